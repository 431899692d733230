"""CLI for the ConPave pavement adviser.

Provides a command-line interface for scoring design parameters,
deriving design specifications, running the compatibility model and
estimating recommendation probabilities.
"""

import json
import logging
import sys
from pathlib import Path
from typing import Optional

import click
import yaml
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.tree import Tree

from .config import find_config_file, load_config
from .engine import AdviserEngine
from .exceptions import AdviserError
from .schema import (
    CompatibilityPrediction,
    ConfidenceLevel,
    DesignSpec,
    GuidelineSection,
    ParameterSet,
    PavementType,
    RecommendationExplanation,
    RecommendationResult,
)

console = Console()

CONFIDENCE_COLORS = {
    ConfidenceLevel.VERY_HIGH: "green",
    ConfidenceLevel.HIGH: "green",
    ConfidenceLevel.MODERATE: "yellow",
    ConfidenceLevel.LOW: "red",
    ConfidenceLevel.VERY_LOW: "red",
}


@click.group()
@click.version_option(version="1.0.0", prog_name="conpave-adviser")
@click.option(
    "--config",
    "config_path",
    type=click.Path(exists=True),
    help="Path to an adviser configuration YAML file"
)
@click.option(
    "--verbose", "-v",
    is_flag=True,
    help="Show debug logging"
)
def main(config_path: Optional[str], verbose: bool):
    """ConPave Pavement Type Adviser.

    Recommends a rigid pavement type (JPCP, JRCP, CRCP or PCP) for a set
    of design parameters and derives IRC-based design values.
    """
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    try:
        path = Path(config_path) if config_path else find_config_file()
        if path is not None:
            load_config(path)
    except Exception as e:
        console.print(f"[red]Error loading config: {e}[/red]")
        sys.exit(1)


def parameter_options(func):
    """Add the -p/--param and --params options to a command."""
    func = click.option(
        "--params", "params_file",
        type=click.Path(exists=True),
        help="JSON or YAML file with parameter values"
    )(func)
    func = click.option(
        "--param", "-p",
        multiple=True,
        help="Parameter value (format: trafficVolume=2)"
    )(func)
    return func


def load_parameters(pairs: tuple, params_file: Optional[str]) -> ParameterSet:
    """Merge a parameter file with -p overrides into a ParameterSet."""
    data = {}
    if params_file:
        with open(params_file, "r", encoding="utf-8") as f:
            if params_file.endswith((".yaml", ".yml")):
                data = yaml.safe_load(f) or {}
            else:
                data = json.load(f)
        if not isinstance(data, dict):
            raise AdviserError(f"Parameter file must contain a mapping: {params_file}")

    for pair in pairs:
        if "=" not in pair:
            raise AdviserError(f"Invalid parameter '{pair}' (expected field=value)")
        key, value = pair.split("=", 1)
        data[key.strip()] = value.strip()

    return ParameterSet.from_mapping(data)


def parse_calibration(pairs: tuple) -> Optional[dict[str, float]]:
    if not pairs:
        return None
    weights = {}
    for pair in pairs:
        if "=" not in pair:
            raise AdviserError(f"Invalid calibration '{pair}' (expected TYPE=weight)")
        key, value = pair.split("=", 1)
        try:
            weights[key.strip()] = float(value)
        except ValueError:
            raise AdviserError(f"Invalid calibration weight '{value}' for {key.strip()}") from None
    return weights


def output_json(data: dict):
    """Print data as JSON."""
    print(json.dumps(data, indent=2))


@main.command("recommend")
@parameter_options
@click.option(
    "--calibrate", "-c",
    multiple=True,
    help="Calibration weight per type, 0.5-1.5 (format: CRCP=1.1)"
)
@click.option(
    "--json-output", "-j",
    is_flag=True,
    help="Output raw JSON instead of formatted text"
)
def recommend_cmd(param: tuple, params_file: Optional[str], calibrate: tuple, json_output: bool):
    """Recommend a pavement type for the given parameters.

    Examples:
        conpave-adviser recommend -p trafficVolume=2 -p designLife=20
        conpave-adviser recommend --params site.yaml -c CRCP=1.1
    """
    try:
        engine = AdviserEngine()
        params = load_parameters(param, params_file)

        with console.status("Scoring pavement types..."):
            result = engine.score(params, parse_calibration(calibrate))
            explanation = engine.explain(result, params)
            spec = engine.derive(result.recommended_type, params)

        if json_output:
            output_json({
                "parameters": params.to_record(),
                "result": result.model_dump(mode="json"),
                "explanation": explanation.model_dump(mode="json"),
                "design": spec.model_dump(mode="json"),
            })
            return

        display_result(result, explanation)
        display_design_spec(spec)

    except Exception as e:
        console.print(f"[red]Error: {e}[/red]")
        sys.exit(1)


@main.command("specs")
@click.argument("pavement_type")
@parameter_options
@click.option(
    "--json-output", "-j",
    is_flag=True,
    help="Output raw JSON instead of formatted text"
)
def specs_cmd(pavement_type: str, param: tuple, params_file: Optional[str], json_output: bool):
    """Derive design specifications for one pavement type.

    Example:
        conpave-adviser specs JPCP -p trafficVolume=3 -p subgradeCBR=1
    """
    try:
        engine = AdviserEngine()
        params = load_parameters(param, params_file)
        pavement = PavementType.from_string(pavement_type)
        spec = engine.derive(pavement, params)
        guidelines = engine.guidelines(pavement, params)

        if json_output:
            output_json({
                "design": spec.model_dump(mode="json"),
                "guidelines": [g.model_dump(mode="json") for g in guidelines],
            })
            return

        display_design_spec(spec)
        display_guidelines(guidelines)

    except Exception as e:
        console.print(f"[red]Error: {e}[/red]")
        sys.exit(1)


@main.command("predict")
@parameter_options
@click.option(
    "--json-output", "-j",
    is_flag=True,
    help="Output raw JSON instead of formatted text"
)
def predict_cmd(param: tuple, params_file: Optional[str], json_output: bool):
    """Run the compatibility model on the given parameters."""
    try:
        engine = AdviserEngine()
        params = load_parameters(param, params_file)
        prediction = engine.predict(params)

        if json_output:
            output_json(prediction.model_dump(mode="json"))
            return

        display_prediction(prediction)

    except Exception as e:
        console.print(f"[red]Error: {e}[/red]")
        sys.exit(1)


@main.command("compare")
@parameter_options
@click.option(
    "--json-output", "-j",
    is_flag=True,
    help="Output raw JSON instead of formatted text"
)
def compare_cmd(param: tuple, params_file: Optional[str], json_output: bool):
    """Run both recommendation strategies and compare them."""
    try:
        engine = AdviserEngine()
        params = load_parameters(param, params_file)
        comparison = engine.compare(params)

        if json_output:
            output_json(comparison.model_dump(mode="json"))
            return

        table = Table(show_header=True, header_style="bold", title="Strategy Comparison")
        table.add_column("Type")
        table.add_column("Weighted score", justify="right")
        table.add_column("Compatibility", justify="right")
        for t in PavementType:
            table.add_row(
                t.value,
                str(comparison.scoring.scores[t]),
                f"{comparison.compatibility.per_type_scores[t]:.1f}",
            )
        console.print(table)

        console.print(f"\nWeighted scoring: [bold cyan]{comparison.scoring.recommended_type.value}[/bold cyan]")
        console.print(f"Compatibility model: [bold cyan]{comparison.compatibility.top_type.value}[/bold cyan]")
        if comparison.agree:
            console.print("[green]✓ Both strategies agree[/green]")
        for signal in comparison.signals:
            console.print(f"  [yellow]•[/yellow] {signal}")

    except Exception as e:
        console.print(f"[red]Error: {e}[/red]")
        sys.exit(1)


@main.command("simulate")
@click.option(
    "--samples", "-n",
    type=int,
    default=None,
    help="Number of random trials (default from config)"
)
@click.option(
    "--seed", "-s",
    type=int,
    default=None,
    help="Random seed for reproducible estimates"
)
@click.option(
    "--workers", "-w",
    type=int,
    default=None,
    help="Thread pool size (default from config)"
)
@click.option(
    "--json-output", "-j",
    is_flag=True,
    help="Output raw JSON instead of formatted text"
)
def simulate_cmd(samples: Optional[int], seed: Optional[int], workers: Optional[int], json_output: bool):
    """Estimate how often each type is recommended over random inputs.

    Example:
        conpave-adviser simulate -n 10000 --seed 42
    """
    try:
        engine = AdviserEngine()
        with console.status("Running simulation..."):
            report = engine.estimate(samples, seed=seed, workers=workers)

        if json_output:
            output_json(report.model_dump(mode="json"))
            return

        table = Table(show_header=True, header_style="bold", title=f"{report.sample_size} trials")
        table.add_column("Type")
        table.add_column("Count", justify="right")
        table.add_column("Probability", justify="right")
        for t in PavementType:
            table.add_row(t.value, str(report.counts[t]), report.formatted_probabilities[t])
        console.print(table)

    except Exception as e:
        console.print(f"[red]Error: {e}[/red]")
        sys.exit(1)


@main.command("validate-model")
def validate_model_cmd():
    """Run the compatibility model self-test battery."""
    try:
        report = AdviserEngine().validate_model()

        table = Table(show_header=True, header_style="bold")
        table.add_column("Case")
        table.add_column("Expected")
        table.add_column("Predicted")
        table.add_column("Score", justify="right")
        for case in report.results:
            marker = "[green]✓[/green]" if case.correct else "[red]✗[/red]"
            table.add_row(
                f"{marker} {case.name}",
                case.expected.value,
                case.predicted.value,
                f"{case.top_score:.1f}",
            )
        console.print(table)

        console.print(
            f"\nAccuracy: {report.accuracy:.0%} | Precision: {report.precision:.0%} | "
            f"Recall: {report.recall:.0%} ({report.test_cases} cases)"
        )

    except Exception as e:
        console.print(f"[red]Error: {e}[/red]")
        sys.exit(1)


@main.command("init-config")
@click.option(
    "--out", "-o",
    type=click.Path(),
    default="adviser-config.yaml",
    help="Output path for the configuration file"
)
@click.option(
    "--force", "-f",
    is_flag=True,
    help="Overwrite existing config file"
)
def init_config_cmd(out: str, force: bool):
    """Generate a default adviser configuration file.

    Example:
        conpave-adviser init-config --out my-config.yaml
    """
    from .config import save_default_config

    out_path = Path(out)
    if out_path.exists() and not force:
        console.print(f"[red]Error:[/red] Config file already exists: {out}")
        console.print("Use --force to overwrite")
        sys.exit(1)

    try:
        save_default_config(out_path)
        console.print(f"[green]✓[/green] Config file created: {out}")
        console.print("\nThis file configures:")
        console.print("  • scoring_weights - How much each factor contributes to a type's score")
        console.print("  • score_bounds - Balancing and flooring of the adjusted scores")
        console.print("  • confidence_thresholds - Confidence levels and margins")
        console.print("  • reliability - Reliability index bonuses and penalties")
        console.print("  • compatibility - CRCP hazard correction")
        console.print("  • simulation - Monte Carlo sample sizes and workers")
        console.print("\nThe adviser will look for config in this order:")
        console.print("  1. CONPAVE_ADVISER_CONFIG environment variable")
        console.print("  2. ./adviser-config.yaml (current directory)")
        console.print("  3. ~/.config/conpave-adviser/config.yaml")
    except Exception as e:
        console.print(f"[red]Error creating config:[/red] {e}")
        sys.exit(1)


def display_result(result: RecommendationResult, explanation: RecommendationExplanation):
    """Display a scoring result in formatted text."""
    color = CONFIDENCE_COLORS[result.confidence_level]
    console.print(Panel(
        f"Recommended: [bold cyan]{result.recommended_type.value}[/bold cyan] "
        f"({result.highest_score})\n"
        f"Confidence: [{color}]{result.confidence_level.value}[/{color}]\n"
        f"Reliability: {result.reliability}% | Margin: {result.score_difference}",
        title="Pavement Recommendation",
    ))

    table = Table(show_header=True, header_style="bold")
    table.add_column("Type")
    table.add_column("Score", justify="right")
    table.add_column("Share", justify="right")
    for t, score in result.ranked():
        name = f"[bold cyan]{t.value}[/bold cyan]" if t == result.recommended_type else t.value
        table.add_row(name, str(score), f"{explanation.probabilities[t]}%")
    console.print(table)

    console.print(f"\n{explanation.main_explanation}")
    if explanation.alternative_explanation:
        console.print(f"[yellow]{explanation.alternative_explanation}[/yellow]")
    if result.calibration:
        weights = ", ".join(f"{t.value}={w}" for t, w in result.calibration.items())
        console.print(f"[dim]Calibration applied: {weights}[/dim]")


def display_design_spec(spec: DesignSpec):
    """Display a design specification as a tree."""
    tree = Tree(f"[bold cyan]{spec.name}[/bold cyan]")

    design = tree.add("[bold]Design[/bold]")
    design.add(f"Thickness: {spec.thickness}")
    design.add(f"Reinforcement: {spec.reinforcement}")
    design.add(f"Joint spacing: {spec.joint_spacing}")
    design.add(f"Design life: {spec.design_life} years")
    design.add(f"Maintenance: {spec.maintenance_interval}")
    design.add(f"Reference: {spec.irc_reference}")

    if spec.special_considerations:
        considerations = tree.add("[bold]Special Considerations[/bold]")
        for item in spec.special_considerations:
            considerations.add(item)

    cost = spec.lifecycle_cost
    costs = tree.add(f"[bold]Lifecycle Cost[/bold] ({cost.unit})")
    costs.add(f"Initial: {cost.initial_cost}")
    costs.add(f"Maintenance over {cost.design_life} years: {cost.maintenance_cost}")
    costs.add(f"Total: {cost.total_lifecycle_cost}")
    costs.add(f"Annual: {cost.annual_cost}")

    console.print(tree)


def display_guidelines(guidelines: list[GuidelineSection]):
    tree = Tree("[bold]Construction Guidelines[/bold]")
    for section in guidelines:
        branch = tree.add(f"[bold]{section.category}[/bold]")
        for item in section.items:
            branch.add(item)
    console.print(tree)


def display_prediction(prediction: CompatibilityPrediction):
    """Display a compatibility model prediction."""
    console.print(Panel(
        f"Top type: [bold cyan]{prediction.top_type.value}[/bold cyan] "
        f"({prediction.confidence_score:.0%})\n"
        f"Alternative: {prediction.alternative_type.value} ({prediction.alternative_score:.0%})\n"
        f"IRC compliance: {prediction.irc_compliance}% | "
        f"Reference coverage: {prediction.irc_reference_coverage}%",
        title=f"Compatibility Model v{prediction.model_version}",
    ))

    table = Table(show_header=True, header_style="bold")
    table.add_column("Parameter")
    table.add_column("Weight", justify="right")
    table.add_column("Score", justify="right")
    table.add_column("Note")
    for name, detail in prediction.match_details.items():
        color = "green" if detail.matched else "yellow"
        table.add_row(name, f"{detail.weight:g}", f"[{color}]{detail.score:.1f}[/{color}]", detail.note)
    console.print(table)

    if prediction.hazard_swap_applied:
        console.print("[yellow]⚠ CRCP demoted because of site hazards[/yellow]")
    for note in prediction.notes:
        console.print(f"  [yellow]•[/yellow] {note}")
    for note in prediction.irc_notes:
        console.print(f"  [dim]• {note}[/dim]")


if __name__ == "__main__":
    main()
