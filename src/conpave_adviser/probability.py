"""Monte Carlo estimate of how often each pavement type is recommended.

Each trial draws every parameter uniformly from its domain and scores the
resulting complete parameter set. Trials are split into fixed-size
chunks, each with its own generator seeded from the parent, so a seeded
estimate gives the same counts however many workers run the chunks.
"""

import logging
import random
from concurrent.futures import ThreadPoolExecutor
from typing import Optional

from .config import get_config
from .exceptions import SampleSizeLimitError, ZeroSampleSizeError
from .schema import ParameterSet, PavementType, ProbabilityReport
from .scorer import PavementScorer
from .standards import PARAMETER_SPACE

logger = logging.getLogger(__name__)

CHUNK_SIZE = 10_000


def random_parameter_set(rng: random.Random) -> ParameterSet:
    """Draw one complete parameter set uniformly from the parameter space."""
    return ParameterSet(**{name: rng.choice(domain) for name, domain in PARAMETER_SPACE.items()})


def _run_chunk(scorer: PavementScorer, trials: int, seed: int) -> dict[PavementType, int]:
    rng = random.Random(seed)
    counts = {t: 0 for t in PavementType}
    for _ in range(trials):
        result = scorer.score(random_parameter_set(rng))
        counts[result.recommended_type] += 1
    return counts


class ProbabilityEstimator:
    """Estimates recommendation frequencies by random sampling."""

    def __init__(self, scorer: Optional[PavementScorer] = None):
        self.scorer = scorer or PavementScorer()

    def estimate(
        self,
        sample_size: Optional[int] = None,
        rng: Optional[random.Random] = None,
        seed: Optional[int] = None,
        workers: Optional[int] = None,
    ) -> ProbabilityReport:
        """Run the simulation.

        Args:
            sample_size: Number of trials (configured default when omitted).
            rng: Generator to draw chunk seeds from.
            seed: Seed for a fresh generator, used when no rng is given.
            workers: Thread pool size (configured default when omitted).

        Returns:
            ProbabilityReport with counts and per-type probabilities.

        Raises:
            ZeroSampleSizeError: If sample_size is zero or negative.
            SampleSizeLimitError: If sample_size exceeds the configured cap.
        """
        settings = get_config().simulation
        if sample_size is None:
            sample_size = settings.default_sample_size
        if sample_size <= 0:
            raise ZeroSampleSizeError(f"Sample size must be positive, got {sample_size}")
        if sample_size > settings.max_sample_size:
            raise SampleSizeLimitError(
                f"Sample size {sample_size} exceeds the maximum of {settings.max_sample_size}"
            )

        rng = rng or random.Random(seed)
        workers = workers or settings.workers

        chunks = []
        remaining = sample_size
        while remaining > 0:
            trials = min(CHUNK_SIZE, remaining)
            chunks.append((trials, rng.getrandbits(64)))
            remaining -= trials

        logger.debug("Running %d trials in %d chunk(s) on %d worker(s)", sample_size, len(chunks), workers)

        if workers > 1 and len(chunks) > 1:
            with ThreadPoolExecutor(max_workers=workers) as executor:
                partials = list(executor.map(lambda chunk: _run_chunk(self.scorer, *chunk), chunks))
        else:
            partials = [_run_chunk(self.scorer, trials, chunk_seed) for trials, chunk_seed in chunks]

        counts = {t: sum(partial[t] for partial in partials) for t in PavementType}
        raw = {t: counts[t] / sample_size for t in PavementType}

        return ProbabilityReport(
            sample_size=sample_size,
            counts=counts,
            raw_probabilities=raw,
            formatted_probabilities={t: f"{p * 100:.1f}%" for t, p in raw.items()},
        )


def estimate(
    sample_size: Optional[int] = None,
    rng: Optional[random.Random] = None,
    seed: Optional[int] = None,
    workers: Optional[int] = None,
) -> ProbabilityReport:
    """Estimate recommendation probabilities with the default scorer."""
    return ProbabilityEstimator().estimate(sample_size, rng=rng, seed=seed, workers=workers)
