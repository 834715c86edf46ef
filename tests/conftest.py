import numpy as np
import pytest

from chainmc import MarkovChainMonteCarlo
from tests.utils import IncrementRule, RandomWalkRule

SEED = None


@pytest.fixture(scope="module")
def rng():
    """Seed and return an RNG for test reproducibility"""
    return np.random.default_rng(SEED)


@pytest.fixture
def increment_rule():
    return IncrementRule()


@pytest.fixture(params=[1, 3])
def random_walk_rule(request):
    return RandomWalkRule(num_sites=request.param)


@pytest.fixture(params=[(0, 1), (5, 1), (0, 4), (7, 3)])
def engine(random_walk_rule, rng, request):
    burn_in, thin_by = request.param
    return MarkovChainMonteCarlo(
        random_walk_rule,
        burn_in_iterations=burn_in,
        iterations_per_sample=thin_by,
        max_iterations=50,
        seed=rng.integers(2**32),
    )
