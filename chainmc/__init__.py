"""Generic Markov chain Monte Carlo sampling with anytime semantics."""

from importlib.metadata import PackageNotFoundError, version

from chainmc.distribution import SampleDistribution
from chainmc.engine import MarkovChainMonteCarlo
from chainmc.rule import FunctionalUpdateRule, UpdateRule

try:
    __version__ = version("chainmc")
except PackageNotFoundError:
    # package is not installed
    pass

__all__ = [
    "MarkovChainMonteCarlo",
    "SampleDistribution",
    "UpdateRule",
    "FunctionalUpdateRule",
]
