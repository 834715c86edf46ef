"""Implementation of Markov chain update rules.

An update rule is the algorithm specific part of MCMC sampling (i.e. a
Metropolis-Hastings accept/reject step or a single Gibbs update). Rules
should derive from UpdateRule whenever possible.
"""

from chainmc.rule.base import UpdateRule, UpdateRuleInterface
from chainmc.rule.functional import FunctionalUpdateRule

__all__ = ["UpdateRule", "UpdateRuleInterface", "FunctionalUpdateRule"]
