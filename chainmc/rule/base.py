"""Implementation of base UpdateRule classes."""

from abc import ABCMeta, abstractmethod

from chainmc.metadata import Metadata


class UpdateRuleInterface(metaclass=ABCMeta):
    """UpdateRuleInterface for defining Markov chain transitions.

    This interface defines the bare minimum methods that must be implemented
    by an update rule used by a MarkovChainMonteCarlo engine. The engine takes
    care of burn-in, thinning and recording samples, an update rule only needs
    to know how to start a chain and how to move it by a single step.
    """

    @abstractmethod
    def create_initial(self, rng):
        """Create the starting point of a chain.

        Called exactly once per run, when the engine is initialized.

        Args:
            rng (np.Generator):
                the PRNG of the engine.

        Returns:
            the initial parameter value.
        """

    @abstractmethod
    def update(self, current, rng):
        """Carry out a single Markov transition.

        The current value may be modified in place and returned, or a new
        value may be returned. Either way the returned value becomes the new
        current value of the chain. If the transition fails it must raise
        before modifying current, a half applied transition would corrupt
        the chain.

        Args:
            current:
                current parameter value of the chain.
            rng (np.Generator):
                the PRNG of the engine. Using it (and only it) for all random
                draws keeps runs reproducible.

        Returns:
            the next parameter value of the chain.
        """


class UpdateRule(UpdateRuleInterface):
    """Abstract base class for update rules.

    Derived classes implement create_initial and update, and can add any
    keyword specifications they need to reproduce results to the spec.
    """

    def __init__(self, **spec_kwargs):
        """Initialize UpdateRule.

        Args:
            **spec_kwargs:
                specifications to record in the rule's spec.
        """
        self._spec = Metadata(self.__class__.__name__, **spec_kwargs)

    @property
    def spec(self):
        """Return update rule specifications."""
        return self._spec
