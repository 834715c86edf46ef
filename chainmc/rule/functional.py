"""An UpdateRule built from a pair of plain functions."""

from chainmc.rule.base import UpdateRule


class FunctionalUpdateRule(UpdateRule):
    """An update rule that delegates to a create_initial and update function pair.

    Useful for quick rules that do not need their own class, i.e.

        rule = FunctionalUpdateRule(lambda rng: 0, lambda x, rng: x + 1)
    """

    def __init__(self, create_initial, update, **spec_kwargs):
        """Initialize FunctionalUpdateRule.

        Args:
            create_initial (Callable):
                function taking a PRNG and returning the starting value.
            update (Callable):
                function taking the current value and a PRNG and returning the
                next value.
            **spec_kwargs:
                specifications to record in the rule's spec.
        """
        if not callable(create_initial) or not callable(update):
            raise TypeError("create_initial and update must both be callable.")
        super().__init__(
            create_initial=_function_name(create_initial),
            update=_function_name(update),
            **spec_kwargs,
        )
        self._create_initial = create_initial
        self._update = update

    def create_initial(self, rng):
        """Create the starting point of a chain."""
        return self._create_initial(rng)

    def update(self, current, rng):
        """Carry out a single Markov transition."""
        return self._update(current, rng)


def _function_name(function):
    """Get a printable name for a callable."""
    return getattr(function, "__qualname__", type(function).__name__)
