"""Implementation of the WalkState holding the live state of a random walk."""

from chainmc.exceptions import NotSampledError
from chainmc.utils.values import clone_value


class WalkState:
    """Current and previous parameter values of a Markov chain.

    The current value is the live state that update rules are free to modify
    in place. The previous value is the last recorded sample, always held as
    an independent clone of what current was when it was recorded.
    """

    def __init__(self, initial):
        """Initialize a walk from its starting point.

        Current and previous are set to separate clones of the initial value,
        so the walk owns its state and does not alias the caller's value.

        Args:
            initial:
                the starting parameter value of the chain.
        """
        self._current = clone_value(initial)
        self._previous = clone_value(initial)
        self._recorded = False

    @property
    def current(self):
        """Get the current parameter value."""
        return self._current

    @current.setter
    def current(self, value):
        """Set the current parameter value."""
        self._current = value

    @property
    def previous(self):
        """Get the last recorded parameter value."""
        if not self._recorded:
            raise NotSampledError(
                "No samples have been recorded yet. At least one sampling step "
                "must be completed before the previous parameter is available."
            )
        return self._previous

    @property
    def has_previous(self):
        """Return True if a sample has been recorded."""
        return self._recorded

    def record(self):
        """Record the current value as the previous one.

        Returns:
            the clone of the current value that is now the previous value.
        """
        self._previous = clone_value(self._current)
        self._recorded = True
        return self._previous

    def copy(self):
        """Return an independent copy of this walk state."""
        walk = self.__class__.__new__(self.__class__)
        walk._current = clone_value(self._current)
        walk._previous = clone_value(self._previous)
        walk._recorded = self._recorded
        return walk

    def __repr__(self):
        previous = repr(self._previous) if self._recorded else "<unset>"
        return f"WalkState(current={self._current!r}, previous={previous})"
