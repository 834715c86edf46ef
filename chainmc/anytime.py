"""Implementation of an anytime iterative algorithm base class.

An anytime algorithm can be stopped at any iteration and still have a valid
(if partial) result available. Derived classes implement initialize, step and
cleanup, and the run method drives them.
"""

import logging
from abc import ABC, abstractmethod
from numbers import Integral

from chainmc.exceptions import ConfigurationError
from chainmc.utils.progressbar import progress_bar


def check_integer(name, value, minimum):
    """Check that a configuration value is an integer >= minimum.

    Args:
        name (str):
            name of the configuration value, used in error messages.
        value (int):
            value to check.
        minimum (int):
            smallest valid value.

    Returns:
        int: the validated value.
    """
    # bools are Integral too
    if isinstance(value, bool) or not isinstance(value, Integral):
        raise ConfigurationError(
            f"{name} must be an integer, got {value!r} of type "
            f"{type(value).__name__}."
        )
    value = int(value)
    if value < minimum:
        raise ConfigurationError(f"{name} must be >= {minimum}, got {value}.")
    return value


class AnytimeAlgorithm(ABC):
    """Abstract base class for anytime iterative algorithms.

    The run method calls initialize once, then step until max_iterations steps
    have been done, step returns False or stop is called, and finally cleanup.
    The result property can be polled at any time after initialization.
    """

    def __init__(self, max_iterations=1000):
        """Initialize AnytimeAlgorithm.

        Args:
            max_iterations (int): optional
                maximum number of steps in a run.
        """
        self.max_iterations = max_iterations
        self._iteration = 0
        self._running = False
        self._stop_requested = False

    @property
    def max_iterations(self):
        """Get the maximum number of steps in a run."""
        return self._max_iterations

    @max_iterations.setter
    def max_iterations(self, value):
        """Set the maximum number of steps in a run."""
        self._max_iterations = check_integer("max_iterations", value, 1)

    @property
    def iteration(self):
        """Get the number of steps completed in the current or last run."""
        return self._iteration

    @property
    def is_running(self):
        """Return True while a run is in progress."""
        return self._running

    @property
    def should_stop(self):
        """Return True if a stop has been requested for the current run."""
        return self._stop_requested

    def stop(self):
        """Request the current run to stop before the next step."""
        self._stop_requested = True

    @abstractmethod
    def initialize(self):
        """Initialize the algorithm for a run.

        Returns:
            bool: True if the run should go ahead.
        """

    @abstractmethod
    def step(self):
        """Carry out a single iteration.

        Returns:
            bool: True if the run should keep going.
        """

    @abstractmethod
    def cleanup(self):
        """Clean up after a run."""

    @property
    @abstractmethod
    def result(self):
        """Get the current result of the algorithm."""

    def run(self, progress=False):
        """Run the algorithm until done or stopped.

        Cleanup is always called, also if initialize or a step raises, in which
        case the exception is propagated after cleanup.

        Args:
            progress (bool): optional
                if true will show a progress bar.

        Returns:
            the result after the run.
        """
        self._iteration = 0
        self._stop_requested = False
        self._running = True
        try:
            if not self.initialize():
                logging.info(f"{self.__class__.__name__} did not initialize.")
                return self.result

            desc = f"Running {self.__class__.__name__}"
            with progress_bar(progress, self.max_iterations, desc) as p_bar:
                while self._iteration < self.max_iterations:
                    if self._stop_requested:
                        logging.info(
                            f"{self.__class__.__name__} stopped after "
                            f"{self._iteration} of {self.max_iterations} steps."
                        )
                        break
                    keep_going = self.step()
                    self._iteration += 1
                    p_bar.update()
                    if not keep_going:
                        break
        finally:
            self.cleanup()
            self._running = False
        return self.result
