"""Implementation of the MarkovChainMonteCarlo sampling engine.

The engine drives a Markov chain using a given UpdateRule. It discards an
initial burn-in, records every iterations_per_sample state of the chain and
accumulates the recorded states into an empirical SampleDistribution.
"""

import logging
from copy import deepcopy
from warnings import warn

import numpy as np

from chainmc.anytime import AnytimeAlgorithm, check_integer
from chainmc.distribution import SampleDistribution
from chainmc.exceptions import ConfigurationError, NotSampledError
from chainmc.metadata import EngineMetadata, Metadata
from chainmc.utils.progressbar import progress_bar
from chainmc.utils.values import clone_value
from chainmc.walk import WalkState

DEFAULT_NUM_SAMPLES = 1000


class MarkovChainMonteCarlo(AnytimeAlgorithm):
    """A MarkovChainMonteCarlo engine is used to run MCMC sampling.

    The specific MCMC algorithm is defined by the given UpdateRule, the engine
    only takes care of burn-in, thinning and accumulating samples. A run is
    driven by the run method, which initializes the chain, takes up to
    max_iterations samples and cleans up. The result can be polled at any time
    after initialization, also while running or after a run was stopped.

    Every recorded sample is an independent clone of the chain state, so
    update rules are free to modify the current value in place.
    """

    def __init__(
        self,
        update_rule,
        burn_in_iterations=0,
        iterations_per_sample=1,
        max_iterations=DEFAULT_NUM_SAMPLES,
        seed=None,
    ):
        """Initialize a MarkovChainMonteCarlo engine.

        Args:
            update_rule (UpdateRule):
                the update rule implementing create_initial and update.
            burn_in_iterations (int): optional
                number of updates to discard before recording samples.
            iterations_per_sample (int): optional
                number of updates between recorded samples, i.e. the amount
                to thin the chain by.
            max_iterations (int): optional
                maximum number of samples recorded in a run.
            seed (int): optional
                non-negative integer to seed the PRNG
        """
        if not callable(getattr(update_rule, "create_initial", None)) or not callable(
            getattr(update_rule, "update", None)
        ):
            raise TypeError(
                f"{type(update_rule).__name__} is not a valid update rule.\n"
                "An update rule must implement create_initial and update."
            )
        super().__init__(max_iterations=max_iterations)
        self._update_rule = update_rule
        self.burn_in_iterations = burn_in_iterations
        self.iterations_per_sample = iterations_per_sample

        self._seed = seed if seed is not None else np.random.SeedSequence().entropy
        self._rng = np.random.default_rng(self._seed)

        self._walk = None
        self._result = None
        self._num_updates = 0

    @property
    def update_rule(self):
        """Get the update rule."""
        return self._update_rule

    @property
    def burn_in_iterations(self):
        """Get the number of updates discarded before sampling."""
        return self._burn_in_iterations

    @burn_in_iterations.setter
    def burn_in_iterations(self, value):
        """Set the number of updates discarded before sampling."""
        self._burn_in_iterations = check_integer("burn_in_iterations", value, 0)

    @property
    def iterations_per_sample(self):
        """Get the number of updates between recorded samples."""
        return self._iterations_per_sample

    @iterations_per_sample.setter
    def iterations_per_sample(self, value):
        """Set the number of updates between recorded samples."""
        self._iterations_per_sample = check_integer("iterations_per_sample", value, 1)

    @property
    def seed(self):
        """Get seed for PRNG."""
        return self._seed

    @property
    def rng(self):
        """Get the PRNG shared by the engine and the update rule."""
        return self._rng

    @rng.setter
    def rng(self, value):
        """Set the PRNG.

        Args:
            value (np.Generator or int or None):
                a PRNG, or a seed to create one. If None the PRNG is removed,
                and a new one must be set before initializing.
        """
        if value is None or isinstance(value, np.random.Generator):
            # the seed of a given generator is unknown
            self._seed = None
            self._rng = value
        else:
            self._seed = value
            self._rng = np.random.default_rng(value)

    @property
    def spec(self):
        """Return sampling specifications."""
        return EngineMetadata(
            self.__class__.__name__,
            seed=self._seed,
            burn_in_iterations=self._burn_in_iterations,
            iterations_per_sample=self._iterations_per_sample,
            max_iterations=self.max_iterations,
            update_rule=getattr(
                self._update_rule,
                "spec",
                Metadata(self._update_rule.__class__.__name__),
            ),
        )

    @property
    def result(self):
        """Get the SampleDistribution of samples recorded in the current run.

        This is a live object that keeps growing while the run goes on, use
        its copy method to get a snapshot.
        """
        return self._result

    @property
    def walk(self):
        """Get the WalkState of the chain."""
        return self._walk

    @property
    def current_parameter(self):
        """Get the live current parameter value of the chain."""
        if self._walk is None:
            raise NotSampledError(
                "The chain has not been initialized. Call initialize first."
            )
        return self._walk.current

    @property
    def previous_parameter(self):
        """Get the last recorded sample."""
        if self._walk is None:
            raise NotSampledError(
                "The chain has not been initialized. Call initialize and take "
                "at least one step first."
            )
        return self._walk.previous

    @property
    def num_updates(self):
        """Get the number of updates done since initialize, burn-in included."""
        return self._num_updates

    @property
    def num_samples(self):
        """Get the number of samples recorded in the current run."""
        return 0 if self._result is None else self._result.total

    def initialize(self):
        """Initialize the chain and run the burn-in.

        Creates the starting point with the update rule, runs burn-in updates
        without recording anything, and allocates an empty result.

        Returns:
            bool: always True, errors from the update rule are raised.
        """
        if self._rng is None:
            raise ConfigurationError(
                "A random number generator must be set before initializing."
            )
        if self._result is not None and self._result.total > 0:
            warn(
                "Initializing an engine with pre-existing samples.\n"
                "A new result is created, previous results are left as they are.",
                RuntimeWarning,
            )

        logging.info(
            f"Initializing {self.__class__.__name__} with seed {self._seed}, "
            f"{self._burn_in_iterations} burn-in iterations, "
            f"{self._iterations_per_sample} iterations per sample and "
            f"{self.max_iterations} max iterations."
        )
        # drop the previous chain, so a failed burn-in leaves nothing to step
        self._walk, self._result = None, None
        walk = WalkState(self._update_rule.create_initial(self._rng))
        for _ in range(self._burn_in_iterations):
            self._mcmc_update(walk)
        logging.debug(f"Burn-in done after {self._burn_in_iterations} updates.")

        self._walk = walk
        self._num_updates = self._burn_in_iterations
        self._result = SampleDistribution(capacity_hint=self.max_iterations)
        return True

    def step(self):
        """Advance the chain by iterations_per_sample updates and record a sample.

        Returns:
            bool: always True, stopping is up to the caller.
        """
        if self._walk is None or self._result is None:
            raise NotSampledError(
                "The chain has not been initialized. Call initialize first."
            )
        for _ in range(self._iterations_per_sample):
            self._mcmc_update(self._walk)
            self._num_updates += 1
        self._result.increment(self._walk.record())
        return True

    def cleanup(self):
        """Clean up after a run. Nothing to release, only logs the run."""
        distinct = 0 if self._result is None else len(self._result)
        logging.info(
            f"{self.__class__.__name__} finished with {self.num_samples} samples "
            f"of {distinct} distinct values after {self._num_updates} updates."
        )

    def sample(self, nsamples, progress=False):
        """Generate MCMC samples.

        Initializes the chain if it has not been initialized and yields a
        sample every iterations_per_sample updates. Samples are recorded in the
        result as well.

        Args:
            nsamples (int):
                number of samples to generate.
            progress (bool): optional
                If true will show a progress bar.

        Yields:
            a clone of each recorded sample.
        """
        nsamples = check_integer("nsamples", nsamples, 0)
        if self._walk is None or self._result is None:
            self.initialize()

        desc = f"Sampling {nsamples} values from a {self.__class__.__name__} chain"
        with progress_bar(progress, total=nsamples, description=desc) as p_bar:
            for _ in range(nsamples):
                self.step()
                p_bar.update()
                yield clone_value(self._walk.previous)

    def clone(self):
        """Return an independent copy of the engine.

        The PRNG, walk state, result and update rule are deep copied. The clone
        is not reseeded, so it continues the exact same trajectory as the
        original until either the PRNG of one of them is reset.

        Returns:
            MarkovChainMonteCarlo
        """
        engine = self.__class__.__new__(self.__class__)
        engine.__dict__.update(self.__dict__)
        engine._update_rule = deepcopy(self._update_rule)
        engine._rng = deepcopy(self._rng)
        engine._walk = None if self._walk is None else self._walk.copy()
        engine._result = None if self._result is None else self._result.copy()
        engine._running = False
        engine._stop_requested = False
        return engine

    def _mcmc_update(self, walk):
        """Do a single update of the given walk with the update rule."""
        new_value = self._update_rule.update(walk.current, self._rng)
        if new_value is None:
            raise TypeError(
                f"The update rule {self._update_rule.__class__.__name__} returned "
                "None.\nAn update must return the next value of the chain."
            )
        walk.current = new_value
