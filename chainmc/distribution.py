"""Implementation of the SampleDistribution class.

A SampleDistribution accumulates the values visited by a Markov chain into a
weighted empirical distribution. It has some minimal methods and properties
useful to start analyzing the samples.
"""

import json
from math import log, log2

import numpy as np
from monty.json import MontyDecoder, MontyEncoder, MSONable

from chainmc.exceptions import NotSampledError
from chainmc.utils.values import clone_value, hashable_key


class SampleDistribution(MSONable):
    """An empirical distribution built from sampled values.

    Each distinct value is stored once along with a non-negative weight (the
    number of times it was recorded). Values are keyed by equality, not
    identity, so repeated visits of the same value accumulate into one entry.
    The first instance recorded is kept as the representative value, and it
    is a clone of the value given, so later changes to the given value are
    not reflected here.

    Equality follows python, so a list and a tuple with the same items are
    separate entries, while ndarrays of different dtypes with equal elements
    share one.

    Note that values are keyed exactly, so continuous valued parameters will
    mostly give one entry per visited point. Counting is most useful for
    discrete or low cardinality parameter spaces.

    Attributes:
        capacity_hint (int):
            expected number of samples. Informational only, this is not a
            limit on the number of samples or distinct values.
    """

    def __init__(self, capacity_hint=None):
        """Initialize an empty distribution.

        Args:
            capacity_hint (int): optional
                expected number of samples to be recorded.
        """
        self.capacity_hint = capacity_hint
        self._values = {}
        self._counts = {}
        self._total = 0

    @property
    def total(self):
        """Get the total weight of all values."""
        return self._total

    @property
    def max_count(self):
        """Get the largest weight of a single value."""
        if not self._counts:
            return 0
        return max(self._counts.values())

    def increment(self, value, count=1):
        """Add weight to a value.

        Args:
            value:
                sampled value.
            count (int or float): optional
                non-negative weight to add. Default is 1.

        Returns:
            the new weight of the value.
        """
        if count < 0:
            raise ValueError(f"Can not increment by a negative count {count}.")
        key = hashable_key(value)
        if key in self._counts:
            self._counts[key] += count
        elif count > 0:
            self._values[key] = clone_value(value)
            self._counts[key] = count
        else:
            return 0
        self._total += count
        return self._counts[key]

    def decrement(self, value, count=1):
        """Remove weight from a value.

        The weight is floored at zero, and values reaching zero weight are
        removed from the distribution.

        Args:
            value:
                sampled value.
            count (int or float): optional
                non-negative weight to remove. Default is 1.

        Returns:
            the new weight of the value.
        """
        if count < 0:
            raise ValueError(f"Can not decrement by a negative count {count}.")
        key = hashable_key(value)
        if key not in self._counts:
            return 0
        removed = min(count, self._counts[key])
        self._counts[key] -= removed
        self._total -= removed
        if self._counts[key] == 0:
            del self._counts[key]
            del self._values[key]
            return 0
        return self._counts[key]

    def get(self, value, default=0):
        """Get the weight of a value, default if it was never recorded."""
        return self._counts.get(hashable_key(value), default)

    def probability(self, value):
        """Get the empirical probability of a value.

        Returns:
            float: weight of value / total weight, 0.0 if empty.
        """
        if self._total == 0:
            return 0.0
        return self.get(value) / self._total

    get_fraction = probability

    def log_probability(self, value):
        """Get the natural log of the empirical probability of a value."""
        probability = self.probability(value)
        return log(probability) if probability > 0 else -np.inf

    def values(self):
        """Get the distinct values recorded."""
        return list(self._values.values())

    def counts(self):
        """Get the weights of distinct values, same order as values."""
        return list(self._counts.values())

    def items(self):
        """Return generator for (value, weight)."""
        for key, value in self._values.items():
            yield value, self._counts[key]

    def probabilities(self):
        """Get the empirical probabilities of values as an ndarray."""
        counts = np.array(self.counts(), dtype=float)
        if self._total == 0:
            return counts
        return counts / self._total

    def most_probable(self):
        """Get the value with the largest weight.

        Ties are resolved in favor of the value recorded first.
        """
        if not self._counts:
            raise NotSampledError("Can not get the mode of an empty distribution.")
        key = max(self._counts, key=self._counts.get)
        return self._values[key]

    def entropy(self):
        """Get the Shannon entropy of the empirical distribution in bits."""
        return -float(sum(p * log2(p) for p in self.probabilities() if p > 0))

    def sample(self, rng, size=None):
        """Draw values from the empirical distribution.

        Args:
            rng (np.Generator):
                PRNG to draw with.
            size (int): optional
                number of values to draw. If None a single value is returned.

        Returns:
            a value or a list of values. Values are clones and can be freely
            modified.
        """
        if self._total == 0:
            raise NotSampledError("Can not sample from an empty distribution.")
        values = self.values()
        indices = rng.choice(len(values), size=size, p=self.probabilities())
        if size is None:
            return clone_value(values[indices])
        return [clone_value(values[i]) for i in indices]

    def clear(self):
        """Remove all values."""
        self._values.clear()
        self._counts.clear()
        self._total = 0

    def copy(self):
        """Return a frozen snapshot of the distribution as a new instance."""
        distribution = self.__class__(capacity_hint=self.capacity_hint)
        for value, count in self.items():
            distribution.increment(value, count)
        return distribution

    def __getitem__(self, value):
        """Get the weight of a value."""
        return self.get(value)

    def __contains__(self, value):
        """Check if a value has been recorded."""
        return hashable_key(value) in self._counts

    def __iter__(self):
        """Iterate over the distinct values."""
        return iter(self.values())

    def __len__(self):
        """Return the number of distinct values."""
        return len(self._counts)

    def __eq__(self, other):
        if not isinstance(other, SampleDistribution):
            return NotImplemented
        return self._counts == other._counts

    def __repr__(self):
        return (
            f"{self.__class__.__name__}(distinct={len(self)}, total={self._total})"
        )

    def as_dict(self):
        """Get Json-serialization dict representation.

        Values are encoded with the MontyEncoder, so ndarrays and MSONables are
        recreated when loaded. Tuples are loaded back as lists.

        Returns:
            MSONable dict
        """
        return {
            "@module": self.__class__.__module__,
            "@class": self.__class__.__name__,
            "capacity_hint": self.capacity_hint,
            "values": json.loads(json.dumps(self.values(), cls=MontyEncoder)),
            "counts": self.counts(),
        }

    @classmethod
    def from_dict(cls, d):
        """Instantiate a SampleDistribution from dict representation.

        Args:
            d (dict):
                dictionary representation.
        Returns:
            SampleDistribution
        """
        distribution = cls(capacity_hint=d.get("capacity_hint"))
        values = MontyDecoder().process_decoded(d["values"])
        for value, count in zip(values, d["counts"]):
            distribution.increment(value, count)
        return distribution
