"""
A few testing utilities and update rules that may be useful to just import
and run.
"""

import json
import pickle

import numpy as np
from monty.json import MontyDecoder, MSONable

from chainmc.rule import UpdateRule


class IncrementRule(UpdateRule):
    """Deterministic rule adding one to an integer each update."""

    def __init__(self, start=0):
        super().__init__(start=start)
        self.start = start
        self.num_calls = 0
        self.num_initial_calls = 0

    def create_initial(self, rng):
        self.num_initial_calls += 1
        return self.start

    def update(self, current, rng):
        self.num_calls += 1
        return current + 1


class RandomWalkRule(UpdateRule):
    """Lazy random walk over integer occupancies, modified in place."""

    def __init__(self, num_sites=1, num_states=4):
        super().__init__(num_sites=num_sites, num_states=num_states)
        self.num_sites = num_sites
        self.num_states = num_states

    def create_initial(self, rng):
        return np.zeros(self.num_sites, dtype=int)

    def update(self, current, rng):
        site = rng.integers(self.num_sites)
        current[site] = (current[site] + rng.choice([-1, 0, 1])) % self.num_states
        return current


class FailingRule(IncrementRule):
    """Rule raising after a number of updates."""

    def __init__(self, fail_after=0):
        super().__init__()
        self.fail_after = fail_after

    def update(self, current, rng):
        if self.num_calls >= self.fail_after:
            raise RuntimeError("Update failed!")
        return super().update(current, rng)


def assert_msonable(obj, skip_keys=None, test_if_subclass=True):
    """
    Tests if obj is MSONable and tries to verify whether the contract is
    fulfilled.
    By default, the method tests whether obj is an instance of MSONable.
    This check can be deactivated by setting test_if_subclass to False.
    """
    if test_if_subclass:
        assert isinstance(obj, MSONable)

    skip_keys = [] if skip_keys is None else skip_keys
    d1 = obj.as_dict()
    d2 = obj.__class__.from_dict(obj.as_dict()).as_dict()
    for key in d1.keys():
        if key in skip_keys:
            continue
        assert d1[key] == d2[key]

    try:
        _ = json.loads(obj.to_json(), cls=MontyDecoder)
    except Exception as e:
        raise AssertionError(e)


def assert_pickles(obj):
    """Test if obj is picklable."""
    try:
        p = pickle.dumps(obj)
        obj_copy = pickle.loads(p)
    except Exception as e:
        raise AssertionError(e)

    assert isinstance(obj_copy, obj.__class__)

    if isinstance(obj, MSONable):
        d1 = obj.as_dict()
        d2 = obj_copy.as_dict()
        for key in d1.keys():
            assert d1[key] == d2[key]
    else:
        # not a complete test, since we are only checking that attribute names match
        d1 = obj.__dict__
        d2 = obj_copy.__dict__
        assert d1.keys() == d2.keys()
