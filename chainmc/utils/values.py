"""Capabilities required from sampled parameter values.

Parameter values must support equality and an explicit deep copy. Values are
cloned whenever they are recorded, so that samples never alias the live state
of a random walk, and they are keyed by value (not identity) when counted.
"""

from copy import deepcopy

import numpy as np

IMMUTABLE_TYPES = (type(None), bool, int, float, complex, str, bytes, np.generic)


def clone_value(value):
    """Return an independent copy of a parameter value.

    Immutable scalars are returned as is, tuples and frozensets are rebuilt
    from cloned members, ndarrays are copied with ndarray.copy and anything
    else is deep copied.

    Args:
        value:
            parameter value to clone.

    Returns:
        a copy that is equal to value and shares no mutable state with it.
    """
    if isinstance(value, IMMUTABLE_TYPES):
        return value
    if isinstance(value, np.ndarray):
        return value.copy()
    if type(value) is tuple:
        return tuple(clone_value(val) for val in value)
    if isinstance(value, frozenset):
        return frozenset(clone_value(val) for val in value)
    return deepcopy(value)


def hashable_key(value):
    """Return a hashable key for a parameter value.

    Two values that compare equal give the same key. Containers and ndarrays
    are converted recursively. ndarray keys are built from their shape and
    elements as python scalars, so arrays of different dtypes (or with signed
    zeros) that compare equal share a key, while arrays of different shapes do
    not. Lists, tuples and ndarrays are tagged, since a list never equals a
    tuple.

    Args:
        value:
            parameter value.

    Returns:
        hashable key

    Raises:
        TypeError: if the value is not hashable and cannot be converted.
    """
    if isinstance(value, np.ndarray):
        return "ndarray", value.shape, tuple(value.ravel().tolist())
    if isinstance(value, np.generic):
        return value.item()
    if isinstance(value, list):
        return "list", tuple(hashable_key(val) for val in value)
    if type(value) is tuple:
        return "tuple", tuple(hashable_key(val) for val in value)
    if isinstance(value, dict):
        return frozenset(
            (hashable_key(key), hashable_key(val)) for key, val in value.items()
        )
    if isinstance(value, (set, frozenset)):
        return frozenset(hashable_key(val) for val in value)

    try:
        hash(value)
    except TypeError as type_error:
        raise TypeError(
            f"Values of type {type(value).__name__} can not be counted.\n"
            "Sampled values must be hashable, or one of list, tuple, dict, set "
            "or ndarray."
        ) from type_error
    return value
