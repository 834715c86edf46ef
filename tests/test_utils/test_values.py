import numpy as np
import numpy.testing as npt
import pytest

from chainmc.utils.values import clone_value, hashable_key


@pytest.mark.parametrize("value", [None, True, 3, 2.5, 1j, "abc", b"abc", np.int64(4)])
def test_clone_immutable(value):
    assert clone_value(value) is value


@pytest.mark.parametrize(
    "value",
    [
        [1, [2, 3]],
        {"a": [1, 2], "b": {"c": 3}},
        {1, 2},
        (1, [2, 3]),
        np.arange(6).reshape(2, 3),
    ],
)
def test_clone_mutable(value):
    clone = clone_value(value)
    npt.assert_equal(clone, value)
    assert hashable_key(clone) == hashable_key(value)
    assert clone is not value


def test_clone_is_deep():
    value = (np.zeros(2), [1])
    clone = clone_value(value)
    clone[0][0] = 1
    clone[1].append(2)
    npt.assert_array_equal(value[0], [0, 0])
    assert value[1] == [1]

    array = np.arange(4)
    clone = clone_value(array[::2])
    assert not np.shares_memory(clone, array)


def test_hashable_key():
    assert hashable_key(3) == 3
    assert hashable_key(np.int64(3)) == 3
    assert hashable_key([1, 2]) == hashable_key([1, 2])
    assert hashable_key([1, 2]) != hashable_key((1, 2))
    assert hashable_key({"a": [1]}) == hashable_key({"a": [1]})
    assert hashable_key({"a": [1]}) != hashable_key({"a": (1,)})
    assert hashable_key({1, 2}) == hashable_key(frozenset([2, 1]))
    assert hashable_key(np.array([1, 2])) == hashable_key(np.array([1, 2]))
    assert hashable_key(np.arange(4)[::2]) == hashable_key(np.array([0, 2]))
    # shape is part of ndarray keys, dtype is not
    assert hashable_key(np.zeros(4)) != hashable_key(np.zeros((2, 2)))
    assert hashable_key(np.zeros(4)) == hashable_key(np.zeros(4, dtype=int))
    assert hashable_key(np.array([-0.0, 1.0])) == hashable_key(np.array([0.0, 1.0]))
    assert hashable_key(np.array([1, 2])) != hashable_key([1, 2])
    for value in ([1, [2]], {"a": {"b": np.ones(2)}}, np.ones((2, 2))):
        hash(hashable_key(value))


def test_hashable_key_unhashable():
    class Unhashable:
        __hash__ = None

    with pytest.raises(TypeError, match="can not be counted"):
        hashable_key(Unhashable())
