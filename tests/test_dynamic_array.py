import pytest

from algokata.dynamic_array import DynamicArray


def test_example_from_source():
    arr = DynamicArray(2)
    assert len(arr) == 0
    assert arr.capacity() == 2

    arr.push_back(10)
    arr.push_back(20)
    assert len(arr) == 2
    assert arr.capacity() == 2

    arr.push_back(30)
    assert len(arr) == 3
    assert arr.capacity() == 4

    assert [arr[0], arr[1], arr[2]] == [10, 20, 30]

    arr[1] = 99
    assert arr[1] == 99

    assert arr.pop_back() == 30
    assert len(arr) == 2


def test_capacity_doubles_and_never_below_size():
    arr = DynamicArray(1)
    for value in range(20):
        arr.push_back(value)
        assert arr.capacity() >= len(arr)
    assert list(arr) == list(range(20))


def test_capacity_is_power_of_two_multiple_of_initial():
    arr = DynamicArray(3)
    for value in range(10):
        arr.push_back(value)
    ratio, remainder = divmod(arr.capacity(), 3)
    assert remainder == 0
    assert ratio & (ratio - 1) == 0


def test_pop_does_not_shrink_capacity():
    arr = DynamicArray(2)
    for value in range(5):
        arr.push_back(value)
    before = arr.capacity()
    while len(arr):
        arr.pop_back()
    assert arr.capacity() == before


def test_pop_back_returns_in_reverse():
    arr = DynamicArray(2)
    for value in (5, 6, 7):
        arr.push_back(value)
    assert [arr.pop_back() for _ in range(3)] == [7, 6, 5]


def test_pop_empty_raises():
    with pytest.raises(IndexError):
        DynamicArray(2).pop_back()


@pytest.mark.parametrize("index", [-1, 2, 5])
def test_out_of_range_access_raises(index):
    arr = DynamicArray(4)
    arr.push_back(1)
    arr.push_back(2)
    with pytest.raises(IndexError):
        _ = arr[index]
    with pytest.raises(IndexError):
        arr[index] = 0
    assert len(arr) == 2
    assert [arr[0], arr[1]] == [1, 2]
    assert arr.capacity() == 4


@pytest.mark.parametrize("capacity", [0, -3])
def test_invalid_capacity_rejected(capacity):
    with pytest.raises(ValueError):
        DynamicArray(capacity)