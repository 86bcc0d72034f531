import pytest

from algokata.arrays import (
    binary_search,
    build_array,
    contains_duplicate,
    find_numbers,
    majority_element,
    max_profit,
    merge_intervals,
    missing_number,
    move_zeroes,
    number_of_steps,
    pivot_index,
    remove_duplicates,
    remove_element,
    running_sum,
)


def test_max_profit_example():
    assert max_profit([7, 1, 5, 3, 6, 4]) == 5


def test_max_profit_falling_prices_is_zero():
    assert max_profit([9, 7, 4, 3, 1]) == 0
    assert max_profit([]) == 0


def test_max_profit_rising_prices_spans_whole_range():
    prices = [2, 3, 5, 8, 13]
    assert max_profit(prices) == prices[-1] - prices[0]


def test_find_numbers_example():
    assert find_numbers([12, 345, 2, 6, 7896]) == 2


def test_find_numbers_bounds():
    two_digit = [10, 42, 99]
    assert find_numbers(two_digit) == len(two_digit)
    assert find_numbers([1, 5, 9, 100]) == 0


def test_find_numbers_rejects_non_positive():
    with pytest.raises(ValueError):
        find_numbers([12, 0])


def test_number_of_steps_example():
    assert number_of_steps(14) == 6
    assert number_of_steps(0) == 0


@pytest.mark.parametrize("n", [1, 3, 7, 14, 123, 1000])
def test_number_of_steps_doubling_adds_one(n):
    assert number_of_steps(2 * n) == number_of_steps(n) + 1


def test_running_sum_invariants():
    nums = [1, 2, 3, 4, 5]
    sums = running_sum(nums)
    assert len(sums) == len(nums)
    assert sums[0] == nums[0]
    assert sums[-1] == sum(nums)
    assert [b - a for a, b in zip(sums, sums[1:])] == nums[1:]


def test_running_sum_empty():
    assert running_sum([]) == []


def test_majority_element():
    assert majority_element([3, 2, 3]) == 3
    assert majority_element([1, 2, 3, 4]) == 0


def test_build_array_identity_and_involution():
    assert build_array([0, 1, 2, 3]) == [0, 1, 2, 3]
    assert build_array([1, 0, 3, 2]) == list(range(4))


def test_build_array_of_permutation_is_permutation():
    nums = [0, 2, 1, 5, 3, 4]
    assert sorted(build_array(nums)) == sorted(nums)


def test_contains_duplicate():
    assert contains_duplicate([1, 2, 3, 4]) is False
    assert contains_duplicate([1, 2, 3, 1]) is True
    assert contains_duplicate([]) is False


def test_remove_duplicates():
    nums = [1, 1, 2, 2, 3, 4, 5]
    k = remove_duplicates(nums)
    assert nums[:k] == [1, 2, 3, 4, 5]
    assert len(nums) == 7


def test_remove_duplicates_empty():
    nums: list[int] = []
    assert remove_duplicates(nums) == 0


def test_remove_element():
    nums = [3, 2, 2, 3]
    k = remove_element(nums, 2)
    assert nums[:k] == [3, 3]


def test_remove_element_absent_value_keeps_all():
    nums = [1, 4, 6]
    assert remove_element(nums, 9) == len(nums)
    assert nums == [1, 4, 6]


@pytest.mark.parametrize("gap", range(6))
def test_missing_number_finds_gap(gap):
    nums = [x for x in reversed(range(6)) if x != gap]
    assert missing_number(nums) == gap


def test_missing_number_out_of_range():
    with pytest.raises(ValueError):
        missing_number([0, 7])


def test_move_zeroes():
    nums = [0, 1, 0, 3, 12]
    assert move_zeroes(nums) is None
    assert nums == [1, 3, 12, 0, 0]


def test_binary_search_finds_every_element():
    nums = [-1, 0, 1, 4, 7, 9, 12]
    for index, value in enumerate(nums):
        assert binary_search(nums, value) == index


def test_binary_search_missing():
    assert binary_search([-1, 0, 1, 4, 7, 9, 12], 5) == -1
    assert binary_search([], 1) == -1


def test_pivot_index():
    nums = [1, 7, 3, 6, 5, 6]
    index = pivot_index(nums)
    assert index == 3
    assert sum(nums[:index]) == sum(nums[index + 1 :])


def test_pivot_index_none():
    assert pivot_index([1, 2, 3]) == -1


def test_merge_intervals_example():
    intervals = [[1, 3], [2, 6], [8, 10], [12, 16]]
    assert merge_intervals(intervals) == [[1, 6], [8, 10], [12, 16]]


def test_merge_intervals_touching_and_unsorted():
    intervals = [[4, 5], [1, 4]]
    assert merge_intervals(intervals) == [[1, 5]]
    assert intervals == [[4, 5], [1, 4]]


def test_merge_intervals_contained():
    assert merge_intervals([[1, 10], [2, 3]]) == [[1, 10]]