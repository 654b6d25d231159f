import pytest

from dpkit.sequences import (
    coin_change_ways,
    largest_divisible_subset,
    length_of_lis,
    min_cut_cost,
)


def test_lis_worked_example():
    assert length_of_lis([10, 9, 2, 5, 3, 7, 101, 18]) == 4


@pytest.mark.parametrize("nums", [[3, 1, 2], [5, 5, 5], [9, 4, 7, 1, 8], [2]])
def test_lis_of_sorted_distinct_is_whole(nums):
    distinct = sorted(set(nums))
    assert length_of_lis(distinct) == len(distinct)


@pytest.mark.parametrize("nums", [[3, 1, 2], [9, 4, 7, 1, 8], [2, 6]])
def test_lis_of_decreasing_is_one(nums):
    assert length_of_lis(sorted(nums, reverse=True)) == length_of_lis([nums[0]])


def test_lis_is_strict():
    assert length_of_lis([5, 5, 5]) == length_of_lis([5])


def test_lis_empty():
    assert length_of_lis([]) == 0


def test_divisible_subset_chain_returned_whole():
    chain = [8, 1, 4, 2]
    assert largest_divisible_subset(chain) == sorted(chain)


@pytest.mark.parametrize("nums", [[1, 2, 3], [3, 4, 16, 8], [5, 9, 18, 54, 108, 540, 90], [7]])
def test_divisible_subset_is_valid(nums):
    result = largest_divisible_subset(nums)
    assert result == sorted(result)
    assert set(result) <= set(nums)
    for small, big in zip(result, result[1:]):
        assert big % small == 0


def test_divisible_subset_does_not_mutate():
    nums = [4, 2, 1]
    largest_divisible_subset(nums)
    assert nums == [4, 2, 1]


def test_divisible_subset_empty_raises():
    with pytest.raises(ValueError):
        largest_divisible_subset([])


def test_coin_change_worked_example():
    assert coin_change_ways(5, [1, 2, 5]) == 4


def test_coin_change_zero_amount():
    assert coin_change_ways(0, []) == 1
    assert coin_change_ways(0, [3]) == 1


def test_coin_change_no_coins():
    assert coin_change_ways(7, []) == 0


@pytest.mark.parametrize("amount", [1, 5, 13])
def test_coin_change_single_unit_coin(amount):
    assert coin_change_ways(amount, [1]) == coin_change_ways(0, [1])


@pytest.mark.parametrize("amount", [1, 3, 11])
def test_coin_change_unreachable(amount):
    assert coin_change_ways(amount, [2]) == 0


def test_coin_change_order_independent():
    assert coin_change_ways(10, [5, 2, 1]) == coin_change_ways(10, [1, 2, 5])


def test_coin_change_rejects_bad_coin():
    with pytest.raises(ValueError):
        coin_change_ways(4, [0, 1])


def test_min_cut_worked_example():
    assert min_cut_cost(7, [1, 3, 4, 5]) == 16


def test_min_cut_no_cuts():
    assert min_cut_cost(9, []) == 0


@pytest.mark.parametrize("n,cut", [(7, 3), (10, 1), (4, 2)])
def test_min_cut_single_cut_costs_length(n, cut):
    assert min_cut_cost(n, [cut]) == n


def test_min_cut_order_independent_and_no_mutation():
    cuts = [5, 1, 4, 3]
    assert min_cut_cost(7, cuts) == min_cut_cost(7, sorted(cuts))
    assert cuts == [5, 1, 4, 3]


def test_min_cut_at_least_stick_per_level():
    n, cuts = 9, [5, 6, 1, 4, 2]
    cost = min_cut_cost(n, cuts)
    assert cost >= n
    assert cost <= n * len(cuts)