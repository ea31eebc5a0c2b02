from collections import Counter
from itertools import permutations
from math import prod

import pytest

from algodrills.arrays import (
    common_elements,
    is_subset,
    longest_consecutive_run,
    max_consecutive_ones,
    max_product_subarray,
    max_subarray_sum,
    max_water_area,
    merge_in_place,
    min_jumps,
    min_swaps_to_group,
    next_permutation,
    remove_duplicates,
    repeat_and_missing,
    sort_colors,
    three_way_partition,
    trapped_rain_water,
)


def test_max_subarray_sum_all_positive_is_total():
    nums = [3, 1, 4, 1, 5]
    assert max_subarray_sum(nums) == sum(nums)


def test_max_subarray_sum_all_negative_is_largest_element():
    nums = [-8, -3, -6, -2, -5]
    assert max_subarray_sum(nums) == max(nums)


def test_max_subarray_sum_classic_example():
    assert max_subarray_sum([-2, 1, -3, 4, -1, 2, 1, -5, 4]) == 6


def test_max_subarray_sum_empty_raises():
    with pytest.raises(ValueError):
        max_subarray_sum([])


def test_max_product_subarray_positive_is_product():
    nums = [2, 3, 4]
    assert max_product_subarray(nums) == prod(nums)


def test_max_product_subarray_even_negatives_take_everything():
    nums = [-2, 3, -4]
    assert max_product_subarray(nums) == prod(nums)


def test_max_product_subarray_single_zero():
    assert max_product_subarray([0]) == 0


def test_max_product_subarray_empty_raises():
    with pytest.raises(ValueError):
        max_product_subarray([])


def test_max_water_area_classic_example():
    assert max_water_area([1, 8, 6, 2, 5, 4, 8, 3, 7]) == 49


def test_max_water_area_symmetric_under_reversal():
    heights = [4, 3, 2, 1, 4, 7, 2]
    assert max_water_area(heights) == max_water_area(heights[::-1])


def test_max_water_area_empty():
    assert max_water_area([]) == 0


def test_trapped_rain_water_classic_example():
    assert trapped_rain_water([0, 1, 0, 2, 1, 0, 1, 3, 2, 1, 2, 1]) == 6


def test_trapped_rain_water_monotonic_traps_nothing():
    assert trapped_rain_water([1, 2, 3, 4, 5]) == 0
    assert trapped_rain_water([5, 4, 3, 2, 1]) == 0


def test_trapped_rain_water_symmetric_under_reversal():
    heights = [4, 2, 0, 3, 2, 5]
    assert trapped_rain_water(heights) == trapped_rain_water(heights[::-1])


def test_merge_in_place_gives_sorted_union():
    target = [1, 3, 5, 7]
    source = [0, 2, 3, 8, 9]
    expected = sorted(target + source)
    merge_in_place(target, source)
    assert target == expected


def test_merge_in_place_with_empty_source():
    target = [1, 2, 3]
    merge_in_place(target, [])
    assert target == [1, 2, 3]


def test_next_permutation_walks_lexicographic_order():
    ordered = sorted(set(permutations([1, 2, 2, 3])))
    for current, following in zip(ordered, ordered[1:] + ordered[:1]):
        nums = list(current)
        next_permutation(nums)
        assert nums == list(following)


def test_next_permutation_short_lists_untouched():
    nums = [7]
    next_permutation(nums)
    assert nums == [7]


def test_remove_duplicates_moves_distinct_values_to_front():
    nums = [0, 0, 1, 1, 1, 2, 2, 3, 3, 4]
    original = list(nums)
    count = remove_duplicates(nums)
    assert count == len(set(original))
    assert nums[:count] == sorted(set(original))
    assert nums[count:] == original[count:]


def test_remove_duplicates_empty():
    assert remove_duplicates([]) == 0


def test_repeat_and_missing():
    assert repeat_and_missing([3, 1, 2, 5, 3]) == (3, 4)


def test_repeat_and_missing_out_of_range_raises():
    with pytest.raises(ValueError):
        repeat_and_missing([1, 9, 2])


def test_sort_colors_sorts():
    nums = [2, 0, 2, 1, 1, 0, 0, 2, 1]
    expected = sorted(nums)
    sort_colors(nums)
    assert nums == expected


def test_sort_colors_all_same():
    nums = [2, 2, 2]
    sort_colors(nums)
    assert nums == [2, 2, 2]


def test_three_way_partition_invariant():
    values = [1, 14, 5, 20, 4, 2, 54, 20, 87, 98, 3, 1, 32]
    original = Counter(values)
    low, high = 14, 20
    three_way_partition(values, low, high)
    assert Counter(values) == original
    below = sum(1 for v in values if v < low)
    above = sum(1 for v in values if v > high)
    assert all(v < low for v in values[:below])
    assert all(low <= v <= high for v in values[below:len(values) - above])
    assert all(v > high for v in values[len(values) - above:])


def test_min_swaps_to_group_examples():
    assert min_swaps_to_group([2, 1, 5, 6, 3], 3) == 1
    assert min_swaps_to_group([2, 7, 9, 5, 8, 7, 4], 5) == 2


def test_min_swaps_to_group_already_grouped():
    assert min_swaps_to_group([1, 2, 3], 5) == 0


def test_common_elements_example():
    a = [1, 5, 10, 20, 40, 80]
    b = [6, 7, 20, 80, 100]
    c = [3, 4, 15, 20, 30, 70, 80, 120]
    assert common_elements(a, b, c) == [20, 80]


def test_common_elements_reports_repeats_once():
    assert common_elements([1, 1, 2], [1, 1, 2], [1, 1, 2, 2]) == [1, 2]


def test_common_elements_none_shared():
    assert common_elements([1, 2], [3, 4], [1, 3]) == []


def test_is_subset():
    assert is_subset([11, 1, 13, 21, 3, 7], [11, 3, 7, 1]) is True
    assert is_subset([1, 2, 3], [1, 2, 4]) is False


def test_is_subset_counts_repeats():
    assert is_subset([1, 2], [1, 1]) is False
    assert is_subset([1, 1, 2], [1, 1]) is True


def test_longest_consecutive_run_example():
    assert longest_consecutive_run([1, 9, 3, 10, 4, 20, 2]) == 4


def test_longest_consecutive_run_ignores_repeats():
    assert longest_consecutive_run([5, 5, 5]) == 1


def test_longest_consecutive_run_empty():
    assert longest_consecutive_run([]) == 0


def test_max_consecutive_ones():
    assert max_consecutive_ones([1, 1, 0, 1, 1, 1]) == 3


def test_max_consecutive_ones_none():
    assert max_consecutive_ones([]) == 0
    assert max_consecutive_ones([0, 0]) == 0


def test_min_jumps_examples():
    assert min_jumps([9, 10, 1, 2, 3, 4, 8, 0, 0, 0, 0, 0, 0, 0, 1]) == 2
    assert min_jumps([1, 3, 5, 8, 9, 2, 6, 7, 6, 8, 9]) == 3
    assert min_jumps([2, 3, 1, 1, 2, 4, 2, 0, 1, 1]) == 4


def test_min_jumps_blocked():
    assert min_jumps([1, 0, 2]) == -1


def test_min_jumps_single_position():
    assert min_jumps([0]) == 0