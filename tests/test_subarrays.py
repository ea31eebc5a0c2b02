import pytest

from algodrills.subarrays import (
    count_pairs_with_sum,
    count_subarrays_divisible_by,
    has_zero_sum_subarray,
    longest_subarray_divisible_by,
    longest_unique_substring,
    longest_window_with_at_most_k_evens,
    longest_zero_sum_subarray,
    smallest_subarray_with_sum_above,
)


def test_count_pairs_known_example():
    assert count_pairs_with_sum([1, 5, 7, 1], 6) == 2


def test_count_pairs_is_order_independent():
    values = [1, 5, 7, -1, 5, 3, 3]
    assert count_pairs_with_sum(values, 6) == count_pairs_with_sum(
        list(reversed(values)), 6
    )


def test_count_pairs_unmatched_value_changes_nothing():
    values = [2, 4, 3, 3, 1]
    assert count_pairs_with_sum(values + [100], 6) == count_pairs_with_sum(values, 6)


def test_count_pairs_single_value_has_no_pair():
    assert count_pairs_with_sum([3], 6) == 0


def test_longest_zero_sum_whole_array():
    values = [15, -2, 2, -8, 1, 7, 10]
    closed = values + [-sum(values)]
    assert longest_zero_sum_subarray(closed) == len(closed)


def test_longest_zero_sum_all_positive():
    assert longest_zero_sum_subarray([1, 2, 3]) == 0


def test_longest_zero_sum_single_zero():
    assert longest_zero_sum_subarray([4, 0, 5]) == 1


def test_longest_divisible_whole_array():
    values = [2, 7, 6, 1, 4, 5]
    k = sum(values)
    assert longest_subarray_divisible_by(values, k) == len(values)


def test_longest_divisible_scaled_values():
    k = 3
    values = [v * k for v in [1, -2, 5, 0, 7]]
    assert longest_subarray_divisible_by(values, k) == len(values)


def test_longest_divisible_rejects_zero():
    with pytest.raises(ValueError):
        longest_subarray_divisible_by([1, 2], 0)


def test_count_divisible_known_example():
    assert count_subarrays_divisible_by([4, 5, 0, -2, -3, 1], 5) == 7


def test_count_divisible_by_one_counts_every_subarray():
    values = [3, -1, 4, 1, 5]
    assert count_subarrays_divisible_by(values, 1) == sum(range(len(values) + 1))


def test_count_divisible_rejects_zero():
    with pytest.raises(ValueError):
        count_subarrays_divisible_by([1], 0)


@pytest.mark.parametrize(
    "values, expected",
    [
        ([4, 2, -3, 1, 6], True),
        ([4, 2, 0, 1, 6], True),
        ([-3, 2, 1], True),
        ([4, 2, 3, 1, 6], False),
        ([], False),
    ],
)
def test_has_zero_sum_subarray(values, expected):
    assert has_zero_sum_subarray(values) is expected


def test_smallest_subarray_single_element_suffices():
    values = [1, 4, 45, 6, 0, 19]
    assert smallest_subarray_with_sum_above(values, max(values) - 1) == 1


def test_smallest_subarray_none_when_impossible():
    values = [1, 10, 5, 2, 7]
    assert smallest_subarray_with_sum_above(values, sum(values)) is None


def test_smallest_subarray_whole_array_needed():
    values = [1, 1, 1, 1]
    assert smallest_subarray_with_sum_above(values, sum(values) - 1) == len(values)


def test_smallest_subarray_grows_with_threshold():
    values = [1, 4, 45, 6, 0, 19]
    lengths = [
        smallest_subarray_with_sum_above(values, t) for t in range(0, sum(values), 7)
    ]
    assert lengths == sorted(lengths)


def test_window_all_odd():
    values = [1, 3, 5, 7]
    assert longest_window_with_at_most_k_evens(values, 0) == len(values)


def test_window_k_covers_all_evens():
    values = [2, 3, 4, 6, 1]
    evens = sum(v % 2 == 0 for v in values)
    assert longest_window_with_at_most_k_evens(values, evens) == len(values)


def test_window_all_even_with_zero_k():
    assert longest_window_with_at_most_k_evens([2, 4, 6], 0) == 0


def test_window_never_exceeds_k_plus_odds():
    values = [2, 1, 4, 3, 6, 5, 8]
    for k in range(5):
        result = longest_window_with_at_most_k_evens(values, k)
        assert result <= k + sum(v % 2 for v in values)


def test_longest_unique_substring_known_example():
    assert longest_unique_substring("abcabcbb") == 3


@pytest.mark.parametrize("text", ["", "a", "abcdef", "xyz"])
def test_longest_unique_substring_distinct_characters(text):
    assert longest_unique_substring(text) == len(text)


def test_longest_unique_substring_repeated_character():
    assert longest_unique_substring("bbbbb") == len("b")


def test_longest_unique_substring_bounded_by_alphabet():
    text = "pwwkewpwwkew"
    assert longest_unique_substring(text) <= len(set(text))