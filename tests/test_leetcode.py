import statistics

import pytest

from judgekit.leetcode import (
    binary_search,
    count_bits,
    find_median_sorted_arrays,
    find_peak_element,
    hamming_weight,
    linear_search,
    range_bitwise_and,
    relative_sort_array,
    remove_element,
    reverse_bits,
    search_matrix,
    single_number,
    sort_colors,
)


def test_relative_sort_array_example():
    arr1 = [2, 3, 1, 3, 2, 4, 6, 7, 9, 2, 19]
    arr2 = [2, 1, 4, 3, 9, 6]
    assert relative_sort_array(arr1, arr2) == [2, 2, 2, 1, 4, 3, 3, 9, 6, 7, 19]


def test_relative_sort_array_is_permutation():
    arr1 = [5, 0, 1000, 5, 3, 3, 7]
    result = relative_sort_array(arr1, [3, 3, 5])
    assert sorted(result) == sorted(arr1)
    assert result[:4] == [3, 3, 5, 5]
    assert result[4:] == sorted(result[4:])


def test_relative_sort_array_out_of_range():
    with pytest.raises(ValueError):
        relative_sort_array([1001], [1])


@pytest.mark.parametrize("lone", [0, 4, -7, 123456])
def test_single_number(lone):
    assert single_number([9, lone, 3, 9, 3]) == lone


@pytest.mark.parametrize(
    "nums", [[1], [1, 2], [2, 1], [1, 2, 3, 1], [1, 2, 1, 3, 5, 6, 4], [5, 4, 3, 2, 1]]
)
def test_find_peak_element_is_peak(nums):
    index = find_peak_element(nums)
    assert index == 0 or nums[index] > nums[index - 1]
    assert index == len(nums) - 1 or nums[index] > nums[index + 1]


def test_find_peak_element_empty():
    with pytest.raises(ValueError):
        find_peak_element([])


@pytest.mark.parametrize("n", [0, 1, 43261596, 0xFFFFFFFF, 0x80000000, 12345])
def test_reverse_bits_involution(n):
    assert reverse_bits(reverse_bits(n)) == n
    assert hamming_weight(reverse_bits(n)) == hamming_weight(n)


def test_reverse_bits_low_bit():
    assert reverse_bits(1) == 1 << 31


def test_reverse_bits_out_of_range():
    with pytest.raises(ValueError):
        reverse_bits(1 << 32)


@pytest.mark.parametrize("k", range(0, 33))
def test_hamming_weight_of_ones(k):
    assert hamming_weight((1 << k) - 1) == k


def test_hamming_weight_negative_is_32_bit():
    assert hamming_weight(-1) == 32


def test_range_bitwise_and_example():
    assert range_bitwise_and(5, 7) == 4


@pytest.mark.parametrize("left,right", [(0, 0), (3, 3), (12, 15), (1, 100), (26, 30)])
def test_range_bitwise_and_is_common_subset(left, right):
    result = range_bitwise_and(left, right)
    assert all(result & value == result for value in range(left, right + 1))
    if left == right:
        assert result == left


def test_remove_element():
    nums = [0, 1, 2, 2, 3, 0, 4, 2]
    original = list(nums)
    count = remove_element(nums, 2)
    kept = [value for value in original if value != 2]
    assert count == len(kept)
    assert nums[:count] == kept
    assert nums[count:] == original[count:]


@pytest.mark.parametrize("target", [4, 5, 6, 7, 0, 1, 2])
def test_linear_search_found(target):
    nums = [4, 5, 6, 7, 0, 1, 2]
    assert linear_search(nums, target) == nums.index(target)


def test_linear_search_missing():
    assert linear_search([4, 5, 6], 3) == -1


def test_count_bits_matches_hamming_weight():
    counts = count_bits(64)
    assert len(counts) == 65
    assert counts == [hamming_weight(value) for value in range(65)]


@pytest.mark.parametrize(
    "nums1,nums2", [([1, 3], [2]), ([1, 2], [3, 4]), ([], [7]), ([0, 0], [0, 0])]
)
def test_find_median_matches_statistics(nums1, nums2):
    assert find_median_sorted_arrays(nums1, nums2) == statistics.median(nums1 + nums2)


def test_find_median_empty():
    with pytest.raises(ValueError):
        find_median_sorted_arrays([], [])


def test_binary_search():
    nums = [-1, 0, 3, 5, 9, 12]
    for target in nums:
        assert binary_search(nums, target) == nums.index(target)
    assert binary_search(nums, 2) == -1
    assert binary_search(nums, 13) == -1


def test_search_matrix():
    matrix = [[1, 3, 5, 7], [10, 11, 16, 20], [23, 30, 34, 60]]
    for row in matrix:
        for value in row:
            assert search_matrix(matrix, value)
    assert not search_matrix(matrix, 13)
    assert not search_matrix(matrix, 61)


def test_search_matrix_empty():
    assert not search_matrix([], 1)
    assert not search_matrix([[]], 1)


def test_sort_colors_in_place():
    nums = [2, 0, 2, 1, 1, 0]
    original = list(nums)
    sort_colors(nums)
    assert nums == sorted(original)