# judgekit

A small library of solutions to classic online-judge problems. Each one is a
plain Python function or class that solves a single case. You can call it,
test it and reuse it.

## Installation

From a checkout of the project:

```
pip install .
```

To run the tests, install the test extra as well:

```
pip install ".[test]"
pytest
```

## Modules

### `judgekit.beecrowd`

- `sum_message(a, b)` returns the sum line, for example `"X = 5"`.
- `circle_area(radius)` returns the area of a circle as a float, worked out with π = 3.14159.
- `xor_pairs(pairs)` yields the XOR of each pair of unsigned 32-bit integers. It raises
  `ValueError` if a value falls outside that range.
- `josephus(n, k)` returns the 1-based position of the survivor among `n` people.
- `parse_number(text, base)` parses digits in any base from 2 to 36, in either case, and wraps
  the result modulo 2**32. `to_hex(value)` and `to_bin(value)` format a non-negative integer
  without a prefix.
- `convert_base(text, kind)` takes `kind` as `"bin"` or `"dec"`. Any other kind is read as
  hexadecimal. It returns lines such as `"10 dec"` and `"a hex"` for the two other bases.
- `sums_until_zero(pairs)` yields the sum of each pair and stops at the pair `(0, 0)`.
- `euclidean_division(a, b)` returns `(q, r)` with `a == b * q + r` and `0 <= r < abs(b)`.

### `judgekit.xor_segment_tree`

`XorSegmentTree(values)` holds a non-empty sequence of integers in `0 .. 2**20 - 1`. It supports
two operations on 1-based inclusive ranges:

- `query(left, right)` returns the sum over the range,
- `update(left, right, value)` XORs every element in the range with `value`.

A range outside the sequence raises `IndexError`. A value that does not fit in 20 bits raises
`ValueError`. `len(tree)` gives the number of elements.

```python
from judgekit.xor_segment_tree import XorSegmentTree

tree = XorSegmentTree([4, 10, 3, 13, 7])
tree.query(2, 4)        # 26
tree.update(1, 3, 3)
tree.query(2, 4)        # 22
```

### `judgekit.strings`

- `reverse_words(text)` reverses the letters of each space-separated word. It keeps the words in
  their order and leaves the spacing as it was.

### `judgekit.codeforces`

- `is_square_sum(numbers)`: whether the numbers add up to a perfect square.
- `longest_good_array(low, high)`: the longest array within `low..high` whose elements and
  differences both strictly increase.
- `completion_day(n, a, b, c)`: the first day by which a repeating three-day walk reaches `n`.
- `initials(first, second, third)`: the first letters of three non-empty words.
- `max_problems(n, k)`: how many problems fit before a party `k` minutes after the contest.
- `can_balance(a, b, c)`: whether three piles can be evened out towards the middle.
- `suffix_best_sums(values)`: for each suffix length, the best sum when one element may be
  replaced by an earlier one.

### `judgekit.leetcode`

The module has `relative_sort_array`, `single_number`, `find_peak_element`, `reverse_bits`,
`hamming_weight`, `range_bitwise_and`, `remove_element`, `linear_search`, `count_bits`,
`find_median_sorted_arrays`, `binary_search`, `search_matrix` and `sort_colors`.
`remove_element` and `sort_colors` change the list they are given.

```python
from judgekit.leetcode import binary_search, count_bits

binary_search([-1, 0, 3, 5, 9, 12], 9)   # 4
count_bits(5)                            # [0, 1, 1, 2, 1, 2]
```

## What it does not do

judgekit has no command-line program and does not read judge-formatted input from standard
input. Each function takes the values of one case as arguments and returns the answer. To read
input and print output, write the loop yourself.