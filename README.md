# algodrills

Small, dependency-free implementations of well-known algorithm exercises on
arrays, matrices, sorted data and strings. Every function takes ordinary
Python lists and strings and returns ordinary Python values.

## Installation

```
pip install .
```

The `test` extra installs pytest for running the test suite.

## Modules

- `algodrills.sums`: `two_sum`, `three_sum`, `four_sum`, `max_subarray_sum`
- `algodrills.arrays`: `is_rotated_sorted`, `majority_element`, `merge_sorted`,
  `merge_intervals`, `missing_number`, `move_zeroes`, `rearrange_by_sign`,
  `rotate`, `single_number`, `sort_colors`, `max_profit`
- `algodrills.matrix`: `rotate_matrix`, `set_zeroes`
- `algodrills.searching`: `binary_search`, `search_insert`, `search_rotated`,
  `search_rotated_with_duplicates`, `find_peak_element`, `single_non_duplicate`,
  `find_median_sorted_arrays`, `search_matrix`, `search_sorted_matrix`
- `algodrills.answers`: binary searches over the answer space:
  `min_eating_speed`, `min_days`, `ship_within_days`, `smallest_divisor`,
  `split_array`
- `algodrills.strings`: `frequency_sort`, `is_isomorphic`, `largest_odd_number`,
  `longest_common_prefix`, `longest_palindrome`, `reverse_words`,
  `rotate_string`, `beauty_sum`
- `algodrills.parsing`: `max_depth`, `my_atoi`, `remove_outer_parentheses`,
  `roman_to_int`

## Examples

```python
from algodrills.sums import two_sum, three_sum
from algodrills.searching import find_median_sorted_arrays
from algodrills.answers import min_eating_speed
from algodrills.parsing import roman_to_int, my_atoi

two_sum([2, 7, 11, 15], 9)                  # (0, 1)
two_sum([1, 2], 10)                         # None
three_sum([-1, 0, 1, 2, -1, -4])            # [[-1, -1, 2], [-1, 0, 1]]
find_median_sorted_arrays([1, 3], [2])      # 2.0
min_eating_speed([3, 6, 7, 11], 8)          # 4
roman_to_int("MCMXCIV")                     # 1994
my_atoi("   -42abc")                        # -42
```

## Behaviour worth knowing

- Some functions work in place on the list they are given and return `None`:
  `move_zeroes`, `rotate`, `sort_colors`, `merge_sorted`, `rotate_matrix` and
  `set_zeroes`.
- Index searches such as `binary_search` and `search_rotated` return `-1` when
  the target is absent; `min_days` returns `-1` when there are too few flowers.
- Functions that have no meaningful answer for empty input, such as
  `max_subarray_sum`, `max_profit`, `find_peak_element` and the functions in
  `algodrills.answers`, raise `ValueError`. So do `rearrange_by_sign` when the
  values cannot alternate by sign, `rotate_matrix` for a non-square matrix, and
  `remove_outer_parentheses` for characters other than parentheses.
- `my_atoi` clamps its result to the signed 32-bit range.

## What it does not do

algodrills is a library only: it has no command-line tool and reads no input
of its own. Call the functions from your own code.