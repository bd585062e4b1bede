# algodrills

A small collection of classic algorithm exercises written as plain Python
functions, with no dependencies beyond the standard library.

## Installation

From the project directory:

```
pip install .
```

## Modules

- `algodrills.arrays`: `maximum_wealth`, `max_profit`, `single_number`,
  `missing_number`, `remove_element`, `largest_divisible_subset`,
  `set_zeroes`, `num_rescue_boats`, `merge_sorted`,
  `deck_revealed_increasing`, `k_closest`
- `algodrills.numbers`: `hamming_weight`, `range_bitwise_and`,
  `is_power_of_two`, `add_digits`, `fib`, `is_palindrome`
- `algodrills.text`: `is_valid_parentheses`, `first_unique_char`,
  `remove_k_digits`, `group_anagrams`
- `algodrills.trees`: `TreeNode`, `build_tree`, `tree_values`, `is_leaf`,
  `sum_numbers`, `invert_tree`, `add_one_row`
- `algodrills.linked_list`: `ListNode`, `build_list`, `list_values`,
  `delete_duplicates`
- `algodrills.graphs`: `num_islands`, `open_lock`, `find_cheapest_price`,
  `find_judge`

## Examples

```python
from algodrills.arrays import max_profit
from algodrills.text import is_valid_parentheses
from algodrills.trees import build_tree, sum_numbers
from algodrills.graphs import open_lock

max_profit([7, 1, 5, 3, 6, 4])         # 5
is_valid_parentheses("()[]{}")         # True
sum_numbers(build_tree([1, 2, 3]))     # 25
open_lock(["0201", "0101", "0102", "1212", "2002"], "0202")  # 6
```

Binary trees are built from level-order lists with `None` for missing
children and read back the same way with `tree_values`. Linked lists are
built from plain Python lists with `build_list` and read back with
`list_values`.

Some functions work in place and return `None` (`set_zeroes`,
`merge_sorted`) or modify their argument as well as returning a result
(`remove_element`, `invert_tree`, `add_one_row`, `delete_duplicates`).

Errors are raised as `ValueError`:

- `is_valid_parentheses` when the string holds a character that is not a
  bracket;
- `remove_k_digits` when `k` is larger than the number of digits;
- `merge_sorted` when `nums1` has no room for `m + n` values or `nums2`
  holds fewer than `n`.

## What it does not do

The package is a library only: it has no command-line tool, reads no input
files and keeps no state between calls.

## Running the tests

Install the test extra and run pytest from the project directory:

```
pip install -e ".[test]"
pytest
```