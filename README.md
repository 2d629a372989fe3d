# kata

Worked solutions to classic algorithm exercises. They are grouped by the kind of data they work on:

- `kata.arrays`: `two_sum`, `find_median_sorted_arrays`, `remove_duplicates`, `remove_element`, `search_insert`, `plus_one`, `merge`, `single_number`, `contains_duplicate`, `find_disappeared_numbers`, `unique_occurrences`
- `kata.strings`: `length_of_longest_substring`, `roman_to_int`, `longest_common_prefix`, `is_valid_parentheses`, `generate_parenthesis`, `str_str`, `length_of_last_word`, `add_binary`, `is_palindrome`, `detect_capital_use`, `reformat`
- `kata.numbers`: `reverse_integer`, `is_palindrome_number`, `my_sqrt`, `climb_stairs`, `is_ugly`
- `kata.bits`: `reverse_bits`, `hamming_weight`, `count_bits`, `find_complement`
- `kata.linked_list`: `ListNode`, `build_list`, `add_two_numbers`, `merge_two_lists`, `delete_duplicates`
- `kata.trees`: `TreeNode`, `build_tree`, `inorder_traversal`, `is_same_tree`, `is_mirror`, `is_symmetric`, `level_order`, `max_depth`, `sorted_array_to_bst`

## Installation

```
pip install .
```

Install with the `test` extra to run the test suite:

```
pip install ".[test]"
pytest
```

## Examples

```python
from kata.arrays import two_sum
from kata.strings import roman_to_int
from kata.linked_list import build_list, add_two_numbers

two_sum([2, 7, 11, 15], 9)          # [0, 1]
roman_to_int("MCMXCIV")             # 1994

total = add_two_numbers(build_list([2, 4, 3]), build_list([5, 6, 4]))
list(total)                         # [7, 0, 8]
```

```python
from kata.trees import build_tree, level_order, is_symmetric

root = build_tree([3, 9, 20, None, None, 15, 7])
level_order(root)                   # [[3], [9, 20], [15, 7]]
is_symmetric(build_tree([1, 2, 2, 3, 4, 4, 3]))  # True
```

## Notes on behaviour

- Linked lists iterate over their values, so `list(node)` turns one into a plain Python list. `build_list([])` returns `None`.
- `build_tree` reads values in level order and uses `None` for a missing child.
- `remove_duplicates`, `remove_element`, `plus_one`, `merge` and `delete_duplicates` change their argument in place. `merge` returns `None`.
- `find_median_sorted_arrays` raises `ValueError` when both lists are empty; `roman_to_int` raises `ValueError` on a character that is not a Roman digit; `merge` raises `ValueError` when `nums1` has no room for the merged values.
- `two_sum` returns `[]` when no pair adds up to the target, and `str_str` returns `-1` when the needle is absent.
- `reverse_integer` returns `0` when the reversed value leaves the signed 32-bit range; `reverse_bits` and `hamming_weight` treat their argument as an unsigned 32-bit value.

## What it does not do

The package is a library of functions only: it has no command-line program.