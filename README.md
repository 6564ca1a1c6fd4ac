# algonotes

A small library of classic algorithm solutions, written as plain Python
functions and classes. It has no dependencies outside the standard library.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

| Module | Contents |
| --- | --- |
| `algonotes.linked_list` | `ListNode`, `from_values`, `to_values`, `reverse_list`, `add_two_numbers`, `remove_elements`, `merge_two_lists`, `remove_nth_from_end`, `reverse_k_group`, `swap_pairs` |
| `algonotes.trees` | `TreeNode`, `BSTIterator`, `right_side_view` |
| `algonotes.arithmetic` | `range_bitwise_and`, `count_primes`, `count_primes_sieve`, `trailing_zeroes`, `is_happy`, `divide`, `fraction_to_decimal` |
| `algonotes.bits` | `reverse_bits`, `hamming_weight` (on unsigned 32-bit words) |
| `algonotes.formatting` | `title_to_number`, `convert_to_title`, `compare_version`, `largest_number` |
| `algonotes.text` | `count_repeated_substrings`, `is_isomorphic`, `length_of_longest_substring`, `find_repeated_dna_sequences`, `str_str`, `longest_common_prefix` |
| `algonotes.parentheses` | `generate_parenthesis`, `longest_valid_parentheses`, `longest_valid_parentheses_dp`, `is_valid` |
| `algonotes.palindromes` | `is_palindrome`, `partition`, `min_cut` |
| `algonotes.arrays` | `three_sum_closest`, `max_area`, `rob`, `majority_element`, `rotate`, `max_value_index`, `find_median_sorted_arrays`, `min_sub_array_len`, `remove_duplicates`, `remove_element` |
| `algonotes.grids` | `calculate_minimum_hp`, `num_islands` |
| `algonotes.heap_sort` | `max_heapify`, `make_max_heap`, `heap_sort` |
| `algonotes.min_stack` | `MinStack` |

## Examples

```python
from algonotes.linked_list import from_values, to_values, reverse_list
from algonotes.formatting import convert_to_title, compare_version
from algonotes.arithmetic import fraction_to_decimal
from algonotes.trees import TreeNode, BSTIterator
from algonotes.min_stack import MinStack

to_values(reverse_list(from_values([1, 2, 3, 4])))   # [4, 3, 2, 1]
convert_to_title(28)                                  # "AB"
compare_version("1.2", "1.10")                        # -1
fraction_to_decimal(1, 3)                             # "0.(3)"

root = TreeNode(2, TreeNode(1), TreeNode(3))
list(BSTIterator(root))                               # [1, 2, 3]

stack = MinStack()
stack.push(-1)
stack.top(), stack.get_min()                          # (-1, -1)
```

## Notes

- Linked lists are chains of `ListNode` objects; a node can be iterated to get
  its values, and `from_values` and `to_values` convert between Python lists and
  linked lists. The list operations relink the nodes they are given.
- `add_two_numbers` takes digits most significant first and returns the digits
  of the sum least significant first.
- `rotate`, `heap_sort`, `max_heapify`, `make_max_heap`, `remove_duplicates` and
  `remove_element` change the list they are given; `remove_element` also sorts it.
- `BSTIterator` is a Python iterator and also offers `has_next()`.
- `MinStack.pop()` returns the removed value; `pop()` and `top()` raise
  `IndexError` on an empty stack, while `get_min()` returns 0.
- Invalid input raises `ValueError` (for example `majority_element` with no
  majority, `three_sum_closest` with fewer than three numbers), and division by
  zero in `divide` or `fraction_to_decimal` raises `ZeroDivisionError`.

## What it does not do

This is a library only: there is no command-line program, and nothing reads
from standard input or prints results. Call the functions from Python.