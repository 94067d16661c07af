# cdrills

A collection of classic programming drills as a small, plain Python library
with no dependencies outside the standard library. It covers number theory,
searching, sorting, string handling, array tricks, text patterns,
page-replacement simulation, a bounded stack, a singly linked list and a few
everyday formulas.

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

- `cdrills.numtheory`: `gcd`, `lcm`, `factorial`, `ncr`, `is_palindrome_number`,
  `is_prime`, `prime_pair_sums`, `is_armstrong`, `sum_natural`, `fibonacci_triangle`
- `cdrills.searching`: `jump_search`, `binary_search`, `linear_search`,
  `subarray_with_sum`, `sorted_union`, `intersection`, `min_max`, `second_smallest`
- `cdrills.sorting`: `insertion_sort`, `selection_sort`, `bubble_sort`,
  `sort_string`; each returns a new list (or string) and leaves its input alone
- `cdrills.textops`: `reverse_string`, `string_length`, `is_anagram`, `delete_char`,
  `remove_spaces`, `toggle_case`, `is_vowel`, `count_vowels` (returns a
  `VowelCount` of `vowels` and `others`), `remove_vowels`
- `cdrills.arrays`: `rotate_left`, `add_matrices`, `is_sparse`, `swap_adjacent`,
  `find_triplets`
- `cdrills.patterns`: `star_pyramid`, `alphabet_pyramid`, `right_aligned_pyramid`,
  `right_angle`, `cube_table`, `multiplication_table`; each returns a list of lines
- `cdrills.paging`: `fifo_faults`, `optimal_faults`, `lru_faults`
- `cdrills.stack`: `BoundedStack` (`push`, `pop`, `peek`, `len()`, iteration
  from the top down), `StackOverflowError`, `StackUnderflowError`
- `cdrills.linked`: `Node`, `LinkedList` (`from_iterable`, `append`, `reverse`,
  `nth_from_end`)
- `cdrills.formulas`: `circle_area`, `equilateral_area`, `average` (1 to 100
  values), `calculate`, `format_calculation`
- `cdrills.books`: the abstract `Book` and `MyBook`, whose `display()` prints
  and returns its title, author and price

Functions that search return `-1` when nothing is found; invalid arguments
raise `ValueError`, `IndexError` or the stack's own exceptions.

## Examples

```python
from cdrills.numtheory import gcd, lcm
from cdrills.searching import jump_search
from cdrills.paging import lru_faults
from cdrills.linked import LinkedList

gcd(98, 56)          # 14
lcm(15, 20)          # 60
jump_search([0, 1, 1, 2, 3, 5, 8, 13, 21, 34, 55, 89], 55)   # 10

lru_faults([7, 0, 1, 2, 0, 3, 0, 4], 3)   # number of page faults

lst = LinkedList.from_iterable([10, 20, 30])
lst.reverse()
lst.nth_from_end(1)  # 10
```

## Command-line tools

Count page faults for FIFO, optimal and LRU replacement. The reference string
may be given as arguments; otherwise its length and pages are read from
standard input. A menu then asks for an algorithm and a number of frames:

```
cdrills-paging 7 0 1 2 0 3 0 4
```

Work with a bounded stack through a menu of push, pop, display and exit,
read from standard input. `--capacity` sets the maximum number of items
(default 100):

```
cdrills-stack --capacity 10
```