# recurkit

Small recursive and backtracking algorithms, together with binary-tree and
linked-list helpers. Everything is a plain function that takes and returns
ordinary Python values (lists, strings, ints), apart from the `ListNode` and
`TreeNode` classes used for linked lists and trees.

## Installation

From a checkout of the project:

```
pip install .
```

There are no runtime dependencies.

## Modules

### `recurkit.combinatorics`

- `subsets(nums)`: every subset, the full set first and the empty set last.
- `permutations(nums)`, `swap_permutations(nums)`: all permutations, in
  pick-unused-position order and in in-place-swap order respectively.
- `combination_sum(candidates, target)`: combinations with reuse; raises
  `ValueError` if any candidate is not positive.
- `combination_sum2(candidates, target)`: unique combinations, each candidate
  used at most once.
- `combination_sum3(k, n)`: `k` distinct digits 1-9 adding up to `n`.
- `palindrome_partitions(s)`, `generate_parentheses(n)`,
  `letter_case_permutations(s)`.
- `binary_strings(n)`, `binary_strings_without_consecutive_ones(n)`
  (`ValueError` for negative `n`).
- `subsequences_with_sum(values, target)`,
  `first_subsequence_with_sum(values, target)` (returns `None` if none),
  `count_subsequences_with_sum(values, target)`, `subset_sums(values)`.
- `increasing_numbers(n)`: `n`-digit numbers with strictly increasing digits.

### `recurkit.puzzles`

- `solve_sudoku(board)`: returns a solved copy of a 9x9 board, `"."` marking
  empty cells; raises `ValueError` if the board is not 9x9 or has no solution.
- `solve_n_queens(n)`: every board, as lists of row strings of `"Q"` and `"."`.
- `word_exists(board, word)`: word search through adjacent cells; raises
  `ValueError` for an empty word.
- `rat_in_maze(maze)`: every path through a square 0/1 maze as `D`/`L`/`R`/`U`
  strings.
- `word_break(s, words)`: whether `s` splits into words from `words`.
- `largest_after_swaps(s, k)`: largest string reachable with at most `k` swaps.

### `recurkit.arrays`

- `merge_sort(values)`: stable sorted copy.
- `zig_zag(values)`: rearranged so that a0 <= a1 >= a2 <= a3 ...

### `recurkit.linked_list`

- `ListNode` (iterable over its values), `from_values`, `to_values`,
  `swap_pairs`.

### `recurkit.tree`

- `TreeNode` (with an `is_leaf` property) and `build_tree(values)`, which builds
  a tree from level-order values with `None` for missing children.
- Traversals: `inorder`, `preorder`, `postorder`, `level_order`,
  `inorder_iterative`, `preorder_iterative`, `postorder_iterative`,
  `postorder_two_stacks`.

### `recurkit.tree_algorithms`

- `is_same_tree`, `is_symmetric`, `height`, `is_balanced`, `diameter`,
  `max_width`, `has_children_sum_property`.
- `max_path_sum(root)`: raises `ValueError` for an empty tree.
- `path_to(root, target)`, `lowest_common_ancestor(root, p, q)` (nodes are
  matched by identity).
- `binary_tree_paths`, `boundary_traversal`, `top_view`.

## Examples

```python
from recurkit.combinatorics import generate_parentheses, combination_sum
from recurkit.puzzles import solve_n_queens, word_break
from recurkit.linked_list import from_values, to_values, swap_pairs
from recurkit.tree import build_tree, inorder, level_order
from recurkit.tree_algorithms import diameter, top_view

generate_parentheses(2)          # ['(())', '()()']
combination_sum([2, 3, 6, 7], 7) # [[2, 2, 3], [7]]
len(solve_n_queens(4))           # 2
word_break("leetcode", ["leet", "code"])  # True

to_values(swap_pairs(from_values([1, 2, 3, 4])))  # [2, 1, 4, 3]

root = build_tree([1, 2, 3, 4, 5, 6, 7])
inorder(root)      # [4, 2, 5, 1, 6, 3, 7]
level_order(root)  # [1, 2, 3, 4, 5, 6, 7]
diameter(root)     # 4
top_view(root)     # [4, 2, 1, 3, 7]
```

## What it does not do

The package is a library only: it has no command-line program, and nothing
prints results. Call the functions from your own code.

## Running the tests

```
pip install -e ".[test]"
pytest
```