# algodrills

Small, self-contained solutions to classic algorithm exercises. Each one
is a plain Python function (or, in one case, a class) that takes ordinary
Python values and returns a result. There are no dependencies beyond the
standard library.

## Installation

```
pip install .
```

## Modules

- `algodrills.greedy`: `matrix_flip_count`, `min_mismatch`,
  `min_expression_value`, `max_meetings`, `consensus_dna`,
  `inequality_extremes`
- `algodrills.dp`: `stair_numbers`, `max_candy`, `binomial_mod`,
  `max_card_price`, `max_increasing_sum`, `non_decreasing_numbers`,
  `tiling_count`, `tiling_count_with_squares`, `longest_increasing_length`,
  `coin_combinations`, `min_coins`, `min_moves_to_sort`, `fibonacci`,
  `padovan`, `max_sticker_score`, and the `PrefixSum2D` class with its
  `query(top, left, bottom, right)` method (1-based, inclusive)
- `algodrills.graph`: `count_regions`, `reachability`, `dfs_order`,
  `bfs_order`, `lotto_combinations`
- `algodrills.arrays`: `min_max`, `classify_scale`, `above_average_ratio`
- `algodrills.stacks`: `next_greater`, `stack_sequence_ops`,
  `infix_to_postfix`, `evaluate_postfix`, `bracket_value`
- `algodrills.printer_queue`: `print_order`
- `algodrills.strings`: `common_pattern`, `letter_counts`, `count_vowels`,
  `is_palindrome`, `rotate_mirror`, `heard_and_seen`, `strip_cambridge`,
  `fbi_agents`, `short_form`, `is_balanced`, `shift_distances`,
  `count_joi_ioi`, `caesar_decode`, `find_password`, `suffixes`
- `algodrills.tree`: the `TreeNode` dataclass and `inorder_traversal`

## Conventions

Input that a function cannot work with (an empty list where values are
needed, ragged grids, out-of-range indices, unexpected characters) raises
`ValueError`. Where an exercise has an "impossible" answer, the function
returns it as a value instead:

- `matrix_flip_count` and `min_coins` return `-1`
- `stack_sequence_ops` returns `None`
- `bracket_value` returns `0` for a malformed bracket string

Several counting functions in `algodrills.dp` return their result modulo a
fixed number, as their docstrings state (10007, or 10^9 for
`stair_numbers`).

## Examples

```python
from algodrills.dp import fibonacci, PrefixSum2D
from algodrills.stacks import infix_to_postfix
from algodrills.graph import bfs_order

fibonacci(10)                      # 55
infix_to_postfix("A*(B+C)")        # "ABC+*"
bfs_order(4, [(1, 2), (1, 3), (1, 4), (2, 4), (3, 4)], 1)  # [1, 2, 3, 4]

sums = PrefixSum2D([[1, 2, 4], [8, 16, 32]])
sums.query(1, 1, 2, 2)             # 27
```

## What it does not do

The package is a library only. It has no command-line programs and does
not read problem input from standard input or print answers; callers pass
Python values in and get Python values back.

## Running the tests

```
pip install .[test]
pytest
```