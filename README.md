# cses_kit

Small, dependency-free solutions to a set of classic algorithm problems:
greedy matching after sorting, counting with dynamic programming, the coin
piles puzzle, and a collection of introductory puzzles.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Library use

The package has four modules of solvers.

- `cses_kit.sorting`: `apartments`, `distinct_count`, `ferris_wheel_gondolas`
- `cses_kit.counting`: `dice_combinations`, `coin_combinations`, and the modulus `MOD` (1 000 000 007)
- `cses_kit.piles`: `can_empty` (closed form) and `can_empty_by_search` (tries every move count)
- `cses_kit.introductory`: `apple_division`, `gray_code`, `increasing_array_moves`,
  `palindrome_reorder`, `beautiful_permutation`, `longest_repetition`,
  `hanoi_moves`, `trailing_zeros`, and the exception `NoSolutionError`

```python
from cses_kit.sorting import apartments, distinct_count, ferris_wheel_gondolas
from cses_kit.counting import dice_combinations, coin_combinations
from cses_kit.piles import can_empty, can_empty_by_search
from cses_kit.introductory import (
    apple_division,
    gray_code,
    increasing_array_moves,
    longest_repetition,
    trailing_zeros,
)

apartments([60, 45, 80, 60], [30, 60, 75], 5)   # 2 applicants get an apartment
distinct_count([2, 3, 2, 2, 3])                  # 2
ferris_wheel_gondolas([7, 2, 3, 9], 10)          # 3 gondolas

dice_combinations(3)                             # 4
coin_combinations([2, 3, 5], 9)                  # 8 ordered ways

can_empty(2, 1)                                  # True
can_empty(2, 2)                                  # False

gray_code(2)                                     # ['00', '01', '11', '10']
trailing_zeros(20)                               # 4
longest_repetition("ATTCGGGA")                   # 3
increasing_array_moves([3, 2, 5, 1, 7])          # 5
apple_division([3, 2, 7, 4, 1])                  # 1
```

Counts from `dice_combinations` and `coin_combinations` are taken modulo
`MOD`; `coin_combinations` raises `ValueError` for a negative target or a
coin value that is not positive.

`palindrome_reorder` and `beautiful_permutation` raise `NoSolutionError`
(a subclass of `ValueError`) when no answer exists. `hanoi_moves(n)` returns
the list of `(from, to)` moves that carry `n` disks from peg 1 to peg 3, and
`longest_repetition` raises `ValueError` for an empty string.

## Command line

The `cses-kit` command reads a problem's input from standard input and
prints the answer in the usual judge format. It has three subcommands:

```
cses-kit hanoi               # input: n; prints 2**n - 1, then one "from to" move per line
cses-kit palindrome          # input: a string; prints a palindrome or "NO SOLUTION"
cses-kit coin-piles          # input: t, then t pairs a b; prints YES or NO for each
cses-kit coin-piles --search # the same, deciding by trying every move count
```

For example:

```
echo "3  2 1  2 2  3 3" | cses-kit coin-piles
```

prints `YES`, `NO` and `YES` on separate lines. Malformed input (a missing
or non-integer number, or a negative count) is reported on standard error
and the command exits with status 1.

## What the command does not cover

Only the three problems above have a subcommand. The other solvers
(apartments, distinct numbers, Ferris wheel, dice and coin combinations,
apple division, Gray code, increasing array, permutations, repetitions and
trailing zeros) are available from Python only.