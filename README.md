# algokit

A small collection of classic algorithms and numeric exercises, written as
plain Python functions that take values and return results. It has no
dependencies beyond the standard library.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## What is inside

| Module               | Contents                                                                 |
|----------------------|--------------------------------------------------------------------------|
| `algokit.searching`  | `binary_search`, `linear_search`                                         |
| `algokit.sorting`    | `bubble_sort`, `heap_sort`, `insertion_sort`, `merge_sort`, `quick_sort` |
| `algokit.primes`     | `primes_up_to`, `is_prime`, `populate_grid`, `primes_in_grid`, `benchmark_grid`, `GridReport` |
| `algokit.geometry`   | `hypotenuse`, `square_or_circle_area`                                    |
| `algokit.arithmetic` | `factorial`, `fibonacci`, `even_fibonacci_sum`, `series_sum`, `is_armstrong`, `average`, `to_binary`, `nth_root`, `reverse_number`, `digit_sum`, `swap` |
| `algokit.clock`      | `ClockTime`, `add_times`                                                 |
| `algokit.text`       | `CharacterClass`, `classify_character`, `reverse_string`                 |
| `algokit.calculator` | `calculate`, `UnknownOperatorError`                                      |
| `algokit.matrix`     | `multiply`, `concentric_rectangles`                                      |
| `algokit.cli`        | `main`, the entry point of the `algokit` command                         |

### Searching and sorting

`binary_search` and `linear_search` return the index of the target, or
`None` when it is absent. `binary_search` expects ascending input.

Every sort takes any iterable and returns a new ascending list; the input is
left untouched. `merge_sort` is stable.

```python
from algokit.searching import binary_search
from algokit.sorting import merge_sort

merge_sort([12, 11, 13, 5, 6, 7])                 # [5, 6, 7, 11, 12, 13]
binary_search([2, 3, 4, 7, 10, 11, 40], 40)       # 6
```

### Primes

`primes_up_to(n)` runs a sieve and returns every prime up to and including
`n`. `is_prime` tests a single number. `benchmark_grid(size=100, seed=None)`
fills a `size` by `size` grid with random integers from 1 to 100, finds the
primes in it, and returns a `GridReport` holding the grid, the primes and
both timings in microseconds; `str()` of the report lists the primes
followed by the two timings.

```python
from algokit.primes import primes_up_to, benchmark_grid

primes_up_to(20)                  # [2, 3, 5, 7, 11, 13, 17, 19]
report = benchmark_grid(10, seed=1)
report.primes                     # the prime entries, row by row
```

### Arithmetic

```python
from algokit.arithmetic import factorial, digit_sum, nth_root, to_binary

factorial(5)       # 120
digit_sum(123)     # 6
to_binary(10)      # "1010"
nth_root(50, 2)    # approximately 7.0711
```

`factorial`, `fibonacci`, `to_binary` and `digit_sum` raise `ValueError`
outside their domain (`digit_sum` accepts positive numbers only).
`nth_root` uses Newton-Raphson iteration and stops once `x**n` is within
0.0001 of `k`. `even_fibonacci_sum` defaults to a limit of 40,000,000.
`average` returns the integer mean, truncated toward zero.

### Clock times

`ClockTime` is a frozen time of day on a 24-hour clock. Times can be parsed
from `"hours minutes seconds"` and added with `+` or `add_times`; the sum
wraps past midnight.

```python
from algokit.clock import ClockTime

total = ClockTime.parse("11 59 59") + ClockTime.parse("3 2 5")
str(total)   # "15 2 4"
```

### Text

`classify_character` returns a `CharacterClass` member: `DIGIT`,
`LOWERCASE`, `UPPERCASE` or `SPECIAL` (only ASCII digits and letters count
as digits or letters). `reverse_string` reverses a line, dropping its
trailing newline, and raises `ValueError` for an empty line.

### Calculator

`calculate(operator, a, b)` applies `+`, `-`, `*` or `/` and returns a
float. It raises `UnknownOperatorError` (a `ValueError`) for any other
operator and `ZeroDivisionError` for division by zero.

```python
from algokit.calculator import calculate

calculate("+", 2, 3)   # 5.0
```

### Matrices

`multiply(a, b)` returns the matrix product and raises `ValueError` when
the shapes do not fit. `concentric_rectangles(n)` returns a `2n-1` square
grid whose rings count down from `n` at the edge to 1 in the centre.

## Command line

Installing the package provides an `algokit` command with three
subcommands:

```
algokit hypotenuse 3 4      # The hypotenuse is: 5.000000
algokit sieve 20            # 2 3 5 7 11 13 17 19
algokit calc / 9 3          # you opted for division / result: 3.00
```

`hypotenuse` with fewer than two legs prints `Not enough arguments!`.
`calc` exits with status 1 for an unknown operator or division by zero.
See all options with:

```
algokit --help
```

## What it does not do

The command line covers only the hypotenuse, the sieve and the calculator.
The other exercises (factorials, Fibonacci, clock addition, character
classification, matrices and the rest) are available as functions to call
from Python; there are no interactive prompts that read them from standard
input.