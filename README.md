# easyproblems

Small, self-contained solutions to a set of introductory programming-contest
problems: counting, string puzzles and short sequence tasks. Each problem is a
plain Python function that takes ordinary Python values and returns its answer.
The package has no dependencies beyond the standard library and needs
Python 3.10 or later.

## Installation

```
pip install .
```

To run the test suite as well:

```
pip install ".[test]"
pytest
```

## Modules

### `easyproblems.counting`

Counting and simple arithmetic problems:

- `is_easy(responses)` – `True` when no response is `1` (nobody called the problem hard)
- `tram_capacity(stops)` – smallest capacity never exceeded; `stops` are `(exiting, entering)` pairs and the tram starts empty
- `count_teams(problems)` – problems whose votes add up to more than one
- `count_magnet_groups(magnets)` – number of groups of equal adjacent magnets
- `count_rooms(rooms)` – rooms `(occupied, capacity)` with space for two more people
- `count_faces(names)` – total faces of the named polyhedra (`Tetrahedron` 4, `Cube` 6, `Octahedron` 8, `Dodecahedron` 12, any other name 20)
- `count_distinct_letters(text)` – distinct lower-case ASCII letters in the text
- `horseshoes_to_buy(colors)` – how many horseshoes must be replaced so all colours differ
- `candy_ways(n)` – ways to split `n` candies into shares `a > b > 0`
- `domino_count(m, n)` – dominoes that fit on an `m` × `n` board
- `calculating_function(n)` – the alternating sum `-1 + 2 - 3 + ... ± n`
- `game_winner(n)` – `"First"` or `"Second"`, the winner of the divisible-by-three game

### `easyproblems.strings`

String problems:

- `is_amusing_joke(guest, host, pile)` – whether the pile holds exactly the letters of both names
- `ultra_fast_xor(a, b)` – digit-wise difference of two binary strings; raises `ValueError` if their lengths differ
- `abbreviate(word)` – shortens words longer than ten characters to first letter, count, last letter
- `is_pangram(text)` – whether every Latin letter appears, in either case
- `different_string(s)` – `s` with its first pair of differing neighbours swapped, or `None` if no such pair exists
- `binary_cut_pieces(s)` – fewest pieces to cut a binary string into so they can be rearranged into sorted order
- `min_doublings(x, s)` – how many times `x` must be doubled before it contains `s`, or `-1` if six doublings are not enough
- `cover_in_water(s)` – fewest actions to fill every empty cell (`.`) of a row where `#` marks a blocked cell
- `fox_snake(rows, cols)` – the snake pattern as a list of lines

### `easyproblems.sequences`

Problems on short sequences of integers:

- `round_summands(n)` – `n` split into round numbers, lowest place first
- `arrival_swaps(heights)` – adjacent swaps to put the first tallest soldier first and the last shortest soldier last; raises `ValueError` for an empty line-up
- `is_sum_triple(a, b, c)` – whether one number is the sum of the other two
- `contains_value(values, k)` – whether `k` occurs among the values
- `doremy_paint(values)` – whether the values can be arranged so all adjacent pair sums match; raises `ValueError` for an empty sequence
- `jagged_swaps_sortable(values)` – whether a permutation can be sorted by jagged swaps (it can exactly when it starts with `1`); raises `ValueError` for an empty sequence
- `line_trip_tank(values, x)` – smallest tank volume for the trip from `0` to `x` and back with gas stations at the ascending positions `values`; raises `ValueError` when there are no stations
- `halloumi_sortable(values, k)` – whether reversing subarrays of length up to `k` can sort the values
- `sort_pair(a, b)` – the two numbers as `(smaller, larger)`
- `strings_intersect(a, b, c, d)` – whether chord `a`–`b` crosses chord `c`–`d` on a twelve-hour clock; raises `ValueError` for a position outside 1–12

## Example

```python
from easyproblems.counting import calculating_function, domino_count
from easyproblems.strings import abbreviate, ultra_fast_xor

abbreviate("localization")             # "l10n"
domino_count(2, 4)                      # 4
calculating_function(5)                 # -3
ultra_fast_xor("1010100", "0100101")    # "1110001"
```

## Command line

Installing the package also installs the `easyproblems` command. It reads
whitespace-separated input from standard input and prints one answer per line.
The puzzle is chosen by a positional argument:

```
echo "SANTACLAUS DEDMOROZ SANTAMOROZDEDCLAUS" | easyproblems joke
```

prints `YES` when the third word holds exactly the letters of the first two,
otherwise `NO`.

```
printf "2\n1 4 3\n2 5 8\n" | easyproblems sum
```

reads a count of test cases followed by that many triples and prints `Yes` or
`No` for each, depending on whether one number is the sum of the other two.

Missing or short input makes the command print a usage error and exit with
status 2.

## What the package does not do

Only the `joke` and `sum` puzzles are reachable from the command line. All the
other problems are available as library functions only; there is no command
that reads their input format from standard input.