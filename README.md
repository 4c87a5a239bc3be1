# puzzlekit

Solutions to well-known algorithmic puzzles, written in plain Python with no
third-party dependencies. Every puzzle is a function, apart from the stock
price tracker, which is a class.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Modules

### `puzzlekit.numbers`

- `find_kth_number(n, k)`: the k-th smallest integer in `[1, n]` in
  lexicographic order.
- `closest_primes(left, right)`: the first pair of consecutive primes in
  `[left, right]` with the smallest gap, or `[-1, -1]` when there are fewer
  than two primes.
- `find_the_winner(n, k)`: the 1-based survivor of a Josephus circle.
- `nth_person_gets_nth_seat(n)`: the probability that the last passenger
  gets their own seat.
- `new21_game(n, k, max_pts)`: the probability of finishing with at most `n`
  points when drawing until reaching `k`.
- `max_rotate_function(nums)`: the maximum of `sum(i * rotated[i])` over all
  rotations (0 for an empty list).
- `max_consecutive(bottom, top, special)`: the longest run of non-special
  floors; raises `ValueError` if `special` is empty.
- `largest_divisible_subset(nums)`: a largest subset where each pair divides
  one another, listed from largest to smallest element.

### `puzzlekit.strings`

- `prefix_function(word)`: the border lengths for each position.
- `longest_prefix(s)`: the longest proper prefix that is also a suffix.
- `custom_sort_string(order, s)`: `s` reordered by `order`, with other
  letters following in alphabetical order.
- `has_all_codes(s, k)`: whether every binary code of length `k` occurs in `s`.
- `number_of_substrings(s)`: the number of substrings holding each of `a`,
  `b` and `c`; raises `ValueError` on any other character.
- `smallest_trimmed_numbers(nums, queries)`: for each `(k, trim)` query, the
  index of the k-th smallest number after keeping its last `trim` digits;
  raises `ValueError` for an impossible trim or rank.
- `top_k_frequent(words, k)`: the `k` most frequent words, ties broken
  alphabetically; raises `ValueError` if `k` exceeds the number of distinct
  words.
- `count_distinct(nums, k, p)`: the number of distinct subarrays with at most
  `k` elements divisible by `p`.

### `puzzlekit.arrays`

- `find_unsorted_subarray(nums)`: the length of the shortest window whose
  sorting sorts the whole list.
- `rearrange_barcodes(barcodes)`: an arrangement with no two equal
  neighbours, placing the most frequent code first where allowed.
- `total_fruit(fruits)`: the longest run holding at most two kinds of fruit.
- `number_of_pairs(nums1, nums2, diff)`: the number of pairs `i < j` with
  `nums1[i] - nums1[j] <= nums2[i] - nums2[j] + diff`; the two lists must be
  of equal length.
- `find_in_mountain_array(target, mountain)`: the smallest index of `target`
  in a sequence that rises strictly to one peak and then falls, or `-1`.
- `shopping_offers(price, special, needs)`: the lowest cost of buying exactly
  `needs`, where each offer lists quantities followed by its price.

### `puzzlekit.stock`

- `StockPrice`: records prices by timestamp; a later `update` for the same
  timestamp corrects the earlier one. `current()` gives the price at the
  latest timestamp, `maximum()` and `minimum()` the extremes among the prices
  on record. These three raise `LookupError` before any update.

### `puzzlekit.grids`

- `max_area_of_island(grid)`: the area of the largest 4-connected group of 1s.
- `closed_island(grid)`: the number of groups of 0s not reached by a flood
  started from every border cell.
- `calculate_minimum_hp(dungeon)`: the least starting health for a path moving
  right or down to the bottom-right room; raises `ValueError` for an empty
  dungeon.
- `knight_probability(n, k, row, column)`: the probability a knight stays on
  an `n`-by-`n` board after `k` random moves; raises `ValueError` if it starts
  off the board.

### `puzzlekit.graphs`

- `TreeNode`: a binary tree node with `val`, `left` and `right`.
- `min_mutation(start, end, bank)`: the fewest single-base mutations through
  genes in `bank`, or `-1`.
- `can_finish(num_courses, prerequisites)`: whether all courses can be taken
  given `(course, prerequisite)` pairs.
- `rob(root)`: the largest sum of tree values with no parent and child both
  chosen.
- `is_rectangle_cover(rectangles)`: whether rectangles `(x1, y1, x2, y2)` tile
  one rectangle exactly.

## Example

```python
from puzzlekit.numbers import find_the_winner
from puzzlekit.strings import top_k_frequent
from puzzlekit.stock import StockPrice

find_the_winner(5, 2)                                   # 3
top_k_frequent(["i", "love", "code", "i", "love"], 2)   # ["i", "love"]

prices = StockPrice()
prices.update(1, 10)
prices.update(2, 5)
prices.update(1, 3)
prices.maximum()                                        # 5
prices.minimum()                                        # 3
```

## What it does not do

puzzlekit is a library only: it has no command-line program, and it reads no
input files. Call its functions from your own code.