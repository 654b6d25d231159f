# dpkit

A small library of dynamic-programming solutions to well-known problems:
stock trading profits, integer sequences, subsequences of strings and
assorted string puzzles. Every function takes plain Python values and
returns a plain Python value; nothing is kept between calls.

## Installation

```
pip install .
```

## Modules

### `dpkit.stocks`

Maximum profit from a sequence of daily prices. A transaction is one buy
followed by a later sell, and at most one share is held at a time.

- `max_profit_single(prices)`: at most one transaction. Raises `ValueError`
  when `prices` is empty.
- `max_profit_unlimited(prices)`: any number of transactions.
- `max_profit_two_transactions(prices)`: at most two transactions.
- `max_profit_k_transactions(k, prices)`: at most `k` transactions. Raises
  `ValueError` when `k` is negative.
- `max_profit_with_cooldown(prices)`: any number of transactions, with no
  buying on the day after a sale.
- `max_profit_with_fee(prices, fee)`: any number of transactions, with `fee`
  taken off every sale.

### `dpkit.sequences`

- `length_of_lis(nums)`: length of the longest strictly increasing subsequence.
- `largest_divisible_subset(nums)`: the largest subset in which, for every
  pair, one divides the other; returned in ascending order. Raises
  `ValueError` when `nums` is empty.
- `coin_change_ways(amount, coins)`: the number of combinations of coins
  (each usable any number of times) that sum to `amount`, modulo
  10**10 + 7. An `amount` of 0 gives 1 and an empty `coins` gives 0;
  otherwise a negative `amount` or a coin that is not positive raises
  `ValueError`.
- `min_cut_cost(n, cuts)`: the least total cost of cutting a stick of length
  `n` at every position in `cuts`, where each cut costs the length of the
  piece being cut.

### `dpkit.subsequences`

- `longest_common_subsequence(text1, text2)`: length of the longest common
  subsequence.
- `shortest_common_supersequence(text1, text2)`: a shortest string that has
  both inputs as subsequences.
- `longest_palindromic_subsequence(s)`: length of the longest palindromic
  subsequence.
- `min_insertions_palindrome(s)`: fewest character insertions that make `s`
  a palindrome.
- `min_delete_distance(text1, text2)`: fewest deletions, from either string,
  that make the two equal.
- `num_distinct(s, t)`: the number of distinct subsequences of `s` equal to
  `t`, modulo 10**9 + 7.
- `edit_distance(word1, word2)`: fewest single-character insertions,
  deletions or replacements that turn `word1` into `word2`.

### `dpkit.text`

- `longest_string_chain(words)`: the longest chain in which each word is the
  previous one with exactly one letter added.
- `divide_string(s, k, fill)`: splits `s` into groups of `k` characters,
  padding the last group with `fill`. Raises `ValueError` when `k` is less
  than 1 or `fill` is not a single character.
- `min_deletions_k_special(word, k)`: fewest character deletions so that any
  two letter frequencies differ by at most `k`.
- `max_manhattan_distance(s, k)`: the greatest Manhattan distance from the
  origin reached along a walk of `N`/`S`/`E`/`W` moves when up to `k` moves
  may be changed.
- `wildcard_match(s, p)`: whether pattern `p` matches the whole of `s`, where
  `?` matches any one character and `*` matches any run of characters,
  including an empty one.

## Example

```python
from dpkit.stocks import max_profit_single
from dpkit.subsequences import edit_distance
from dpkit.text import divide_string, wildcard_match

max_profit_single([7, 1, 5, 3, 6, 4])   # 5
edit_distance("horse", "ros")          # 3
divide_string("abcdefghij", 3, "x")    # ['abc', 'def', 'ghi', 'jxx']
wildcard_match("adceb", "*a*b")        # True
```

## What it does not do

dpkit is a library only: it has no command-line tool, and nothing reads
input files or writes results anywhere. Call the functions from your own
code.

## Running the tests

```
pip install ".[test]"
pytest
```