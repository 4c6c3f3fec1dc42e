# katas

A collection of small, self-contained programming exercises. Each one is a
plain Python function. Every module covers one topic, and the package uses
only the standard library.

## Installation

    pip install .

To run the test suite:

    pip install ".[test]"
    pytest

## What is inside

| Module | Functions |
| --- | --- |
| `katas.music_encoder` | `compress` |
| `katas.smallfuck` | `interpreter` |
| `katas.assembler` | `simple_assembler` |
| `katas.bananas` | `bananas` |
| `katas.caesar` | `encode`, `decode` |
| `katas.tic_tac_toe` | `is_solved` |
| `katas.granny` | `tour` |
| `katas.bookseller` | `stock_list` |
| `katas.smallest` | `smallest` |
| `katas.meeting` | `meeting` |
| `katas.weights` | `order_weight` |
| `katas.directions` | `dir_reduc` |
| `katas.primes` | `gap`, `is_prime`, `next_prime` |
| `katas.greed` | `score` |
| `katas.high_low` | `high_and_low` |
| `katas.human_time` | `human_readable_time` |
| `katas.integers_recreation` | `list_squared` |
| `katas.ip_addresses` | `ips_between`, `is_valid_ip` |
| `katas.anagrams` | `anagrams` |
| `katas.century` | `what_century` |
| `katas.travel` | `choose_best_sum` |
| `katas.beeramid` | `beeramid` |
| `katas.bakery` | `cakes` |
| `katas.array_diff` | `array_diff` |
| `katas.arithmetic` | `count_bits`, `even_or_odd`, `find_odd`, `maximum_subarray_sum`, `multiple_3_and_5`, `multiply`, `make_negative`, `digital_root`, `positive_sum`, `josephus_survivor` |
| `katas.wordplay` | `create_phone_number`, `disemvowel`, `reverse_string`, `spin_words`, `valid_parentheses`, `get_count`, `first_non_repeating` |

## Examples

```python
from katas.music_encoder import compress
from katas.smallfuck import interpreter
from katas.assembler import simple_assembler
from katas.caesar import encode, decode
from katas.century import what_century

compress([1, 2, 2, 3])                   # "1,2*2,3"
compress([1, 10, 8, 6, 7])               # "1,10-6/2,7"

interpreter("*", "00101100")             # "10101100"

simple_assembler(["mov a 5", "inc a"])   # {"a": 6}

chunks = encode("abcdefghjuty12", 1)     # ["abbc", "defg", "hikv", "uz12"]
decode(chunks)                           # "abcdefghjuty12"

what_century("2011")                     # "21st"
```

## Errors

Input that cannot be handled raises `ValueError`. Some examples are an empty
sequence passed to `compress`, an unknown instruction passed to
`simple_assembler`, a board that is not 3x3 passed to `is_solved`, and an
unmatched bracket reached by `interpreter`.

## What it does not do

The package is a library only. It has no command-line program. It reads no
files and keeps no state between calls.