# classicalgos

A small library of classic algorithms and data structures for plain Python
data: lists, strings and ints go in, new values come out. It needs Python 3.10
or later and has no runtime dependencies.

## Modules

| Module | Contents |
| --- | --- |
| `classicalgos.sorting` | `bubble_sort`, `bubble_sort_counted`, `heap_sort`, `merge_sort`, `timing_table` |
| `classicalgos.searching` | `linear_search`, `largest` |
| `classicalgos.counting` | `element_frequencies`, `format_frequency_table`, `stock_span` |
| `classicalgos.numbers` | `PrimeCheck`, `prime_check_half`, `is_prime_trial`, `square_root`, `is_vowel` |
| `classicalgos.greedy` | `Activity`, `select_activities`, `select_sorted_activities`, `KnapsackStep`, `KnapsackResult`, `fractional_knapsack`, `huffman_codes` |
| `classicalgos.dynamic` | `count_true_parenthesizations`, `interleave`, `lcs_length`, `word_subsets` |
| `classicalgos.games` | `Outcome`, `play`, `computer_choice`, `pyramid` |
| `classicalgos.linked_list` | `ListNode`, `LinkedList`, `from_values`, `to_values`, `delete_node`, `partition`, `reverse`, `rotate_right` |
| `classicalgos.tree` | `TreeNode`, `max_depth` |
| `classicalgos.intset` | `OrderedIntSet` with `add`, `is_empty`, `union`, `intersection`, `difference` |
| `classicalgos.stack` | `BoundedStack` with `push`, `pop`, `peek`; `StackOverflowError`, `StackUnderflowError` |
| `classicalgos.tcp` | `serve_once`, `request`: one request/response exchange over TCP |
| `classicalgos.udp` | `digit_sum`, `serve_digit_sum`, `request_digit_sum`: a digit-sum exchange over UDP |

## Sorting and searching

The sorts never change their input; they return a new list.

```python
from classicalgos.sorting import bubble_sort_counted, heap_sort, merge_sort, timing_table
from classicalgos.searching import largest, linear_search

merge_sort([12, 11, 13, 5, 6, 7])      # [5, 6, 7, 11, 12, 13]
heap_sort([12, 11, 13, 5, 6, 7])       # [5, 6, 7, 11, 12, 13]
bubble_sort_counted([5, 1, 4, 2, 8])   # ([1, 2, 4, 5, 8], 10)

linear_search([2, 3, 4, 10, 40], 10)   # 3
linear_search([2, 3, 4, 10, 40], 7)    # None
largest([10, 324, 45, 90, 9808])       # 9808; ValueError for an empty input

# Rows of (row_number, size, seconds) for heap sort on random data.
timing_table([1000, 2000], seed=1)
```

`timing_table()` with no arguments times sizes 2500, 5000, ... 50000.

## Counting

```python
from classicalgos.counting import element_frequencies, format_frequency_table, stock_span

element_frequencies([1, 2, 8, 3, 2, 2, 2, 5, 1])   # {1: 2, 2: 4, 8: 1, 3: 1, 5: 1}
print(format_frequency_table([1, 2, 2]))           # an "Element | Frequency" text table
stock_span([10, 4, 5, 90, 120, 80])                # [1, 1, 2, 4, 5, 1]
```

## Numbers and characters

```python
from classicalgos.numbers import is_prime_trial, is_vowel, prime_check_half, square_root

prime_check_half(9)    # PrimeCheck(is_prime=False, steps=2)
is_prime_trial(13)     # True
square_root(2)         # about 1.4142; ValueError for negative input
is_vowel("E")          # True; ValueError unless given exactly one character
```

`prime_check_half` only tries divisors below half the number, so small
numbers such as 4 that get no trial division are reported prime.

## Greedy algorithms

```python
from classicalgos.greedy import Activity, fractional_knapsack, huffman_codes, select_activities

select_activities([1, 3, 0, 5, 8, 5], [2, 4, 6, 7, 9, 9])   # [0, 1, 3, 4]

result = fractional_knapsack(60, [50, 5, 1000], [5000, 500000, 5000])
[step.item for step in result.steps]   # [1, 0, 2]; items are numbered from 0
result.total                           # about 505025.0

huffman_codes("abcdef", [5, 9, 12, 13, 16, 45])
# {'f': '0', 'c': '100', 'd': '101', 'a': '1100', 'b': '1101', 'e': '111'}
```

`select_activities` expects activities already ordered by finishing time;
`select_sorted_activities` takes `Activity` records in any order, sorts them
by finish and returns the chosen records.

## Dynamic programming

```python
from classicalgos.dynamic import count_true_parenthesizations, interleave, lcs_length, word_subsets

expression = interleave("TTFT", "|&^")      # "T|T&F^T"
count_true_parenthesizations(expression)    # 4
lcs_length("AGGTAB", "GXTXAYB")             # 4
word_subsets(["amazon", "apple", "facebook", "google", "leetcode"], ["e", "o"])
# ['facebook', 'google', 'leetcode']
```

## Games and drawing

```python
from classicalgos.games import Outcome, computer_choice, play, pyramid

play("r", "s")        # Outcome.WIN
play("r", "p")        # Outcome.LOSE
computer_choice()     # "r", "p" or "s"; pass a random.Random for repeatable draws
print(pyramid(3))     # a blank line, then rows of 1, 3 and 5 centred stars
```

## Linked lists and trees

```python
from classicalgos.linked_list import LinkedList, from_values, partition, reverse, rotate_right, to_values
from classicalgos.tree import TreeNode, max_depth

items = LinkedList([1, 4])
items.insert_at_beginning(3)
items.delete(3)          # True
items.sort()
list(items)              # [1, 4]

to_values(reverse(from_values([1, 2, 3])))                 # [3, 2, 1]
to_values(rotate_right(from_values([1, 2, 3, 4, 5]), 2))   # [4, 5, 1, 2, 3]
to_values(partition(from_values([1, 4, 3, 2, 5, 2]), 3))   # [1, 2, 2, 4, 3, 5]

root = TreeNode(3, TreeNode(9), TreeNode(20, TreeNode(15), TreeNode(7)))
max_depth(root)   # 3
```

`delete_node(node)` removes a node from its chain without the head by copying
its successor into it; it raises `ValueError` for the last node.

## Sets and stacks

```python
from classicalgos.intset import OrderedIntSet
from classicalgos.stack import BoundedStack, StackOverflowError, StackUnderflowError

a = OrderedIntSet([5, 10, 15, 20, 20, 25])
b = OrderedIntSet([20, 25, 30, 35])
str(a.union(b))          # "5 10 15 20 25 30 35"
str(a.intersection(b))   # "20 25"
str(a.difference(b))     # "5 10 15"

stack = BoundedStack()   # capacity 5 by default
stack.push(1)
stack.peek()             # 1
stack.pop()              # 1
stack.pop()              # raises StackUnderflowError
```

Pushing onto a full stack raises `StackOverflowError`.

## Socket exchanges

`classicalgos.tcp.serve_once(respond, host="", port=8080)` accepts one
connection, reads up to 1024 bytes, sends back `respond(message)` and returns
the message it received. `request(message, host="127.0.0.1", port=8080)` is
the matching client.

`classicalgos.udp.serve_digit_sum(host="", port=8080)` receives one number,
answers with the sum of its decimal digits and returns that sum;
`request_digit_sum(number, host="127.0.0.1", port=8080)` sends a number and
returns the answer. Numbers travel as 4-byte little-endian signed integers.

```python
import threading
from classicalgos.udp import digit_sum, request_digit_sum, serve_digit_sum

digit_sum(1234)   # 10

server = threading.Thread(target=serve_digit_sum, kwargs={"port": 9090})
server.start()
request_digit_sum(1234, port=9090)   # 10
server.join()
```

Both servers handle a single exchange and then close.

## What it does not do

The package is a library only. It installs no commands and has no interactive
menus or prompts: every function takes its input as arguments and returns its
result, and errors are raised as exceptions rather than printed.

## Running the tests

Install the `test` extra and run `pytest` from the project root.