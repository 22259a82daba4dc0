# dsdrills

Small data-structure drills: a bounded stack, a bounded queue, binary trees of
integers, recursive arithmetic, and a set of exercises built on the stack and
queue, with a command line to run them.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Stack

`dsdrills.stack.Stack(capacity)` is a last-in, first-out stack that holds at
most `capacity` items. A negative capacity raises `ValueError`. Pushing onto a
full stack raises `StackOverflowError` (an `OverflowError`); popping or peeking
an empty stack raises `StackUnderflowError` (an `IndexError`).

```python
from dsdrills.stack import Stack

s = Stack(3)
s.push("a")
s.push("b")
s.peek()      # "b"
s.pop()       # "b"
len(s)        # 1
s.is_empty()  # False
s.is_full()   # False
```

## Queue

`dsdrills.circular_queue.CircularQueue(capacity)` is a first-in, first-out
queue that holds at most `capacity` items. Enqueueing onto a full queue raises
`QueueFullError` (an `OverflowError`); dequeueing an empty one raises
`QueueEmptyError` (an `IndexError`).

```python
from dsdrills.circular_queue import CircularQueue

q = CircularQueue(5)
for letter in "ABCD":
    q.enqueue(letter)
q.dequeue()   # "A"
len(q)        # 3
```

## Recursion

`dsdrills.recursion` defines arithmetic by recursion or repeated steps:

- `factorial(n)`: n!
- `power(x, n)`: x to the non-negative integer power n
- `count_up(n)` / `count_down(n)`: `[1, ..., n]` and `[n, ..., 1]`
- `is_even(n)`: parity by repeated subtraction of 2
- `product(a, b)`: a times b by repeated addition
- `quotient(m, n)` / `remainder(m, n)`: division by repeated subtraction;
  a divisor of zero or less raises `ValueError`
- `square(n)`: n squared as the sum of the first n odd numbers
- `digit_sum(n)`: sum of the decimal digits; values below 10 come back unchanged

The functions that require a non-negative argument raise `ValueError` for a
negative one.

```python
from dsdrills.recursion import factorial, digit_sum, quotient, remainder

factorial(5)       # 120
digit_sum(1234)    # 10
quotient(17, 5)    # 3
remainder(17, 5)   # 2
```

## Binary trees

`dsdrills.binary_tree.Node(left, item, right)` is a node; `None` stands for an
empty tree. The module offers:

- measures: `count_nodes`, `total` (sum of items), `leaves`, `height`
- `contains(item, tree)` and `clone(tree)`
- traversals returning lists: `preorder`, `inorder`, `postorder`
- `render(tree)`: a sideways drawing, right subtree above, three spaces of
  indent per level, one line per node
- random builders with items in 0..99, each taking a `random.Random`:
  `complete(height, rng)` (perfect tree), `balanced(size, rng)` (nodes split as
  evenly as possible), `random_tree(size, rng)` (a root over two balanced
  subtrees of `size - 1` nodes each) and `random_split(size, rng)` (nodes
  shared out randomly between the sides)

```python
import random
from dsdrills.binary_tree import Node, count_nodes, total, preorder, render, balanced

tree = Node(Node(Node(None, 4, None), 2, Node(None, 5, None)), 1, Node(None, 3, None))
count_nodes(tree)   # 5
total(tree)         # 15
preorder(tree)      # [1, 2, 4, 5, 3]
print(render(tree), end="")
#    3
# 1
#       5
#    2
#       4

print(render(balanced(9, random.Random(42))), end="")
```

## Exercises

`dsdrills.exercises` solves classic problems with the stack and queue:

- `sort_with_stacks(values)`: the values in increasing order.
- `distinct_descending(values)`: the distinct values in decreasing order.
- `reverse_words(text)`: reverses each word of the first line. Each space
  flushes the current word with a space before it and starts the next word
  with a space, so separators come out doubled between words.
- `is_balanced(text)`: checks `()`, `[]` and `{}` on the first line. A closer
  cancels only a matching opener on top; other closers are ignored. A closer
  met with no opener pending raises `StackUnderflowError`.
- `is_palindrome(text)`: compares the ASCII letters of the text, ignoring case.
- `round_robin(jobs, timeslice=3)`: runs `(pid, time)` jobs round robin and
  returns the ids in finishing order; a timeslice of zero or less raises
  `ValueError`.

```python
from dsdrills.exercises import round_robin, is_palindrome

round_robin([(1, 7), (2, 5), (3, 9), (4, 6)])   # [2, 4, 1, 3]
is_palindrome("A man, a plan, a canal: Panama")  # True
```

## Command line

```
dsdrills --help
dsdrills sort 5 3 9 1
dsdrills distinct 4 4 2 7
dsdrills reverse "hello world"
dsdrills balance "{[()]}"
dsdrills palindrome "Socorram-me subi no onibus em Marrocos"
dsdrills schedule 1:7 2:5 3:9 4:6 --timeslice 3
```

`reverse`, `balance` and `palindrome` read one line from standard input when
no text is given. `schedule` with no jobs runs `1:7 2:5 3:9 4:6`. `balance`
and `schedule` exit with status 1 and a message on standard error when the
input raises an error.

## Limits

The command line covers the stack and queue exercises only; the recursion and
binary-tree functions are used from Python.