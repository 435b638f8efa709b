# wordcalc

A small set of classic data structures and the tools built on them:

- `wordcalc.linkedlist`: `DoublyLinkedList`, a generic doubly linked list, and
  its `Node`. The list can add at either end (`add_to_front`, `add_to_end`),
  insert after the first equal value (`insert_after`), remove the first equal
  value (`remove`) and test membership (`find`, `in`). It iterates forwards
  and, with `reversed()`, backwards. `head` and `tail` give the end nodes, or
  `None` when the list is empty.
- `wordcalc.stack`: `Stack`, last in first out (`push`, `pop`, `peek`,
  `is_empty`).
- `wordcalc.linked_queue`: `Queue`, first in first out (`enqueue`, `dequeue`,
  `peek`, `is_empty`).
- `wordcalc.rpn`: `RPNCalculator`, which evaluates space-separated postfix
  expressions such as `"3 2 5 * +"`, and `parse_number`.
- `wordcalc.infix`: `to_postfix`, which turns an infix expression into
  postfix, and `InfixCalculator`, which evaluates infix expressions.
- `wordcalc.wordcount`: `WordCount`, which counts words in text using an
  `AVLTree`, and the `wordcalc-wordcount` command.

## Installation

```
pip install .
```

To run the tests, install the test extra:

```
pip install .[test]
pytest
```

## Containers

```python
from wordcalc.linkedlist import DoublyLinkedList
from wordcalc.stack import Stack
from wordcalc.linked_queue import Queue

items = DoublyLinkedList([1, 2, 4])
items.insert_after(2, 3)   # True; False if no value equals 2
list(items)                # [1, 2, 3, 4]
list(reversed(items))      # [4, 3, 2, 1]
items.remove(1)            # True
len(items)                 # 3

stack = Stack()
stack.push("a")
stack.push("b")
stack.pop()                # "b"

queue = Queue()
queue.enqueue("a")
queue.enqueue("b")
queue.dequeue()            # "a"
```

`pop`, `dequeue` and `peek` raise `IndexError` on an empty stack or queue.

## Calculators

```python
from wordcalc.rpn import RPNCalculator, DivisionByZeroError
from wordcalc.infix import InfixCalculator, to_postfix

RPNCalculator().evaluate("3 2 5 * +")             # 13.0
to_postfix("(1 + 2) * 4")                          # "1 2 + 4 *"
InfixCalculator().evaluate_infix("(1 + 2) * 4")   # 12.0

try:
    RPNCalculator().evaluate("1 0 /")
except DivisionByZeroError:
    ...
```

Numbers are decimal, optionally with a leading `-` and a fractional part, with
no exponent. The RPN calculator understands `+`, `-`, `*` and `/`. In infix
input, spaces are ignored, so digits separated only by spaces join into one
number, and only digits, `.`, parentheses and `+ - * / ^` are accepted.

Errors are raised as subclasses of `CalculatorError`, each with a numeric
`code`:

- `InsufficientOperandsError` (1): an operator lacked operands, the expression
  was empty, or a token was not understood.
- `TooManyOperandsError` (2): more than one value was left over.
- `DivisionByZeroError` (3): a division by zero.
- `MismatchedParenthesesError` (1) and `InvalidCharacterError` (1), from
  `to_postfix`.

## Counting words

```python
from wordcalc.wordcount import WordCount

wc = WordCount()
wc.process_line("The cat and the hat.")
wc.counts()            # [("and", 1), ("cat", 1), ("hat", 1), ("the", 2)]
print(wc.format_counts())
```

A word is a run of ASCII letters and digits; it is lower-cased, and any other
character ends it. `read_file` counts the words of a whole file and raises
`OSError` when it cannot be opened.

From the shell:

```
wordcalc-wordcount path/to/file.txt
```

This prints `Word Counts:` followed by one `word - count` line per distinct
word, in sorted order. If the file cannot be opened, an error goes to standard
error, the heading is still printed, and the exit status is 1.

## What it does not do

- There is no command for the calculators; they are used from Python only.
- `^` is accepted by `to_postfix` with the highest precedence and right
  associativity, but the calculator cannot evaluate it: an expression using it
  raises `InsufficientOperandsError`.
- There is no unary minus in infix input; negative numbers can only be written
  directly in postfix input.