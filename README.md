# structkit

Small, self-contained implementations of classic data structures:

| Module                    | Class              | What it is                                                 |
|---------------------------|--------------------|------------------------------------------------------------|
| `structkit.avl_tree`      | `AvlTree`          | Self-balancing AVL tree of integers (duplicates go right)  |
| `structkit.binary_tree`   | `BinarySearchTree` | Unbalanced binary search tree of unique string keys        |
| `structkit.circular_list` | `CircularList`     | Ring of unique names, walked from its head                 |
| `structkit.linked_queue`  | `LinkedQueue`      | Unbounded first-in, first-out queue                        |
| `structkit.stack`         | `Stack`            | Last-in, first-out stack                                   |

The package has no runtime dependencies.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Usage

### AVL tree

```python
from structkit.avl_tree import AvlTree

tree = AvlTree()
for value in (30, 10, 20, 40, 50):
    tree.insert(value)

list(tree.in_order())   # values in ascending order
list(tree.pre_order())  # root first, then left and right subtrees
tree.height()           # 0 for an empty tree
len(tree)               # number of values inserted, duplicates included
print(tree.format_in_order())
print(tree.format_pre_order())
print(tree.format_graphically())  # the root and its direct children
```

Rotations are logged at debug level on the `structkit.avl_tree` logger.

### Binary search tree

```python
from structkit.binary_tree import BinarySearchTree, DuplicateKeyError

tree = BinarySearchTree()
tree.insert("Content b")
tree.insert("Content a")
tree.insert("Content c")

try:
    tree.insert("Content a")
except DuplicateKeyError:
    pass

"Content a" in tree       # True
tree.remove("Content b")  # KeyError if the key is absent
list(tree.in_order())
list(tree.pre_order())
list(tree.post_order())
```

A removed node with two children is replaced by the left-most node of
its right subtree. `format_in_order()`, `format_pre_order()` and
`format_post_order()` return text listings of the keys.

### Circular list

```python
from structkit.circular_list import CircularList, run_commands

names = CircularList()
names.add("Ana")          # ValueError if the name is already present
names.add("Bruno")
names.add("Carla")
names.neighbours("Ana")   # ("Carla", "Bruno")
names.remove("Bruno")     # KeyError if the name is absent
print(names.format())     # "Carla <- [Ana, Carla, ] -> Ana"

report = run_commands(["ADD Ana", "ADD Bruno", "SHOW Ana", "REMOVE Ana"])
```

`run_commands(lines)` applies lines of the form `ADD <name>`,
`SHOW <name>` and `REMOVE <name>` to a fresh list and returns a report:
the list as it stands before each command, followed by that command's
outcome. Lines with other commands add only the list picture.

### Queue and stack

```python
from structkit.linked_queue import LinkedQueue, LinkedQueueEmptyError
from structkit.stack import Stack, StackEmptyError

queue = LinkedQueue()
queue.enqueue("Person 1")
queue.dequeue()           # "Person 1"

stack = Stack()
stack.push("Document 1")
stack.push("Document 2")
stack.peek()              # "Document 2"
stack.pop()               # "Document 2"
```

Taking from an empty queue or stack raises `LinkedQueueEmptyError` or
`StackEmptyError`, both subclasses of `IndexError`. Both classes also
have a `format()` method returning a text listing.

## Command-line demos

Each structure has a small demo command that exercises it and prints
the result:

```
structkit-avl-tree [--count N] [--seed S]
structkit-binary-tree [--insert-count N] [--remove-count N] [--seed S]
structkit-circular-list [INPUT] [OUTPUT]
structkit-linked-queue [--count N]
structkit-stack [--count N]
```

`structkit-circular-list` reads commands from `INPUT` (default
`InputExample.txt`) and writes the report to `OUTPUT` (default
`output.txt`). `structkit-linked-queue` needs `--count` of at least 2.

## Limitations

There is no fixed-capacity queue: `LinkedQueue` grows without limit.
`AvlTree` supports insertion only; values cannot be removed from it.