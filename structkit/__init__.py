"""Classic data structures: trees, a queue, a stack and a circular list."""

__version__ = "0.1.0"

__all__ = [
    "avl_tree",
    "binary_tree",
    "circular_list",
    "linked_queue",
    "stack",
]