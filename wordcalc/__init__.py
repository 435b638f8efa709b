"""Linked-list containers, RPN and infix calculators, and an AVL-tree word counter."""

__version__ = "0.1.0"
__all__ = ["linkedlist", "stack", "linked_queue", "rpn", "infix", "wordcount"]