"""Classic algorithm exercises on lists, strings, integers, trees, linked lists and graphs."""

__version__ = "0.1.0"
__all__ = ["arrays", "graphs", "linked_list", "numbers", "text", "trees"]