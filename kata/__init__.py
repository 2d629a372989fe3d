"""Classic algorithm exercises on arrays, strings, numbers, bits, linked lists and binary trees."""

__version__ = "0.1.0"

__all__ = ["arrays", "bits", "linked_list", "numbers", "strings", "trees"]