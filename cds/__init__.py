"""Vector, linked list, stack and queue containers with comparator-based sort and search."""

__version__ = "0.1.0"
__all__ = ["algo", "errors", "llist", "queue", "stack", "vector"]