"""A red-black tree of ordered keys with a shared sentinel leaf node."""

__version__ = "0.1.0"
__all__ = ["rbtree"]