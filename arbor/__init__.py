"""Binary, binary-search and n-ary trees, a linked list, and tree algorithms."""

__version__ = "0.1.0"