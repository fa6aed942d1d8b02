"""Classic data structures: linked lists, stack, circular queue, BST, AVL tree and hash table."""

__version__ = "0.1.0"