"""Classic data structures and algorithms in plain Python: trees, heaps, tries,
union-find, graph searches, segment trees, sequence algorithms, linked lists,
queues and stacks."""

__version__ = "0.1.0"