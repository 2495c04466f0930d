"""Classic data structures and algorithms: lists, polynomials, sparse matrices, stacks, queues, deques, trees, heaps and graphs."""

__version__ = "0.1.0"