"""Classic data structures and algorithms: sorts, searches, heaps, queues,
hash tables, search trees, graphs, Huffman coding and tries."""

__version__ = "0.1.0"