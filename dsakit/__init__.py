"""Classic data structures and algorithms in plain Python: trees, sorting,
containers, tries, Huffman coding, shortest paths, array and hashing problems,
heaps, dynamic programming, bit tricks, number theory, grids, graphs and
minimum spanning trees."""

__version__ = "0.1.0"