"""graphwalk — path queries over adjacency-list graph files."""

__version__ = "0.1.0"
