"""Building blocks for particle-in-cell plasma simulations on a Yee grid: vectors, grid indexing, particle shapes, configuration, sparse operators and output files."""

__version__ = "0.1.0"