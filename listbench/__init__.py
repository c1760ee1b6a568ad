"""Array, linked-list and tree list structures, a circular queue, and a benchmark that times them."""

__version__ = "0.1.0"