"""Console backends."""
