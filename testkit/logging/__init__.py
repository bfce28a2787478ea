"""Console output helpers for testkit."""
