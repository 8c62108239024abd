"""reclog command-line interface."""
