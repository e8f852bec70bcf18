"""Command-line plumbing: shared Click context and the query loop."""
