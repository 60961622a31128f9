"""Command-line interface for fcleaner."""
