"""Command-line interface for include-url."""
