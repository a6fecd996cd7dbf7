"""Command-line interface for the Keap client."""
