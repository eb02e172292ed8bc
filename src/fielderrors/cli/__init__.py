"""Command-line interface for fielderrors."""
