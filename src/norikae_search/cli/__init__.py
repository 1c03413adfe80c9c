"""Command line interface for norikae-search."""
