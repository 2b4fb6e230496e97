"""Command line interface for findurls."""
