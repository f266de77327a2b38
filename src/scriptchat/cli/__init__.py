"""Command line interface for scriptchat."""
