"""Observability module for scriptchat."""

from scriptchat.observability.logging import setup_logging

__all__ = ["setup_logging"]
