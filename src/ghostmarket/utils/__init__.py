"""Utilities for the GhostMarket command line."""

from .color_formatter import ColoredFormatter, setup_logging

__all__ = ["ColoredFormatter", "setup_logging"]
