"""Workspace handling, tool parameters and JSON result shaping for rust-analyzer tools."""

__version__ = "0.1.0"