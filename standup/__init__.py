"""Standup: dated standup notes opened in your terminal editor."""

__version__ = "0.1.0"
