"""Lazy iterator adaptors and helpers for peeking, merging, zipping and combining iterables."""

__version__ = "0.1.0"