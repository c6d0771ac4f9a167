"""Scaffold generator for ERC-8004 registered agents."""

__version__ = "0.1.0"
