"""Algorithms and data structures: graphs, number theory, strings, range queries and ordered sets."""

__version__ = "0.1.0"