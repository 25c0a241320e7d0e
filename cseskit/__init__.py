"""Competitive-programming problem solvers and data structures: searches, dynamic programs, graphs, trees, range queries and line envelopes."""

__version__ = "0.1.0"