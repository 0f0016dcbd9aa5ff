"""Solvers for classic sorting, counting, coin-pile and introductory problems, with a command line."""

__version__ = "0.1.0"
__all__ = ["sorting", "counting", "piles", "introductory", "cli"]