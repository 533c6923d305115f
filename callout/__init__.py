"""Gym shorthand grammar parser and CLI."""

from callout.core.grammar import GrammarParser, parse

__version__ = "0.1.0"

__all__ = ["GrammarParser", "parse", "__version__"]
