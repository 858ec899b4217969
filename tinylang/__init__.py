"""Scanner, parser and syntax tree for the TINY teaching language."""

__version__ = "0.1.0"
__all__ = ["cli", "parser", "scanner", "tokens", "tree"]