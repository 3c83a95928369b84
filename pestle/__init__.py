"""Building blocks for parsers: positions, spans, tokens, a backtracking stack and operator-precedence parsers."""

__version__ = "0.1.0"

__all__ = ["position", "span", "stack", "token", "pratt_parser", "prec_climber"]