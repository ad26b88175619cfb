"""
Domain models and value objects.

Contains the Complex value type and its textual notation.
"""

from complexplane.core.domain.complex_number import Complex
from complexplane.core.domain.parsing import (
    DEFAULT_PARSER_CONFIG,
    ParseError,
    ParserConfig,
    parse_components,
)

__all__ = [
    # Complex model
    "Complex",
    # Parsing
    "DEFAULT_PARSER_CONFIG",
    "ParseError",
    "ParserConfig",
    "parse_components",
]
