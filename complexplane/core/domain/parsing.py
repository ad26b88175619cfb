"""
Parsing: Textual Notation of Complex Numbers

Accepted forms (whitespace anywhere is ignored):
    "a+bi", "a-bi", "a+i", "a-i", with an optional leading sign on a

Algorithm:
1. Strip all whitespace
2. Split on '+' / '-', recording every sign boundary
3. Real part = first token, negated if the text starts with '-'
4. Imaginary coefficient = second token without its trailing 'i'
   (1.0 when the token is exactly "i"), negated if any sign boundary
   after the first character was '-'

Exponent literals ("1e-5") are recognised by default: a sign directly after
'e'/'E' that follows a digit or '.' belongs to the number, not a boundary.
"""

import logging
import re
from dataclasses import dataclass

logger = logging.getLogger(__name__)


# =============================================================================
# EXCEPTIONS
# =============================================================================


class ParseError(ValueError):
    """
    Text does not decompose into exactly a real term and an imaginary term.

    Attributes:
        text: The original input
        reason: Short description of what was wrong
    """

    def __init__(self, text: str, reason: str):
        self.text = text
        self.reason = reason
        super().__init__(f"Cannot parse complex number {text!r}: {reason}")


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class ParserConfig:
    """Parser configuration.

    allow_exponent=False restores plain sign splitting: every '+'/'-' is a
    boundary and exponent literals are rejected.
    """

    allow_exponent: bool = True


DEFAULT_PARSER_CONFIG = ParserConfig()


# =============================================================================
# LITERALS
# =============================================================================

_DECIMAL_LITERAL = re.compile(r"(?:\d+\.?\d*|\.\d+)")
_EXPONENT_LITERAL = re.compile(r"(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")


def _is_exponent_sign(text: str, index: int) -> bool:
    if index < 2 or text[index - 1] not in "eE":
        return False
    previous = text[index - 2]
    return previous.isdigit() or previous == "."


def _split_terms(compact: str, allow_exponent: bool) -> tuple[list[str], list[tuple[int, str]]]:
    """
    Split compact text on sign characters.

    Returns:
        (non-empty tokens, [(index, sign), ...] for every boundary)
    """
    tokens: list[str] = []
    signs: list[tuple[int, str]] = []
    current: list[str] = []

    for index, char in enumerate(compact):
        if char in "+-" and not (allow_exponent and _is_exponent_sign(compact, index)):
            signs.append((index, char))
            if current:
                tokens.append("".join(current))
                current = []
            continue
        current.append(char)

    if current:
        tokens.append("".join(current))

    return tokens, signs


def _reject(text: str, reason: str) -> ParseError:
    logger.debug("Rejected complex literal %r: %s", text, reason)
    return ParseError(text, reason)


def _to_float(token: str, text: str, config: ParserConfig) -> float:
    pattern = _EXPONENT_LITERAL if config.allow_exponent else _DECIMAL_LITERAL
    if not pattern.fullmatch(token):
        raise _reject(text, f"{token!r} is not a valid floating-point literal")
    return float(token)


# =============================================================================
# PARSER
# =============================================================================


def parse_components(text: str, config: ParserConfig | None = None) -> tuple[float, float]:
    """
    Parse complex notation into its (real, imaginary) components.

    Args:
        text: Complex number in "a+bi" notation
        config: Parser configuration (default: exponent literals allowed)

    Returns:
        (real, imaginary)

    Raises:
        ParseError: If the text is not exactly a real and an imaginary term,
            the second term does not end with 'i', or a term is not a
            floating-point literal
        TypeError: If text is not a string

    Examples:
        >>> parse_components("1 + i")
        (1.0, 1.0)
        >>> parse_components("-1.912871 + 7.837i")
        (-1.912871, 7.837)
        >>> parse_components("1e-3 - 2.5E+2i")
        (0.001, -250.0)
    """
    if not isinstance(text, str):
        raise TypeError(f"text must be a str, got {type(text).__name__}")

    if config is None:
        config = DEFAULT_PARSER_CONFIG

    compact = "".join(text.split())
    if not compact:
        raise _reject(text, "empty input")

    tokens, signs = _split_terms(compact, config.allow_exponent)

    if len(tokens) != 2:
        raise _reject(
            text, f"expected a real and an imaginary term, found {len(tokens)} term(s)"
        )

    real_token, imaginary_token = tokens

    if not compact.endswith("i") or not imaginary_token.endswith("i"):
        raise _reject(text, "imaginary term must end with 'i'")

    real = _to_float(real_token, text, config)

    coefficient = imaginary_token[:-1]
    imaginary = 1.0 if coefficient == "" else _to_float(coefficient, text, config)

    if compact[0] == "-":
        real = -real

    if any(sign == "-" for index, sign in signs if index > 0):
        imaginary = -imaginary

    return real, imaginary
