"""
Short IDs - compact tokens for monotonic counters.

Turns an ever-increasing integer (e.g. a database sequence value) into a short
string over a curated alphabet, via plain positional base conversion with
base = len(alphabet). The same value always yields the same token, so the
caller must feed it unique, increasing integers.

Tokens are not fixed length: comparing two tokens lexically or by length does
not follow numeric order. Smaller alphabets give longer tokens.
"""

from collections.abc import Sequence

from toolkit.core.errors import PreconditionViolation

# Order is part of the format; changing it changes every issued token
DEFAULT_ALPHABET = (
    "m", "b", "z", "f", "t", "c", "p", "j", "r", "l",
    "s", "d", "n", "x", "q", "w", "k", "g", "h", "v",
)


def _is_integer(value):
    return isinstance(value, int) and not isinstance(value, bool)


def _digits(value, base):
    """Base-`base` digits of `value`, most significant first."""
    digits = []
    while value >= base:
        value, remainder = divmod(value, base)
        digits.append(remainder)
    digits.append(value)
    digits.reverse()
    return digits


def encode_short_id(value, alphabet=DEFAULT_ALPHABET):
    """Encode a non-negative integer as a short string over `alphabet`.

    `alphabet` is any ordered sequence of distinct symbols (a list of strings
    or a plain string). Uniqueness of the symbols is the caller's
    responsibility.

    >>> encode_short_id(1_234_567_890)
    'vckmvqs'
    >>> encode_short_id(1_234_567_890, ["a", "e", "i", "o", "u"])
    'eaaeiaiieooaoa'

    Raises PreconditionViolation for a negative or non-integer value, or an
    alphabet that cannot represent it.
    """
    if not _is_integer(value):
        raise PreconditionViolation("value must be an integer", argument="value", value=value)
    if value < 0:
        raise PreconditionViolation("value must be non-negative", argument="value", value=value)

    if not isinstance(alphabet, Sequence):
        raise PreconditionViolation("alphabet must be a sequence of symbols", argument="alphabet", value=alphabet)

    base = len(alphabet)
    if base == 0:
        raise PreconditionViolation("alphabet must not be empty", argument="alphabet", value=alphabet)
    if base == 1 and value > 0:
        # Base 1 has no positional form beyond the zero digit
        raise PreconditionViolation(
            "alphabet needs at least two symbols to encode values above zero",
            argument="alphabet",
            value=alphabet,
        )

    return "".join(alphabet[digit] for digit in _digits(value, base))
