"""Reversible price transforms.

Two schemes are supported:

* reversal, used for the retail and wholesale prices stored on products;
* digit/letter substitution (``0`` -> ``a`` ... ``9`` -> ``j``), used by the
  switch-to-alphabet and switch-to-number helpers.
"""

_DIGITS = "0123456789"
_LETTERS = "abcdefghij"
_ALPHABET_BASE = ord("a")


class PriceFormatError(ValueError):
    """Raised when a price contains characters outside the scheme's domain."""


def encode_price(price: str) -> str:
    return price[::-1]


# Reversal is its own inverse.
decode_price = encode_price


def alphabet_encode(price) -> str:
    text = str(price)
    if not text:
        raise PriceFormatError("price must not be empty")
    letters = []
    for char in text:
        if char not in _DIGITS:
            raise PriceFormatError("price must contain only digits 0-9, got {!r}".format(char))
        letters.append(chr(_ALPHABET_BASE + int(char)))
    return "".join(letters)


def number_decode(letters: str) -> str:
    text = str(letters)
    if not text:
        raise PriceFormatError("alphabet price must not be empty")
    digits = []
    for char in text:
        if char not in _LETTERS:
            raise PriceFormatError(
                "alphabet price must contain only letters a-j, got {!r}".format(char)
            )
        digits.append(str(ord(char) - _ALPHABET_BASE))
    return "".join(digits)


__all__ = [
    "PriceFormatError",
    "alphabet_encode",
    "decode_price",
    "encode_price",
    "number_decode",
]
