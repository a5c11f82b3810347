"""Crockford Base32 alphabet and decode table.

I, L, O and U are left out of the alphabet; on decode O reads as 0 and
I/L read as 1. Decoding is case-insensitive.
"""

ENCODING = "0123456789ABCDEFGHJKMNPQRSTVWXYZ"
INVALID = -1
ALIASES = {"O": 0, "I": 1, "L": 1}


def _build_decode_table():
    table = [INVALID] * 128
    for value, char in enumerate(ENCODING):
        table[ord(char)] = value
        table[ord(char.lower())] = value
    for char, value in ALIASES.items():
        table[ord(char)] = value
        table[ord(char.lower())] = value
    return tuple(table)


DECODING = _build_decode_table()
_ALIAS_TRANSLATION = str.maketrans({char: ENCODING[value] for char, value in ALIASES.items()})


def decode_char(char):
    """5-bit value of a character, or INVALID (-1)."""
    code = ord(char)
    if code >= 128:
        return INVALID
    return DECODING[code]


def replace_aliases(text):
    """Rewrite uppercase alias letters to the digits they decode to."""
    return text.translate(_ALIAS_TRANSLATION)
