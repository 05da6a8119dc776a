"""ASCII character classes matching the C locale's isspace/isalnum."""

import string

ASCII_WHITESPACE = frozenset(" \t\n\v\f\r")
ASCII_ALNUM = frozenset(string.ascii_letters + string.digits)


def is_ascii_space(char: str) -> bool:
    return char in ASCII_WHITESPACE


def is_ascii_alnum(char: str) -> bool:
    return char in ASCII_ALNUM


def only_allowed(text: str, symbols: str) -> bool:
    """True if every character of text is ASCII alnum or in symbols."""
    return all(char in ASCII_ALNUM or char in symbols for char in text)
