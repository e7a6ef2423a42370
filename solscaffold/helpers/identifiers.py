"""Identifier case conversion used by the Solidity templates."""

from __future__ import annotations


def format_identifier(text: str, pascal_case: bool) -> str:
    """Join whitespace-separated words into a Pascal or camel case identifier.

    Only the first character of each word is touched; the rest is kept as-is,
    so "my counter" -> "MyCounter" and "MyCounter" stays "MyCounter".
    """
    result = []
    capitalize_next = pascal_case

    for word in text.split():
        first, rest = word[0], word[1:]
        if capitalize_next:
            result.append(first.upper() + rest)
        else:
            result.append(first.lower() + rest)
        capitalize_next = True

    return "".join(result)


def to_constant_case(name: str) -> str:
    """Convert an identifier to the constant name used in generated routers.

    An underscore is inserted before every run of uppercase characters:
    "Counter" -> "_COUNTER", "ERC20Module" -> "_ERC20_MODULE".
    """
    result = []
    prev_is_uppercase = False

    for char in name:
        if char.isupper():
            if not prev_is_uppercase:
                result.append("_")
            prev_is_uppercase = True
        else:
            prev_is_uppercase = False
        result.append(char)

    return "".join(result).upper()
