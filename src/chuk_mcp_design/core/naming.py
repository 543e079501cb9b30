"""
Naming transforms - the single source of every emitted name.

CSS variables, class names, TypeScript unions and name lists are all
derived from the authored token key through these functions, so the
three artifact kinds always agree on a given token.
"""

from __future__ import annotations

import re

_CASE_BOUNDARY = re.compile(r"([a-z])([A-Z])")
_WHITESPACE = re.compile(r"\s+")
_NON_WORD = re.compile(r"\W", re.ASCII)

SEPARATOR = "-"


def to_kebab_case(identifier: str) -> str:
    """
    Convert an identifier to delimited lowercase form.

    A separator is inserted at every lowercase→uppercase boundary and
    whitespace runs become a separator. Digits are not boundaries.

    Examples:
        >>> to_kebab_case("dataVizLilac")
        'data-viz-lilac'
        >>> to_kebab_case("gray150")
        'gray150'
        >>> to_kebab_case("data-viz-lilac")
        'data-viz-lilac'
    """
    text = _CASE_BOUNDARY.sub(rf"\1{SEPARATOR}\2", str(identifier))
    text = _WHITESPACE.sub(SEPARATOR, text)
    return text.lower()


def to_pascal_case(identifier: str) -> str:
    """
    Capitalize each separator-delimited segment and concatenate.

    Casing inside a segment is kept, so this is not an inverse of
    to_kebab_case.

    Examples:
        >>> to_pascal_case("background-hover")
        'BackgroundHover'
        >>> to_pascal_case("interactionHover")
        'InteractionHover'
    """
    return "".join(
        segment[:1].upper() + segment[1:] for segment in str(identifier).split(SEPARATOR)
    )


def to_identifier(name: str) -> str:
    """Strip every non-word character (``groww-primary`` → ``growwprimary``)."""
    return _NON_WORD.sub("", str(name))


def variable_name(key: str, stem: str | None = None) -> str:
    """
    Build a CSS custom-property name for a token key.

    Args:
        key: Authored token key
        stem: Optional category stem (semantic tokens)

    Returns:
        Name like ``--gray150`` or ``--background-secondary``
    """
    leaf = to_kebab_case(key)
    if stem:
        return f"--{to_kebab_case(stem)}{SEPARATOR}{leaf}"
    return f"--{leaf}"


def class_name(prefix: str, key: str) -> str:
    """Build a utility class name: ``background`` + ``primary`` → ``backgroundPrimary``."""
    return prefix + to_pascal_case(to_kebab_case(key))
