"""Reserved words that `parse_identifier()` refuses to accept as identifiers.

The table is fixed. Grammars that need other reserved words should build their own
identifier parser on top of `parse_tok_with_rule()`.
"""

__all__ = ["KEYWORDS", "is_keyword"]

from typing import Final

KEYWORDS: Final[tuple[str, ...]] = (
    "true",
    "false",
    "if",
    "eval",
)


def is_keyword(word: str) -> bool:
    """Return whether `word` is exactly one of the reserved `KEYWORDS`.

    Examples:

    ```pycon
    >>> is_keyword("eval")
    True
    >>> is_keyword("evaluate")
    False

    ```
    """
    return word in KEYWORDS
