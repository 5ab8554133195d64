"""Identifier casing helpers for generated C# code."""


def _words(text: str) -> list[str]:
    return [word.strip() for word in text.split() if word.strip()]


def pascal_case(text: str) -> str:
    """Upper-case the first character of every whitespace-separated word.

    The rest of each word is left alone, so ``namespaceId`` becomes
    ``NamespaceId`` and ``my field name`` becomes ``My Field Name``.
    Runs of whitespace collapse to a single space.
    """
    return " ".join(word[0].upper() + word[1:] for word in _words(text))


def capitalize(text: str) -> str:
    """Like pascal_case, but also lower-case the rest of every word."""
    return " ".join(word[0].upper() + word[1:].lower() for word in _words(text))
