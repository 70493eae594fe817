"""Shared identifier helpers for sqldbalint validation rules."""

_QUOTE_PAIRS = {("[", "]"), ('"', '"')}


def unquote(name: str) -> str:
    """Strip identifier brackets or double quotes.

    Example:
        [Orders] -> Orders
        "Orders" -> Orders
    """
    if len(name) >= 2 and (name[0], name[-1]) in _QUOTE_PAIRS:
        return name[1:-1]
    return name


def normalize_name(name: str) -> str:
    """Normalize an identifier for case-insensitive comparison."""
    return unquote(name.strip()).casefold()


__all__ = ["normalize_name", "unquote"]
