"""Small string helpers used by the shell parser."""

from __future__ import annotations

__all__ = ["split_once_owned"]


def split_once_owned(text: str, sep: str) -> tuple[str, str] | None:
    """Split ``text`` at the first occurrence of ``sep``.

    Returns ``(head, tail)`` with the separator removed, or ``None`` when
    ``sep`` does not occur in ``text``.  An empty separator matches at the
    very start, giving ``("", text)``.
    """
    if not sep:
        return "", text
    head, found, tail = text.partition(sep)
    if not found:
        return None
    return head, tail