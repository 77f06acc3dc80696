from __future__ import annotations

from collections.abc import Iterable

DEFAULT_HEADER_ORDER = (
    "Authorization",
    "Content-Type",
    "Content-Length",
)


def sanitize_header(name: str, value: str) -> tuple[str, str]:
    """
    Strip CR, LF, and null bytes from a header name and value so a caller
    supplied token cannot inject extra header lines.
    """
    clean_name = name.replace("\r", "").replace("\n", "").replace("\x00", "")
    clean_value = value.replace("\r", "").replace("\n", "").replace("\x00", "")
    return clean_name, clean_value


def order_headers(
    default_headers: Iterable[tuple[str, str]],
    user_headers: Iterable[tuple[str, str]] | dict[str, str] | None,
    order: Iterable[str] = DEFAULT_HEADER_ORDER,
) -> list[tuple[str, str]]:
    """
    Merge user headers over defaults while respecting a deterministic order.
    Matching is case-insensitive and the later value wins. Headers missing
    from `order` are appended in insertion order.
    """
    merged: dict[str, tuple[str, str]] = {}
    for name, value in default_headers:
        name, value = sanitize_header(name, value)
        merged[name.lower()] = (name, value)
    if user_headers:
        items = user_headers.items() if isinstance(user_headers, dict) else user_headers
        for name, value in items:
            name, value = sanitize_header(name, value)
            merged[name.lower()] = (name, value)

    ordered: list[tuple[str, str]] = []
    for name in order:
        key = name.lower()
        if key in merged:
            ordered.append(merged.pop(key))
    ordered.extend(merged.values())
    return ordered
