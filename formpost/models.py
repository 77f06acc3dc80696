from __future__ import annotations

from collections.abc import Iterable


class PreparedRequest:
    """
    A fully encoded multipart POST, ready to hand to an HTTP client.

    Headers keep their order; `header_map` gives case-insensitive access.
    """

    def __init__(
        self,
        url: str,
        headers: Iterable[tuple[str, str]],
        body: bytes,
        boundary: str,
        timeout: float,
        method: str = "POST",
    ) -> None:
        self.url = url
        self.method = method
        self.headers: list[tuple[str, str]] = list(headers)
        self.body = body
        self.boundary = boundary
        self.timeout = timeout

    @property
    def header_map(self) -> dict[str, str]:
        return {name.lower(): value for name, value in self.headers}

    @property
    def content_type(self) -> str:
        return self.header_map.get("content-type", "")

    def __repr__(self) -> str:
        return f"<PreparedRequest [{self.method}] {self.url} {len(self.body)} bytes>"

