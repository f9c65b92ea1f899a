from __future__ import annotations

import logging
from collections.abc import Callable
from collections.abc import Iterable
from collections.abc import Iterator
from typing import TypeAlias

from auweb.coretypes import multidict
from auweb.utils import strutils

logger = logging.getLogger(__name__)

WarnCallback: TypeAlias = Callable[[str], None]


def _native(x: bytes) -> str:
    return x.decode("utf-8", "surrogateescape")


def _always_bytes(x: str | bytes) -> bytes:
    return strutils.always_bytes(x, "utf-8", "surrogateescape")


class Headers(multidict.MultiDict):  # type: ignore
    """
    The request or response headers as the user typed or received them.

    Fields are kept as raw bytes in their original order and spelling, the
    str API goes through surrogateescape so nothing is lost:
    >>> h = Headers([(b"Accept", b"text/html"), (b"accept", b"application/xml")])

    Lookups ignore case, and repeated headers are folded as per RFC 7230:
    >>> h["ACCEPT"]
    "text/html, application/xml"
    >>> h.get_all("accept")
    ["text/html", "application/xml"]

    `str(h)` is the header block as it is shown to the user:
    >>> print(h)
    Accept: text/html
    accept: application/xml
    """

    fields: tuple[tuple[bytes, bytes], ...]

    def __init__(self, fields: Iterable[tuple[bytes, bytes]] = ()):
        super().__init__(fields)
        for key, value in self.fields:
            if not isinstance(key, bytes) or not isinstance(value, bytes):
                raise TypeError("Header fields must be bytes.")

    @staticmethod
    def _reduce_values(values) -> str:
        return ", ".join(values)

    @staticmethod
    def _kconv(key) -> bytes:
        return key.lower()

    def __str__(self) -> str:
        return "".join(f"{name}: {value}\n" for name, value in self.items(multi=True))

    def __iter__(self) -> Iterator[str]:
        for x in super().__iter__():
            yield _native(x)

    def get_all(self, name: str | bytes) -> list[str]:
        """
        Like `Headers.get`, but does not fold multiple headers into a single one.
        """
        return [_native(x) for x in super().get_all(_always_bytes(name))]

    def add(self, name: str | bytes, value: str | bytes) -> None:
        super().add(_always_bytes(name), _always_bytes(value))

    def items(self, multi=False):
        if multi:
            return ((_native(k), _native(v)) for k, v in self.fields)
        return super().items()


def _parse_header_line(line: str) -> tuple[str, str] | None:
    name, sep, value = line.partition(":")
    if not sep or not strutils.is_token(name):
        return None
    value = value.strip(" \t")
    if not strutils.is_field_value(value):
        return None
    return name, value


def parse_headers(text: str, warn: WarnCallback | None = None) -> Headers:
    """
    Parse a block of "Name: Value" lines as typed by the user.

    Lines end at "\\n" or "\\r\\n" only, and empty lines are ignored. Any other
    line that has no colon, an invalid header name or control characters in
    the value is skipped and reported through `warn` (or logged if no
    callback is given). Repeated names are kept as separate fields, and
    surrounding whitespace is stripped from values.

    Never raises for malformed input.
    """
    if warn is None:
        warn = logger.warning

    headers = Headers()
    for line in strutils.split_lines(text):
        if not line:
            continue
        pair = _parse_header_line(line)
        if pair is None:
            warn(f"Failed to parse header - {line}")
        else:
            headers.add(*pair)
    return headers
