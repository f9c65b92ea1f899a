"""
Content-type sniffing.

A response's content-type is resolved to a `MimeType` and then classified into a
`MimeKind`, which selects both the beautifier and the syntax highlighter.
"""

from __future__ import annotations

import collections
import enum
import typing
from dataclasses import dataclass
from dataclasses import field

from auweb.utils import strutils

if typing.TYPE_CHECKING:
    from auweb.http import Headers


class MimeKind(enum.Enum):
    JSON = "json"
    XML = "xml"
    HTML = "html"
    DEFAULT = "default"

    @property
    def extension(self) -> str:
        """The file extension a syntax highlighter guesses its language from."""
        if self is MimeKind.DEFAULT:
            return ""
        return self.value


@dataclass(frozen=True)
class MimeType:
    type: str
    subtype: str
    parameters: dict[str, str] = field(default_factory=dict, compare=False)

    def __str__(self) -> str:
        return f"{self.type}/{self.subtype}"


TEXT_PLAIN = MimeType("text", "plain")

_KINDS: dict[tuple[str, str], MimeKind] = {
    ("application", "json"): MimeKind.JSON,
    ("text", "json"): MimeKind.JSON,
    ("application", "xml"): MimeKind.XML,
    ("text", "xml"): MimeKind.XML,
    ("text", "html"): MimeKind.HTML,
}


def parse_content_type(c: str) -> tuple[str, str, dict[str, str]] | None:
    """
    A simple parser for content-type values. Returns a (type, subtype,
    parameters) tuple, where type and subtype are strings, and parameters
    is a dict. If the string could not be parsed, return None.

    E.g. the following string:

        text/html; charset=UTF-8

    Returns:

        ("text", "html", {"charset": "UTF-8"})
    """
    parts = c.split(";", 1)
    ts = parts[0].split("/", 1)
    if len(ts) != 2:
        return None
    type_, subtype = ts[0].strip().lower(), ts[1].strip().lower()
    if not strutils.is_token(type_) or not strutils.is_token(subtype):
        return None
    d = collections.OrderedDict()
    if len(parts) == 2:
        for i in parts[1].split(";"):
            clause = i.split("=", 1)
            if len(clause) == 2:
                d[clause[0].strip()] = clause[1].strip()
    return type_, subtype, d


def mime_type(content_type: str | None) -> MimeType:
    """Resolve a content-type value, falling back to text/plain."""
    if content_type and (ct := parse_content_type(content_type)):
        return MimeType(*ct)
    return TEXT_PLAIN


def detect_mime_type(headers: Headers) -> MimeType:
    return mime_type(headers.get("content-type"))


def classify(mime: MimeType | str) -> MimeKind:
    if isinstance(mime, str):
        mime = mime_type(mime)
    return _KINDS.get((mime.type, mime.subtype), MimeKind.DEFAULT)
