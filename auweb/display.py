"""
Glue between a completed response and whatever widgets show it.

Toolkit bindings implement `TextContainer` for their text widgets. Everything
the display needs to remember between calls (which highlighter is active) lives
in a `DisplayContext` that is passed in explicitly.
"""

from __future__ import annotations

import typing
from dataclasses import dataclass
from dataclasses import field

from auweb import contentviews
from auweb import mime
from auweb.http import Headers
from auweb.options import Options


@typing.runtime_checkable
class TextContainer(typing.Protocol):
    """The minimal capability set of a text widget."""

    def get_all_text(self) -> str: ...

    def replace_all_text(self, text: str) -> None: ...

    def clear_all_text(self) -> None: ...

    def append_styled_text(self, text: str, style: str | None = None) -> None: ...


class BufferTextContainer:
    """
    A `TextContainer` that keeps its text in memory.
    Styled runs are recorded as `(start, end, style)` offsets.
    """

    def __init__(self, text: str = ""):
        self._text = text
        self.styles: list[tuple[int, int, str]] = []

    def get_all_text(self) -> str:
        return self._text

    def replace_all_text(self, text: str) -> None:
        self._text = text
        self.styles.clear()

    def clear_all_text(self) -> None:
        self.replace_all_text("")

    def append_styled_text(self, text: str, style: str | None = None) -> None:
        start = len(self._text)
        self._text += text
        if style:
            self.styles.append((start, len(self._text), style))

    def __repr__(self):
        return f"BufferTextContainer({self._text!r})"


@dataclass
class Response:
    text: str
    headers: Headers
    mime_type: mime.MimeType
    kind: mime.MimeKind
    highlight: str | None = None
    """Extension of a highlighter chosen by the user, overriding the detected one."""

    @classmethod
    def from_parts(
        cls, text: str, headers: Headers, highlight: str | None = None
    ) -> Response:
        mime_type = mime.detect_mime_type(headers)
        return cls(
            text=text,
            headers=headers,
            mime_type=mime_type,
            kind=mime.classify(mime_type),
            highlight=highlight,
        )


@dataclass
class DisplayContext:
    current_extension: str | None = None
    current_mime: str | None = None
    options: Options = field(default_factory=Options)


def output_response(
    body: TextContainer,
    headers: TextContainer,
    response: Response,
    context: DisplayContext,
) -> None:
    """
    Show a response: the beautified body goes into `body`, the header block
    into `headers`, and `context` remembers which highlighter to use.
    """
    body.replace_all_text(
        contentviews.beautify(response.kind, response.text, context.options)
    )
    headers.clear_all_text()
    for name, value in response.headers.items(multi=True):
        headers.append_styled_text(name, "header-name")
        headers.append_styled_text(f": {value}\n")

    if response.highlight:
        context.current_extension = response.highlight
        context.current_mime = None
    else:
        context.current_extension = response.kind.extension
        context.current_mime = str(response.mime_type)


def language_hint(context: DisplayContext) -> tuple[str, str | None]:
    """
    The (filename, content type) pair a syntax highlighter guesses its
    language from.
    """
    extension = context.current_extension
    if extension is None:
        extension = "text/plain"
    return f"dummy.{extension}", context.current_mime
