import re
from typing import overload


@overload
def always_bytes(str_or_bytes: None, *encode_args) -> None: ...


@overload
def always_bytes(str_or_bytes: str | bytes, *encode_args) -> bytes: ...


def always_bytes(str_or_bytes: None | str | bytes, *encode_args) -> None | bytes:
    if str_or_bytes is None or isinstance(str_or_bytes, bytes):
        return str_or_bytes
    elif isinstance(str_or_bytes, str):
        return str_or_bytes.encode(*encode_args)
    else:
        raise TypeError(
            f"Expected str or bytes, but got {type(str_or_bytes).__name__}."
        )


# https://tools.ietf.org/html/rfc7230#section-3.2.6
_TOKEN = re.compile(r"[!#$%&'*+\-.^_`|~0-9A-Za-z]+")

# Visible characters, obs-text and horizontal tab; no other control characters.
_FIELD_VALUE = re.compile(r"[^\x00-\x08\x0a-\x1f\x7f]*")


def is_token(s: str) -> bool:
    """
    True if the given string is a legal RFC 7230 token,
    e.g. a header name or a MIME type/subtype.
    """
    return bool(_TOKEN.fullmatch(s))


def is_field_value(s: str) -> bool:
    return bool(_FIELD_VALUE.fullmatch(s))


def split_lines(text: str) -> list[str]:
    """
    Split text into lines at "\\n" and "\\r\\n" only.

    Unlike `str.splitlines`, form feeds, U+2028 and friends stay part of
    the line. A final line break does not start another line.
    """
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return [line.removesuffix("\r") for line in lines]
