import urllib.parse
from collections.abc import Sequence
from typing import TypeAlias

from auweb.utils import strutils

FormField: TypeAlias = tuple[str, str]


def encode_form(text: str) -> list[FormField]:
    """
    Turn "key=value" lines into an ordered list of form fields.

    Lines end at "\\n" or "\\r\\n" only. Each line yields exactly one field,
    in input order, so empty lines become ("", ""). Only the first "="
    separates key and value, and a line without "=" becomes a key with an
    empty value. Repeated keys are kept.
    """
    fields = []
    for line in strutils.split_lines(text):
        key, _, value = line.partition("=")
        fields.append((key, value))
    return fields


def urlencode_form(fields: Sequence[FormField]) -> str:
    """
    Takes a list of (key, value) tuples and returns an
    application/x-www-form-urlencoded body.
    """
    return urllib.parse.urlencode(fields, False, errors="surrogateescape")
