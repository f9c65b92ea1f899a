"""
auweb includes a set of content views which pretty-print response bodies.

Each view handles one `MimeKind`. `beautify` picks the view for a kind and
falls back to the unmodified text if the body cannot be parsed, so it can be
used on whatever the server actually sent.
"""

import logging

from ._api import Contentview
from ._registry import ContentviewRegistry
from ._view_html import html_view
from ._view_json import json_view
from ._view_raw import raw
from ._view_xml import xml_view
from auweb.mime import MimeKind
from auweb.options import Options

logger = logging.getLogger(__name__)

registry = ContentviewRegistry()

_views: list[Contentview] = [
    html_view,
    json_view,
    raw,
    xml_view,
]
for view in _views:
    registry.register(view)


def beautify(
    kind: MimeKind,
    text: str,
    options: Options | None = None,
    registry: ContentviewRegistry = registry,
) -> str:
    """
    Pretty-print `text` as `kind`.

    Never raises: if the text cannot be parsed, it is returned unchanged.
    """
    if options is None:
        options = Options()
    view = registry.get_view(kind)
    try:
        return view.prettify(text, options)
    except Exception as e:
        logger.debug(f"Contentview {view.name!r} failed: {e}", exc_info=True)
        return text


__all__ = [
    "Contentview",
    "ContentviewRegistry",
    "beautify",
    "registry",
]
