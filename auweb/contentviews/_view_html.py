"""
HTML prettifier.

The document is parsed with the HTML5 tree construction rules browsers use
(implied `<head>`, `<tbody>`, misnested tags) and the resulting tree is
written out again one node per line:

- A `<!DOCTYPE html>` line always comes first.
- Void elements are self-closing and never get a closing tag.
- Whitespace-only text is dropped, other text is escaped, except inside
  `<script>` and `<style>`, which is emitted verbatim.
- Comments and processing instructions are dropped.
"""

import lxml.etree
from lxml.html import html5parser

from auweb.contentviews._api import Contentview
from auweb.mime import MimeKind
from auweb.options import Options

DOCTYPE = "<!DOCTYPE html>"

VOID_ELEMENTS = frozenset(
    {
        "area",
        "base",
        "basefont",
        "bgsound",
        "br",
        "col",
        "command",
        "embed",
        "frame",
        "hr",
        "image",
        "img",
        "input",
        "isindex",
        "keygen",
        "link",
        "menuitem",
        "meta",
        "nextid",
        "param",
        "source",
        "track",
        "wbr",
    }
)
RAW_TEXT_ELEMENTS = frozenset({"script", "style"})

_text_escapes = str.maketrans({"&": "&amp;", "<": "&lt;", ">": "&gt;"})
_attr_escapes = str.maketrans(
    {"&": "&amp;", "<": "&lt;", ">": "&gt;", "'": "&#39;", '"': "&quot;"}
)


def escape_text(s: str) -> str:
    return s.translate(_text_escapes)


def escape_attr(s: str) -> str:
    return s.translate(_attr_escapes)


def is_void_element(name: str) -> bool:
    return name.lower() in VOID_ELEMENTS


class _Writer:
    def __init__(self, indent: str):
        self.indent = indent
        self.lines: list[str] = [DOCTYPE]

    def text(self, data: str | None, parent: str, prefix: str) -> None:
        if data is None or not data.strip():
            return
        if parent.lower() in RAW_TEXT_ELEMENTS:
            self.lines.append(prefix + data)
        else:
            self.lines.append(prefix + escape_text(data.strip()))

    def element(self, el, prefix: str) -> None:
        # <svg> and <math> content is namespaced by the parser.
        name = lxml.etree.QName(el).localname
        attrs = "".join(
            f' {lxml.etree.QName(k).localname}="{escape_attr(v)}"'
            for k, v in el.attrib.items()
        )
        void = is_void_element(name)
        if void:
            self.lines.append(f"{prefix}<{name}{attrs}/>")
        else:
            self.lines.append(f"{prefix}<{name}{attrs}>")

        child_prefix = prefix + self.indent
        self.text(el.text, name, child_prefix)
        for child in el:
            # Comments and processing instructions have a non-string tag.
            if isinstance(child.tag, str):
                self.element(child, child_prefix)
            self.text(child.tail, name, child_prefix)

        if not void:
            self.lines.append(f"{prefix}</{name}>")

    def getvalue(self) -> str:
        return "\n".join(self.lines) + "\n"


def is_wellformed(text: str) -> bool:
    parser = lxml.etree.XMLParser(resolve_entities=False, recover=False)
    try:
        lxml.etree.fromstring(text.encode("utf-8"), parser)
    except lxml.etree.XMLSyntaxError:
        return False
    return True


class HTMLContentview(Contentview):
    name = "HTML"
    kind = MimeKind.HTML

    def prettify(self, text: str, options: Options) -> str:
        if not text.strip():
            raise ValueError("Document is empty.")
        if options.html_wellformed_gate and not is_wellformed(text):
            raise ValueError("HTML is not well-formed.")

        root = html5parser.document_fromstring(text)

        writer = _Writer(" " * options.markup_indent)
        writer.element(root, "")
        return writer.getvalue()


html_view = HTMLContentview()
