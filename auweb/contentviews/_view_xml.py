import re

import lxml.etree

from auweb.contentviews._api import Contentview
from auweb.mime import MimeKind
from auweb.options import Options

XML_DECLARATION = re.compile(r"\s*(<\?xml\s.*?\?>)", re.DOTALL)


def _drop_blank_text(element) -> None:
    for el in element.iter():
        if el.text is not None and not el.text.strip():
            el.text = None
        if el.tail is not None and not el.tail.strip():
            el.tail = None


class XMLContentview(Contentview):
    name = "XML"
    kind = MimeKind.XML

    def prettify(self, text: str, options: Options) -> str:
        parser = lxml.etree.XMLParser(
            remove_blank_text=True,
            resolve_entities=False,
            strip_cdata=False,
            recover=False,
            encoding="utf-8",
        )
        try:
            document = lxml.etree.fromstring(text.encode("utf-8"), parser)
        except lxml.etree.XMLSyntaxError as e:
            raise ValueError(f"Not well-formed XML: {e}") from e

        _drop_blank_text(document)
        lxml.etree.indent(document, space=" " * options.markup_indent)
        pretty = lxml.etree.tostring(
            document.getroottree(), encoding="unicode"
        ).strip()

        # The declaration is not part of the tree; reuse the one from the input.
        if decl := XML_DECLARATION.match(text):
            pretty = f"{decl.group(1)}\n{pretty}"
        return pretty


xml_view = XMLContentview()
