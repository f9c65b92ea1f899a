import json

from auweb.contentviews._api import Contentview
from auweb.mime import MimeKind
from auweb.options import Options


def _reject_constant(name: str):
    raise ValueError(f"Invalid JSON constant: {name}")


class JSONContentview(Contentview):
    name = "JSON"
    kind = MimeKind.JSON

    def prettify(self, text: str, options: Options) -> str:
        # dicts keep insertion order, so keys come out in the order they were sent.
        data = json.loads(text, parse_constant=_reject_constant)
        return json.dumps(
            data, indent=options.json_indent, ensure_ascii=False, allow_nan=False
        )


json_view = JSONContentview()
