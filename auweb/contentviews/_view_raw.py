from auweb.contentviews._api import Contentview
from auweb.mime import MimeKind
from auweb.options import Options


class RawContentview(Contentview):
    kind = MimeKind.DEFAULT

    def prettify(self, text: str, options: Options) -> str:
        return text


raw = RawContentview()
