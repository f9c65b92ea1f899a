from __future__ import annotations

import logging
import sys
from collections.abc import Sequence

from auweb import contentviews
from auweb import exceptions
from auweb import http
from auweb import log
from auweb import mime
from auweb import options
from auweb.tools import cmdline

logger = logging.getLogger(__name__)


def _read(path: str) -> str:
    # Bodies are not necessarily UTF-8; undecodable bytes become U+FFFD.
    if path == "-":
        data = sys.stdin.buffer.read()
    else:
        with open(path, "rb") as f:
            data = f.read()
    return data.decode("utf-8", errors="replace")


def pretty(arguments: Sequence[str] | None = None) -> int:
    parser = cmdline.pretty()
    args = parser.parse_args(arguments)
    handler = log.setup_logging(args.verbosity)
    try:
        opts = options.Options()
        try:
            options.load_paths(opts, args.config or options.default_path())
            options.set_options(opts, *args.setoptions)
        except exceptions.OptionsError as e:
            print(f"auweb-pretty: {e}", file=sys.stderr)
            return 1

        try:
            body = _read(args.file)
            header_text = _read(args.headers) if args.headers else ""
        except OSError as e:
            print(f"auweb-pretty: {e}", file=sys.stderr)
            return 1

        headers = http.parse_headers(header_text)
        if args.content_type:
            mime_type = mime.mime_type(args.content_type)
        else:
            mime_type = mime.detect_mime_type(headers)
        kind = mime.classify(mime_type)
        logger.debug(f"Prettifying {mime_type} as {kind.value}.")

        prettified = contentviews.beautify(kind, body, opts)
        sys.stdout.write(prettified)
        if not prettified.endswith("\n"):
            sys.stdout.write("\n")
        return 0
    finally:
        handler.uninstall()


if __name__ == "__main__":  # pragma: no cover
    sys.exit(pretty())
