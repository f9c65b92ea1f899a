import argparse

from auweb import log
from auweb import version


def pretty() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="auweb-pretty",
        description="Pretty-print an HTTP response body the way auweb displays it.",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=version.AUWEB,
    )
    parser.add_argument(
        "file",
        nargs="?",
        default="-",
        help="File containing the response body. Defaults to stdin.",
    )
    parser.add_argument(
        "-t",
        "--content-type",
        dest="content_type",
        help="Content type of the body, e.g. application/json.",
    )
    parser.add_argument(
        "-H",
        "--headers",
        dest="headers",
        metavar="PATH",
        help="File with raw response headers, one 'Name: Value' per line. "
        "Its content-type is used if --content-type is not given.",
    )
    parser.add_argument(
        "--config",
        dest="config",
        metavar="PATH",
        help="Read options from PATH instead of the default config file.",
    )
    parser.add_argument(
        "--set",
        dest="setoptions",
        action="append",
        default=[],
        metavar="option=value",
        help="Set an option, e.g. --set json_indent=4.",
    )
    parser.add_argument(
        "-v",
        "--verbosity",
        choices=log.LogLevels,
        default="warn",
        help="Log verbosity.",
    )
    return parser
