import dataclasses
import logging
import os
from dataclasses import dataclass
from pathlib import Path

import ruamel.yaml

from auweb import exceptions

logger = logging.getLogger(__name__)

CONF_DIR = "~/.auweb"
CONF_BASENAME = "config.yaml"


@dataclass
class Options:
    """
    Everything that is configurable about auweb.

    Options are passed explicitly to the code that needs them, there is no
    process-wide instance.
    """

    url: str = "https://api.github.com/users/kykc/repos"
    """The URL the request form is pre-filled with."""
    headers: str = ""
    """Raw header text the request form is pre-filled with."""
    request: str = ""
    """Raw request body the request form is pre-filled with."""

    json_indent: int = 2
    """Number of spaces used to indent prettified JSON."""
    markup_indent: int = 4
    """Number of spaces used to indent prettified XML and HTML."""
    html_wellformed_gate: bool = False
    """
    Only prettify HTML that is also well-formed XML.
    Malformed documents are shown verbatim instead of the repaired tree.
    """

    def update(self, **kwargs) -> None:
        """
        Set several options at once.
        Raises OptionsError for unknown options and values of the wrong type.
        """
        known = {f.name: f for f in dataclasses.fields(self)}
        for name, value in kwargs.items():
            if name not in known:
                raise exceptions.OptionsError(f"Unknown option: {name}")
            _check_option_type(name, value, known[name].type)
        for name, value in kwargs.items():
            setattr(self, name, value)


def _check_option_type(name: str, value, typeinfo: type) -> None:
    # bool is a subclass of int, but "json_indent: true" is certainly a mistake.
    if isinstance(value, bool) and typeinfo is not bool:
        ok = False
    else:
        ok = isinstance(value, typeinfo)
    if not ok:
        raise exceptions.OptionsError(
            f"Expected {typeinfo.__name__} for {name}, but got {type(value).__name__}."
        )
    if typeinfo is int and value < 0:
        raise exceptions.OptionsError(f"{name} must not be negative.")


def parse(text: str) -> dict:
    if not text:
        return {}
    try:
        yaml = ruamel.yaml.YAML(typ="safe", pure=True)
        data = yaml.load(text)
    except ruamel.yaml.error.YAMLError as v:
        if hasattr(v, "problem_mark"):
            snip = v.problem_mark.get_snippet()
            raise exceptions.OptionsError(
                "Config error at line %s:\n%s\n%s"
                % (v.problem_mark.line + 1, snip, getattr(v, "problem", ""))
            )
        else:
            raise exceptions.OptionsError("Could not parse options.")
    if data is None:
        return {}
    elif not isinstance(data, dict):
        raise exceptions.OptionsError("Config error - no keys found.")
    return data


def load(opts: Options, text: str) -> None:
    """
    Load configuration from text, over-writing options already set in
    this object. May raise OptionsError if the config file is invalid.
    """
    opts.update(**parse(text))


def load_paths(opts: Options, *paths: Path | str) -> None:
    """
    Load paths in order. Each path takes precedence over the previous
    path. Paths that don't exist are ignored, errors raise an
    OptionsError.
    """
    for p in paths:
        p = Path(p).expanduser()
        if p.exists() and p.is_file():
            with p.open(encoding="utf8") as f:
                try:
                    txt = f.read()
                except UnicodeDecodeError as e:
                    raise exceptions.OptionsError(f"Error reading {p}: {e}")
            try:
                load(opts, txt)
            except exceptions.OptionsError as e:
                raise exceptions.OptionsError(f"Error reading {p}: {e}")
            logger.debug(f"Loaded options from {p}.")


def save(opts: Options, path: Path | str) -> None:
    """
    Save all options to path, creating parent directories as needed.
    """
    path = Path(path).expanduser()
    path.parent.mkdir(parents=True, exist_ok=True)
    try:
        with path.open("w", encoding="utf8") as f:
            ruamel.yaml.YAML().dump(dataclasses.asdict(opts), f)
    except OSError as e:
        raise exceptions.OptionsError(f"Error writing {path}: {e}")


def default_path() -> Path:
    return Path(os.path.expanduser(CONF_DIR)) / CONF_BASENAME


def set_options(opts: Options, *specs: str) -> None:
    """
    Apply "name=value" option specs as given on the command line.
    Values are parsed as YAML scalars, so "json_indent=4" sets an int.
    """
    for spec in specs:
        name, sep, value = spec.partition("=")
        if not sep:
            raise exceptions.OptionsError(f"Invalid option spec: {spec!r}")
        data = parse(f"{name.strip()}: {value.strip()}")
        # An empty value means the empty string rather than null.
        if value.strip() == "":
            data = {name.strip(): ""}
        opts.update(**data)
