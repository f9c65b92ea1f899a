import io

import pytest

from auweb.tools import cmdline
from auweb.tools import main


@pytest.fixture
def no_config(tmp_path, monkeypatch):
    monkeypatch.setattr(main.options, "default_path", lambda: tmp_path / "none.yaml")


def test_parser():
    args = cmdline.pretty().parse_args(["-t", "text/xml", "body.xml"])
    assert args.file == "body.xml"
    assert args.content_type == "text/xml"
    assert args.verbosity == "warn"

    args = cmdline.pretty().parse_args([])
    assert args.file == "-"
    assert args.setoptions == []


def test_content_type_argument(tmp_path, capsys, no_config):
    p = tmp_path / "body.json"
    p.write_text('{"b":1,"a":2}')
    assert main.pretty(["-t", "application/json", str(p)]) == 0
    assert capsys.readouterr().out == '{\n  "b": 1,\n  "a": 2\n}\n'


def test_content_type_from_headers(tmp_path, capsys, no_config):
    body = tmp_path / "body.xml"
    body.write_text("<a><b/></a>")
    headers = tmp_path / "headers.txt"
    headers.write_text("Content-Type: text/xml; charset=utf-8\nbroken\n")
    assert main.pretty(["-H", str(headers), str(body)]) == 0
    out, err = capsys.readouterr()
    assert out == "<a>\n    <b/>\n</a>\n"
    assert "Failed to parse header - broken" in err


def _stdin(data: bytes):
    return io.TextIOWrapper(io.BytesIO(data), encoding="utf-8")


def test_stdin(capsys, monkeypatch, no_config):
    monkeypatch.setattr("sys.stdin", _stdin(b"plain\x07text\x1b[0m\n"))
    assert main.pretty([]) == 0
    assert capsys.readouterr().out == "plain\x07text\x1b[0m\n"


def test_non_utf8_stdin(capsys, monkeypatch, no_config):
    monkeypatch.setattr("sys.stdin", _stdin(b'{"a":"caf\xe9"}'))
    assert main.pretty(["-t", "application/json"]) == 0
    assert capsys.readouterr().out == '{\n  "a": "caf\ufffd"\n}\n'


def test_non_utf8_file(tmp_path, capsys, no_config):
    p = tmp_path / "latin1.html"
    p.write_bytes(b"<p>caf\xe9</p>")
    assert main.pretty(["-t", "text/html", str(p)]) == 0
    out = capsys.readouterr().out
    assert out.startswith("<!DOCTYPE html>\n<html>\n")
    assert "            caf\ufffd\n" in out


def test_set_option(tmp_path, capsys, no_config):
    p = tmp_path / "body.json"
    p.write_text("[1]")
    assert main.pretty(["-t", "application/json", "--set", "json_indent=0", str(p)]) == 0
    assert capsys.readouterr().out == "[\n1\n]\n"


def test_config_file(tmp_path, capsys):
    config = tmp_path / "config.yaml"
    config.write_text("markup_indent: 1\n")
    p = tmp_path / "body.xml"
    p.write_text("<a><b/></a>")
    assert main.pretty(["--config", str(config), "-t", "text/xml", str(p)]) == 0
    assert capsys.readouterr().out == "<a>\n <b/>\n</a>\n"


def test_config_error(tmp_path, capsys):
    config = tmp_path / "config.yaml"
    config.write_text("json_indent: lots\n")
    assert main.pretty(["--config", str(config), "-"]) == 1
    assert "auweb-pretty: Error reading" in capsys.readouterr().err


def test_missing_file(tmp_path, capsys, no_config):
    assert main.pretty([str(tmp_path / "missing.json")]) == 1
    assert "auweb-pretty:" in capsys.readouterr().err
