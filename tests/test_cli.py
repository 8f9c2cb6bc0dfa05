import pytest

from fgusheet import __main__ as cli, config
from fgusheet.__main__ import build_parser, main


@pytest.fixture(autouse=True)
def quiet_logging(monkeypatch):
    monkeypatch.setattr(cli, "setup_logging", lambda level: None)


def test_convert_writes_sheet_next_to_input(tmp_path, sample_xml, capsys):
    source = tmp_path / "export.xml"
    source.write_bytes(sample_xml)

    assert main(["convert", str(source)]) == 0

    output = tmp_path / "Aria Moonwhisper.html"
    assert output.exists()
    assert "<h1>Aria Moonwhisper</h1>" in output.read_text(encoding="utf-8")
    assert str(output) in capsys.readouterr().out


def test_convert_explicit_output(tmp_path, sample_xml):
    source = tmp_path / "export.xml"
    source.write_bytes(sample_xml)
    target = tmp_path / "out.html"

    assert main(["convert", str(source), "-o", str(target)]) == 0
    assert target.read_text(encoding="utf-8").startswith("<!DOCTYPE html>")


def test_convert_reports_bad_document(tmp_path, capsys):
    source = tmp_path / "broken.xml"
    source.write_bytes(b"<root><character>")

    assert main(["convert", str(source)]) == 1
    assert "Invalid XML" in capsys.readouterr().err


def test_convert_missing_file(tmp_path):
    assert main(["convert", str(tmp_path / "nope.xml")]) == 1


def test_serve_defaults():
    args = build_parser().parse_args(["serve"])
    assert args.port == config.PORT
    assert args.host == config.HOST


def test_command_required():
    with pytest.raises(SystemExit):
        build_parser().parse_args([])
