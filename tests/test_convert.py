import pytest

from fgusheet import convert
from fgusheet.convert import DocumentError, SheetError, generate_sheet, sheet_filename


@pytest.mark.parametrize("name,filename", [
    ("Aria Moonwhisper", "Aria Moonwhisper.html"),
    ("Mïra O'Brien!!", "Mra OBrien.html"),
    ("  spaced_out-name  ", "spaced_out-name.html"),
    ("!!!", "character_sheet.html"),
    ("", "character_sheet.html"),
    (None, "character_sheet.html"),
])
def test_sheet_filename(name, filename):
    assert sheet_filename(name) == filename


def test_generate_sheet(sample_xml):
    sheet = generate_sheet(sample_xml)
    assert sheet.filename == "Aria Moonwhisper.html"
    assert sheet.name == "Aria Moonwhisper"
    assert sheet.html.startswith("<!DOCTYPE html>")
    assert sheet.html.rstrip().endswith("</html>")
    assert sheet.to_dict() == {"html": sheet.html, "filename": sheet.filename, "name": sheet.name}


def test_sparse_character_still_renders():
    sheet = generate_sheet(b"<root><character><race>Orc</race></character></root>")
    assert sheet.filename == "character_sheet.html"
    assert sheet.name == "Character Sheet"
    assert "Race:</strong> Orc" in sheet.html


def test_root_element_name_does_not_matter():
    sheet = generate_sheet("<export><character><name>Bo</name></character></export>")
    assert sheet.name == "Bo"


def test_superscript_spell_level_renders_as_its_own_group():
    sheet = generate_sheet(
        "<root><character><powers><id-00001>"
        "<name>Oddity</name><group>Spells</group><level>\u00b2</level>"
        "</id-00001></powers></character></root>"
    )
    assert "Level \u00b2 (1 spells)" in sheet.html


@pytest.mark.parametrize("xml", [
    b"<root><character>",
    b"not xml at all",
    b"<root><npc><name>Goblin</name></npc></root>",
    b"<root><character/></root>",
])
def test_bad_documents_raise(xml):
    with pytest.raises(DocumentError):
        generate_sheet(xml)


def test_render_failure_is_reported_whole(monkeypatch, sample_xml):
    def explode(view):
        raise TypeError("unexpected shape")

    monkeypatch.setattr(convert, "render_sheet", explode)
    with pytest.raises(SheetError) as excinfo:
        generate_sheet(sample_xml)
    assert not isinstance(excinfo.value, DocumentError)
    assert "unexpected shape" in str(excinfo.value)
