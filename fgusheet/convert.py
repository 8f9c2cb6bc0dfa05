"""
XML to HTML conversion pipeline.

``generate_sheet`` either returns a complete sheet or raises ``SheetError``;
no partially rendered HTML ever leaves this module.
"""

import logging
import re
from dataclasses import dataclass

from fgusheet import config
from fgusheet.assemble import assemble_character
from fgusheet.render import render_sheet
from fgusheet.tree import DocumentError, SheetError, parse_document, safe_get

logger = logging.getLogger(__name__)

_FILENAME_STRIP = re.compile(r"[^A-Za-z0-9 _-]")
DEFAULT_SHEET_NAME = "Character Sheet"

__all__ = ["DocumentError", "GeneratedSheet", "SheetError", "generate_sheet", "sheet_filename"]


@dataclass(frozen=True)
class GeneratedSheet:
    html: str
    filename: str
    name: str

    def to_dict(self):
        return {"html": self.html, "filename": self.filename, "name": self.name}


def sheet_filename(name, default=config.DEFAULT_FILENAME):
    """Clean filename - remove invalid characters"""
    if not isinstance(name, str):
        return default
    clean_name = _FILENAME_STRIP.sub("", name).strip()
    return f"{clean_name}.html" if clean_name else default


def find_character(tree):
    """Return the ``character`` node under the document's root element."""
    root = next(iter(tree.values()), None) if isinstance(tree, dict) else None
    char = safe_get(root, "character", None)
    if not isinstance(char, dict):
        raise DocumentError("No character data found in XML")
    return char


def generate_sheet(xml_content):
    """Parse FGU character XML and return the rendered sheet."""
    char = find_character(parse_document(xml_content))
    try:
        view = assemble_character(char)
        html = render_sheet(view)
    except Exception as e:
        logger.exception("Failed to generate HTML")
        raise SheetError(f"Failed to generate HTML: {e}") from e

    logger.info("Generated sheet for %r (%d bytes)", view.name, len(html))
    return GeneratedSheet(
        html=html,
        filename=sheet_filename(view.name),
        name=view.name or DEFAULT_SHEET_NAME,
    )
