"""
Fantasy Grounds Unity Character Sheet Generator
===============================================
Convert FGU XML character exports into printable HTML character sheets.
"""

from fgusheet.convert import GeneratedSheet, SheetError, generate_sheet, sheet_filename

__version__ = "2.1.0"

__all__ = ["GeneratedSheet", "SheetError", "generate_sheet", "sheet_filename"]
