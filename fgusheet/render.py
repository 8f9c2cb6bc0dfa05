"""Render a CharacterView into a standalone HTML character sheet."""

from jinja2 import Environment, StrictUndefined
from markupsafe import Markup

from fgusheet.model import COIN_ORDER
from fgusheet.stats import ABILITY_NAMES, format_modifier
from fgusheet.templates import SHEET_CSS, SHEET_SCRIPT, SHEET_TEMPLATE

# autoescape applies to every {{ }} in the template; only the static
# stylesheet and script below are trusted as markup
_env = Environment(autoescape=True, undefined=StrictUndefined)
_env.filters["modifier"] = format_modifier

_sheet_template = _env.from_string(SHEET_TEMPLATE)


def render_sheet(view):
    """Return the full HTML document for ``view``."""
    abilities = [(name, view.abilities[name]) for name in ABILITY_NAMES if name in view.abilities]
    return _sheet_template.render(
        c=view,
        abilities=abilities,
        coin_order=COIN_ORDER,
        css=Markup(SHEET_CSS),
        script=Markup(SHEET_SCRIPT),
    )
