"""Render compiled svgs into safe strings for html templates."""

from collections.abc import Iterable, Mapping
from typing import Any

from markupsafe import Markup

from .errors import NotFoundError

Attrs = Iterable[tuple[str, Any]] | Mapping[str, Any]


def attr_name(name: str) -> str:
    """Convert an attribute name, e.g. ``phx_click`` -> ``phx-click``."""
    return str(name).replace("_", "-")


def attr_value(value: Any) -> str:
    """Format an attribute value for the svg tag.

    Numbers and booleans are written bare (``1.5``, ``true``). Everything
    else is converted to a string, with ``&`` and ``"`` escaped, and double
    quoted.
    """
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float)):
        return str(value)
    text = str(value).replace("&", "&amp;").replace('"', "&quot;")
    return f'"{text}"'


def render_attrs(attrs: Attrs | None) -> str:
    """Turn attribute pairs into the text inserted after ``<svg``.

    Args:
        attrs: Ordered (name, value) pairs or a mapping

    Returns:
        String of `` name="value"`` entries, each with a leading space
    """
    if not attrs:
        return ""
    items = attrs.items() if isinstance(attrs, Mapping) else attrs
    return "".join(f" {attr_name(name)}={attr_value(value)}" for name, value in items)


def render(library: Mapping[str, str], key: str, attrs: Attrs | None = None) -> Markup:
    """Render an svg from the library into a safe string.

    Optional attributes are inserted into the svg tag in the order given.
    Names containing ``_`` are converted to use ``-``, so ``phx_click``
    renders as ``phx-click``. Names are otherwise used as is, so
    ``("@click", "open = true")`` works for alpine directives.

    Examples:
        render(library, "heroicons/menu")
        Markup('<svg xmlns= ... </svg>')

        render(library, "heroicons/menu", [("class", "h-5 w-5")])
        Markup('<svg class="h-5 w-5" xmlns= ... </svg>')

    Raises:
        NotFoundError: The key is not in the library
    """
    try:
        svg = library[key]
    except KeyError:
        raise NotFoundError(key) from None
    return Markup(f"<svg{render_attrs(attrs)}{svg}")
