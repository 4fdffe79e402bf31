"""Write self-contained SVG markup from element definitions.

An element is a dict: "tag" names it, "children" holds nested elements,
"text" holds character content, every other key is an attribute. Attribute
order follows dict insertion order, so output is deterministic.
"""

from __future__ import annotations

import re
from typing import Any

SVG_NS = "http://www.w3.org/2000/svg"

# Code points XML 1.0 forbids in documents, even as character references.
_XML_ILLEGAL_RE = re.compile("[\x00-\x08\x0b\x0c\x0e-\x1f\ufffe\uffff]")

_XML_ESCAPES = {
    "&": "&amp;",
    "<": "&lt;",
    ">": "&gt;",
    '"': "&quot;",
    "'": "&#39;",
}


def escape_xml(value: str) -> str:
    """Escape the five XML-reserved characters and drop illegal control chars."""
    return "".join(_XML_ESCAPES.get(ch, ch) for ch in _XML_ILLEGAL_RE.sub("", value))


def _attr_string(attrs: dict[str, Any]) -> str:
    return "".join(
        f' {k}="{escape_xml(str(v))}"' for k, v in attrs.items() if v is not None
    )


def serialize_element(elem: dict[str, Any]) -> str:
    tag = elem.get("tag", "g")
    attrs = {k: v for k, v in elem.items() if k not in ("tag", "children", "text")}
    children = elem.get("children") or []
    text = elem.get("text")

    if not children and text is None:
        return f"<{tag}{_attr_string(attrs)} />"

    inner = "".join(serialize_element(child) for child in children)
    if text is not None:
        inner = escape_xml(text) + inner
    return f"<{tag}{_attr_string(attrs)}>{inner}</{tag}>"


def serialize_svg(
    elements: list[dict[str, Any]],
    width: int | str,
    height: int | str,
    view_box: tuple[Any, Any, Any, Any],
    label: str = "",
) -> str:
    """Wrap elements in a root <svg> with display size and coordinate box."""
    root: dict[str, Any] = {
        "tag": "svg",
        "xmlns": SVG_NS,
        "width": width,
        "height": height,
        "viewBox": " ".join(str(v) for v in view_box),
        "role": "img",
        "aria-label": label,
        "children": elements,
    }
    return serialize_element(root)
