from __future__ import annotations

import html
import json
from typing import Any

_SCRIPT_UNSAFE = {
    "<": "\\u003c",
    ">": "\\u003e",
    "&": "\\u0026",
}


def escape_text(text: str) -> str:
    """Escape ``&``, ``<`` and ``>`` for HTML text content.

    Not idempotent: escaping already-escaped text encodes the ``&`` of each
    entity again, so escape once per interpolation site.
    """
    return html.escape(text or "", quote=False)


def escape_attribute(text: str) -> str:
    """Escape for a double-quoted HTML attribute value."""
    return escape_text(text).replace('"', "&quot;")


def to_script_json(payload: Any) -> str:
    """Serialize ``payload`` for a ``<script type="application/json">`` block.

    The output never contains a literal ``<``, ``>`` or ``&``, so a value such
    as ``"</script>"`` cannot terminate the surrounding element.
    """
    encoded = json.dumps(payload, ensure_ascii=False, separators=(",", ":"))
    for char, replacement in _SCRIPT_UNSAFE.items():
        encoded = encoded.replace(char, replacement)
    return encoded
