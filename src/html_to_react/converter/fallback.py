"""Raw-HTML fallback component."""

from __future__ import annotations

import json

from html_to_react.converter.document import Document

FALLBACK_WARNING = "⚠️ Original content failed to render"


def emit_fallback(document: Document, component_name: str) -> str:
    """Render a component embedding the sanitized markup verbatim.

    The markup goes through ``dangerouslySetInnerHTML`` as a JSON string
    literal, which is valid JavaScript for any input text.
    """
    markup = json.dumps(document.markup)
    return (
        "import React from 'react';\n"
        "\n"
        f"const {component_name} = () => {{\n"
        "  return (\n"
        "    <div style={{ padding: '20px', border: '1px solid red' }}>\n"
        f"      <h2>{FALLBACK_WARNING}</h2>\n"
        f"      <div dangerouslySetInnerHTML={{{{ __html: {markup} }}}} />\n"
        "    </div>\n"
        "  );\n"
        "};\n"
        "\n"
        f"export default {component_name};\n"
    )
