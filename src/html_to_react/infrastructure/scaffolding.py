"""React project scaffolding around a generated component."""

from __future__ import annotations

import base64
import json
import logging
import re
import shutil
import sys
from pathlib import Path
from urllib.parse import unquote, urlparse

from html_to_react.converter.component import styles_module_name
from html_to_react.converter.document import Document

logger = logging.getLogger(__name__)

PROJECT_DIRS = (
    "src",
    "src/components",
    "src/styles",
    "public",
    "public/images",
)

RUNTIME_DEPENDENCIES = {
    "react": "^18.2.0",
    "react-dom": "^18.2.0",
    "react-scripts": "5.0.1",
    "html-to-react": "^1.4.3",
    "cheerio": "^1.0.0-rc.12",
}

# 1x1 transparent GIF.
PLACEHOLDER_IMAGE = base64.b64decode(
    "R0lGODlhAQABAIAAAAAAAP///yH5BAEAAAAALAAAAAABAAEAAAIBRAA7"
)

GLOBAL_CSS = "global.css"


def project_slug(output_dir: Path) -> str:
    """npm-compatible package name derived from the output directory."""
    slug = re.sub(r"[^a-z0-9._-]+", "-", output_dir.resolve().name.lower())
    slug = slug.strip("-._")
    return slug or "converted-app"


def build_package_json(name: str, *, windows: bool | None = None) -> str:
    """Render the ``package.json`` manifest of the generated project."""
    if windows is None:
        windows = sys.platform == "win32"
    start = (
        "set DISABLE_ESLINT_PLUGIN=true && react-scripts start"
        if windows
        else "DISABLE_ESLINT_PLUGIN=true react-scripts start"
    )
    manifest = {
        "name": name,
        "version": "1.0.0",
        "private": True,
        "dependencies": dict(RUNTIME_DEPENDENCIES),
        "scripts": {
            "start": start,
            "build": "react-scripts build",
            "test": "react-scripts test",
            "eject": "react-scripts eject",
        },
        "eslintConfig": {"extends": ["react-app", "react-app/jest"]},
    }
    return json.dumps(manifest, indent=2) + "\n"


def build_app_js(component_name: str) -> str:
    """Render ``src/App.js`` mounting the generated component."""
    return (
        "import React from 'react';\n"
        f"import './styles/{GLOBAL_CSS}';\n"
        f"import {component_name} from './components/{component_name}';\n"
        "\n"
        "function App() {\n"
        "  return (\n"
        '    <div className="App">\n'
        f"      <{component_name} />\n"
        "    </div>\n"
        "  );\n"
        "}\n"
        "\n"
        "export default App;\n"
    )


def build_index_js() -> str:
    """Render ``src/index.js``."""
    return (
        "import React from 'react';\n"
        "import ReactDOM from 'react-dom/client';\n"
        "import App from './App';\n"
        "\n"
        "const root = ReactDOM.createRoot(document.getElementById('root'));\n"
        "root.render(\n"
        "  <React.StrictMode>\n"
        "    <App />\n"
        "  </React.StrictMode>\n"
        ");\n"
    )


def build_index_html(title: str) -> str:
    """Render ``public/index.html`` with an escaped title."""
    safe_title = (
        title.replace("&", "&amp;").replace("<", "&lt;").replace(">", "&gt;")
    )
    return (
        "<!DOCTYPE html>\n"
        '<html lang="en">\n'
        "  <head>\n"
        '    <meta charset="utf-8" />\n'
        '    <meta name="viewport" content="width=device-width, initial-scale=1" />\n'
        f"    <title>{safe_title}</title>\n"
        "  </head>\n"
        "  <body>\n"
        '    <div id="root"></div>\n'
        "  </body>\n"
        "</html>\n"
    )


def local_asset_path(reference: str) -> Path | None:
    """Relative filesystem path for a local asset reference, else ``None``.

    Remote URLs, protocol-relative, absolute, data and fragment references
    are not local assets.
    """
    parsed = urlparse(reference)
    if parsed.scheme or parsed.netloc or not parsed.path:
        return None
    if parsed.path.startswith("/"):
        return None
    relative = Path(unquote(parsed.path))
    if ".." in relative.parts:
        return None
    return relative


class ProjectScaffolder:
    """Write the generated React project to disk."""

    def write(
        self,
        output_dir: Path,
        document: Document,
        component_name: str,
        component_source: str,
    ) -> tuple[Path, ...]:
        """Create the project tree and write every generated file.

        Parameters
        ----------
        output_dir : Path
            Project root; created when missing.
        document : Document
            Sanitized document providing style rules, title and assets.
        component_name : str
            Component identifier used for file names.
        component_source : str
            Converted or fallback component module.

        Returns
        -------
        tuple[Path, ...]
            Files written, component first.

        Raises
        ------
        OSError
            If a directory or file cannot be created.
        """
        for directory in PROJECT_DIRS:
            (output_dir / directory).mkdir(parents=True, exist_ok=True)

        src = output_dir / "src"
        styles_dir = src / "styles"
        public = output_dir / "public"
        files: list[tuple[Path, str | bytes]] = [
            (src / "components" / f"{component_name}.js", component_source),
            (styles_dir / styles_module_name(component_name), document.styles),
            (styles_dir / GLOBAL_CSS, document.styles),
            (src / "App.js", build_app_js(component_name)),
            (src / "index.js", build_index_js()),
            (public / "index.html", build_index_html(document.title or component_name)),
            (public / "images" / "placeholder.gif", PLACEHOLDER_IMAGE),
            (output_dir / "package.json", build_package_json(project_slug(output_dir))),
        ]

        written: list[Path] = []
        for path, content in files:
            if isinstance(content, bytes):
                path.write_bytes(content)
            else:
                path.write_text(content, encoding="utf-8")
            written.append(path)

        written.extend(self._copy_assets(output_dir, document))
        return tuple(written)

    def _copy_assets(self, output_dir: Path, document: Document) -> list[Path]:
        source_dir = document.source_path.resolve().parent
        copied: list[Path] = []
        for reference in dict.fromkeys(document.assets):
            relative = local_asset_path(reference)
            if relative is None:
                logger.debug("Skipping non-local asset %s", reference)
                continue
            source = source_dir / relative
            if not source.is_file():
                logger.warning("Referenced asset not found: %s", reference)
                continue
            target = output_dir / "public" / relative
            target.parent.mkdir(parents=True, exist_ok=True)
            shutil.copyfile(source, target)
            copied.append(target)
        return copied
