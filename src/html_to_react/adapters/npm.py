"""npm-backed package manager for generated projects."""

from __future__ import annotations

import logging
import shutil
import subprocess
import sys
from pathlib import Path

logger = logging.getLogger(__name__)


def _npm_command() -> str | None:
    executable = "npm.cmd" if sys.platform == "win32" else "npm"
    return shutil.which(executable)


def _log_manual_steps(project_dir: Path, step: str) -> None:
    logger.error("You can run it manually:")
    logger.error("  1. cd %s", project_dir)
    logger.error("  2. npm %s", step)


class NpmPackageManager:
    """Run ``npm install`` / ``npm start`` in a generated project."""

    def install(self, project_dir: Path) -> bool:
        """Install project dependencies.

        Parameters
        ----------
        project_dir : Path
            Directory holding the generated ``package.json``.

        Returns
        -------
        bool
            ``True`` when ``npm install`` exited successfully.
        """
        npm = _npm_command()
        if npm is None:
            logger.error("npm was not found on PATH; skipping dependency install")
            _log_manual_steps(project_dir, "install")
            return False
        try:
            subprocess.run([npm, "install"], cwd=project_dir, check=True)
        except (OSError, subprocess.CalledProcessError) as exc:
            logger.error("Failed to install dependencies automatically: %s", exc)
            _log_manual_steps(project_dir, "install")
            return False
        logger.info("Installed dependencies in %s", project_dir)
        return True

    def start(self, project_dir: Path) -> bool:
        """Run the development server in the foreground until it exits."""
        npm = _npm_command()
        if npm is None:
            logger.error("npm was not found on PATH; cannot start the dev server")
            _log_manual_steps(project_dir, "start")
            return False
        try:
            subprocess.run([npm, "start"], cwd=project_dir, check=True)
        except KeyboardInterrupt:
            logger.info("Dev server stopped")
        except (OSError, subprocess.CalledProcessError) as exc:
            logger.error("Failed to start React app: %s", exc)
            _log_manual_steps(project_dir, "start")
            return False
        return True
