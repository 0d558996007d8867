"""Git-backed revision source.

Shells out to the git executable to name the current commit, list build tags
that contain it, and create new build tags.
"""

from __future__ import annotations

import logging
import subprocess
from pathlib import Path

from buildnumber.core.errors import ExternalToolError

logger = logging.getLogger(__name__)


class GitRevisionSource:
    """Revision source backed by a local git repository.

    Usage:
        git = GitRevisionSource()
        head = git.current_revision()
        tags = git.tags_containing(head, "build-*")
    """

    def __init__(self, executable: str = "git", repository_dir: Path | None = None) -> None:
        self._executable = executable
        self._cwd = repository_dir

    def current_revision(self) -> str:
        """Describe HEAD, falling back to the abbreviated commit hash."""
        return self._run("describe", "--always")

    def short_revision(self) -> str:
        """Abbreviated commit hash of HEAD."""
        return self._run("rev-parse", "--short", "HEAD")

    def tags_containing(self, revision: str, pattern: str | None = None) -> list[str]:
        """List tags (optionally matching a glob ``pattern``) that contain ``revision``."""
        args = ["tag", "-l"]
        if pattern:
            args.append(pattern)
        args.extend(["--contains", revision])
        output = self._run(*args)
        return [line.strip() for line in output.splitlines() if line.strip()]

    def create_tag(self, name: str, revision: str) -> None:
        """Tag the commit ``revision`` names, peeling annotated tags to their commit."""
        self._run("tag", name, f"{revision}^{{commit}}")
        logger.info("Created tag %s at %s", name, revision)

    def _run(self, *args: str) -> str:
        command = [self._executable, *args]
        logger.debug("Running %s", " ".join(command))
        try:
            result = subprocess.run(
                command,
                cwd=self._cwd,
                capture_output=True,
                text=True,
                check=True,
            )
        except FileNotFoundError as exc:
            raise ExternalToolError(f"git executable not found: {self._executable}", command) from exc
        except subprocess.CalledProcessError as exc:
            raise ExternalToolError(
                f"{' '.join(command)} exited with status {exc.returncode}",
                command,
                exc.stderr or "",
            ) from exc
        return result.stdout.strip()
