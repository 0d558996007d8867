"""Property-list metadata store.

Reads an Info.plist (XML or binary), exposes its string values, and writes it
back atomically in the format it was read in.
"""

from __future__ import annotations

import logging
import os
import plistlib
import stat
import tempfile
from pathlib import Path
from typing import Any
from xml.parsers.expat import ExpatError

from buildnumber.core.errors import ExternalToolError

logger = logging.getLogger(__name__)


class PlistMetadataStore:
    """Metadata store backed by a property-list file on disk.

    Usage:
        store = PlistMetadataStore.load(path)
        store.set("CFBundleVersion", "1.0.0.6")
        store.save()
    """

    def __init__(
        self,
        path: Path,
        data: dict[str, Any] | None = None,
        fmt: plistlib.PlistFormat = plistlib.FMT_XML,
    ) -> None:
        self._path = Path(path)
        self._data: dict[str, Any] = dict(data or {})
        self._fmt = fmt

    @property
    def path(self) -> Path:
        return self._path

    @classmethod
    def load(cls, path: str | Path) -> PlistMetadataStore:
        """Read a property list from ``path``."""
        path = Path(path)
        try:
            raw = path.read_bytes()
            data = plistlib.loads(raw)
        except (OSError, ExpatError, ValueError) as exc:
            raise ExternalToolError(f"Cannot read property list {path}: {exc}") from exc

        if not isinstance(data, dict):
            raise ExternalToolError(f"Property list {path} does not hold a dictionary")

        fmt = plistlib.FMT_BINARY if raw.startswith(b"bplist00") else plistlib.FMT_XML
        logger.debug("Loaded %d keys from %s", len(data), path)
        return cls(path, data, fmt)

    def get(self, key: str) -> str | None:
        """Return the value for ``key`` as a string, or None when absent."""
        value = self._data.get(key)
        if value is None:
            return None
        return str(value)

    def set(self, key: str, value: str) -> None:
        self._data[key] = value

    def save(self) -> None:
        """Write the property list back to its path atomically."""
        directory = self._path.parent
        fd, tmp_name = tempfile.mkstemp(prefix=f".{self._path.name}.", dir=directory)
        try:
            with os.fdopen(fd, "wb") as fh:
                plistlib.dump(self._data, fh, fmt=self._fmt)
            if self._path.exists():
                os.chmod(tmp_name, stat.S_IMODE(self._path.stat().st_mode))
            os.replace(tmp_name, self._path)
        except (OSError, TypeError, OverflowError) as exc:
            Path(tmp_name).unlink(missing_ok=True)
            raise ExternalToolError(f"Cannot write property list {self._path}: {exc}") from exc

        logger.info("Wrote %s", self._path)
