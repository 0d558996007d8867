"""Collaborator interfaces shared by the orchestrator and its implementations.

The orchestrator only talks to the outside world through these protocols, so
tests can hand it in-memory fakes and the CLI can hand it the plist and git
implementations.
"""

from __future__ import annotations

from typing import Protocol

# Metadata-store keys
BUNDLE_VERSION_KEY = "CFBundleVersion"
SHORT_VERSION_KEY = "CFBundleShortVersionString"


class MetadataStore(Protocol):
    """Key-value property store holding the product's declared version."""

    def get(self, key: str) -> str | None: ...

    def set(self, key: str, value: str) -> None: ...

    def save(self) -> None: ...


class RevisionSource(Protocol):
    """Source-control access needed to find and record build tags."""

    def current_revision(self) -> str: ...

    def short_revision(self) -> str: ...

    def tags_containing(self, revision: str, pattern: str | None = None) -> list[str]: ...

    def create_tag(self, name: str, revision: str) -> None: ...
