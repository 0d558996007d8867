"""Build orchestrator — computes and commits the next build version.

Reads the declared version from the metadata store, finds the highest build
tag reachable from the current revision, increments the build number of the
maximum, writes the result back, and tags the revision.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from buildnumber.core.config import MODE_ANNOTATED, BuildNumberConfig
from buildnumber.core.errors import FormatError
from buildnumber.core.types import (
    BUNDLE_VERSION_KEY,
    SHORT_VERSION_KEY,
    MetadataStore,
    RevisionSource,
)
from buildnumber.version.model import RenderMode, Version, latest_version

logger = logging.getLogger(__name__)


@dataclass
class BuildResult:
    """Outcome of a build-number run."""

    old_version: Version
    new_version: Version
    tag: str
    revision: str

    def summary(self, mode: RenderMode | str | None = None) -> str:
        old = self.old_version.long_version(mode)
        new = self.new_version.long_version(mode)
        return f"Version modified: {old} -> {new}"


class BuildOrchestrator:
    """Drive one build-number run against injected collaborators.

    Usage:
        orchestrator = BuildOrchestrator(config, store, revisions)
        result = orchestrator.run()
    """

    def __init__(
        self,
        config: BuildNumberConfig,
        store: MetadataStore,
        revisions: RevisionSource,
    ) -> None:
        self._config = config
        self._store = store
        self._revisions = revisions

    def run(self) -> BuildResult:
        """Compute the next build version, persist it and tag the revision."""
        prefix = self._config.tag_prefix

        old_version = self.read_current_version()

        revision = self._revisions.current_revision()
        tag_versions = self.tag_versions(revision)
        logger.debug("Found %d build tags containing %s", len(tag_versions), revision)

        new_version = latest_version([old_version.copy(), *tag_versions])
        logger.debug("Highest known version for %s is %s", revision, new_version)
        new_version.increment_build_in_place()

        if self._config.mode == MODE_ANNOTATED:
            new_version.revision = self._revisions.short_revision()
            new_version.revision_kind = self._config.revision_kind

        # Past this point a failure leaves earlier writes in place.
        self._store.set(BUNDLE_VERSION_KEY, new_version.long_version())
        self._store.set(SHORT_VERSION_KEY, new_version.short_version())
        self._store.save()

        tag = f"{prefix}{new_version.long_version()}"
        self._revisions.create_tag(tag, revision)

        logger.info("Version modified: %s -> %s", old_version, new_version)
        return BuildResult(
            old_version=old_version,
            new_version=new_version,
            tag=tag,
            revision=revision,
        )

    def read_current_version(self) -> Version:
        """Parse the version declared in the metadata store."""
        text = self._store.get(BUNDLE_VERSION_KEY)
        if text is None:
            raise FormatError(f"Metadata store has no {BUNDLE_VERSION_KEY}")
        return Version.parse(text)

    def tag_versions(self, revision: str) -> list[Version]:
        """Parse every prefixed build tag that contains ``revision``."""
        prefix = self._config.tag_prefix
        versions: list[Version] = []
        for tag in self._revisions.tags_containing(revision, f"{prefix}*"):
            if not tag.startswith(prefix):
                continue
            versions.append(Version.parse(tag[len(prefix) :]))
        return versions
