"""Shared fixtures for the buildnumber test suite."""

from __future__ import annotations

import logging
import plistlib
from pathlib import Path

import pytest

from buildnumber.core.config import BuildNumberConfig, set_config
from buildnumber.core.errors import ExternalToolError


class FakeRevisionSource:
    """In-memory revision source recording the tags it is asked to create."""

    def __init__(
        self,
        tags: list[str] | None = None,
        revision: str = "abcdef10",
        short: str = "abcdef1",
        fail_create: bool = False,
    ) -> None:
        self.tags = list(tags or [])
        self.revision = revision
        self.short = short
        self.fail_create = fail_create
        self.created: list[tuple[str, str]] = []
        self.queried: list[tuple[str, str | None]] = []

    def current_revision(self) -> str:
        return self.revision

    def short_revision(self) -> str:
        return self.short

    def tags_containing(self, revision: str, pattern: str | None = None) -> list[str]:
        self.queried.append((revision, pattern))
        return list(self.tags)

    def create_tag(self, name: str, revision: str) -> None:
        if self.fail_create:
            raise ExternalToolError("git tag failed", ["git", "tag", name, revision])
        self.created.append((name, revision))


def write_plist(path: Path, data: dict, fmt: plistlib.PlistFormat = plistlib.FMT_XML) -> Path:
    with path.open("wb") as fh:
        plistlib.dump(data, fh, fmt=fmt)
    return path


def read_plist(path: Path) -> dict:
    with path.open("rb") as fh:
        return plistlib.load(fh)


@pytest.fixture(autouse=True)
def reset_global_state():
    """Keep the config singleton and the package logger isolated per test."""
    set_config(None)
    package_logger = logging.getLogger("buildnumber")
    handlers = list(package_logger.handlers)
    propagate = package_logger.propagate
    level = package_logger.level
    yield
    set_config(None)
    package_logger.handlers[:] = handlers
    package_logger.propagate = propagate
    package_logger.setLevel(level)


@pytest.fixture
def info_plist(tmp_path):
    """An Info.plist declaring version 1.0.0."""
    return write_plist(
        tmp_path / "Info.plist",
        {
            "CFBundleIdentifier": "com.example.app",
            "CFBundleVersion": "1.0.0",
            "CFBundleShortVersionString": "1.0",
        },
    )


@pytest.fixture
def revisions():
    """Revision source with two build tags reachable from HEAD."""
    return FakeRevisionSource(tags=["build-1.0.0.2", "build-1.0.0.5"])


@pytest.fixture
def config(info_plist):
    return BuildNumberConfig(metadata_path=info_plist)
