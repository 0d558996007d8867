"""The Version value type: fields, invariants, ordering, and rendering.

A Version is ``major.minor[.patch[.build]]`` plus an optional free-form
revision annotation such as ``git-rev abcdef10``. Alphanumeric designations
(``1.0b3``) are not supported.

Examples:
    >>> v = Version.parse("1.0.1.1 (git-rev abcdef10)")
    >>> v.long_version()
    '1.0.1.1'
    >>> v.short_version(RenderMode.WITH_REVISION)
    '1.0.1 (abcdef10)'
    >>> v.short_version(RenderMode.WITH_REVISION_KIND)
    '1.0.1 (git-rev abcdef10)'
"""

from __future__ import annotations

import functools
from enum import Enum
from typing import Any

from buildnumber.core.errors import FormatError, InvalidArgumentError, InvalidStateError
from buildnumber.version.parser import VersionComponents, parse_components


class RenderMode(str, Enum):
    """How much of the revision annotation to render."""

    NONE = "none"
    WITH_REVISION = "with_revision"
    WITH_REVISION_KIND = "with_revision_kind"  # implies WITH_REVISION


def _coerce_mode(mode: RenderMode | str | None, method: str) -> RenderMode:
    if mode is None:
        return RenderMode.NONE
    try:
        return RenderMode(mode)
    except ValueError:
        raise InvalidArgumentError(f"Unknown option {mode!r} for {method}()") from None


def _check_number(name: str, value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidArgumentError(f"{name} must be an integer, got {value!r}")
    if value < 0:
        raise InvalidArgumentError(f"{name} must be non-negative, got {value}")
    return value


def _sign(a: int, b: int) -> int:
    return (a > b) - (a < b)


@functools.total_ordering
class Version:
    """A four-component build version with an optional revision annotation.

    ``major`` and ``minor`` are always integers (``None`` becomes 0).
    ``patch`` and ``build`` may be absent; a build number requires a patch,
    so setting ``build`` fills in ``patch = 0`` and clearing ``patch`` while
    a build is present raises InvalidStateError.
    """

    __hash__ = None  # mutable

    def __init__(
        self,
        major: int | None = 0,
        minor: int | None = 0,
        patch: int | None = None,
        build: int | None = None,
        revision: str | None = None,
        revision_kind: str | None = None,
    ) -> None:
        self._major = 0
        self._minor = 0
        self._patch: int | None = None
        self._build: int | None = None
        self.major = major
        self.minor = minor
        self.patch = patch
        self.build = build
        self.revision = revision
        self.revision_kind = revision_kind

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    @classmethod
    def parse(cls, text: str) -> Version:
        """Parse a version out of a string such as ``1.0 (git-rev abcdef10)``."""
        if not isinstance(text, str):
            raise FormatError(f"Invalid version string: {text!r}")
        return cls.from_components(parse_components(text))

    @classmethod
    def from_components(cls, components: VersionComponents) -> Version:
        """Build a Version through the normal setters, re-checking invariants."""
        version = cls()
        version.major = components.major
        version.minor = components.minor
        version.patch = components.patch
        version.build = components.build
        version.revision_kind = components.revision_kind
        version.revision = components.revision
        return version

    def copy(self) -> Version:
        """Return an independent copy of this version."""
        return Version(
            self._major,
            self._minor,
            self._patch,
            self._build,
            self.revision,
            self.revision_kind,
        )

    __copy__ = copy

    def __deepcopy__(self, memo: dict[int, Any]) -> Version:
        return self.copy()

    # ------------------------------------------------------------------
    # Fields
    # ------------------------------------------------------------------

    @property
    def major(self) -> int:
        """Major-feature version. Never absent."""
        return self._major

    @major.setter
    def major(self, value: int | None) -> None:
        self._major = 0 if value is None else _check_number("major", value)

    @property
    def minor(self) -> int:
        """Minor-feature version. Never absent."""
        return self._minor

    @minor.setter
    def minor(self, value: int | None) -> None:
        self._minor = 0 if value is None else _check_number("minor", value)

    @property
    def patch(self) -> int | None:
        """Patch version. Optional unless a build number is set."""
        return self._patch

    @patch.setter
    def patch(self, value: int | None) -> None:
        if value is None:
            if self._build is not None:
                raise InvalidStateError("Invalid version configuration. No build without patch.")
            self._patch = None
            return
        self._patch = _check_number("patch", value)

    @property
    def build(self) -> int | None:
        """Build number. Setting it initializes an absent patch to zero."""
        return self._build

    @build.setter
    def build(self, value: int | None) -> None:
        self._build = None if value is None else _check_number("build", value)
        if self._build is not None and self._patch is None:
            self._patch = 0

    # ------------------------------------------------------------------
    # Increment
    # ------------------------------------------------------------------

    def increment_build(self) -> Version:
        """Return a copy of this version with an incremented build number."""
        version = self.copy()
        version.increment_build_in_place()
        return version

    def increment_build_in_place(self) -> None:
        """Increment this version's build number, starting at 1."""
        if self._build is not None:
            self.build = self._build + 1
        else:
            self.build = 1

    # ------------------------------------------------------------------
    # Ordering
    # ------------------------------------------------------------------

    def compare(self, other: Version) -> int:
        """Return -1, 0 or 1 as this version is less than, equal to or greater than ``other``."""
        return compare(self, other)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return compare(self, other) == 0

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return compare(self, other) < 0

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def revision_string(self, mode: RenderMode | str | None = None) -> str:
        """Render the revision annotation, or ``""`` when there is nothing to show.

        WITH_REVISION is treated like NONE here; WITH_REVISION_KIND prefixes the
        revision kind when one is set.
        """
        mode = _coerce_mode(mode, "revision_string")
        show_kind = mode is RenderMode.WITH_REVISION_KIND

        if self.revision is None:
            if self.revision_kind is None or not show_kind:
                return ""
            return self.revision_kind
        if self.revision_kind is None or not show_kind:
            return self.revision
        return f"{self.revision_kind} {self.revision}"

    def short_version(self, mode: RenderMode | str | None = None) -> str:
        """Render ``major.minor[.patch]``, never including the build number.

        The patch is left out when absent, or when it is zero on a version
        without a build number.
        """
        mode = _coerce_mode(mode, "short_version")

        if self._patch is None or (self._patch == 0 and self._build is None):
            version = f"{self._major}.{self._minor}"
        else:
            version = f"{self._major}.{self._minor}.{self._patch}"

        return self._with_revision(version, mode)

    def long_version(self, mode: RenderMode | str | None = None) -> str:
        """Render ``short_version`` plus the build number when there is one."""
        mode = _coerce_mode(mode, "long_version")
        if self._build is None:
            return self.short_version(mode)

        version = f"{self.short_version()}.{self._build}"
        return self._with_revision(version, mode)

    def _with_revision(self, version: str, mode: RenderMode) -> str:
        if mode is RenderMode.NONE:
            return version
        revision = self.revision_string(mode)
        return f"{version} ({revision})" if revision else version

    def __str__(self) -> str:
        return self.long_version()

    def __repr__(self) -> str:
        return f"<{type(self).__name__}: {self.long_version(RenderMode.WITH_REVISION_KIND)}>"


def compare(a: Version, b: Version) -> int:
    """Order two versions by major, minor, patch, then build.

    An absent patch compares as zero. A build-numbered version outranks the
    same version without a build number; two absent builds are equal.
    """
    result = _sign(a.major, b.major)
    if result == 0:
        result = _sign(a.minor, b.minor)
    if result == 0:
        result = _sign(a.patch or 0, b.patch or 0)
    if result == 0:
        if a.build is None and b.build is None:
            result = 0
        elif b.build is None:
            result = 1
        elif a.build is None:
            result = -1
        else:
            result = _sign(a.build, b.build)
    return result


def parse_version(text: str) -> Version:
    """Parse a version string. Shorthand for ``Version.parse``."""
    return Version.parse(text)


def increment_build(version: Version) -> Version:
    """Return a copy of ``version`` with its build number incremented."""
    return version.increment_build()


def latest_version(versions: list[Version]) -> Version:
    """Return the greatest of ``versions``."""
    if not versions:
        raise InvalidArgumentError("Empty version list")
    return max(versions)
