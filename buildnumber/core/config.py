"""Global configuration for buildnumber.

Collects the inputs a build-number run needs: where the metadata store lives,
which tag prefix marks build tags, and how to reach git. Settings come from
environment variables (Xcode exports the two path inputs) and may be
overridden explicitly, e.g. by CLI flags.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from buildnumber.core.errors import ConfigError

DEFAULT_TAG_PREFIX = "build-"
DEFAULT_REVISION_KIND = "git-rev"

MODE_NUMERIC = "numeric"
MODE_ANNOTATED = "annotated"
MODES = (MODE_NUMERIC, MODE_ANNOTATED)


@dataclass
class BuildNumberConfig:
    """Top-level configuration for a build-number run."""

    # Metadata store location
    metadata_path: Path | None = None
    products_dir: Path | None = None
    infoplist_path: Path | None = None

    # Source control
    tag_prefix: str = DEFAULT_TAG_PREFIX
    git_executable: str = "git"
    repository_dir: Path | None = None

    # Versioning
    mode: str = MODE_NUMERIC
    revision_kind: str = DEFAULT_REVISION_KIND

    # Logging
    log_level: str = "WARNING"

    def resolve_metadata_path(self) -> Path:
        """Return the metadata-store path, failing if it cannot be used.

        An explicit ``metadata_path`` wins. Otherwise the path is
        ``products_dir / infoplist_path``, and both must be set.
        """
        if self.metadata_path is not None:
            path = Path(self.metadata_path)
        else:
            if self.products_dir is None or self.infoplist_path is None:
                raise ConfigError(
                    "Not running under Xcode: BUILT_PRODUCTS_DIR and INFOPLIST_PATH "
                    "must be set when no --path is given"
                )
            path = Path(self.products_dir) / self.infoplist_path

        if not path.exists():
            raise ConfigError(f"Cannot find Info.plist in {path}")
        return path

    @classmethod
    def from_env(cls, environ: dict[str, str] | None = None) -> BuildNumberConfig:
        """Build config from environment variables, falling back to defaults."""
        env = os.environ if environ is None else environ
        config = cls()

        if val := env.get("BUILT_PRODUCTS_DIR"):
            config.products_dir = Path(val)
        if val := env.get("INFOPLIST_PATH"):
            config.infoplist_path = Path(val)
        if val := env.get("BUILDNUMBER_TAG_PREFIX"):
            config.tag_prefix = val
        if val := env.get("BUILDNUMBER_GIT"):
            config.git_executable = val
        if val := env.get("BUILDNUMBER_REPOSITORY"):
            config.repository_dir = Path(val)
        if val := env.get("BUILDNUMBER_MODE"):
            if val not in MODES:
                raise ConfigError(f"BUILDNUMBER_MODE must be one of {', '.join(MODES)}, got {val!r}")
            config.mode = val
        if val := env.get("BUILDNUMBER_LOG_LEVEL"):
            config.log_level = val.upper()

        return config


# Module-level singleton
_config: BuildNumberConfig | None = None


def get_config() -> BuildNumberConfig:
    """Return the global config, lazily initialized from env."""
    global _config
    if _config is None:
        _config = BuildNumberConfig.from_env()
    return _config


def set_config(config: BuildNumberConfig | None) -> None:
    """Override the global config (useful in tests). ``None`` resets it."""
    global _config
    _config = config
