"""buildnumber core — configuration, errors, and collaborator protocols.

Import the most commonly used names from here for convenience:

    from buildnumber.core import BuildNumberConfig, FatalError
"""

from buildnumber.core.config import BuildNumberConfig, get_config, set_config
from buildnumber.core.errors import (
    ConfigError,
    ExternalToolError,
    FatalError,
    FormatError,
    InvalidArgumentError,
    InvalidStateError,
)
from buildnumber.core.types import (
    BUNDLE_VERSION_KEY,
    SHORT_VERSION_KEY,
    MetadataStore,
    RevisionSource,
)

__all__ = [
    "BUNDLE_VERSION_KEY",
    "BuildNumberConfig",
    "ConfigError",
    "ExternalToolError",
    "FatalError",
    "FormatError",
    "InvalidArgumentError",
    "InvalidStateError",
    "MetadataStore",
    "RevisionSource",
    "SHORT_VERSION_KEY",
    "get_config",
    "set_config",
]
