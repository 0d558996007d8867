"""buildnumber version model — tokenizer, parser, ordering, and rendering.

Usage:
    from buildnumber.version import Version, RenderMode

    version = Version.parse("1.0.1.1 (git-rev abcdef10)")
    version.increment_build_in_place()
    version.long_version()  # '1.0.1.2'
"""

from buildnumber.version.lexer import Lexer
from buildnumber.version.model import (
    RenderMode,
    Version,
    compare,
    increment_build,
    latest_version,
    parse_version,
)
from buildnumber.version.parser import Parser, VersionComponents, split_annotation

__all__ = [
    "Lexer",
    "Parser",
    "RenderMode",
    "Version",
    "VersionComponents",
    "compare",
    "increment_build",
    "latest_version",
    "parse_version",
    "split_annotation",
]
