"""buildnumber revision sources.

Usage:
    from buildnumber.revision import GitRevisionSource
"""

from buildnumber.revision.git import GitRevisionSource

__all__ = ["GitRevisionSource"]
