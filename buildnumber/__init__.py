"""buildnumber — four-component build versions for Xcode products.

Reads CFBundleVersion from an Info.plist, finds the highest ``build-`` tag
reachable from HEAD, bumps the build number, writes it back and tags it.
"""

__version__ = "0.1.0"
