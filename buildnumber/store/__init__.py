"""buildnumber metadata stores.

Usage:
    from buildnumber.store import PlistMetadataStore

    store = PlistMetadataStore.load("Info.plist")
"""

from buildnumber.store.plist import PlistMetadataStore

__all__ = ["PlistMetadataStore"]
