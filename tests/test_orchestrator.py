"""Tests for the build orchestrator."""

import pytest

from buildnumber.core.config import BuildNumberConfig
from buildnumber.core.errors import ExternalToolError, FormatError
from buildnumber.orchestrator import BuildOrchestrator
from buildnumber.store import PlistMetadataStore
from buildnumber.version import RenderMode

from conftest import FakeRevisionSource, read_plist, write_plist


class TestBuildOrchestrator:
    """Test a full build-number run against a plist and fake git"""

    def test_bump_from_highest_tag(self, config, info_plist, revisions):
        store = PlistMetadataStore.load(info_plist)

        result = BuildOrchestrator(config, store, revisions).run()

        assert result.new_version.long_version() == "1.0.0.6"
        assert result.tag == "build-1.0.0.6"
        assert result.revision == "abcdef10"
        assert result.summary() == "Version modified: 1.0 -> 1.0.0.6"

        data = read_plist(info_plist)
        assert data["CFBundleVersion"] == "1.0.0.6"
        assert data["CFBundleShortVersionString"] == "1.0.0"
        assert revisions.created == [("build-1.0.0.6", "abcdef10")]
        assert revisions.queried == [("abcdef10", "build-*")]

    def test_no_tags_starts_build_at_one(self, config, info_plist):
        revisions = FakeRevisionSource()
        store = PlistMetadataStore.load(info_plist)

        result = BuildOrchestrator(config, store, revisions).run()

        assert str(result.new_version) == "1.0.0.1"
        assert revisions.created == [("build-1.0.0.1", "abcdef10")]

    def test_declared_version_above_tags(self, tmp_path):
        path = write_plist(tmp_path / "Info.plist", {"CFBundleVersion": "2.1"})
        revisions = FakeRevisionSource(tags=["build-1.9.0.40"])
        store = PlistMetadataStore.load(path)

        result = BuildOrchestrator(BuildNumberConfig(), store, revisions).run()

        assert str(result.new_version) == "2.1.0.1"
        assert read_plist(path)["CFBundleShortVersionString"] == "2.1.0"

    def test_old_version_untouched(self, config, info_plist):
        revisions = FakeRevisionSource(tags=[])
        store = PlistMetadataStore.load(info_plist)

        result = BuildOrchestrator(config, store, revisions).run()

        assert result.old_version.build is None
        assert result.new_version.build == 1

    def test_custom_prefix(self, info_plist):
        config = BuildNumberConfig(metadata_path=info_plist, tag_prefix="ci/")
        revisions = FakeRevisionSource(tags=["ci/1.0.0.8", "build-1.0.0.99"])
        store = PlistMetadataStore.load(info_plist)

        result = BuildOrchestrator(config, store, revisions).run()

        assert result.tag == "ci/1.0.0.9"
        assert revisions.queried == [("abcdef10", "ci/*")]

    def test_malformed_tag_aborts_before_writing(self, config, info_plist):
        revisions = FakeRevisionSource(tags=["build-1.0.0.2", "build-nightly"])
        store = PlistMetadataStore.load(info_plist)

        with pytest.raises(FormatError):
            BuildOrchestrator(config, store, revisions).run()

        assert read_plist(info_plist)["CFBundleVersion"] == "1.0.0"
        assert revisions.created == []

    def test_missing_bundle_version(self, tmp_path):
        path = write_plist(tmp_path / "Info.plist", {"CFBundleName": "App"})
        revisions = FakeRevisionSource()

        with pytest.raises(FormatError, match="CFBundleVersion"):
            BuildOrchestrator(BuildNumberConfig(), PlistMetadataStore.load(path), revisions).run()

        assert revisions.created == []

    def test_malformed_bundle_version(self, tmp_path):
        path = write_plist(tmp_path / "Info.plist", {"CFBundleVersion": "1.0b3"})

        with pytest.raises(FormatError):
            BuildOrchestrator(
                BuildNumberConfig(), PlistMetadataStore.load(path), FakeRevisionSource()
            ).run()

    def test_tag_failure_keeps_written_store(self, config, info_plist):
        revisions = FakeRevisionSource(tags=["build-1.0.0.5"], fail_create=True)
        store = PlistMetadataStore.load(info_plist)

        with pytest.raises(ExternalToolError):
            BuildOrchestrator(config, store, revisions).run()

        assert read_plist(info_plist)["CFBundleVersion"] == "1.0.0.6"

    def test_annotated_mode(self, info_plist, revisions):
        config = BuildNumberConfig(metadata_path=info_plist, mode="annotated")
        store = PlistMetadataStore.load(info_plist)

        result = BuildOrchestrator(config, store, revisions).run()

        assert result.new_version.revision == "abcdef1"
        assert result.new_version.revision_kind == "git-rev"
        assert result.summary(RenderMode.WITH_REVISION_KIND) == (
            "Version modified: 1.0 -> 1.0.0.6 (git-rev abcdef1)"
        )
        assert read_plist(info_plist)["CFBundleVersion"] == "1.0.0.6"
        assert result.tag == "build-1.0.0.6"
