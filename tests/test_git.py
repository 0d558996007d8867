"""Tests for the git revision source."""

import subprocess
from pathlib import Path
from unittest.mock import Mock, patch

import pytest

from buildnumber.core.errors import ExternalToolError
from buildnumber.revision import GitRevisionSource


def _completed(stdout: str) -> Mock:
    return Mock(stdout=stdout, stderr="", returncode=0)


class TestGitRevisionSource:
    """Test git command construction and error mapping"""

    @patch("buildnumber.revision.git.subprocess.run")
    def test_current_revision(self, mock_run):
        mock_run.return_value = _completed("build-1.0.0.5-2-gabcdef1\n")

        assert GitRevisionSource().current_revision() == "build-1.0.0.5-2-gabcdef1"
        args = mock_run.call_args
        assert args[0][0] == ["git", "describe", "--always"]
        assert args[1]["check"] is True
        assert args[1]["text"] is True

    @patch("buildnumber.revision.git.subprocess.run")
    def test_short_revision(self, mock_run):
        mock_run.return_value = _completed("abcdef1\n")
        assert GitRevisionSource().short_revision() == "abcdef1"
        assert mock_run.call_args[0][0] == ["git", "rev-parse", "--short", "HEAD"]

    @patch("buildnumber.revision.git.subprocess.run")
    def test_tags_containing(self, mock_run):
        mock_run.return_value = _completed("build-1.0.0.2\nbuild-1.0.0.5\n\n")

        tags = GitRevisionSource().tags_containing("abcdef1", "build-*")

        assert tags == ["build-1.0.0.2", "build-1.0.0.5"]
        assert mock_run.call_args[0][0] == [
            "git",
            "tag",
            "-l",
            "build-*",
            "--contains",
            "abcdef1",
        ]

    @patch("buildnumber.revision.git.subprocess.run")
    def test_tags_containing_none(self, mock_run):
        mock_run.return_value = _completed("")
        assert GitRevisionSource().tags_containing("abcdef1") == []
        assert mock_run.call_args[0][0] == ["git", "tag", "-l", "--contains", "abcdef1"]

    @patch("buildnumber.revision.git.subprocess.run")
    def test_create_tag(self, mock_run):
        mock_run.return_value = _completed("")
        source = GitRevisionSource(executable="/usr/bin/git", repository_dir=Path("/src/app"))

        source.create_tag("build-1.0.0.6", "abcdef1")

        assert mock_run.call_args[0][0] == [
            "/usr/bin/git",
            "tag",
            "build-1.0.0.6",
            "abcdef1^{commit}",
        ]
        assert mock_run.call_args[1]["cwd"] == Path("/src/app")

    @patch("buildnumber.revision.git.subprocess.run")
    def test_create_tag_peels_annotated_tag(self, mock_run):
        mock_run.return_value = _completed("")

        GitRevisionSource().create_tag("build-1.0.0.1", "v1.0")

        assert mock_run.call_args[0][0] == ["git", "tag", "build-1.0.0.1", "v1.0^{commit}"]

    @patch("buildnumber.revision.git.subprocess.run")
    def test_command_failure(self, mock_run):
        mock_run.side_effect = subprocess.CalledProcessError(
            128, ["git", "tag"], stderr="fatal: tag 'build-1.0.0.6' already exists\n"
        )

        with pytest.raises(ExternalToolError) as exc_info:
            GitRevisionSource().create_tag("build-1.0.0.6", "abcdef1")

        assert "already exists" in str(exc_info.value)
        assert exc_info.value.command == ["git", "tag", "build-1.0.0.6", "abcdef1^{commit}"]

    @patch("buildnumber.revision.git.subprocess.run")
    def test_missing_executable(self, mock_run):
        mock_run.side_effect = FileNotFoundError("git")

        with pytest.raises(ExternalToolError, match="not found"):
            GitRevisionSource().current_revision()
