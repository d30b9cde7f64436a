"""Tests for utils and the exception types."""

from __future__ import annotations

import pytest

from aptclient.exceptions import AptError, DuplicateRepositoryError, ExternalToolError, FileAccessError
from aptclient.models import Package, Repository
from aptclient.utils import package_name, package_names, safe_int


class TestSafeInt:
    """Tests for safe_int."""

    @pytest.mark.parametrize(
        "value, expected",
        [("42", 42), ("", 0), (None, 0), ("abc", 0), ("1.5", 0), (" 7 ", 7)],
    )
    def test_values(self, value, expected):
        assert safe_int(value) == expected

    def test_custom_default(self):
        assert safe_int("x", default=-1) == -1


class TestPackageName:
    """Tests for package_name and package_names."""

    def test_accepts_package_and_str(self):
        assert package_name(Package(name="bash"), "op") == "bash"
        assert package_name("zsh", "op") == "zsh"

    def test_error_message_names_operation(self):
        with pytest.raises(AptError, match=r"^apt.install: Invalid package with empty Name$"):
            package_name("", "apt.install")

    def test_names_validated_as_a_batch(self):
        with pytest.raises(AptError):
            package_names(["bash", None, "zsh"], "op")
        assert package_names(["bash", Package(name="zsh")], "op") == ["bash", "zsh"]


class TestExceptions:
    """Tests for exception formatting."""

    def test_file_access_error(self, tmp_path):
        err = FileAccessError(f"Reading {tmp_path}: denied", tmp_path)
        assert err.path == tmp_path
        assert str(err) == f"Reading {tmp_path}: denied"
        assert err.message == str(err)

    def test_duplicate_error(self):
        repo = Repository(uri="http://a.example.com/", distribution="stable", components="main")
        err = DuplicateRepositoryError(repo)
        assert err.repo is repo
        assert "deb http://a.example.com/ stable main" in str(err)

    def test_external_tool_error_without_output(self):
        err = ExternalToolError("running apt-get: not found", ["apt-get"])
        assert str(err) == "running apt-get: not found"
        assert err.output == ""
        assert "ExternalToolError" in repr(err)
