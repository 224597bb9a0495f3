"""Tests for porcelain.difftree module."""

import pytest
from pydantic import ValidationError

from porcelain.difftree import CommandNotImplementedError, DiffTreeRequest, run_diff_tree


class TestDiffTreeRequest:
    """Tests for DiffTreeRequest."""

    def test_from_args_splits_options(self):
        """Test that options and tree-ish arguments are recorded as given."""
        request = DiffTreeRequest.from_args(["-r", "--stat", "HEAD~1", "HEAD", "-M50%"])

        assert request.kind == "unsupported"
        assert request.tree_ish == ("HEAD~1", "HEAD")
        assert request.options == ("-r", "--stat", "-M50%")

    def test_request_is_frozen(self):
        """Test that requests cannot be modified."""
        request = DiffTreeRequest()

        with pytest.raises(ValidationError):
            request.tree_ish = ("HEAD",)


class TestRunDiffTree:
    """Tests for run_diff_tree function."""

    @pytest.mark.parametrize("args", [[], ["HEAD"], ["-p", "--color", "a", "b"]])
    def test_always_raises(self, args):
        """Test that every request fails as not implemented."""
        with pytest.raises(CommandNotImplementedError) as exc_info:
            run_diff_tree(DiffTreeRequest.from_args(args))

        assert exc_info.value.command == "diff-tree"
        assert "not implemented" in str(exc_info.value)

    def test_is_a_not_implemented_error(self):
        """Test that callers can catch the builtin NotImplementedError."""
        with pytest.raises(NotImplementedError):
            run_diff_tree(DiffTreeRequest())
