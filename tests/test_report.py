"""Tests for porcelain.status.report module."""

import pytest

from porcelain.ignore import IgnoreRules
from porcelain.status import Category, DuplicateClassificationError
from porcelain.status.report import build_status_report, compose_report


class TestComposeReport:
    """Tests for compose_report function."""

    def test_scenario_staged_new_file(self, raw_status_factory, temp_dir, empty_rules):
        """Test a staged new file end to end."""
        raw = raw_status_factory(added={"a.txt"}, staged={"a.txt"})

        report = compose_report("main", raw, temp_dir, empty_rules)

        assert "#       new file:   a.txt" in report.lines
        assert report.classified.unstaged == {}

    def test_untracked_filtered_and_rendered(self, raw_status_factory, temp_dir):
        """Test that ignored untracked files never reach the output."""
        raw = raw_status_factory(untracked={"keep.py", "drop.log"})

        report = compose_report("main", raw, temp_dir, IgnoreRules(["*.log"]))

        assert report.untracked == ["keep.py"]
        assert "#       keep.py" in report.lines
        assert not any("drop.log" in line for line in report.lines)

    def test_all_untracked_ignored(self, raw_status_factory, temp_dir):
        """Test that a fully ignored untracked set falls back to a clean report."""
        raw = raw_status_factory(index_size=4, untracked={"drop.log"})

        report = compose_report("main", raw, temp_dir, IgnoreRules(["*.log"]))

        assert report.lines == ["# nothing to commit (working directory clean)"]

    def test_hide_untracked(self, raw_status_factory, temp_dir, empty_rules):
        """Test that untracked files can be left out."""
        raw = raw_status_factory(index_size=4, untracked={"new.py"})

        report = compose_report("main", raw, temp_dir, empty_rules, show_untracked=False)

        assert report.untracked == []
        assert report.lines == ["# nothing to commit (working directory clean)"]

    def test_duplicate_produces_no_report(self, mocker, raw_status_factory, temp_dir, empty_rules):
        """Test that a classification error propagates before rendering."""
        raw = raw_status_factory(missing={"x"}, removed={"x"})
        mock_render = mocker.patch("porcelain.status.report.render_status")

        with pytest.raises(DuplicateClassificationError):
            compose_report("main", raw, temp_dir, empty_rules)
        mock_render.assert_not_called()

    def test_logs_each_classified_entry(self, mocker, raw_status_factory, temp_dir, empty_rules):
        """Test that every classified entry is logged at debug level."""
        raw = raw_status_factory(added={"a.txt"}, staged={"a.txt"}, missing={"b.txt"})
        mock_logger = mocker.patch("porcelain.status.report.logger")

        compose_report("main", raw, temp_dir, empty_rules)

        mock_logger.debug.assert_any_call(
            "status_entry", path="a.txt", category="new file", staged=True,
        )
        mock_logger.debug.assert_any_call(
            "status_entry", path="b.txt", category="missing", staged=False,
        )


class TestBuildStatusReport:
    """Tests for build_status_report function."""

    def test_collects_from_git(self, mocker, raw_status_factory, mock_repo_root):
        """Test the full pipeline with git collaborators mocked."""
        raw = raw_status_factory(modified={"b.txt"}, untracked={"x.log", "y.py"})
        mocker.patch("porcelain.status.report.get_raw_status", return_value=raw)
        mocker.patch("porcelain.status.report.get_branch", return_value="feature")
        (mock_repo_root / ".gitignore").write_text("*.log\n")

        report = build_status_report(mock_repo_root)

        assert report.branch == "feature"
        assert report.lines[0] == "# On branch feature"
        assert "#       modified:   b.txt" in report.lines
        assert report.untracked == ["y.py"]

    def test_config_extra_patterns(self, mocker, raw_status_factory, mock_repo_root):
        """Test that config patterns apply on top of the ignore file."""
        raw = raw_status_factory(untracked={"a.tmp", "b.py"})
        mocker.patch("porcelain.status.report.get_raw_status", return_value=raw)
        mocker.patch("porcelain.status.report.get_branch", return_value="main")

        config = {"ignore_file": ".gitignore", "ignore": ["*.tmp"], "show_untracked": True}
        report = build_status_report(mock_repo_root, config=config)

        assert report.untracked == ["b.py"]

    def test_show_untracked_override(self, mocker, raw_status_factory, mock_repo_root):
        """Test that the explicit flag beats the config value."""
        raw = raw_status_factory(index_size=0, untracked={"a.py"})
        mocker.patch("porcelain.status.report.get_raw_status", return_value=raw)
        mocker.patch("porcelain.status.report.get_branch", return_value="main")

        report = build_status_report(
            mock_repo_root,
            config={"show_untracked": True},
            show_untracked=False,
        )

        assert "# Initial commit" in report.lines

    def test_worktree_rename_is_not_clean(self, mocker, git_result, mock_repo_root):
        """Test that a rename of an intent-to-add path shows up in the report."""
        mocker.patch(
            "subprocess.run",
            side_effect=[
                git_result(" R new.txt\0old.txt\0"),
                git_result("new.txt\0old.txt\0"),
                git_result("main\n"),
            ],
        )

        report = build_status_report(mock_repo_root, config={"show_untracked": True})

        assert "# nothing to commit (working directory clean)" not in report.lines
        assert report.classified.unstaged == {
            "new.txt": Category.ADDED,
            "old.txt": Category.MISSING,
        }
        assert "#       missing:    old.txt" in report.lines
        assert "#       new file:   new.txt" in report.lines
