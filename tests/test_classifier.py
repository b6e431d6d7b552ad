"""Tests for gitscm.status.classifier module."""

import pytest

from gitscm.status import GroupId, RawStatusRecord, StatusKind, classify


def _record(code: str) -> RawStatusRecord:
    return RawStatusRecord(path="file.txt", x=code[0], y=code[1])


class TestConflictCodes:
    """Tests for whole-pair conflict codes."""

    @pytest.mark.parametrize(
        "code,kind",
        [
            ("DD", StatusKind.BOTH_DELETED),
            ("AU", StatusKind.ADDED_BY_US),
            ("UD", StatusKind.DELETED_BY_THEM),
            ("UA", StatusKind.ADDED_BY_THEM),
            ("DU", StatusKind.DELETED_BY_US),
            ("AA", StatusKind.BOTH_ADDED),
            ("UU", StatusKind.BOTH_MODIFIED),
        ],
    )
    def test_conflict_goes_to_merge_only(self, code, kind):
        """Test that conflict codes yield a single merge entry."""
        assert classify(_record(code)) == [(GroupId.MERGE, kind)]

    def test_conflict_takes_precedence_over_columns(self):
        """Test that AA is not also reported as an index addition."""
        result = classify(_record("AA"))

        assert len(result) == 1
        assert all(group_id == GroupId.MERGE for group_id, _ in result)

    def test_deleted_by_both_is_not_index_deleted(self):
        """Test that DD is not split into index and working tree deletions."""
        kinds = [kind for _, kind in classify(_record("DD"))]

        assert StatusKind.INDEX_DELETED not in kinds
        assert StatusKind.DELETED not in kinds


class TestUntrackedAndIgnored:
    """Tests for ?? and !! codes."""

    def test_untracked_goes_to_working_tree(self):
        """Test that ?? is untracked in the working tree group."""
        assert classify(_record("??")) == [(GroupId.WORKING_TREE, StatusKind.UNTRACKED)]

    def test_ignored_goes_to_working_tree(self):
        """Test that !! is ignored in the working tree group."""
        assert classify(_record("!!")) == [(GroupId.WORKING_TREE, StatusKind.IGNORED)]


class TestIndexColumn:
    """Tests for index (X column) classification."""

    @pytest.mark.parametrize(
        "x,kind",
        [
            ("M", StatusKind.INDEX_MODIFIED),
            ("A", StatusKind.INDEX_ADDED),
            ("D", StatusKind.INDEX_DELETED),
            ("R", StatusKind.INDEX_RENAMED),
            ("C", StatusKind.INDEX_COPIED),
        ],
    )
    def test_index_codes(self, x, kind):
        """Test each staged code with a clean working tree."""
        assert classify(RawStatusRecord(path="f", x=x, y=" ")) == [(GroupId.INDEX, kind)]

    @pytest.mark.parametrize("x", [" ", "U", "T", "X", "?"])
    def test_unknown_index_code_yields_nothing(self, x):
        """Test that unrecognized index codes are skipped."""
        assert classify(RawStatusRecord(path="f", x=x, y=" ")) == []


class TestWorkingTreeColumn:
    """Tests for working tree (Y column) classification."""

    def test_modified(self):
        """Test unstaged modification."""
        assert classify(_record(" M")) == [(GroupId.WORKING_TREE, StatusKind.MODIFIED)]

    def test_deleted(self):
        """Test unstaged deletion."""
        assert classify(_record(" D")) == [(GroupId.WORKING_TREE, StatusKind.DELETED)]

    @pytest.mark.parametrize("y", ["A", "R", "C", "T", "U"])
    def test_unknown_working_tree_code_yields_nothing(self, y):
        """Test that codes other than M and D are skipped."""
        assert classify(RawStatusRecord(path="f", x=" ", y=y)) == []


class TestBothColumns:
    """Tests for records changed in both the index and the working tree."""

    def test_staged_and_modified_again(self):
        """Test that MM yields one index and one working tree entry."""
        assert classify(_record("MM")) == [
            (GroupId.INDEX, StatusKind.INDEX_MODIFIED),
            (GroupId.WORKING_TREE, StatusKind.MODIFIED),
        ]

    def test_added_then_deleted(self):
        """Test that AD yields an index addition and a working tree deletion."""
        assert classify(_record("AD")) == [
            (GroupId.INDEX, StatusKind.INDEX_ADDED),
            (GroupId.WORKING_TREE, StatusKind.DELETED),
        ]

    def test_renamed_and_modified(self):
        """Test that RM yields a rename and a modification."""
        assert classify(_record("RM")) == [
            (GroupId.INDEX, StatusKind.INDEX_RENAMED),
            (GroupId.WORKING_TREE, StatusKind.MODIFIED),
        ]

    def test_clean_record(self):
        """Test that a blank code yields nothing."""
        assert classify(RawStatusRecord(path="f")) == []

    def test_deterministic(self):
        """Test that classification does not depend on earlier calls."""
        record = _record("MD")
        assert classify(record) == classify(record)
