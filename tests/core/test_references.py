"""Tests for entity references and records."""

from dataclasses import FrozenInstanceError

import pytest

from jiractl.core.domain import (
    Issue,
    IssueRef,
    Project,
    ProjectRef,
    Version,
    VersionRef,
    User,
    Credential,
)
from jiractl.core.domain.value_objects import EntityRef
from jiractl.core.exceptions import InputValidationError


class TestIssueRef:
    """Tests for IssueRef.from_value."""

    def test_from_string(self):
        ref = IssueRef.from_value("PROJ-1")
        assert ref.identifier == "PROJ-1"
        assert not ref.is_typed
        assert ref.record is None

    def test_strips_whitespace(self):
        assert IssueRef.from_value("  PROJ-1 ").identifier == "PROJ-1"

    def test_from_record_prefers_key(self):
        issue = Issue(id="10001", key="PROJ-1")
        ref = IssueRef.from_value(issue)
        assert ref.is_typed
        assert ref.record is issue
        assert ref.identifier == "PROJ-1"

    def test_from_record_without_key_uses_id(self):
        assert IssueRef.from_value(Issue(id="10001")).identifier == "10001"

    def test_existing_ref_passes_through(self):
        ref = IssueRef.from_value("PROJ-1")
        assert IssueRef.from_value(ref) is ref

    @pytest.mark.parametrize("value", [42, None, ["PROJ-1"], {"key": "PROJ-1"}, True])
    def test_rejects_other_shapes(self, value):
        with pytest.raises(InputValidationError) as exc_info:
            IssueRef.from_value(value, "issue")
        assert exc_info.value.parameter == "issue"

    def test_rejects_other_record_type(self):
        with pytest.raises(InputValidationError):
            IssueRef.from_value(Project(id="1", key="PROJ"))

    def test_rejects_blank_string(self):
        with pytest.raises(InputValidationError):
            IssueRef.from_value("   ")


def test_base_reference_is_abstract():
    with pytest.raises(TypeError):
        EntityRef("PROJ-1")


@pytest.mark.parametrize(
    "ref_type, record",
    [
        (IssueRef, Issue()),
        (IssueRef, Issue(key="  ")),
        (ProjectRef, Project()),
        (ProjectRef, Project(name="Unnamed")),
        (VersionRef, Version(name="1.0", id="")),
    ],
)
def test_record_without_identifier_is_rejected(ref_type, record):
    with pytest.raises(InputValidationError) as exc_info:
        ref_type.from_value(record, "target")
    assert exc_info.value.parameter == "target"


class TestProjectRef:

    def test_record_identifier(self):
        assert ProjectRef.from_value(Project(id="10000", key="PROJ")).identifier == "PROJ"

    def test_rejects_issue(self):
        with pytest.raises(InputValidationError):
            ProjectRef.from_value(Issue(key="PROJ-1"))


class TestVersionRef:

    def test_record_identifier_is_id(self):
        assert VersionRef.from_value(Version(name="1.0", id="10200")).identifier == "10200"

    def test_record_without_id_is_rejected(self):
        with pytest.raises(InputValidationError):
            VersionRef.from_value(Version(name="1.0"))


class TestRecords:

    def test_every_record_is_tagged(self):
        assert Issue().tag == "Jira.Issue"
        assert User().tag == "Jira.User"
        assert Version().tag == "Jira.Version"
        assert Project().tag == "Jira.Project"

    def test_to_dict_includes_tag(self):
        data = User(name="alice", display_name="Alice").to_dict()
        assert data["type"] == "Jira.User"
        assert data["name"] == "alice"
        assert data["display_name"] == "Alice"

    def test_records_are_immutable(self):
        issue = Issue(key="PROJ-1")
        with pytest.raises(FrozenInstanceError):
            issue.key = "PROJ-2"

    def test_credential_repr_hides_secret(self):
        assert "hunter2" not in repr(Credential("bot", "hunter2"))
