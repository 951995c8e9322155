"""Tests for edit and create metadata operations."""

import pytest

from jiractl.application.operations import get_issue_create_metadata, get_issue_edit_metadata
from jiractl.core.domain import CreateMetaField, EditMetaField, Project
from jiractl.core.exceptions import EmptyResultError, InputValidationError


SUMMARY_META = {
    "required": True,
    "schema": {"type": "string", "system": "summary"},
    "name": "Summary",
    "operations": ["set"],
}


class TestGetIssueEditMetadata:

    def test_converts_fields(self, ctx, transport):
        transport.routes[("GET", "/rest/api/2/issue/PROJ-1/editmeta")] = {
            "fields": {"summary": SUMMARY_META},
        }

        result = get_issue_edit_metadata(ctx, "PROJ-1")

        assert len(result) == 1
        assert isinstance(result[0], EditMetaField)
        assert result[0].tag == "Jira.EditMetaField"
        assert result[0].id == "summary"
        assert result[0].required is True
        assert ctx.errors == []

    def test_empty_projects_reported_then_converted(self, ctx, transport):
        transport.routes[("GET", "/editmeta")] = {
            "fields": {"projects": [], "summary": SUMMARY_META},
        }

        result = get_issue_edit_metadata(ctx, "PROJ-1")

        assert len(ctx.errors) == 1
        assert ctx.errors[0].error_id == "projects.NotFound"
        assert ctx.errors[0].target == "PROJ-1"
        assert [f.id for f in result] == ["summary"]

    def test_multiple_projects_and_issue_types_reported(self, ctx, transport):
        transport.routes[("GET", "/editmeta")] = {
            "fields": {
                "projects": [{"key": "A", "issuetypes": [{"id": "1"}, {"id": "2"}]}, {"key": "B"}],
                "summary": SUMMARY_META,
            },
        }

        result = get_issue_edit_metadata(ctx, "PROJ-1")

        assert [e.error_id for e in ctx.errors] == ["projects.NonUnique", "issuetypes.NonUnique"]
        assert [f.id for f in result] == ["summary"]

    def test_empty_response_is_terminating(self, ctx, transport):
        transport.routes[("GET", "/editmeta")] = {}

        with pytest.raises(EmptyResultError):
            get_issue_edit_metadata(ctx, "PROJ-1")

    def test_wrong_type(self, ctx, transport):
        with pytest.raises(InputValidationError):
            get_issue_edit_metadata(ctx, Project(key="PROJ"))
        assert transport.requests == []


class TestGetIssueCreateMetadata:

    def response(self, projects):
        return {"expand": "projects", "projects": projects}

    def test_converts_fields_of_single_match(self, ctx, transport):
        transport.routes[("GET", "/rest/api/2/issue/createmeta")] = self.response([
            {"key": "PROJ", "issuetypes": [{"id": "1", "name": "Bug", "fields": {"summary": SUMMARY_META}}]},
        ])

        result = get_issue_create_metadata(ctx, "PROJ", "Bug")

        assert [f.id for f in result] == ["summary"]
        assert isinstance(result[0], CreateMetaField)
        assert transport.requests[0].params == {
            "projectKeys": "PROJ",
            "issuetypeNames": "Bug",
            "expand": "projects.issuetypes.fields",
        }
        assert ctx.errors == []

    def test_numeric_ids_and_typed_project(self, ctx, transport):
        transport.routes[("GET", "/createmeta")] = self.response([
            {"id": "10000", "issuetypes": [{"id": "1", "fields": {}}]},
        ])

        get_issue_create_metadata(ctx, Project(id="10000", key="PROJ"), "1")

        assert transport.requests[0].params == {
            "projectIds": "10000",
            "issuetypeIds": "1",
            "expand": "projects.issuetypes.fields",
        }

    def test_no_project_reported_without_conversion(self, ctx, transport):
        transport.routes[("GET", "/createmeta")] = self.response([])

        assert get_issue_create_metadata(ctx, "PROJ", "Bug") == []
        assert [e.error_id for e in ctx.errors] == ["projects.NotFound"]

    def test_multiple_issue_types_converts_first(self, ctx, transport):
        transport.routes[("GET", "/createmeta")] = self.response([
            {"key": "PROJ", "issuetypes": [
                {"id": "1", "fields": {"summary": SUMMARY_META}},
                {"id": "2", "fields": {"priority": {"name": "Priority"}}},
            ]},
        ])

        result = get_issue_create_metadata(ctx, "PROJ", "Bug")

        assert [e.error_id for e in ctx.errors] == ["issuetypes.NonUnique"]
        assert [f.id for f in result] == ["summary"]

    def test_empty_response(self, ctx, transport):
        transport.routes[("GET", "/createmeta")] = None

        with pytest.raises(EmptyResultError):
            get_issue_create_metadata(ctx, "PROJ", "Bug")

    def test_blank_issue_type(self, ctx, transport):
        with pytest.raises(InputValidationError):
            get_issue_create_metadata(ctx, "PROJ", " ")
        assert transport.requests == []
