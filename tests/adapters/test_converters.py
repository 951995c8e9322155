"""Tests for JSON -> record converters."""

from jiractl.adapters.jira import converters
from jiractl.core.domain import EditMetaField, CreateMetaField, RawResponse, User


ISSUE_JSON = {
    "id": "10001",
    "key": "PROJ-1",
    "self": "https://jira.example.com/rest/api/2/issue/10001",
    "fields": {"summary": "Broken login", "status": {"name": "Open"}},
}


class TestIssueConversion:

    def test_identifying_fields_survive(self):
        issue = converters.to_issue(ISSUE_JSON, "https://jira.example.com/")

        assert issue.tag == "Jira.Issue"
        assert issue.id == "10001"
        assert issue.key == "PROJ-1"
        assert issue.rest_url == ISSUE_JSON["self"]
        assert issue.http_url == "https://jira.example.com/browse/PROJ-1"
        assert issue.summary == "Broken login"
        assert issue.fields == ISSUE_JSON["fields"]

    def test_without_fields(self):
        issue = converters.to_issue({"id": 5, "key": "PROJ-5"})
        assert issue.id == "5"
        assert issue.fields == {}
        assert issue.http_url is None


class TestWatchersConversion:

    def test_users_in_input_order(self):
        result = converters.to_watchers({"watchers": [{"name": "alice"}, {"name": "bob"}]})

        assert [u.name for u in result] == ["alice", "bob"]
        assert all(isinstance(u, User) and u.tag == "Jira.User" for u in result)

    def test_missing_watchers_key_is_raw_passthrough(self):
        payload = {"watchCount": 0, "isWatching": False}

        result = converters.to_watchers(payload)

        assert isinstance(result, RawResponse)
        assert result.payload is payload

    def test_user_fields(self):
        user = converters.to_user({
            "name": "alice",
            "displayName": "Alice A.",
            "self": "https://jira.example.com/rest/api/2/user?username=alice",
            "active": True,
        })
        assert user.display_name == "Alice A."
        assert user.rest_url.endswith("username=alice")
        assert user.active is True


class TestVersionConversion:

    def test_fields(self):
        version = converters.to_version({
            "id": "10200",
            "name": "1.0",
            "description": "First",
            "archived": False,
            "released": True,
            "releaseDate": "2026-01-31",
            "projectId": 10000,
            "self": "https://jira.example.com/rest/api/2/version/10200",
        })
        assert version.tag == "Jira.Version"
        assert version.id == "10200"
        assert version.released is True
        assert version.release_date == "2026-01-31"
        assert version.project_id == "10000"
        assert version.start_date is None


class TestProjectConversion:

    def test_lead_name(self):
        project = converters.to_project({"id": "10000", "key": "PROJ", "name": "Project", "lead": {"name": "carol"}})
        assert project.key == "PROJ"
        assert project.lead == "carol"


class TestMetaFieldConversion:

    def test_edit_meta_fields_copied_verbatim(self):
        fields = {
            "summary": {
                "required": True,
                "schema": {"type": "string", "system": "summary"},
                "name": "Summary",
                "operations": ["set"],
            },
            "labels": {
                "required": False,
                "schema": {"type": "array", "items": "string"},
                "name": "Labels",
                "autoCompleteUrl": "https://jira.example.com/rest/api/1.0/labels/suggest?query=",
                "operations": ["add", "set", "remove"],
            },
        }

        result = converters.to_edit_meta_fields(fields)

        assert [f.id for f in result] == ["summary", "labels"]
        assert all(isinstance(f, EditMetaField) for f in result)
        assert result[0].required is True
        assert result[0].schema == {"type": "string", "system": "summary"}
        assert result[1].operations == ["add", "set", "remove"]
        assert result[1].auto_complete_url.endswith("query=")

    def test_non_dict_entries_are_skipped(self):
        result = converters.to_create_meta_fields({"projects": [], "priority": {"name": "Priority"}})
        assert [f.id for f in result] == ["priority"]
        assert isinstance(result[0], CreateMetaField)

    def test_missing_fields(self):
        assert converters.to_edit_meta_fields(None) == []
