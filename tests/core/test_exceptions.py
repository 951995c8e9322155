"""Tests for the exception hierarchy."""

from jiractl.core.exceptions import (
    JiractlError,
    TransportError,
    NotFoundError,
    ErrorRecord,
    flatten_error_payload,
)


class TestTransportError:

    def test_error_messages_from_jira_payload(self):
        error = TransportError(
            "API error 400",
            status=400,
            payload={"errorMessages": ["Bad"], "errors": {"name": "required"}},
        )
        assert error.error_messages == ["Bad", "name: required"]

    def test_error_messages_without_payload(self):
        assert TransportError("boom").error_messages == []

    def test_subclasses_share_base(self):
        error = NotFoundError("missing", status=404)
        assert isinstance(error, TransportError)
        assert isinstance(error, JiractlError)
        assert error.status == 404


class TestFlattenErrorPayload:

    def test_messages_then_field_errors(self):
        payload = {"errorMessages": ["Bad", 7], "errors": {"name": "required"}}
        assert flatten_error_payload(payload) == ["Bad", "7", "name: required"]

    def test_non_dict_payload(self):
        assert flatten_error_payload("<html>down</html>") == []
        assert flatten_error_payload(None) == []


class TestErrorRecord:

    def test_str_includes_target(self):
        record = ErrorRecord(category="InvalidResult", message="No projects", target="PROJ-1")
        assert str(record) == "No projects [PROJ-1]"

    def test_str_without_target(self):
        assert str(ErrorRecord(category="x", message="msg")) == "msg"
