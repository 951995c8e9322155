"""Tests for server operations."""

from jiractl.application.operations import get_server_info


def test_get_server_info(ctx, transport):
    transport.routes[("GET", "/rest/api/2/serverInfo")] = {
        "baseUrl": "https://jira.example.com",
        "version": "9.12.0",
        "buildNumber": 912000,
        "deploymentType": "Server",
        "serverTitle": "Example Jira",
    }

    info = get_server_info(ctx)

    assert info.tag == "Jira.ServerInfo"
    assert info.version == "9.12.0"
    assert info.build_number == 912000
