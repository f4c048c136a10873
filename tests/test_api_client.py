import asyncio
import json

import httpx
import pytest

from pr_assistant.github.api_client import DIFF_MEDIA_TYPE, GitHubAPIClient
from pr_assistant.models.pr_models import RequestSpec


def make_client(github_config, handler):
    return GitHubAPIClient(github_config, transport=httpx.MockTransport(handler))


def test_request_returns_parsed_json(github_config):
    client = make_client(github_config, lambda request: httpx.Response(200, json={"number": 7}))

    result = asyncio.run(client.request("/repos/octo/widgets/pulls/7"))

    assert result == {"number": 7}


def test_request_returns_raw_text_when_not_json(github_config):
    diff = "diff --git a/app.py b/app.py\n+print('hi')\n"
    client = make_client(github_config, lambda request: httpx.Response(200, text=diff))

    result = asyncio.run(client.request("/repos/octo/widgets/pulls/7"))

    assert result == diff


def test_error_status_is_returned_not_raised(github_config):
    client = make_client(github_config, lambda request: httpx.Response(404, json={"message": "Not Found"}))

    result = asyncio.run(client.request("/repos/octo/widgets/pulls/999"))

    assert result == {"message": "Not Found"}


def test_default_headers_are_sent(github_config):
    seen = []

    def handler(request):
        seen.append(request)
        return httpx.Response(200, json={})

    client = make_client(github_config, handler)
    asyncio.run(client.request("/rate_limit"))

    headers = seen[0].headers
    assert headers["authorization"] == "token test-token"
    assert headers["user-agent"] == "PR-Review-Bot"
    assert headers["accept"] == "application/vnd.github.v3+json"
    assert seen[0].url.host == "api.github.com"


def test_caller_headers_override_defaults_key_by_key(github_config):
    seen = []

    def handler(request):
        seen.append(request)
        return httpx.Response(200, text="")

    client = make_client(github_config, handler)
    asyncio.run(client.request("/repos/octo/widgets/pulls/7", headers={"accept": DIFF_MEDIA_TYPE}))

    headers = seen[0].headers
    assert headers.get_list("accept") == [DIFF_MEDIA_TYPE]
    assert headers["authorization"] == "token test-token"


def test_post_body_is_json_encoded(github_config):
    seen = []

    def handler(request):
        seen.append(request)
        return httpx.Response(201, json={"id": 1})

    client = make_client(github_config, handler)
    result = asyncio.run(client.post_issue_comment(7, "Looks good"))

    assert result == {"id": 1}
    assert seen[0].method == "POST"
    assert seen[0].url.path == "/repos/octo/widgets/issues/7/comments"
    assert json.loads(seen[0].content) == {"body": "Looks good"}


def test_list_workflow_runs_filters_by_commit(github_config):
    seen = []

    def handler(request):
        seen.append(request)
        return httpx.Response(200, json={"workflow_runs": []})

    client = make_client(github_config, handler)
    asyncio.run(client.list_workflow_runs("def456"))

    assert seen[0].url.path == "/repos/octo/widgets/actions/runs"
    assert seen[0].url.params["head_sha"] == "def456"


def test_transport_errors_propagate(github_config):
    def handler(request):
        raise httpx.ConnectError("connection refused", request=request)

    client = make_client(github_config, handler)

    with pytest.raises(httpx.ConnectError):
        asyncio.run(client.request("/repos/octo/widgets/pulls/7"))


def test_merge_headers_replaces_case_insensitive_match():
    merged = RequestSpec.merge_headers(
        {"Accept": "application/json", "User-Agent": "bot"},
        {"ACCEPT": "text/plain"}
    )

    assert merged == {"User-Agent": "bot", "ACCEPT": "text/plain"}


def test_merge_headers_without_overrides_keeps_defaults():
    defaults = {"Accept": "application/json"}

    assert RequestSpec.merge_headers(defaults, None) == defaults
