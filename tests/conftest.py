import json

import httpx
import pytest

from pr_assistant.config.workflow_config import GitHubConfig
from pr_assistant.github.api_client import DIFF_MEDIA_TYPE, GitHubAPIClient
from pr_assistant.llm.llm_client import LLMResponse


class FakeLLMClient:
    """Stands in for PRAssistantLLMClient and records prompts"""

    def __init__(self, text="", error=None):
        self.text = text
        self.error = error
        self.prompts = []

    async def generate_response(self, prompt):
        self.prompts.append(prompt)
        if self.error:
            raise self.error
        return LLMResponse(content=self.text, metadata={}, model_used="fake-model")


class FakeClock:
    """Monotonic clock advanced only by the paired sleep function"""

    def __init__(self, start=0.0):
        self.now = start
        self.sleeps = []

    def __call__(self):
        return self.now

    async def sleep(self, seconds):
        self.sleeps.append(seconds)
        self.now += seconds


class FakeGitHub:
    """
    Routes GitHub API requests to canned responses

    pr: JSON returned for the pull request
    diff: text (or JSON value) returned for the diff representation
    runs: list of responses returned in order by the workflow runs endpoint
    """

    def __init__(self, pr=None, diff="", runs=None):
        self.pr = pr if pr is not None else {"head": {"sha": "def456"}, "base": {"sha": "abc123"}, "title": "Add feature", "state": "open"}
        self.diff = diff
        self.runs = list(runs or [])
        self.requests = []
        self.comments = []

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        path = request.url.path

        if path.endswith("/actions/runs"):
            payload = self.runs.pop(0) if len(self.runs) > 1 else (self.runs[0] if self.runs else {"workflow_runs": []})
            return httpx.Response(200, json=payload)

        if path.endswith("/comments") and request.method == "POST":
            body = json.loads(request.content)
            self.comments.append(body["body"])
            return httpx.Response(201, json={"id": len(self.comments), "body": body["body"]})

        if "/pulls/" in path:
            if request.headers.get("accept") == DIFF_MEDIA_TYPE:
                if isinstance(self.diff, str):
                    return httpx.Response(200, text=self.diff)
                return httpx.Response(200, json=self.diff)
            return httpx.Response(200, json=self.pr)

        return httpx.Response(404, json={"message": "Not Found"})

    def run_requests(self):
        return [r for r in self.requests if r.url.path.endswith("/actions/runs")]


@pytest.fixture
def github_config():
    return GitHubConfig(token="test-token", owner="octo", repo="widgets", pr_number=7)


@pytest.fixture
def fake_github():
    return FakeGitHub()


@pytest.fixture
def github_client(github_config, fake_github):
    return GitHubAPIClient(github_config, transport=httpx.MockTransport(fake_github.handler))
