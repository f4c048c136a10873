import asyncio
import logging

import httpx
import pytest

from pr_assistant.code_reviewer.prompts import NO_CHANGES_COMMENT, REVIEW_COMMENT_HEADER
from pr_assistant.code_reviewer.workflow import CodeReviewerWorkflow
from pr_assistant.config.workflow_config import WaiterConfig
from pr_assistant.github.api_client import GitHubAPIClient
from pr_assistant.github.workflow_waiter import WorkflowCompletionWaiter

from conftest import FakeClock, FakeGitHub, FakeLLMClient

DIFF = """diff --git a/src/app.py b/src/app.py
--- a/src/app.py
+++ b/src/app.py
@@ -1,2 +1,3 @@
 def main():
-    pass
+    print("hello")
"""

COMPLETED_RUNS = {"workflow_runs": [{"name": "Update Documentation", "status": "completed", "conclusion": "success"}]}


def build_workflow(github_config, fake_github, llm, waiter_config=None):
    client = GitHubAPIClient(github_config, transport=httpx.MockTransport(fake_github.handler))
    clock = FakeClock()
    waiter = WorkflowCompletionWaiter(client, clock=clock, sleep=clock.sleep)
    workflow = CodeReviewerWorkflow(
        github_client=client,
        llm_client=llm,
        waiter_config=waiter_config or WaiterConfig(timeout_seconds=60, poll_interval_seconds=10),
        waiter=waiter
    )
    return workflow


def test_posts_review_with_header(github_config):
    fake_github = FakeGitHub(diff=DIFF, runs=[COMPLETED_RUNS])
    llm = FakeLLMClient(text="### Summary\nLooks good overall.")
    workflow = build_workflow(github_config, fake_github, llm)

    final_state = asyncio.run(workflow.execute(7))

    assert fake_github.comments == [REVIEW_COMMENT_HEADER + "### Summary\nLooks good overall."]
    assert final_state["wait_result"] == "success"
    assert final_state["comment_posted"] is True
    assert len(llm.prompts) == 1
    assert DIFF in llm.prompts[0]
    for topic in ("Code quality", "bugs", "Security", "Performance", "Readability"):
        assert topic in llm.prompts[0]


def test_waits_for_workflow_on_head_commit(github_config):
    fake_github = FakeGitHub(diff=DIFF, runs=[
        {"workflow_runs": [{"name": "Update Documentation", "status": "in_progress", "conclusion": None}]},
        COMPLETED_RUNS,
    ])
    workflow = build_workflow(github_config, fake_github, FakeLLMClient(text="ok"))

    asyncio.run(workflow.execute(7))

    run_requests = fake_github.run_requests()
    assert len(run_requests) == 2
    assert all(r.url.params["head_sha"] == "def456" for r in run_requests)


def test_proceeds_after_wait_timeout(github_config):
    fake_github = FakeGitHub(diff=DIFF, runs=[{"workflow_runs": []}])
    llm = FakeLLMClient(text="Review text")
    workflow = build_workflow(github_config, fake_github, llm)

    final_state = asyncio.run(workflow.execute(7))

    assert final_state["wait_result"] == "timeout"
    assert fake_github.comments == [REVIEW_COMMENT_HEADER + "Review text"]


@pytest.mark.parametrize("diff", ["", "   \n", {}])
def test_empty_diff_posts_notice_without_model_call(github_config, diff):
    fake_github = FakeGitHub(diff=diff, runs=[COMPLETED_RUNS])
    llm = FakeLLMClient(text="should not be used")
    workflow = build_workflow(github_config, fake_github, llm)

    final_state = asyncio.run(workflow.execute(7))

    assert fake_github.comments == ["## 🤖 AI Code Review\n\nNo changes found in this PR."]
    assert llm.prompts == []
    assert final_state.get("review", "") == ""


def test_no_changes_notice_text():
    assert NO_CHANGES_COMMENT == "## 🤖 AI Code Review\n\nNo changes found in this PR."


def test_missing_head_sha_skips_wait(github_config, caplog):
    fake_github = FakeGitHub(pr={"title": "No head"}, diff=DIFF)
    workflow = build_workflow(github_config, fake_github, FakeLLMClient(text="ok"))

    with caplog.at_level(logging.INFO):
        final_state = asyncio.run(workflow.execute(7))

    assert "skipping wait" in caplog.text
    assert fake_github.run_requests() == []
    assert final_state.get("wait_result") is None
    assert len(fake_github.comments) == 1


def test_disabled_wait_skips_polling(github_config):
    fake_github = FakeGitHub(diff=DIFF, runs=[COMPLETED_RUNS])
    workflow = build_workflow(
        github_config, fake_github, FakeLLMClient(text="ok"),
        waiter_config=WaiterConfig(enabled=False)
    )

    asyncio.run(workflow.execute(7))

    assert fake_github.run_requests() == []


def test_model_failure_propagates_without_comment(github_config):
    fake_github = FakeGitHub(diff=DIFF, runs=[COMPLETED_RUNS])
    llm = FakeLLMClient(error=RuntimeError("model unavailable"))
    workflow = build_workflow(github_config, fake_github, llm)

    with pytest.raises(RuntimeError, match="model unavailable"):
        asyncio.run(workflow.execute(7))

    assert fake_github.comments == []
    assert len(llm.prompts) == 1


def test_transport_failure_propagates(github_config):
    def handler(request):
        raise httpx.ConnectError("unreachable", request=request)

    client = GitHubAPIClient(github_config, transport=httpx.MockTransport(handler))
    workflow = CodeReviewerWorkflow(github_client=client, llm_client=FakeLLMClient(text="ok"))

    with pytest.raises(httpx.ConnectError):
        asyncio.run(workflow.execute(7))
