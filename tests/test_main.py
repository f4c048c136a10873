import sys

import pytest

from pr_assistant import main as dispatcher


@pytest.fixture
def recorded(monkeypatch):
    calls = []

    def fake(prog):
        async def workflow_main():
            calls.append((prog, list(sys.argv)))
        return prog, workflow_main

    monkeypatch.setattr(dispatcher, "WORKFLOWS", {
        "code-reviewer": fake("pr_assistant.code_reviewer"),
        "doc-updater": fake("pr_assistant.doc_updater"),
    })
    monkeypatch.setattr(sys, "argv", ["pr-assistant"])
    return calls


def test_forwards_remaining_arguments_to_workflow(recorded):
    dispatcher.main(["code-reviewer", "--pr-number", "42", "--skip-wait"])

    assert recorded == [
        ("pr_assistant.code_reviewer", ["pr_assistant.code_reviewer", "--pr-number", "42", "--skip-wait"])
    ]


def test_runs_doc_updater(recorded):
    dispatcher.main(["doc-updater", "--dry-run"])

    assert recorded == [("pr_assistant.doc_updater", ["pr_assistant.doc_updater", "--dry-run"])]


def test_unknown_workflow_exits(recorded):
    with pytest.raises(SystemExit) as excinfo:
        dispatcher.main(["summarize"])

    assert excinfo.value.code == 2
    assert recorded == []
