import json
import logging

from pr_assistant.doc_updater.plan_parser import extract_first_json_object, parse_doc_update_plan

PLAN = {
    "updates": [
        {
            "file": "README.md",
            "action": "update",
            "content": "# Widgets\n\nUse `render({name})` to draw a widget.\n",
            "reason": "Documents the new render function",
        }
    ],
    "summary": "Documented render()",
}


def test_parses_plain_json():
    plan = parse_doc_update_plan(json.dumps(PLAN))

    assert plan is not None
    assert plan.updates[0].file == "README.md"
    assert plan.summary == "Documented render()"


def test_tolerates_surrounding_prose_and_code_fences():
    text = "Here is the plan you asked for:\n```json\n" + json.dumps(PLAN, indent=2) + "\n```\nLet me know {if} anything else is needed."

    plan = parse_doc_update_plan(text)

    assert plan is not None
    assert plan.updates[0].content == PLAN["updates"][0]["content"]


def test_braces_inside_strings_do_not_break_extraction():
    text = 'Plan {draft}: ' + json.dumps(PLAN) + ' trailing }'

    plan = parse_doc_update_plan(text)

    assert plan is not None
    assert "{name}" in plan.updates[0].content


def test_empty_plan_is_valid():
    plan = parse_doc_update_plan('{"updates": [], "summary": "No documentation updates needed for these changes."}')

    assert plan is not None
    assert plan.updates == []


def test_no_json_logs_raw_response(caplog):
    with caplog.at_level(logging.ERROR):
        plan = parse_doc_update_plan("I could not determine any updates.")

    assert plan is None
    assert "No JSON found in response" in caplog.text
    assert "I could not determine any updates." in caplog.text


def test_invalid_json_logs_raw_response(caplog):
    text = '{"updates": [{"file": "README.md", "action": "update", "content": "x",}], "summary": }'

    with caplog.at_level(logging.ERROR):
        plan = parse_doc_update_plan(text)

    assert plan is None
    assert text in caplog.text


def test_invalid_action_fails_validation(caplog):
    bad = {"updates": [{"file": "README.md", "action": "delete", "content": ""}], "summary": ""}

    with caplog.at_level(logging.ERROR):
        plan = parse_doc_update_plan(json.dumps(bad))

    assert plan is None
    assert "Error parsing model response" in caplog.text


def test_extract_first_json_object_returns_first_object():
    assert extract_first_json_object('a {"x": 1} b {"y": 2}') == {"x": 1}
    assert extract_first_json_object("no objects [1, 2]") is None
