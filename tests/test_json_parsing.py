"""Tests for model output JSON parsing."""

import json

from deycook.utils.json_parsing import ParseOutcome, parse_model_json

RECIPE = {
    "title": "Shakshuka",
    "servings": 2,
    "steps": ["Simmer the sauce.", "Crack in the eggs."],
    "ingredients": [{"name": "egg", "quantity": "4"}],
}


def test_well_formed_json_matches_direct_decode():
    text = json.dumps(RECIPE)
    result = parse_model_json(text)
    assert result.outcome is ParseOutcome.PARSED
    assert result.data == json.loads(text)


def test_json_wrapped_in_prose_is_recovered():
    text = f"Sure! Here is your recipe:\n{json.dumps(RECIPE, indent=2)}\nEnjoy your meal."
    result = parse_model_json(text)
    assert result.parsed
    assert result.data == RECIPE


def test_json_in_markdown_fence_is_recovered():
    text = f"```json\n{json.dumps(RECIPE)}\n```"
    assert parse_model_json(text).data == RECIPE


def test_first_balanced_object_when_trailing_braces_follow():
    text = f"{json.dumps(RECIPE)} and also {{not json}}"
    result = parse_model_json(text)
    assert result.parsed
    assert result.data == RECIPE


def test_garbage_is_unparseable_and_keeps_raw():
    text = "I'm sorry, I can't help with that {broken"
    result = parse_model_json(text)
    assert result.outcome is ParseOutcome.UNPARSEABLE
    assert result.data is None
    assert result.raw == text


def test_empty_and_none_are_unparseable():
    assert parse_model_json("").outcome is ParseOutcome.UNPARSEABLE
    assert parse_model_json(None).raw == ""


def test_non_object_json_is_unparseable():
    assert not parse_model_json("[1, 2, 3]").parsed
    assert not parse_model_json("42").parsed
