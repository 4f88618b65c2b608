"""
Tests for the interactive team builder script.
"""

import importlib.util
from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest

from game_roster.models.team import Team

SCRIPT_PATH = Path(__file__).resolve().parents[1] / "scripts" / "build_team.py"


@pytest.fixture(scope="module")
def build_team():
    spec = importlib.util.spec_from_file_location("build_team", SCRIPT_PATH)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


def test_take_all_skips_prompt(build_team):
    pool = build_team.load_character_pool()

    with patch.object(build_team.questionary, "checkbox") as checkbox:
        selected = build_team.select_characters(pool, take_all=True)

    checkbox.assert_not_called()
    assert selected is pool


def test_selected_labels_map_to_characters(build_team):
    pool = build_team.load_character_pool()
    prompt = MagicMock()
    prompt.ask.return_value = ["Gandalf (Magician)", "Legolas (Bowman)"]

    with patch.object(build_team.questionary, "checkbox", return_value=prompt):
        selected = build_team.select_characters(pool)

    assert [c.name for c in selected] == ["Gandalf", "Legolas"]
    assert all(any(c is p for p in pool) for c in selected)


def test_cancelled_prompt_selects_nothing(build_team):
    prompt = MagicMock()
    prompt.ask.return_value = None

    with patch.object(build_team.questionary, "checkbox", return_value=prompt):
        assert build_team.select_characters(build_team.load_character_pool()) == []


def test_print_team(build_team, capsys):
    team = Team()
    team.add_all(*build_team.load_character_pool())

    build_team.print_team(team)

    out = capsys.readouterr().out
    assert "Team (6 members)" in out
    assert "Legolas" in out


def test_print_empty_team(build_team, capsys):
    build_team.print_team(Team())

    assert "Team is empty" in capsys.readouterr().out
