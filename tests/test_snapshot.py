"""
Tests for YAML snapshot persistence and config loading
"""
import random

import pytest
import yaml

from scorekeeper.config import load_config
from scorekeeper.models import AppConfig, SettingsUpdate, TeamCreate, TeamUpdate
from scorekeeper.services.snapshot import load_snapshot
from scorekeeper.services.team_store import INCREMENT, TeamStore


def test_missing_snapshot_returns_none(tmp_path):
    assert load_snapshot(str(tmp_path / "absent.yaml")) is None


def test_store_survives_restart(tmp_path):
    """A second store built on the same file sees the first one's changes"""
    config = AppConfig(state_file=str(tmp_path / "state" / "board.yaml"))
    first = TeamStore(config, rng=random.Random(1))
    first.update_settings(SettingsUpdate(team_count=3, score_increment=10))
    first.update_team(1, TeamUpdate(name="Home", score=20))
    first.delete_team(3)

    second = TeamStore(config, rng=random.Random(2))
    teams = second.get_teams()
    assert [t.id for t in teams] == [1, 2]
    assert (teams[0].name, teams[0].score) == ("Home", 20)
    assert second.get_settings().team_count == 3
    assert second.get_settings().score_increment == 10
    # id 3 was used before the restart and must not come back
    assert second.create_team(TeamCreate()).id == 4


def test_corrupt_snapshot_falls_back_to_defaults(tmp_path):
    path = tmp_path / "board.yaml"
    path.write_text("teams: [{id: one}]\n", encoding="utf-8")

    store = TeamStore(AppConfig(state_file=str(path)), rng=random.Random(0))
    assert [t.id for t in store.get_teams()] == [1, 2]


def test_snapshot_next_id_never_below_max_id(tmp_path):
    path = tmp_path / "board.yaml"
    path.write_text(yaml.safe_dump({
        "next_id": 1,
        "settings": {"id": 1, "team_count": 1, "score_increment": 1},
        "teams": [{"id": 7, "name": "Solo", "score": 3, "color": "#4F46E5"}],
    }), encoding="utf-8")

    teams, settings, next_id = load_snapshot(str(path))
    assert [t.name for t in teams] == ["Solo"]
    assert settings.score_increment == 1
    assert next_id == 8


def test_load_config(tmp_path):
    path = tmp_path / "scorekeeper.yaml"
    path.write_text("port: 9000\ndefault_score_increment: 10\n", encoding="utf-8")
    config = load_config(str(path))
    assert config.port == 9000
    assert config.default_score_increment == 10
    assert config.max_team_count == 8


def test_load_config_missing(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_config(str(tmp_path / "nope.yaml"))


def test_config_rejects_empty_palette():
    with pytest.raises(ValueError):
        AppConfig(team_colors=[])


def test_missing_settings_use_config_defaults(tmp_path):
    """A snapshot without settings falls back to the configured defaults"""
    path = tmp_path / "board.yaml"
    path.write_text(yaml.safe_dump({
        "teams": [{"id": 1, "name": "Solo", "score": 0, "color": "#4F46E5"}],
    }), encoding="utf-8")

    config = AppConfig(state_file=str(path), default_team_count=3, default_score_increment=5)
    store = TeamStore(config, rng=random.Random(0))
    assert store.get_settings().score_increment == 5
    assert store.get_settings().team_count == 3
    assert [t.name for t in store.get_teams()] == ["Solo"]


def test_unwritable_snapshot_keeps_store_working(tmp_path):
    """Write failures are logged; the in-memory change still goes through"""
    path = tmp_path / "board.yaml"
    store = TeamStore(AppConfig(state_file=str(path)), rng=random.Random(0))
    path.unlink()
    path.mkdir()

    team = store.adjust_score(1, INCREMENT)
    assert team.score == 100
    assert store.get_team(1).score == 100


def test_unreadable_snapshot_path_uses_defaults(tmp_path):
    path = tmp_path / "board.yaml"
    path.mkdir()

    store = TeamStore(AppConfig(state_file=str(path)), rng=random.Random(0))
    assert [t.id for t in store.get_teams()] == [1, 2]
