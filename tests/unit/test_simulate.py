"""Tests for the command-line walkthrough."""

from __future__ import annotations

import json
import logging

import pytest

from warband import simulate
from warband.config import get_settings
from warband.domain.army import Army
from warband.domain.enums import UnitKind
from warband.presets import build_army


@pytest.fixture(autouse=True)
def _fresh_settings(monkeypatch):
    for name in ("STARTING_GOLD", "VICTORY_REWARD", "CIVILIZATIONS_FILE", "LOG_LEVEL"):
        monkeypatch.delenv(f"WARBAND_{name}", raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


def test_apply_step_skips_rejected_operation(caplog):
    army = Army("Heavy", [(UnitKind.KNIGHT, 1)])
    with caplog.at_level(logging.WARNING, logger="warband.simulate"):
        assert simulate.apply_step(army, "transform", 0) is False
    assert "cannot transform" in caplog.text
    assert army.gold == 1000


def test_apply_step_unknown_operation():
    with pytest.raises(ValueError):
        simulate.apply_step(Army("Any"), "disband", 0)


def test_walkthrough_default_armies():
    chinese = build_army("Chinese")
    english = build_army("English")

    result = simulate.run_walkthrough(chinese, english)

    # Chinese: 10 + 250 + 40 = 300, +7 +10 training, pikeman -> archer +5 = 322
    # English: 50 + 100 + 200 = 350, +3 training, archer -> knight +10 = 363
    assert result == "English wins"
    assert chinese.gold == 1000 - 20 - 30 - 30
    assert english.gold == 1000 - 10 - 40 + 100
    assert len(chinese) == 27
    assert len(english) == 30


def test_main_prints_json(capsys):
    assert simulate.main(["--army", "Byzantine", "--opponent", "Chinese", "--json"]) == 0
    out = capsys.readouterr().out
    assert "Battle result:" in out
    payload = json.loads(out[out.index("[") :])
    assert [report["name"] for report in payload] == ["Byzantine", "Chinese"]
    assert len(payload[0]["history"]) == 1


def test_walkthrough_reports_each_phase():
    phases = []
    simulate.run_walkthrough(build_army("Chinese"), build_army("English"), on_phase=phases.append)
    assert phases == ["training", "transformation", "battle"]


def test_main_text_mode_prints_phases_and_history(capsys):
    assert simulate.main(["--army", "Chinese", "--opponent", "English"]) == 0
    out = capsys.readouterr().out
    for phase in ("raising", "training", "transformation", "battle"):
        assert f"After {phase}:" in out
    assert "Battle result: English wins" in out
    assert "Last history entry (Chinese):" in out
    assert "Last history entry (English):" in out
    chinese_line = next(
        line for line in out.splitlines() if line.startswith("Last history entry (Chinese)")
    )
    assert "vs English: English wins (322 vs 363) gold +0" in chinese_line
    assert "lost: knight(30), knight(20)" in chinese_line


@pytest.mark.parametrize(
    "argv",
    [
        ["--army", "Atlantean"],
        ["--opponent", "Martian"],
        ["--log-level", "chatty"],
    ],
)
def test_main_rejects_bad_arguments(argv, capsys):
    with pytest.raises(SystemExit) as excinfo:
        simulate.main(argv)
    assert excinfo.value.code == 2
    assert "error:" in capsys.readouterr().err


def test_main_accepts_lowercase_log_level(capsys):
    assert simulate.main(["--log-level", "warning", "--json"]) == 0


def test_main_rejects_unreadable_civilizations(tmp_path, capsys):
    path = tmp_path / "civs.json"
    path.write_text("not json")
    with pytest.raises(SystemExit) as excinfo:
        simulate.main(["--civilizations", str(path)])
    assert excinfo.value.code == 2
    assert "cannot load civilizations" in capsys.readouterr().err


def test_main_with_custom_civilizations(tmp_path, capsys):
    path = tmp_path / "civs.json"
    path.write_text(
        json.dumps(
            [
                {"name": "Franks", "composition": [{"kind": "knight", "count": 2}]},
                {"name": "Saxons", "composition": [{"kind": "pikeman", "count": 2}]},
            ]
        )
    )
    argv = ["--civilizations", str(path), "--army", "Franks", "--opponent", "Saxons"]
    assert simulate.main(argv) == 0
    assert "Battle result: Franks wins" in capsys.readouterr().out
