from pathlib import Path
from typing import Any

import pytest

from fyodor.config import load_config


def test_env_seed(monkeypatch: Any) -> None:
    monkeypatch.setenv("FYODOR_SEED", "1234")
    cfg = load_config()
    assert cfg.seed.value == 1234


def test_env_seed_hex() -> None:
    cfg = load_config(env={"FYODOR_SEED": "0xff"})
    assert cfg.seed.value == 255


def test_blank_env_seed_ignored() -> None:
    assert load_config(env={"FYODOR_SEED": "  "}).seed.value is None


def test_custom_env_override(monkeypatch: Any, tmp_path: Path) -> None:
    cfg_file = tmp_path / "cfg.yml"
    cfg_file.write_text('seed:\n  env: "CUSTOM_SEED"\n')
    monkeypatch.setenv("CUSTOM_SEED", "99")
    cfg = load_config(cfg_file)
    assert cfg.seed.env == "CUSTOM_SEED"
    assert cfg.seed.value == 99


def test_yaml_seed_overridden_by_env(tmp_path: Path) -> None:
    cfg_file = tmp_path / "cfg.yml"
    cfg_file.write_text("seed:\n  value: 7\n")
    assert load_config(cfg_file, env={}).seed.value == 7
    assert load_config(cfg_file, env={"FYODOR_SEED": "8"}).seed.value == 8


def test_unparsable_env_seed(monkeypatch: Any) -> None:
    monkeypatch.setenv("FYODOR_SEED", "not-a-seed")
    with pytest.raises(ValueError):
        load_config()
