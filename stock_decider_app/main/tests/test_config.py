import importlib
from pathlib import Path

import config


def test_log_dir_follows_working_directory(tmp_path, monkeypatch):
    monkeypatch.delenv("STOCK_DECIDER_LOG_DIR", raising=False)
    monkeypatch.chdir(tmp_path)
    try:
        importlib.reload(config)
        assert config.LOG_DIR.resolve() == (tmp_path / "logs").resolve()
        assert Path(config.__file__).resolve().parent not in config.LOG_DIR.resolve().parents
    finally:
        monkeypatch.undo()
        importlib.reload(config)


def test_log_dir_from_environment(tmp_path, monkeypatch):
    monkeypatch.setenv("STOCK_DECIDER_LOG_DIR", str(tmp_path / "custom"))
    try:
        importlib.reload(config)
        assert config.LOG_DIR == tmp_path / "custom"
        assert config.LOG_FILE == tmp_path / "custom" / "stock_decider.log"
        assert config.ensure_log_dir().is_dir()
    finally:
        monkeypatch.undo()
        importlib.reload(config)
