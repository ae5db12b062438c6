import logging

import log_setup


def test_configure_logging_is_idempotent(tmp_path, monkeypatch):
    log_file = tmp_path / "stock_decider.log"
    monkeypatch.setattr(log_setup, "LOG_FILE", log_file)
    monkeypatch.setattr(log_setup, "ensure_log_dir", lambda: tmp_path)

    logger = logging.getLogger(log_setup.LOGGER_NAME)
    old_handlers = list(logger.handlers)
    logger.handlers.clear()
    try:
        first = log_setup.configure_logging()
        second = log_setup.configure_logging()
        assert first is second
        assert len([h for h in first.handlers if isinstance(h, logging.FileHandler)]) == 1
        assert first.propagate is False

        first.info("Decision for %s: %s", "LOLC", "buy")
        for h in first.handlers:
            h.flush()
        text = log_file.read_text(encoding="utf-8")
        assert "| INFO | stock_decider | Decision for LOLC: buy" in text
    finally:
        for h in logger.handlers:
            h.close()
        logger.handlers[:] = old_handlers


def test_unknown_level_name_falls_back_to_info(tmp_path, monkeypatch):
    monkeypatch.setattr(log_setup, "LOG_FILE", tmp_path / "stock_decider.log")
    monkeypatch.setattr(log_setup, "ensure_log_dir", lambda: tmp_path)

    logger = logging.getLogger(log_setup.LOGGER_NAME)
    old_handlers = list(logger.handlers)
    old_level = logger.level
    logger.handlers.clear()
    try:
        for name in ("ROOT", "BASIC_FORMAT", "NOPE"):
            monkeypatch.setattr(log_setup, "LOG_LEVEL", name)
            assert log_setup.configure_logging().level == logging.INFO

        monkeypatch.setattr(log_setup, "LOG_LEVEL", "WARNING")
        assert log_setup.configure_logging().level == logging.WARNING
    finally:
        for h in logger.handlers:
            h.close()
        logger.handlers[:] = old_handlers
        logger.setLevel(old_level)
