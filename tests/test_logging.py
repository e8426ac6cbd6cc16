# tests/test_logging.py
# -*- coding: utf-8 -*-

from __future__ import annotations

import logging

from carbon_calc.infra.logging import get_current_log_path, get_logger, init_logging, log_banner


def test_log_file_receives_records(tmp_path, monkeypatch):
    monkeypatch.delenv("CARBON_CALC_LOG_LEVEL", raising=False)
    log_file = tmp_path / "nested" / "run.log"

    init_logging(level="INFO", log_file=log_file)
    log = get_logger("carbon_calc.tests")
    log_banner(log, "route check", box=True)
    log.info("distance_km=%d", 430)
    for handler in logging.getLogger().handlers:
        handler.flush()

    assert get_current_log_path() == log_file.resolve()
    text = log_file.read_text(encoding="utf-8")
    assert "[INFO][carbon_calc.tests] distance_km=430" in text
    assert "route check" in text


def test_env_level_overrides_argument(monkeypatch):
    monkeypatch.setenv("CARBON_CALC_LOG_LEVEL", "ERROR")
    init_logging(level="DEBUG")
    assert logging.getLogger().level == logging.ERROR
    assert get_current_log_path() is None


def test_reinit_without_force_replaces_own_handlers(monkeypatch):
    monkeypatch.delenv("CARBON_CALC_LOG_LEVEL", raising=False)
    init_logging(level="INFO")
    init_logging(level="INFO", force=False)
    ours = [h for h in logging.getLogger().handlers if h.get_name() == "carbon_calc.stream"]
    assert len(ours) == 1


def test_unknown_level_falls_back_to_info(monkeypatch):
    monkeypatch.delenv("CARBON_CALC_LOG_LEVEL", raising=False)
    init_logging(level="chatty")
    assert logging.getLogger().level == logging.INFO
