# tests/test_log.py
import json
import logging

import pytest

from circbuf.core import log
from circbuf.core.buffer import RingBuffer


def _pkg() -> logging.Logger:
    return logging.getLogger("circbuf")


@pytest.fixture()
def restore_logging():
    yield
    log.setup(force=True)


def test_setup_respects_explicit_level(restore_logging):
    log.setup("WARNING", json_mode=False, force=True)
    assert _pkg().level == logging.WARNING


def test_setup_unknown_level_falls_back_to_info(restore_logging):
    log.setup("chatty", json_mode=False, force=True)
    assert _pkg().level == logging.INFO


def test_setup_is_idempotent_without_force(restore_logging):
    log.setup("ERROR", json_mode=False, force=True)
    log.setup("DEBUG")
    assert _pkg().level == logging.ERROR
    assert len(_pkg().handlers) == 1


def test_force_setup_replaces_only_own_handler(restore_logging):
    log.setup(force=True)
    log.setup(force=True)
    assert len(_pkg().handlers) == 1


def test_setup_keeps_host_handlers(restore_logging):
    root = logging.getLogger()
    host = logging.StreamHandler()
    extra = logging.NullHandler()
    root.addHandler(host)
    _pkg().addHandler(extra)
    try:
        log.setup(force=True)
        assert host in root.handlers
        assert extra in _pkg().handlers
    finally:
        root.removeHandler(host)
        _pkg().removeHandler(extra)


def test_setup_leaves_root_level_alone(restore_logging):
    root = logging.getLogger()
    before = root.level
    log.setup("DEBUG", force=True)
    assert root.level == before


def test_get_namespaces_under_package():
    assert log.get("circbuf").name == "circbuf"
    assert log.get("circbuf.core.config").name == "circbuf.core.config"
    assert log.get("win").name == "circbuf.win"


def test_set_level(restore_logging):
    log.set_level("debug")
    assert _pkg().level == logging.DEBUG
    log.set_level("nope")
    assert _pkg().level == logging.INFO


def test_json_mode_emits_json_lines(restore_logging, capsys):
    log.setup("DEBUG", json_mode=True, force=True)
    b = RingBuffer(2, name="jsontest")
    b.put(1).put(2)
    b.clear()

    lines = [json.loads(ln) for ln in capsys.readouterr().out.splitlines() if ln.strip()]
    ours = [r for r in lines if r["name"] == "circbuf.jsontest"]
    msgs = [r["msg"] for r in ours]
    assert any("ring created" in m for m in msgs)
    assert any("ring wrapped" in m for m in msgs)
    assert any("ring cleared" in m for m in msgs)
    assert all(r["lvl"] == "DEBUG" for r in ours)


def test_wrap_logged_once(caplog):
    b = RingBuffer(2, name="wraponce")
    with caplog.at_level(logging.DEBUG, logger="circbuf.wraponce"):
        for v in range(7):
            b.put(v)
    wraps = [r for r in caplog.records if "ring wrapped" in r.getMessage()]
    assert len(wraps) == 1
