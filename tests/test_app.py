import importlib
import logging
from pathlib import Path

import pytest

CONFIG_ROOT = Path(__file__).resolve().parents[1] / "config"


@pytest.fixture
def app_module(monkeypatch):
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    monkeypatch.setenv("EMP_GRID_CONFIG_ROOT", str(CONFIG_ROOT))
    monkeypatch.setenv("EMP_GRID_LOG_FORMAT", "plain")
    module = importlib.import_module("app")
    yield module
    root.handlers[:] = handlers
    root.setLevel(level)


def test_module_exposes_wsgi_server(app_module):
    assert app_module.server is app_module.app.server


def test_pick_port_prefers_requested(app_module, monkeypatch):
    monkeypatch.setattr(app_module, "port_is_free", lambda host, port: True)

    assert app_module.pick_port("127.0.0.1", 8051) == 8051


def test_pick_port_skips_taken_ports(app_module, monkeypatch):
    taken = {8051, 8052}
    monkeypatch.setattr(app_module, "port_is_free", lambda host, port: port not in taken)

    assert app_module.pick_port("127.0.0.1", 8051) == 8053


def test_pick_port_gives_up_after_span(app_module, monkeypatch):
    monkeypatch.setattr(app_module, "port_is_free", lambda host, port: False)

    assert app_module.pick_port("127.0.0.1", 9000, span=3) == 9000


def test_main_runs_on_chosen_port(app_module, monkeypatch):
    calls = {}
    monkeypatch.setenv("PORT", "8100")
    monkeypatch.setenv("HOST", "127.0.0.1")
    monkeypatch.delenv("DEBUG", raising=False)
    monkeypatch.setattr(app_module, "port_is_free", lambda host, port: port != 8100)
    monkeypatch.setattr(app_module.app, "run", lambda **kw: calls.update(kw))

    app_module.main()

    assert calls == {"host": "127.0.0.1", "port": 8101, "debug": False}
