from __future__ import annotations

import runpy


def test_main_module_runs_uvicorn(monkeypatch):
    calls = {}

    def fake_run(app, **kwargs) -> None:
        calls["app"] = app
        calls.update(kwargs)

    monkeypatch.setenv("GE_PORT", "9100")
    monkeypatch.setattr("uvicorn.run", fake_run)

    runpy.run_module("solarcast.main.__main__", run_name="__main__")

    assert calls["app"] == "solarcast.main.app:app"
    assert calls["port"] == 9100
    assert calls["log_config"] is None
