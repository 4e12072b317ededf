from coffee_bot import main


def test_run_serves_app_with_configured_address(monkeypatch):
    calls = []
    monkeypatch.setattr(main.uvicorn, "run", lambda app, **kwargs: calls.append((app, kwargs)))
    monkeypatch.setattr(main.settings, "host", "127.0.0.1")
    monkeypatch.setattr(main.settings, "port", 9001)

    main.run()

    assert calls == [("coffee_bot.main:app", {"host": "127.0.0.1", "port": 9001, "log_config": None})]
