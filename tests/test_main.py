"""Tests for the entry point wiring."""

import pytest

try:
    import main
except (ImportError, ValueError) as e:
    # fabric or the gtk-layer-shell typelib is not installed
    pytest.skip(f"fabric unavailable: {e}", allow_module_level=True)


class FakeLayer:
    def __init__(self, exit_status):
        self.exit_status = exit_status
        self.handlers = {}

    def connect(self, signal, handler):
        self.handlers[signal] = handler


class FakeApplication:
    def __init__(self, name, *windows):
        self.name = name
        self.windows = windows
        self.ran = False
        self.quit_called = False

    def run(self):
        self.ran = True

    def quit(self):
        self.quit_called = True


@pytest.fixture
def wired(monkeypatch):
    state = {}

    def make_layer():
        state["layer"] = FakeLayer(state.get("status", 0))
        return state["layer"]

    def make_app(name, *windows):
        state["app"] = FakeApplication(name, *windows)
        return state["app"]

    monkeypatch.setattr(main, "PowerLayer", make_layer)
    monkeypatch.setattr(main, "Application", make_app)
    monkeypatch.setattr(main, "start_styles_monitor", lambda *a, **kw: None)
    return state


class TestMain:
    def test_returns_layer_status(self, wired):
        wired["status"] = 1
        assert main.main(["--css", "", "--no-watch"]) == 1
        assert wired["app"].ran

    def test_clean_exit(self, wired):
        assert main.main(["--css"]) == 0
        assert wired["app"].name == "oxishut"
        assert wired["app"].windows == (wired["layer"],)

    def test_destroy_quits_app(self, wired):
        main.main(["--css", ""])
        wired["layer"].handlers["destroy"]()
        assert wired["app"].quit_called

    def test_config_error_exits_with_failure(self, wired, monkeypatch):
        from power_menu.errors import ConfigError

        def broken(_css):
            raise ConfigError("read-only home")

        monkeypatch.setattr(main, "resolve_style_path", broken)
        assert main.main([]) == 1
        assert "app" not in wired
