import logging

import pytest

from runcalc.config import Config


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Point the configuration at an empty home directory."""
    monkeypatch.setenv('HOME', str(tmp_path))
    Config.reset_instance()
    yield tmp_path
    Config.reset_instance()


@pytest.fixture(autouse=True)
def restore_root_logger():
    """Undo the handlers and level that setup_logging installs."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield
    for handler in root.handlers[:]:
        if handler not in handlers:
            root.removeHandler(handler)
            handler.close()
    for handler in handlers:
        if handler not in root.handlers:
            root.addHandler(handler)
    root.setLevel(level)
