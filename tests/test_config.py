from pathlib import Path

from frostfire.config import GameConfig


def test_debug_log_defaults_to_working_directory():
    cfg = GameConfig()
    assert cfg.debug_log_path == Path("debug.log")
    assert not cfg.debug_log_path.is_absolute()
