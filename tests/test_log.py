from frostfire.log import DebugLog, MessageLog


def test_message_log_is_bounded():
    log = MessageLog(capacity=3)
    for i in range(5):
        log.add(f"line {i}")
    assert log.tail(10) == ["line 2", "line 3", "line 4"]
    assert log.tail(1) == ["line 4"]
    assert log.tail(0) == []


def test_debug_log_appends_and_truncates(tmp_path):
    path = tmp_path / "debug.log"
    path.write_text("stale\n", encoding="utf-8")
    debug = DebugLog(path, truncate=True)
    debug("first")
    debug.write("second")
    assert path.read_text(encoding="utf-8") == "first\nsecond\n"


def test_debug_log_ignores_unwritable_path(tmp_path):
    debug = DebugLog(tmp_path / "missing" / "debug.log")
    debug("nothing happens")
    assert not (tmp_path / "missing").exists()
