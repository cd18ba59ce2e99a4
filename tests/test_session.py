from frostfire.log import DebugLog
from frostfire.session import Session
from frostfire.state.actors import MovementState, MoveDirection
from frostfire.systems.movement import MoveRequest, TransitionComplete

from tests.helpers import corridor_level


def test_session_spawns_player_at_start():
    session = Session(corridor_level())
    assert session.snapshot() == ((1, 1), MovementState.IDLE)
    assert session.log.tail(1) == ["Entering untitled."]


def test_submit_and_pump(tmp_path):
    debug = DebugLog(tmp_path / "debug.log")
    session = Session(corridor_level(), debug=debug)

    session.submit(MoveRequest(MoveDirection.RIGHT))
    session.submit(MoveRequest(MoveDirection.RIGHT))
    results = session.pump()

    assert [r.accepted for r in results] == [True, False]
    assert session.snapshot() == ((2, 1), MovementState.TRANSITIONING)
    assert session.is_transitioning

    session.submit(TransitionComplete())
    session.submit(MoveRequest(MoveDirection.RIGHT))
    session.pump()
    assert session.snapshot() == ((3, 1), MovementState.TRANSITIONING)

    text = (tmp_path / "debug.log").read_text(encoding="utf-8")
    assert "[session] move right -> (2, 1)" in text
    assert "dropped (in transition)" in text


def test_blocked_move_is_reported_in_message_log():
    session = Session(corridor_level())
    session.submit(MoveRequest(MoveDirection.LEFT))
    (res,) = session.pump()
    assert not res.accepted and res.reason == "blocked"
    assert session.log.tail(1) == ["The way is blocked."]
    assert session.snapshot() == ((1, 1), MovementState.IDLE)
