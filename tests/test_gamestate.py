import pytest

from peril.gamedata import ArmyMove, Player, RecognitionOfWar, Unit, UnitRank
from peril.gamestate import GameError, GameState, MoveOutcome, WarOutcome
from peril.routing import PlayingState


@pytest.fixture
def state():
    return GameState("alice")


def test_new_state_is_empty_and_running(state):
    assert state.is_paused() is False
    assert state.player_snapshot() == Player(username="alice", units={})


def test_pause_and_resume(state):
    state.pause_game()
    assert state.is_paused() is True
    state.resume_game()
    assert state.is_paused() is False


def test_handle_pause_follows_playing_state(state, capsys):
    state.handle_pause(PlayingState(is_paused=True))
    assert state.is_paused() is True
    assert "==== Pause Detected ====" in capsys.readouterr().out
    state.handle_pause(PlayingState(is_paused=False))
    assert state.is_paused() is False
    assert "==== Resume Detected ====" in capsys.readouterr().out


def test_spawn_assigns_sequential_ids(state):
    first = state.command_spawn(["spawn", "europe", "infantry"])
    second = state.command_spawn(["spawn", "asia", "cavalry"])
    assert first == Unit(id=1, rank=UnitRank.INFANTRY, location="europe")
    assert second.id == first.id + 1
    assert state.get_unit(second.id) == second


def test_spawn_prints_message(state, capsys):
    state.command_spawn(["spawn", "europe", "infantry"])
    assert "Spawned a(n) infantry in europe with id 1" in capsys.readouterr().out


@pytest.mark.parametrize(
    "words, message",
    [
        (["spawn", "europe"], "usage: spawn <location> <rank>"),
        (["spawn", "mars", "infantry"], "error: mars is not a valid location"),
        (["spawn", "europe", "dragon"], "error: dragon is not a valid unit"),
    ],
)
def test_spawn_errors(state, words, message):
    with pytest.raises(GameError) as info:
        state.command_spawn(words)
    assert str(info.value) == message
    assert state.units_snapshot() == []


def test_snapshot_is_independent(state):
    state.command_spawn(["spawn", "europe", "infantry"])
    snap = state.player_snapshot()
    snap.units.clear()
    assert len(state.units_snapshot()) == 1


def test_get_unit_missing_returns_none(state):
    assert state.get_unit(42) is None


def test_remove_units_in_location(state):
    state.command_spawn(["spawn", "europe", "infantry"])
    state.command_spawn(["spawn", "asia", "cavalry"])
    state.command_spawn(["spawn", "europe", "artillery"])
    state.remove_units_in_location("europe")
    assert [u.location for u in state.units_snapshot()] == ["asia"]


def test_command_move_relocates_units(state):
    state.command_spawn(["spawn", "europe", "infantry"])
    state.command_spawn(["spawn", "europe", "cavalry"])
    move = state.command_move(["move", "asia", "1", "2"])
    assert move.to_location == "asia"
    assert [u.id for u in move.units] == [1, 2]
    assert all(u.location == "asia" for u in state.units_snapshot())
    assert move.player == state.player_snapshot()


def test_command_move_when_paused(state):
    state.command_spawn(["spawn", "europe", "infantry"])
    state.pause_game()
    with pytest.raises(GameError, match="the game is paused"):
        state.command_move(["move", "asia", "1"])
    assert state.get_unit(1).location == "europe"


@pytest.mark.parametrize(
    "words, message",
    [
        (["move", "asia"], "usage: move <location> <unitID> <unitID> <unitID> etc"),
        (["move", "mars", "1"], "error: mars is not a valid location"),
        (["move", "asia", "x"], "error: x is not a valid unit ID"),
        (["move", "asia", "1_0"], "error: 1_0 is not a valid unit ID"),
        (["move", "asia", "9"], "error: unit with ID 9 not found"),
    ],
)
def test_command_move_errors(state, words, message):
    state.command_spawn(["spawn", "europe", "infantry"])
    with pytest.raises(GameError) as info:
        state.command_move(words)
    assert str(info.value) == message


def test_handle_move_same_player(state):
    state.command_spawn(["spawn", "europe", "infantry"])
    move = state.command_move(["move", "asia", "1"])
    assert state.handle_move(move) is MoveOutcome.SAME_PLAYER


def test_handle_move_war_and_safe(state, capsys):
    state.command_spawn(["spawn", "asia", "infantry"])
    enemy = Player("bob", {1: Unit(1, UnitRank.CAVALRY, "asia")})
    move = ArmyMove(player=enemy, units=list(enemy.units.values()), to_location="asia")
    assert state.handle_move(move) is MoveOutcome.MAKE_WAR
    assert "You are at war with bob!" in capsys.readouterr().out

    far = Player("bob", {1: Unit(1, UnitRank.CAVALRY, "africa")})
    move = ArmyMove(player=far, units=list(far.units.values()), to_location="africa")
    assert state.handle_move(move) is MoveOutcome.SAFE


def _war(state, defender_units):
    return RecognitionOfWar(
        attacker=state.player_snapshot(),
        defender=Player("bob", defender_units),
    )


def test_war_not_involved(state):
    other = RecognitionOfWar(attacker=Player("carol"), defender=Player("bob"))
    assert state.handle_war(other) == (WarOutcome.NOT_INVOLVED, "", "")
    published = RecognitionOfWar(attacker=Player("bob"), defender=Player("alice"))
    assert state.handle_war(published) == (WarOutcome.NOT_INVOLVED, "", "")


def test_war_no_units(state):
    state.command_spawn(["spawn", "europe", "infantry"])
    war = _war(state, {1: Unit(1, UnitRank.INFANTRY, "asia")})
    assert state.handle_war(war) == (WarOutcome.NO_UNITS, "", "")


def test_war_attacker_wins(state):
    state.command_spawn(["spawn", "asia", "artillery"])
    war = _war(state, {1: Unit(1, UnitRank.INFANTRY, "asia")})
    assert state.handle_war(war) == (WarOutcome.YOU_WON, "alice", "bob")
    assert len(state.units_snapshot()) == 1


def test_war_defender_wins_removes_units(state):
    state.command_spawn(["spawn", "asia", "infantry"])
    state.command_spawn(["spawn", "europe", "infantry"])
    war = _war(state, {1: Unit(1, UnitRank.CAVALRY, "asia")})
    assert state.handle_war(war) == (WarOutcome.OPPONENT_WON, "bob", "alice")
    assert [u.location for u in state.units_snapshot()] == ["europe"]


def test_war_draw_removes_units(state):
    state.command_spawn(["spawn", "asia", "cavalry"])
    war = _war(state, {1: Unit(1, UnitRank.CAVALRY, "asia")})
    assert state.handle_war(war) == (WarOutcome.DRAW, "alice", "bob")
    assert state.units_snapshot() == []


def test_status_paused(state, capsys):
    state.pause_game()
    state.command_status()
    assert capsys.readouterr().out == "The game is paused.\n"


def test_status_lists_units(state, capsys):
    state.command_spawn(["spawn", "europe", "infantry"])
    capsys.readouterr()
    state.command_status()
    out = capsys.readouterr().out
    assert "The game is not paused." in out
    assert "You are alice, and you have 1 units." in out
    assert "* 1: europe, infantry" in out