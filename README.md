# peril

Game logic for Peril, a small multiplayer war game. Each player spawns
units (infantry, cavalry, artillery) on the continents, moves them around,
and goes to war with anyone whose units end up on the same continent.

The valid locations are `americas`, `europe`, `africa`, `asia`,
`australia` and `antarctica`.

## Installing

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## The client command

```
peril-client
```

prints `Starting Peril client...` and exits with status 0. It takes no
options besides `--help`.

## Using the library

```python
from peril.gamestate import GameState, GameError

state = GameState("alice")
state.command_spawn(["spawn", "europe", "infantry"])   # returns the new Unit, id 1
state.command_spawn(["spawn", "asia", "artillery"])    # id 2

move = state.command_move(["move", "asia", "1"])       # returns an ArmyMove
state.command_status()

try:
    state.command_spawn(["spawn", "mars", "infantry"])
except GameError as err:
    print(err)  # error: mars is not a valid location
```

Commands take the words of a typed command line, the command name first.
Invalid input raises `peril.gamestate.GameError` with a message for the
player. `command_move` also raises it while the game is paused. New units
get the id one more than the number of units the player holds.

Events from other players are handled on the receiving side:

- `GameState.handle_move(move)` returns a `MoveOutcome`: `SAME_PLAYER`,
  `SAFE`, or `MAKE_WAR` when the mover has units in a location where the
  local player also has units.
- `GameState.handle_pause(state)` pauses or resumes the game from a
  `peril.routing.PlayingState`.
- `GameState.handle_war(recognition)` takes a `RecognitionOfWar` and returns
  a tuple of a `WarOutcome` (`NOT_INVOLVED`, `NO_UNITS`, `YOU_WON`,
  `OPPONENT_WON`, `DRAW`) and the winner's and loser's usernames (empty
  strings when no war is fought). Only the attacker's own state fights the
  war; a loss or a draw removes the local player's units in the contested
  location.

`GameState` also offers `pause_game()`, `resume_game()`, `is_paused()`,
`add_unit()`, `update_unit()`, `remove_units_in_location()`,
`get_unit()` (a copy, or `None`), `units_snapshot()` and
`player_snapshot()`. Its methods are guarded by a lock, so it can be shared
between threads.

Power levels decide a war: artillery counts 10, cavalry 5, infantry 1
(`peril.gamedata.units_to_power_level`). `peril.gamedata` also holds the
`Unit`, `Player`, `ArmyMove`, `RecognitionOfWar` and `UnitRank` types and
`all_ranks()`, `all_locations()` and `overlapping_location(p1, p2)`.

### Routing names

`peril.routing` holds the exchange names (`EXCHANGE_PERIL_DIRECT`,
`EXCHANGE_PERIL_TOPIC`), the routing keys and prefixes (`ARMY_MOVES_PREFIX`,
`WAR_RECOGNITIONS_PREFIX`, `PAUSE_KEY`, `GAME_LOG_SLUG`) and the
`PlayingState` and `GameLog` message types.

### Game logs

`peril.logs.write_log(gamelog, path="game.log", delay=1.0)` waits `delay`
seconds, then appends a `peril.routing.GameLog` to the file as a line of
the form

```
2024-01-02T03:04:05Z alice: All warfare is based on deception.
```

`peril.logs.format_log_line(gamelog)` gives that line without writing it.
Times without a time zone are taken as local time; UTC is written as `Z`.
Failures to open or write the file raise `OSError`.

### Console helpers

`peril.gamelogic` holds the prompts and help text: `client_welcome()`
(returns the username, raises `ValueError` if none is entered),
`get_input()` (the words of one line from stdin, empty at end of input),
`print_client_help()`, `print_server_help()`, `print_quit()` and
`get_malicious_log()`. The printing helpers return the text they wrote.

## What this package does not do

It does not connect to a message broker, publish or subscribe to anything,
or run a server. The `peril-client` command only announces itself; there is
no interactive game loop. The pieces here are the game rules, state and
message types that such a client and server would be built on.