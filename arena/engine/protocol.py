"""Line protocol shell: parse the game's turn input, print hero commands.

Input, once at start::

    <base_x> <base_y>
    <heroes_per_player>

Then every turn::

    <health> <mana>                 # mine
    <health> <mana>                 # opponent
    <entity_count>
    <id> <type> <x> <y> <shield_life> <is_controlled> <health> <vx> <vy> <near_base> <threat_for>
    ...

Output: one command line per hero, in hero order.
"""

from __future__ import annotations

import logging
from typing import Iterator, TextIO

from arena.config import ArenaConfig
from arena.core.errors import ProtocolError
from arena.core.geometry import Point
from arena.core.models import EntityRecord, TurnInput
from arena.core.turn_state import TurnState
from arena.engine.brain import Brain

logger = logging.getLogger(__name__)

ENTITY_FIELDS = 11


def _ints(line: str, expected: int) -> list[int]:
    try:
        values = [int(v) for v in line.split()]
    except ValueError as exc:
        raise ProtocolError(f"Non-integer value in line {line!r}") from exc
    if len(values) != expected:
        raise ProtocolError(f"Expected {expected} values, got {len(values)} in line {line!r}")
    return values


def parse_base_line(line: str) -> Point:
    x, y = _ints(line, 2)
    return Point(x, y)


def parse_faction_line(line: str) -> tuple[int, int]:
    health, mana = _ints(line, 2)
    return health, mana


def parse_entity_line(line: str) -> EntityRecord:
    return EntityRecord(*_ints(line, ENTITY_FIELDS))


def _next_line(lines: Iterator[str]) -> str:
    line = next(lines, None)
    if line is None:
        raise ProtocolError("Unexpected end of input in the middle of a turn")
    return line


def read_turn(lines: Iterator[str]) -> TurnInput | None:
    """Read one full turn; None when the input ends cleanly between turns."""
    first = next(lines, None)
    if first is None or not first.strip():
        return None
    health, mana = parse_faction_line(first)
    enemy_health, enemy_mana = parse_faction_line(_next_line(lines))
    (count,) = _ints(_next_line(lines), 1)
    records = tuple(parse_entity_line(_next_line(lines)) for _ in range(count))
    return TurnInput(health, mana, enemy_health, enemy_mana, records)


class GameLoop:
    """Drives a TurnState from a text stream and writes commands to another."""

    def __init__(
        self,
        stdin: TextIO,
        stdout: TextIO,
        config: ArenaConfig | None = None,
        brain: Brain | None = None,
    ) -> None:
        self._stdin = stdin
        self._stdout = stdout
        self._config = config if config is not None else ArenaConfig()
        self._brain = brain if brain is not None else Brain()
        self.state: TurnState | None = None

    def run(self) -> int:
        """Play until the input ends. Returns the number of turns played."""
        lines = (line.rstrip("\n") for line in self._stdin)
        base = parse_base_line(_next_line(lines))
        (heroes,) = _ints(_next_line(lines), 1)
        self.state = TurnState(base, heroes, self._config)
        logger.info("Match start: base %s, enemy base %s, %d heroes", base, self.state.enemy.base, heroes)

        while (turn_input := read_turn(lines)) is not None:
            self.state.load_turn(turn_input)
            for command in self._brain.next_actions(self.state):
                self._stdout.write(command.render() + "\n")
            self._stdout.flush()

        logger.info("Input closed after %d turns", self.state.turn)
        return self.state.turn
