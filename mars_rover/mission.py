"""Mission scripts: parsing and execution.

A mission is a small line-oriented text file driving one plateau::

    # comments run to the end of the line
    plateau 0 0 5 5
    rover spirit 1 2 N
    rover opportunity 3 3 E
    move spirit 2
    report

``plateau X1 Y1 X2 Y2`` must come first and appear once. ``rover NAME X Y DIR``
registers a rover, ``move NAME [COUNT]`` issues COUNT single steps (default
1) and ``report [NAME]`` records the position of one or every rover.
Keywords are case-insensitive; names are not.

Parsing (:func:`parse_mission`) only checks syntax. Plateau rules are
enforced when the mission runs (:func:`run_mission`).
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Sequence, Tuple, Union

from mars_rover.components import Point, Rover
from mars_rover.errors import PlateauError
from mars_rover.plateau import Plateau
from mars_rover.types import Direction, RoverName


logger = logging.getLogger(__name__)


class MissionParseError(ValueError):
    """Malformed mission line."""

    def __init__(self, line: int, message: str) -> None:
        super().__init__(f"line {line}: {message}")
        self.line = line


@dataclass(frozen=True)
class PlaceRover:
    line: int
    name: RoverName
    position: Point
    direction: Direction


@dataclass(frozen=True)
class MoveRover:
    line: int
    name: RoverName
    count: int = 1


@dataclass(frozen=True)
class Report:
    line: int
    name: Optional[RoverName] = None


Command = Union[PlaceRover, MoveRover, Report]


@dataclass(frozen=True)
class Mission:
    """Parsed mission: plateau corners plus commands in file order."""

    corner_a: Point
    corner_b: Point
    commands: Tuple[Command, ...] = ()


@dataclass(frozen=True)
class ReportEntry:
    line: int
    rover: Rover


@dataclass
class MissionResult:
    """Outcome of :func:`run_mission`.

    Attributes:
        plateau: The plateau in its final state.
        reports: Entries recorded by ``report`` commands, in order.
        errors: ``(line, error)`` pairs skipped in lenient mode.
    """

    plateau: Plateau
    reports: List[ReportEntry] = field(default_factory=list)
    errors: List[Tuple[int, PlateauError]] = field(default_factory=list)


def _parse_int(token: str, line: int, what: str) -> int:
    try:
        return int(token)
    except ValueError:
        raise MissionParseError(line, f"{what} must be an integer, got {token!r}") from None


def _expect_arity(
    tokens: Sequence[str], line: int, low: int, high: Optional[int] = None
) -> None:
    high = low if high is None else high
    args = len(tokens) - 1
    if not low <= args <= high:
        expected = str(low) if low == high else f"{low} to {high}"
        raise MissionParseError(
            line, f"{tokens[0]!r} takes {expected} argument(s), got {args}"
        )


def parse_mission(text: str) -> Mission:
    """Parse mission text.

    Raises:
        MissionParseError: On the first malformed line, or if the
            ``plateau`` command is missing, repeated or not first.
    """
    corners: Optional[Tuple[Point, Point]] = None
    commands: List[Command] = []

    for line_no, raw in enumerate(text.splitlines(), start=1):
        content = raw.split("#", 1)[0].strip()
        if not content:
            continue
        tokens = content.split()
        keyword = tokens[0].lower()

        if keyword == "plateau":
            if corners is not None:
                raise MissionParseError(line_no, "plateau declared more than once")
            _expect_arity(tokens, line_no, 4)
            x1, y1, x2, y2 = (_parse_int(t, line_no, "coordinate") for t in tokens[1:])
            corners = (Point(x1, y1), Point(x2, y2))
            continue

        if corners is None:
            raise MissionParseError(line_no, f"{tokens[0]!r} before plateau declaration")

        if keyword == "rover":
            _expect_arity(tokens, line_no, 4)
            x = _parse_int(tokens[2], line_no, "coordinate")
            y = _parse_int(tokens[3], line_no, "coordinate")
            try:
                direction = Direction.parse(tokens[4])
            except ValueError as e:
                raise MissionParseError(line_no, str(e)) from None
            commands.append(PlaceRover(line_no, tokens[1], Point(x, y), direction))
        elif keyword == "move":
            _expect_arity(tokens, line_no, 1, 2)
            count = _parse_int(tokens[2], line_no, "count") if len(tokens) == 3 else 1
            if count < 1:
                raise MissionParseError(line_no, f"count must be positive, got {count}")
            commands.append(MoveRover(line_no, tokens[1], count))
        elif keyword == "report":
            _expect_arity(tokens, line_no, 0, 1)
            commands.append(Report(line_no, tokens[1] if len(tokens) == 2 else None))
        else:
            raise MissionParseError(line_no, f"unknown command {tokens[0]!r}")

    if corners is None:
        raise MissionParseError(0, "missing plateau declaration")

    return Mission(corner_a=corners[0], corner_b=corners[1], commands=tuple(commands))


def load_mission(path: Union[str, Path]) -> Mission:
    """Read and parse a UTF-8 mission file.

    Raises:
        OSError: The file cannot be read.
        MissionParseError: The file is not valid UTF-8 or is malformed.
    """
    try:
        text = Path(path).read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        raise MissionParseError(0, f"not valid UTF-8 ({e.reason} at byte {e.start})") from None
    return parse_mission(text)


def _execute(plateau: Plateau, command: Command, result: MissionResult) -> None:
    if isinstance(command, PlaceRover):
        plateau.add_rover(command.name, command.position, command.direction)
    elif isinstance(command, MoveRover):
        for _ in range(command.count):
            plateau.move_rover(command.name)
    elif isinstance(command, Report):
        rovers = (
            plateau.rovers() if command.name is None else [plateau.rover(command.name)]
        )
        for rover in rovers:
            result.reports.append(ReportEntry(command.line, rover))
    else:
        raise TypeError(f"Unsupported mission command: {command!r}")


def run_mission(mission: Mission, strict: bool = True) -> MissionResult:
    """Execute ``mission`` on a fresh plateau.

    Args:
        mission: Parsed mission.
        strict: If True the first :class:`PlateauError` propagates. Otherwise
            the failing command is logged, recorded in ``errors`` and skipped.

    Returns:
        MissionResult: Final plateau, report entries and skipped errors.
    """
    plateau = Plateau(mission.corner_a, mission.corner_b)
    result = MissionResult(plateau=plateau)
    logger.info(
        "Mission plateau %s to %s, %d command(s)",
        plateau.southwest,
        plateau.northeast,
        len(mission.commands),
    )

    for command in mission.commands:
        try:
            _execute(plateau, command, result)
        except PlateauError as e:
            if strict:
                raise
            logger.warning("Skipping line %d: %s", command.line, e)
            result.errors.append((command.line, e))

    logger.debug("Mission finished: %s", dict(plateau.snapshot().description))
    return result
