"""Command line entry point: ``python -m mars_rover MISSION``."""

import logging
import sys
from typing import List, Optional

from mars_rover.config import RunConfig, build_parser
from mars_rover.errors import PlateauError
from mars_rover.logging_config import setup_logging
from mars_rover.mission import MissionParseError, Report, load_mission, run_mission
from mars_rover.utils.render import format_rover, render_plateau


logger = logging.getLogger(__name__)


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    config = RunConfig.from_args(args)
    setup_logging(config.log_level, config.log_file)

    try:
        mission = load_mission(config.mission_path)
        result = run_mission(mission, strict=config.strict)
    except (OSError, MissionParseError, PlateauError) as e:
        logger.debug("Mission aborted", exc_info=True)
        print(f"error: {e}", file=sys.stderr)
        return 1

    if any(isinstance(command, Report) for command in mission.commands):
        rovers = [entry.rover for entry in result.reports]
    else:
        rovers = result.plateau.rovers()

    grid = None
    if config.render:
        try:
            grid = render_plateau(result.plateau)
        except ValueError as e:
            print(f"error: {e}", file=sys.stderr)
            return 1

    for rover in rovers:
        print(format_rover(rover))
    if grid is not None:
        print(grid)
    return 0


if __name__ == "__main__":
    sys.exit(main())
