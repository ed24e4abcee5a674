"""Run configuration for the command line entry point."""

import argparse
from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class RunConfig:
    """Settings for one mission run.

    Attributes:
        mission_path: Mission file to execute.
        strict: Abort on the first plateau error instead of skipping it.
        render: Print the final plateau grid after the reports.
        log_level: Name of the ``mars_rover`` logger level.
        log_file: Optional file receiving a copy of the log.
    """

    mission_path: str
    strict: bool = True
    render: bool = False
    log_level: str = "WARNING"
    log_file: Optional[str] = None

    @classmethod
    def from_args(cls, args: argparse.Namespace) -> "RunConfig":
        return cls(
            mission_path=args.mission,
            strict=not args.lenient,
            render=args.render,
            log_level=args.log_level,
            log_file=args.log_file,
        )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="mars_rover",
        description="Run a rover mission file and print final rover positions.",
    )
    parser.add_argument("mission", help="Path to the mission file.")
    parser.add_argument(
        "--lenient",
        action="store_true",
        help="Log and skip rejected commands instead of aborting.",
    )
    parser.add_argument(
        "--render",
        action="store_true",
        help="Print the plateau grid after the positions.",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        type=str.upper,
        help="Logging verbosity (default: WARNING).",
    )
    parser.add_argument("--log-file", default=None, help="Also write logs to this file.")
    return parser
