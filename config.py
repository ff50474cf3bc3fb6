# -*- coding: utf-8 -*-
"""Runtime configuration for the countdown timer."""

import argparse
import logging
import os
from dataclasses import dataclass
from typing import Mapping, Optional, Sequence

from domain.models import DevLink
from domain.themes import theme_ids

DEFAULT_DURATION_SEC = 60
ADJUST_STEP_SEC = 5 * 60
DEFAULT_DB_PATH = "countdown.db"

DEV_LINKS = (
    DevLink("GitHub", "https://github.com/muhammadsherazsandila"),
    DevLink("Portfolio", "https://sherazportfolio.vercel.app"),
    DevLink("Agency", "https://sandiladigix.com"),
    DevLink("LinkedIn", "https://www.linkedin.com/in/muhammad-sheraz-800948347"),
)

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


class ConfigError(ValueError):
    pass


@dataclass(frozen=True)
class AppConfig:
    initial_duration_sec: int = DEFAULT_DURATION_SEC
    adjust_step_sec: int = ADJUST_STEP_SEC
    theme: Optional[str] = None  # None: use the remembered theme
    db_path: str = DEFAULT_DB_PATH
    tick_interval_ms: int = 1000
    log_level: str = "INFO"

    @property
    def log_level_value(self) -> int:
        return getattr(logging, self.log_level)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="countdown",
        description="Visual countdown timer with themes and a fullscreen mode.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  countdown --minutes 25\n"
            "  countdown --minutes 1 --seconds 30 --theme ocean\n"
        ),
    )
    parser.add_argument(
        "--minutes", type=int, default=None, help="Initial duration in minutes"
    )
    parser.add_argument(
        "--seconds", type=int, default=None, help="Extra seconds on top of --minutes"
    )
    parser.add_argument(
        "--theme",
        choices=theme_ids(),
        default=None,
        help="Start with this theme instead of the remembered one",
    )
    parser.add_argument(
        "--db",
        default=None,
        help=f"Preferences database (default: $COUNTDOWN_DB or {DEFAULT_DB_PATH})",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        type=str.upper,
        choices=LOG_LEVELS,
        help="Logging level (default: $COUNTDOWN_LOG_LEVEL or INFO)",
    )
    return parser


def config_from_args(
    args: argparse.Namespace, environ: Optional[Mapping[str, str]] = None
) -> AppConfig:
    env = os.environ if environ is None else environ

    if args.minutes is None and args.seconds is None:
        duration = DEFAULT_DURATION_SEC
    else:
        minutes = args.minutes or 0
        seconds = args.seconds or 0
        if minutes < 0 or seconds < 0:
            raise ConfigError("Duration values cannot be negative.")
        duration = minutes * 60 + seconds
    if duration <= 0:
        raise ConfigError("Initial duration must be positive.")

    log_level = (args.log_level or env.get("COUNTDOWN_LOG_LEVEL") or "INFO").upper()
    if log_level not in LOG_LEVELS:
        raise ConfigError(
            f"Invalid log level '{log_level}'. Valid options: {', '.join(LOG_LEVELS)}"
        )

    return AppConfig(
        initial_duration_sec=duration,
        theme=args.theme,
        db_path=args.db or env.get("COUNTDOWN_DB") or DEFAULT_DB_PATH,
        log_level=log_level,
    )


def load_config(
    argv: Optional[Sequence[str]] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> AppConfig:
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        return config_from_args(args, environ)
    except ConfigError as e:
        parser.error(str(e))
