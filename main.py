#!/usr/bin/env python
"""CLI for the BizBuzz business reputation card."""

import argparse
import asyncio
import logging
import sys
from pathlib import Path

from pydantic import BaseModel, Field, field_validator

from bizbuzz.config import create_from_config, get_default_config_path, load_config
from bizbuzz.controller import BusinessController
from bizbuzz.data import NoticeLevel, Phase, ViewState

logger = logging.getLogger(__name__)


class CLIArgs(BaseModel):
    """Validated CLI arguments."""

    name: str
    location: str
    config: Path
    regenerate: int = Field(default=0, ge=0)
    fast: bool = False
    log: bool = False
    log_dir: str = "logs"

    @field_validator("config")
    @classmethod
    def config_must_exist(cls, v: Path) -> Path:
        if not v.exists():
            raise ValueError(f"Config file not found: {v}")
        return v


def render(view: ViewState) -> None:
    """Print the current card, or the form errors when nothing is loaded."""
    if view.record is None:
        for field, message in view.field_errors.items():
            logger.info(f"  {field}: {message}")
        return

    record = view.record
    print(f"\n{record.name} - {record.location}")
    print(f"  Rating:   {record.rating:.1f} / 5")
    print(f"  Reviews:  {record.reviews}")
    print(f"  Headline: {record.headline}\n")


def flush_notices(controller: BusinessController) -> None:
    for notice in controller.drain_notices():
        if notice.level is NoticeLevel.ERROR:
            logger.error(f"{notice.title} {notice.message}")
        else:
            logger.info(f"{notice.title} {notice.message}")


async def run(args: CLIArgs) -> int:
    """Submit the identity and optionally regenerate its headline.

    Args:
        args: Validated CLI arguments.

    Returns:
        Process exit code.
    """
    config = load_config(args.config)
    if args.fast:
        gateway = config.gateway.model_copy(update={"record_latency": 0.0, "headline_latency": 0.0})
        config = config.model_copy(update={"gateway": gateway})

    controller, session_logger = create_from_config(
        config,
        log_override=args.log if args.log else None,
        log_dir_override=args.log_dir if args.log_dir != "logs" else None,
    )

    logger.info(f"Looking up {args.name!r} in {args.location!r}...")
    view = await controller.submit_identity(args.name, args.location)
    flush_notices(controller)
    render(view)

    exit_code = 0 if view.phase is Phase.LOADED else 1
    if exit_code == 0:
        for _ in range(args.regenerate):
            view = await controller.request_headline_regeneration()
            flush_notices(controller)
            render(view)

    if session_logger:
        path = session_logger.finish_session()
        if path:
            logger.info(f"Session log written to: {path}")
    return exit_code


def main() -> None:
    """Entry point for the CLI."""
    parser = argparse.ArgumentParser(description="Show a reputation snapshot for a local business.")
    parser.add_argument("name", help="Business name")
    parser.add_argument("location", help="Business location (city or area)")
    parser.add_argument(
        "--config",
        "-c",
        type=Path,
        default=None,
        help="Path to YAML config file (default: configs/default.yaml)",
    )
    parser.add_argument(
        "--regenerate",
        "-r",
        type=int,
        default=0,
        help="Number of headline regenerations to request after loading",
    )
    parser.add_argument(
        "--fast",
        action="store_true",
        default=False,
        help="Skip the simulated network latency",
    )
    parser.add_argument(
        "--log",
        action="store_true",
        default=False,
        help="Write a JSON log of the session's actions",
    )
    parser.add_argument(
        "--log-dir",
        type=str,
        default="logs",
        help="Directory for log files (default: logs/)",
    )

    logging.basicConfig(level=logging.INFO, format="%(message)s")

    ns = parser.parse_args()
    config_path: Path = ns.config if ns.config else get_default_config_path()

    try:
        args = CLIArgs(
            name=ns.name,
            location=ns.location,
            config=config_path,
            regenerate=ns.regenerate,
            fast=ns.fast,
            log=ns.log,
            log_dir=ns.log_dir,
        )
    except Exception as e:
        logger.error(str(e))
        sys.exit(1)

    try:
        sys.exit(asyncio.run(run(args)))
    except KeyboardInterrupt:
        sys.exit(130)


if __name__ == "__main__":
    main()
