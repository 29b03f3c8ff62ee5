"""Entry point: ``python -m spindlewarmup [--profile 24k] [-v]``"""

from __future__ import annotations

import argparse
import logging
import sys

from .config.defaults import DEFAULT_MAX_RPM, DEFAULT_TITLE
from .config.spindle_profiles import SpindleModel, get_profile
from .core.session import EditorSession

_PROFILE_CHOICES = {
    "24k": SpindleModel.ROUTER_24K,
    "18k": SpindleModel.ROUTER_18K,
    "10k": SpindleModel.MILL_10K,
}


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="spindlewarmup",
        description="Compose a spindle warm-up program and preview its G-code.",
    )
    p.add_argument("--title", default=DEFAULT_TITLE,
                   help="Initial program title")
    p.add_argument("--profile", choices=sorted(_PROFILE_CHOICES), default=None,
                   help="Spindle preset used for the initial max RPM")
    p.add_argument("--max-rpm", type=int, default=None,
                   help=f"Initial max RPM (default: {DEFAULT_MAX_RPM})")
    p.add_argument("-v", "--verbose", action="store_true",
                   help="Log every edit at DEBUG level")
    return p


def main(argv: list[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    max_rpm = DEFAULT_MAX_RPM
    if args.profile is not None:
        max_rpm = get_profile(_PROFILE_CHOICES[args.profile]).max_rpm
    if args.max_rpm is not None:
        max_rpm = args.max_rpm

    session = EditorSession(title=args.title, max_rpm=max_rpm)
    logging.getLogger(__name__).info("Starting editor (max RPM %d)", max_rpm)

    from .app import launch_gui
    return launch_gui(session)


if __name__ == "__main__":
    sys.exit(main())
