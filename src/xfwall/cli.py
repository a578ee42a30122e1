"""
Command-line interface for xfwall.

Usage:
    xfwall [options] [IMGFILE[:IMGFILE...] ...]

IMGFILEs are mapped onto (monitor, workspace) pairs in the order shown
by '-q'. With no arguments the backdrops are cycled from the saved list.
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from .assigner import join_tokens
from .config import Config
from .exceptions import (
    XfwallError,
    ConfigError,
    ConfigValidationError,
    TransportError,
    XfconfCommandNotFoundError,
    XfconfTimeoutError,
    SchemaError,
    PropertyNotFoundError,
    NoTopologyError,
    NoImageError,
    ImageListError,
    ListValidationError,
)
from .commands import (
    show_query,
    rotate_backdrops,
    set_images,
    set_list,
    set_backdrop_mode,
)
from .session import DesktopSession

EX_USAGE = 64


def setup_logging(level: str = "WARNING") -> None:
    """Configure logging."""
    logging.basicConfig(
        level=getattr(logging, level.upper()),
        format="%(asctime)s %(levelname)-8s %(name)s: %(message)s",
        datefmt="%H:%M:%S",
        stream=sys.stderr,
    )


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="xfwall",
        description=(
            "Cycle XFCE desktop backdrops from a list file, or map image files "
            "onto (monitor, workspace) pairs."
        ),
        epilog=(
            "IMGFILES are mapped into (monitor, workspace) pairs. The monitors are "
            "sorted as indicated by the '-q' option; an empty entry such as in "
            "':::xyz.jpg' leaves that pair untouched."
        ),
    )

    parser.add_argument(
        "-c", "--cycle",
        action="store_true",
        help="Cycle backgrounds from list"
    )
    parser.add_argument(
        "-l", "--listfile",
        metavar="LISTFILE",
        help="Set backdrop list file name"
    )
    parser.add_argument(
        "-m", "--multiple",
        action="store_true",
        help="Turn off using single backdrop across all workspaces. Don't use together with '-s'"
    )
    parser.add_argument(
        "-s", "--single",
        nargs="?",
        const="",
        default=None,
        metavar="WORKSPACE",
        help="Use backdrop from specified workspace for others"
    )
    parser.add_argument(
        "-q", "--query",
        action="store_true",
        help="Query the current setting"
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="With -q, print the report as JSON (not valid without -q)"
    )
    parser.add_argument(
        "-r", "--repeat",
        action="store_true",
        default=None,
        help="When setting images directly repeat the image file list when not enough images indicated"
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed for random image selection"
    )
    parser.add_argument(
        "--config",
        type=Path,
        help="Path to config file"
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable debug logging"
    )
    parser.add_argument(
        "images",
        nargs="*",
        metavar="IMGFILE",
        help="Image files, ':' separated"
    )
    return parser


def parse_workspace(value: str) -> Optional[int]:
    """
    Parse the optional -s workspace index.

    Returns:
        None when no index was given, otherwise the index

    Raises:
        ValueError: If the index is not a non-negative integer
    """
    if value == "":
        return None
    index = int(value)
    if index < 0:
        raise ValueError(f"negative workspace index {index}")
    return index


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logger = logging.getLogger(__name__)

    if args.single is not None and args.multiple:
        print("Specify one of -s or -m", file=sys.stderr)
        return EX_USAGE

    if args.json and not args.query:
        print("--json is only valid together with -q", file=sys.stderr)
        return EX_USAGE

    workspace = None
    if args.single is not None:
        try:
            workspace = parse_workspace(args.single)
        except ValueError:
            print(f"Bad workspace index specified : '{args.single}'", file=sys.stderr)
            return EX_USAGE

    try:
        config = Config.load(config_file=args.config)

        level = "DEBUG" if args.verbose or config.logging.verbose else config.logging.level
        setup_logging(level)

        session = DesktopSession.from_config(config, seed=args.seed)

        if args.query:
            show_query(session, json_output=args.json)
            return 0

        if not args.cycle and (args.single is not None or args.multiple or args.listfile):
            print("Use -c to force a backdrop cycle.")

        report = None
        if args.single is not None:
            report = set_backdrop_mode(session, True, workspace, rotate=args.cycle)
        elif args.multiple:
            report = set_backdrop_mode(session, False, None, rotate=args.cycle)
        elif args.listfile:
            report = set_list(session, args.listfile, rotate=args.cycle)
        elif args.images:
            repeat = args.repeat if args.repeat is not None else config.rotation.repeat
            report = set_images(session, join_tokens(args.images), repeat=repeat)
        else:
            report = rotate_backdrops(session)

        if report is not None and not report.ok:
            print(
                f"\n{len(report.failures)} of {len(report)} backdrop(s) could not be set",
                file=sys.stderr,
            )
            return 1

        return 0

    # Handle specific error types with appropriate exit codes and messages
    except KeyboardInterrupt:
        print("\nCancelled by user", file=sys.stderr)
        return 130

    except ConfigValidationError as e:
        print(f"\nConfiguration Validation Error: {e}", file=sys.stderr)
        return 78  # EX_CONFIG

    except ConfigError as e:
        print(f"\nConfiguration Error: {e}", file=sys.stderr)
        return 78  # EX_CONFIG

    except ListValidationError as e:
        print(f"\nError setting list path: {e}", file=sys.stderr)
        return 65  # EX_DATAERR

    except ImageListError as e:
        print(f"\nImage List Error: {e}", file=sys.stderr)
        return 66  # EX_NOINPUT

    except NoImageError as e:
        print(f"\nNo Image: {e}", file=sys.stderr)
        return 66  # EX_NOINPUT

    except PropertyNotFoundError as e:
        print(f"\nMissing Setting: {e}", file=sys.stderr)
        print("\nSet a list file first with 'xfwall -l LISTFILE'.", file=sys.stderr)
        return 66  # EX_NOINPUT

    except SchemaError as e:
        print(f"\nUnexpected Setting Value: {e}", file=sys.stderr)
        return 65  # EX_DATAERR

    except NoTopologyError as e:
        print(f"\nNo Desktop Topology: {e}", file=sys.stderr)
        print("\nMake sure xfdesktop is running in an XFCE session.", file=sys.stderr)
        return 69  # EX_UNAVAILABLE

    except XfconfCommandNotFoundError as e:
        print("\nxfconf-query Not Found\n", file=sys.stderr)
        print(str(e), file=sys.stderr)
        return 69  # EX_UNAVAILABLE

    except XfconfTimeoutError as e:
        print(f"\nConfiguration Service Timeout: {e}", file=sys.stderr)
        return 75  # EX_TEMPFAIL

    except TransportError as e:
        print(f"\nConfiguration Service Error: {e}", file=sys.stderr)
        return 69  # EX_UNAVAILABLE

    except XfwallError as e:
        # Catch-all for any other xfwall errors
        print(f"\nError: {e}", file=sys.stderr)
        logger.error(str(e))
        if args.verbose:
            raise
        return 1

    except Exception as e:
        # Unexpected errors - show full traceback in verbose mode
        print(f"\nUnexpected Error: {type(e).__name__}: {e}", file=sys.stderr)
        logger.error(f"Unexpected error: {type(e).__name__}: {e}")
        if args.verbose:
            raise
        print("\nRun with -v/--verbose for full traceback.", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
