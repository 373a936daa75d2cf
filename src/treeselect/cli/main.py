"""Command-line interface for treeselect.

This module ties the pieces together: it parses arguments, loads the tree from a
directory or a JSON listing into a :class:`SelectionSession`, applies the
selection operations in command-line order, and writes the rendered tree.

Signal Handling Notes:
    - SIGINT while the directory is being read is treated as a cancelled
      selection: nothing is written and the process exits with 130.
    - SIGPIPE: Handled when the output pipe is closed (e.g., when piping to
      `head`) on Unix-like systems.

Exit Codes:
    0: Successful completion
    1: Runtime error during execution
    2: Command-line syntax error
    126: Permission denied (with -P fail)
    130: Interrupted by SIGINT (Ctrl+C)
    141: Broken pipe (SIGPIPE) on Unix-like systems

Example:
    # Render a directory without its log files
    $ treeselect /path/to/dir -x "*.log"

    # Display version information
    $ treeselect --version
"""

import argparse
import logging
import sys
from typing import Optional, Sequence

from treeselect.cli.argparser import (
    DESELECT,
    DESELECT_ALL,
    FOLDERS_ONLY,
    SELECT,
    SELECT_ALL,
    create_parser,
    validate_args,
)
from treeselect.cli.safe_writer import SafeWriter
from treeselect.cli.signal_handler import setup_signal_handling, signal_handler
from treeselect.exclusion_rules.git_rules import GitIgnoreExclusionRules
from treeselect.listing.listing_entry import load_listing
from treeselect.listing.permission_action import PermissionAction
from treeselect.session import SelectionSession

logger = logging.getLogger("treeselect")


def configure_logging(verbosity: int, quiet: bool) -> None:
    """Send log records to stderr at a level chosen by -v/-q."""
    if quiet:
        level = logging.ERROR
    elif verbosity >= 2:
        level = logging.DEBUG
    elif verbosity == 1:
        level = logging.INFO
    else:
        level = logging.WARNING
    logging.basicConfig(level=level, format="%(levelname)s: %(message)s", stream=sys.stderr, force=True)


def load_session(args: argparse.Namespace, session: SelectionSession) -> None:
    """Populate the session from the directory or listing named in ``args``."""
    if args.listing is not None:
        root_name = args.root_name if args.root_name is not None else args.listing.stem
        session.load_listing(root_name, load_listing(args.listing))
        return

    perm_action = {
        "ignore": PermissionAction.IGNORE,
        "warn": PermissionAction.RAISE,
        "fail": PermissionAction.RAISE,
    }[args.permission_action]
    session.open_directory(args.directory, perm_action, args.follow_symlinks)


def apply_operations(session: SelectionSession, operations: Sequence[tuple]) -> None:
    """Apply recorded selection operations to the session, in order."""
    for operation, path in operations:
        logger.debug("Applying %s%s", operation, f" {path}" if path else "")
        if operation == SELECT:
            session.set_checked(path, True)
        elif operation == DESELECT:
            session.set_checked(path, False)
        elif operation == SELECT_ALL:
            session.select_all()
        elif operation == DESELECT_ALL:
            session.deselect_all()
        elif operation == FOLDERS_ONLY:
            session.folders_only()
        else:
            raise ValueError(f"Unknown selection operation: {operation}")


def main(argv: Optional[Sequence[str]] = None) -> None:
    """Main entry point for the treeselect command-line interface.

    Exit codes:
        0: Successful completion
        1: Runtime error during execution
        2: Command-line syntax error
        126: Permission denied (with -P fail)
        130: Interrupted by SIGINT (Ctrl+C)
        141: Broken pipe (SIGPIPE) on Unix-like systems
    """
    setup_signal_handling()

    exclusion_rules = GitIgnoreExclusionRules()
    parser = create_parser(exclusion_rules)
    args = parser.parse_args(argv)

    try:
        validate_args(args)
    except ValueError as e:
        parser.error(str(e))

    configure_logging(args.verbose, args.quiet)

    session = SelectionSession(exclusion_rules if exclusion_rules.has_rules() else None)
    session.exclusion_text = ",".join(args.exclude)

    try:
        try:
            load_session(args, session)
        except PermissionError as e:
            if args.permission_action != "warn" or args.listing is not None:
                print(f"Error: {str(e)}", file=sys.stderr)
                sys.exit(126)
            print(f"Warning: {str(e)}", file=sys.stderr)
            session.open_directory(args.directory, PermissionAction.IGNORE, args.follow_symlinks)

        apply_operations(session, args.operations)

        output_file = args.output if args.output else sys.stdout.fileno()
        with SafeWriter(output_file) as safe_writer:
            try:
                safe_writer.write(session.render())
            except BrokenPipeError:
                pass  # SafeWriter will automatically close in the context manager

    except KeyboardInterrupt:
        # A cancelled selection is not an error; leave without output
        sys.exit(130)
    except Exception as e:
        print(f"Error: {str(e)}", file=sys.stderr)
        sys.exit(1)

    exit_code = signal_handler.exit_code()
    if exit_code is not None:
        sys.exit(exit_code)


if __name__ == "__main__":
    main()
