"""Command-line argument parsing for treeselect.

This module defines the command-line interface for treeselect, handling argument
parsing and validation. Selection options are recorded as an ordered list of
operations so that, for example, ``--deselect-all --select src`` and
``--select src --deselect-all`` give different results, just as clicking the
same controls in a different order would.
"""

import argparse
from pathlib import Path
from typing import Any, List, Optional, Sequence, Type, Union

from treeselect import __version__
from treeselect.exclusion_rules.base_rules import BaseExclusionRules

# Operation names stored in args.operations
SELECT = "select"
DESELECT = "deselect"
SELECT_ALL = "select_all"
DESELECT_ALL = "deselect_all"
FOLDERS_ONLY = "folders_only"


class SelectionAction(argparse.Action):
    """Action appending ``(operation, path)`` pairs to ``namespace.operations``.

    The operation is taken from the action's ``const``; path-taking options store
    their value, flag options store None.
    """

    def __call__(
        self,
        parser: argparse.ArgumentParser,
        namespace: argparse.Namespace,
        values: Union[str, Sequence[Any], None],
        option_string: Optional[str] = None,
    ) -> None:
        operations = getattr(namespace, "operations", None) or []
        path = values if isinstance(values, str) else None
        operations.append((self.const, path))
        namespace.operations = operations


def create_exclusion_action(exclusion_rules: BaseExclusionRules) -> Type[argparse.Action]:
    """Create an action class feeding gitignore-style rules into ``exclusion_rules``.

    Files (-e) and single patterns (-i) are added as they are encountered, which
    preserves their relative order on the command line.
    """

    class ExclusionRulesAction(argparse.Action):
        def __init__(self, option_strings: List[str], dest: str, **kwargs: Any) -> None:
            super().__init__(option_strings, dest, **kwargs)

        def __call__(
            self,
            parser: argparse.ArgumentParser,
            namespace: argparse.Namespace,
            values: Union[str, Sequence[Any], None],
            option_string: Optional[str] = None,
        ) -> None:
            if values is None:
                return
            if option_string in ("-e", "--exclude-from"):
                try:
                    exclusion_rules.load_rules(Path(str(values)))
                except FileNotFoundError as e:
                    parser.error(str(e))
            else:
                exclusion_rules.add_rule(str(values))

            items = getattr(namespace, self.dest, None) or []
            items.append(values)
            setattr(namespace, self.dest, items)

    return ExclusionRulesAction


def create_parser(exclusion_rules: BaseExclusionRules) -> argparse.ArgumentParser:
    """Create and configure the command-line argument parser.

    Args:
        exclusion_rules: Rules object populated by -e/--exclude-from and -i/--ignore.

    Returns:
        An ArgumentParser instance configured with treeselect's options.
    """
    description = """
    treeselect: select parts of a directory and render them as a text tree.

    Every entry starts out selected. Selection options are applied in the order
    they appear; selecting or deselecting a directory applies to everything
    below it. Name patterns given with -x hide matching entries wherever they
    occur, independently of the selection.
    """

    epilog = """
    Examples:
      # Render the whole directory
      treeselect /path/to/project

      # Hide entries whose name contains a match (comma-separated wildcards)
      treeselect -x "*.pyc, node_modules, .git" /path/to/project

      # Start from nothing and pick a few subtrees
      treeselect --deselect-all -s src -s README.md /path/to/project

      # Show the folder structure without any files
      treeselect --folders-only /path/to/project

      # Apply .gitignore rules and one extra gitignore pattern
      treeselect -e .gitignore -i "dist/" /path/to/project

      # Render a listing saved as JSON
      treeselect --listing listing.json --root-name project -o tree.txt
    """

    parser = argparse.ArgumentParser(
        prog="treeselect",
        description=description,
        epilog=epilog,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.set_defaults(operations=[])

    parser.add_argument(
        "-V", "--version", action="version", version=f"treeselect {__version__}", help="Show the version and exit"
    )
    parser.add_argument(
        "directory",
        type=Path,
        nargs="?",
        help="The directory to select from. Its name heads the rendered tree.",
    )
    parser.add_argument(
        "--listing",
        type=Path,
        metavar="FILE",
        help="Read the tree from a JSON listing instead of a directory.",
    )
    parser.add_argument(
        "--root-name",
        metavar="NAME",
        help="Name heading the rendered tree when using --listing (default: the listing file's stem).",
    )

    selection = parser.add_argument_group("selection (applied in order)")
    selection.add_argument(
        "-s", "--select", metavar="PATH", action=SelectionAction, const=SELECT, help="Select an entry and its contents."
    )
    selection.add_argument(
        "-d",
        "--deselect",
        metavar="PATH",
        action=SelectionAction,
        const=DESELECT,
        help="Deselect an entry and its contents.",
    )
    selection.add_argument(
        "--select-all", nargs=0, action=SelectionAction, const=SELECT_ALL, help="Select every entry."
    )
    selection.add_argument(
        "--deselect-all", nargs=0, action=SelectionAction, const=DESELECT_ALL, help="Deselect every entry."
    )
    selection.add_argument(
        "--folders-only",
        nargs=0,
        action=SelectionAction,
        const=FOLDERS_ONLY,
        help="Deselect every file, keeping folder selections as they are.",
    )

    ExclusionAction = create_exclusion_action(exclusion_rules)

    exclusion = parser.add_argument_group("exclusion")
    exclusion.add_argument(
        "-x",
        "--exclude",
        metavar="PATTERNS",
        action="append",
        default=[],
        help=(
            "Comma-separated wildcard patterns matched anywhere in entry names ('*' matches any text). "
            "Can be specified multiple times."
        ),
    )
    exclusion.add_argument(
        "-e",
        "--exclude-from",
        metavar="FILE",
        action=ExclusionAction,
        help="Gitignore-style file of rules matched against relative paths (can be specified multiple times).",
    )
    exclusion.add_argument(
        "-i",
        "--ignore",
        metavar="PATTERN",
        action=ExclusionAction,
        help="Single gitignore-style rule matched against relative paths (can be specified multiple times).",
    )

    parser.add_argument(
        "-o",
        "--output",
        type=Path,
        metavar="FILE",
        help="Output file path. If not specified, output is written to stdout.",
    )
    parser.add_argument(
        "-L",
        "--follow-symlinks",
        action="store_true",
        help="Follow symbolic links to directories. By default, symlinks are listed as files.",
    )
    parser.add_argument(
        "-P",
        "--permission-action",
        choices=["ignore", "warn", "fail"],
        default="ignore",
        help="How to handle unreadable directories (default: ignore).",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="Log more detail to stderr (-v for info, -vv for debug).",
    )
    parser.add_argument("-q", "--quiet", action="store_true", help="Only log errors.")

    return parser


def validate_args(args: argparse.Namespace) -> None:
    """Validate combinations of arguments that argparse can't express.

    Raises:
        ValueError: If any arguments fail validation.
    """
    if args.directory is None and args.listing is None:
        raise ValueError("either a directory or --listing must be given")
    if args.directory is not None and args.listing is not None:
        raise ValueError("a directory and --listing cannot be used together")
    if args.root_name is not None and args.listing is None:
        raise ValueError("--root-name requires --listing")
    if args.verbose and args.quiet:
        raise ValueError("-v/--verbose and -q/--quiet cannot be used together")
