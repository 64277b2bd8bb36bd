#!/usr/bin/env python3
"""Termlayout - Terminal Text Layout Tool.

Main entry point for the termlayout command-line tool.
"""

import argparse
import sys
import traceback
from pathlib import Path
from typing import TextIO

from colors import Color
from config import ExitCode
from display import emit
from enums import Alignment, LengthMode, LogDestination, MessageType
from errors import (
    InsufficientWidthError,
    TerminalTooSmallError,
    UnknownStyleError,
    ValidationError,
)
from export import export_to_json
from layout import (
    build_bordered_string,
    build_heading,
    dialog_autosize,
    format_list,
    render_tokens,
)
from logging_config import get_logger, setup_logging
from messages import Messenger
from models import LayoutRequest, RenderedBlock
from terminal import SystemTerminal, TerminalInfoProvider
from utils import sanitize_for_log

ALIGNMENTS = [alignment.value for alignment in Alignment]
BLOCK_COMMANDS = ("table", "border", "heading")


def parse_arguments() -> argparse.Namespace:
    """Parse command-line arguments.

    Returns:
        Parsed arguments namespace.

    Exits:
        Code 4 if invalid argument combinations.
    """
    parser = argparse.ArgumentParser(
        description="Terminal text layout: tables, borders, headings and messages",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  termlayout table name Alice age 30            # Property/value table
  termlayout table --body center --content center -w 60 a A b BBB
  termlayout border "Some text" --char =        # Bordered string
  termlayout heading --style error "Disk full"  # Error heading
  termlayout list VAL1 VAL2 VAL3                # { VAL1 | VAL2 | VAL3 }
  termlayout autosize --select width            # Dialog width
  termlayout message --type warning "Low disk" used 91%
  termlayout --export json table a A            # Export to JSON (stdout)

Exit codes:
  0 - Success
  1 - General error
  2 - Width (or terminal) too small
  3 - Unknown heading style
  4 - Invalid arguments
        """,
    )

    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    parser.add_argument("--log-file", type=Path, metavar="PATH", help="Write logs to file")
    parser.add_argument(
        "--syslog", action="store_true", help="Also send log records to the system log"
    )
    parser.add_argument("--color", action="store_true", help="Color headings and messages")
    parser.add_argument(
        "--length-mode",
        choices=[mode.value for mode in LengthMode],
        default=LengthMode.BYTES.value,
        help="Measure strings in UTF-8 bytes (default) or characters",
    )
    parser.add_argument(
        "--export",
        choices=["json"],
        metavar="FORMAT",
        help="Export format (json) for table/border/heading",
    )
    parser.add_argument(
        "--output",
        type=Path,
        metavar="PATH",
        help="Export destination file (requires --export)",
    )

    commands = parser.add_subparsers(dest="command", metavar="COMMAND", required=True)

    table = commands.add_parser("table", help="Print property/value pairs as a table")
    table.add_argument("--body", choices=ALIGNMENTS, default="left", help="Body alignment")
    table.add_argument("--content", choices=ALIGNMENTS, default="left", help="Content alignment")
    table.add_argument("-p", "--padding", type=int, default=2, help="Padding around separator")
    table.add_argument("-w", "--width", type=int, help="Line width (default: terminal)")
    table.add_argument("-s", "--separator", default=":", help="Separator character")
    table.add_argument("tokens", nargs="*", metavar="PROPERTY VALUE", help="Property/value pairs")

    border = commands.add_parser("border", help="Print a string surrounded by a border")
    border.add_argument("text", nargs="?", default="", help="Text (empty: border only)")
    border.add_argument("-c", "--char", default="-", help="Border character")
    border.add_argument("-p", "--padding", type=int, help="Padding in spaces (default: 1)")
    border.add_argument("-w", "--width", type=int, help="Line width (default: terminal)")

    heading = commands.add_parser("heading", help="Print a string formatted as a heading")
    heading.add_argument("text", help="Heading text")
    heading.add_argument(
        "-s", "--style", default="heading1", help="heading1..heading311, warning, error"
    )
    heading.add_argument("-w", "--width", type=int, help="Line width (default: terminal)")

    values = commands.add_parser("list", help="Print values as a list")
    values.add_argument("values", nargs="+", help="Values")
    values.add_argument("-s", "--separator", default=" | ", help="Separator string")
    values.add_argument("--brackets", action="store_true", help="Surround values with []")
    values.add_argument(
        "--no-braces", action="store_true", help="Do not surround the list with { }"
    )

    autosize = commands.add_parser("autosize", help="Calculate a dialog box size")
    autosize.add_argument(
        "--select", choices=["both", "height", "width"], default="both", help="Output value"
    )
    autosize.add_argument("--ratio", type=int, default=4, help="Aspect ratio width:height")
    autosize.add_argument("--height", type=int, help="Fixed height (>= 20)")
    autosize.add_argument("--width", type=int, help="Fixed width (>= 80)")

    message = commands.add_parser("message", help="Print or log an error/info/warning")
    message.add_argument(
        "-t",
        "--type",
        choices=[message_type.value for message_type in MessageType],
        default="info",
        help="Message type",
    )
    message.add_argument(
        "-d",
        "--destination",
        choices=[destination.value for destination in LogDestination],
        default="auto",
        help="Message destination",
    )
    message.add_argument("text", help="Message")
    message.add_argument(
        "pairs", nargs="*", metavar="PROPERTY VALUE", help="Pairs appended as a table"
    )

    args = parser.parse_args()

    # Validation: --output requires --export
    if args.output and not args.export:
        print("Error: --output requires --export", file=sys.stderr)
        sys.exit(ExitCode.INVALID_ARGUMENTS)

    # Validation: only rendered blocks can be exported
    if args.export and args.command not in BLOCK_COMMANDS:
        print(f"Error: --export is not supported for '{args.command}'", file=sys.stderr)
        sys.exit(ExitCode.INVALID_ARGUMENTS)

    return args


def build_block(args: argparse.Namespace, terminal: TerminalInfoProvider) -> RenderedBlock:
    """Render the block requested by a table/border/heading command.

    Args:
        args: Parsed arguments
        terminal: Size provider used when no width is given

    Returns:
        RenderedBlock for display or export.
    """
    mode = LengthMode(args.length_mode)

    if args.command == "table":
        return render_tokens(
            args.tokens,
            body_align=args.body,
            content_align=args.content,
            padding=args.padding,
            width=args.width,
            separator=args.separator,
            terminal=terminal,
            length_mode=mode,
        )

    if args.command == "border":
        return build_bordered_string(
            args.text, args.char, args.padding, args.width, terminal, mode
        )

    return build_heading(args.style, args.text, args.width, terminal, mode)


def execute(
    args: argparse.Namespace,
    terminal: TerminalInfoProvider,
    file: TextIO | None = None,
) -> int:
    """Run one command.

    Args:
        args: Parsed arguments
        terminal: Size provider
        file: Optional output handle (default: sys.stdout)

    Returns:
        Exit code.
    """
    if file is None:
        file = sys.stdout
    logger = get_logger(__name__)

    if args.command == "list":
        print(
            format_list(
                args.values,
                separator=args.separator,
                bracket_values=args.brackets,
                brace_list=not args.no_braces,
            ),
            file=file,
        )
        return ExitCode.SUCCESS

    if args.command == "autosize":
        size = dialog_autosize(
            ratio=args.ratio, height=args.height, width=args.width, terminal=terminal
        )
        if args.select == "height":
            print(size.height, file=file)
        elif args.select == "width":
            print(size.width, file=file)
        else:
            print(size, file=file)
        return ExitCode.SUCCESS

    if args.command == "message":
        messenger = Messenger(terminal=terminal, stdout=file, use_colors=args.color)
        if args.pairs:
            pairs = LayoutRequest.from_tokens(args.pairs).pairs
            return messenger.echo(args.type, args.text, pairs)
        return messenger.message(
            args.type, args.text, destination=LogDestination(args.destination)
        )

    block = build_block(args, terminal)
    logger.info("Rendered %s: %d lines at width %d", block.kind, len(block.lines), block.width)

    if args.export:
        json_data = export_to_json(block)
        if args.output:
            args.output.write_text(json_data)
            logger.info("Exported to %s", sanitize_for_log(str(args.output)))
        else:
            print(json_data, file=file)
    else:
        color = Color.HEADING if args.color and block.kind == "heading" else None
        emit(block.lines, file=file, color=color)

    return ExitCode.SUCCESS


def main() -> None:
    """Main execution flow.

    Exit codes:
        0: Success
        1: General error
        2: Width (or terminal) too small
        3: Unknown heading style
        4: Invalid arguments
    """
    args = parse_arguments()

    # Setup logging (must be called before any logger usage)
    setup_logging(
        verbose=args.verbose,
        log_file=args.log_file,
        use_colors=True,
        syslog=args.syslog,
    )

    logger = get_logger(__name__)

    try:
        code = execute(args, SystemTerminal())
        sys.exit(code)

    except (InsufficientWidthError, TerminalTooSmallError) as e:
        logger.error("%s", sanitize_for_log(str(e)))
        sys.exit(ExitCode.INSUFFICIENT_WIDTH)
    except UnknownStyleError as e:
        logger.error("%s", sanitize_for_log(str(e)))
        sys.exit(ExitCode.UNKNOWN_STYLE)
    except ValidationError as e:
        logger.error("Invalid arguments: %s", sanitize_for_log(str(e)))
        sys.exit(ExitCode.INVALID_ARGUMENTS)
    except KeyboardInterrupt:
        logger.error("Interrupted by user")
        sys.exit(ExitCode.GENERAL_ERROR)
    except OSError as e:
        logger.error("Error during execution: %s", sanitize_for_log(str(e)))
        if args.verbose:
            traceback.print_exc()
        sys.exit(ExitCode.GENERAL_ERROR)


if __name__ == "__main__":
    main()
