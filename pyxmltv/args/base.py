"""
Main argument parser module for pyxmltv

Orchestrates argument parsing, validation, and special actions handling.
"""

import argparse
import sys
from pathlib import Path

from .validator import ArgumentValidator


class ArgumentParser:
    """Command line argument parser for pyxmltv"""

    def __init__(self):
        self.parser = self._create_parser()
        self.validator = ArgumentValidator()

    def _create_parser(self):
        """Create the argument parser with all options"""
        parser = argparse.ArgumentParser(
            prog="pyxmltv",
            description="Convert XMLTV listings to JSON and back",
            formatter_class=argparse.RawDescriptionHelpFormatter,
            epilog=self._get_epilog_text(),
        )

        parser.add_argument(
            "input",
            nargs="?",
            help="XMLTV (or JSON with --from-json) file, http(s) URL, or - for stdin",
        )

        parser.add_argument(
            "--version", "-v", action="store_true",
            help="Show version and exit"
        )

        # Conversion
        parser.add_argument(
            "--output", "-o", type=Path,
            help="Write the result to the specified file instead of stdout"
        )

        parser.add_argument(
            "--format", "-f",
            type=str,
            choices=["object", "dom", "xml"],
            help="Output: object model as JSON (default), node tree as JSON, or normalized XMLTV",
        )

        parser.add_argument(
            "--from-json",
            action="store_true",
            help="Read an object model JSON document and write XMLTV",
        )

        parser.add_argument(
            "--indent", type=int,
            help="JSON indentation (0-8, default: 2)"
        )

        parser.add_argument(
            "--timeout", type=int,
            help="Download timeout in seconds for URL inputs (default: 30)"
        )

        # Log level selection
        level_group = parser.add_mutually_exclusive_group()
        level_group.add_argument(
            "--warning", "-w", action="store_true",
            help="Only warnings and errors"
        )

        level_group.add_argument(
            "--debug", action="store_true",
            help="All debug information (very verbose)"
        )

        # Console output control
        console_group = parser.add_mutually_exclusive_group()
        console_group.add_argument(
            "--console",
            action="store_true",
            help="Display active log level to console (can combine with --warning/--debug)",
        )

        console_group.add_argument(
            "--quiet", "-q",
            action="store_true",
            help="No console output except the result",
        )

        parser.add_argument(
            "--log-file", type=Path,
            help="Also write log messages to the specified file"
        )

        # Configuration
        parser.add_argument(
            "--config", type=Path,
            help="Configuration file path (created with defaults if missing)"
        )

        return parser

    def _get_epilog_text(self):
        """Get the epilog help text"""
        return """
Examples:
  pyxmltv guide.xml                                # Object model as JSON
  pyxmltv guide.xml.gz --format dom --indent 0     # Node tree, compact JSON
  pyxmltv https://example.com/guide.xml -o guide.json
  pyxmltv guide.xml --format xml -o normalized.xml
  pyxmltv guide.json --from-json -o guide.xml
  cat guide.xml | pyxmltv - --debug --console

Configuration:
  <settings version="1">
    <setting id="format">object</setting>
    <setting id="indent">2</setting>
    <translation type="tag" id="programme">shows</translation>
  </settings>

Logging Levels:
  (default)       Warnings and errors to console, info to --log-file
  --warning       Only warnings and errors
  --debug         All debug information
  --console       Display active log level to console (can combine with --warning/--debug)
  --quiet         No console output except the result
        """

    def parse_args(self, args=None):
        """Parse command line arguments with validation"""
        args = self.parser.parse_args(args)

        # Handle special actions that exit immediately
        if self._handle_special_actions(args):
            sys.exit(0)

        # Validate arguments
        self._validate_args(args)

        return args

    def _handle_special_actions(self, args) -> bool:
        """Handle special actions that exit immediately"""
        if args.version:
            from .. import __version__
            print(__version__)
            return True

        return False

    def _validate_args(self, args):
        """Validate argument values"""
        errors = self.validator.validate_all_arguments(args)

        if args.from_json and args.format is not None and args.format != "xml":
            errors.append("Parameter [--from-json] always writes XMLTV, --format must be xml or omitted")

        # If any errors, report them
        if errors:
            self.parser.error("; ".join(errors))

    def get_logging_config(self, args):
        """Determine logging configuration from arguments"""
        config = {
            "level": "default",
            "console": False,
            "quiet": False,
            "log_file": getattr(args, "log_file", None),
        }

        if args.debug:
            config["level"] = "debug"
        elif args.warning:
            config["level"] = "warning"

        if args.console:
            config["console"] = True
        elif args.quiet:
            config["quiet"] = True

        return config
