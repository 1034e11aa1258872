#!/usr/bin/env python3
"""
pyxmltv - XMLTV converter

Command line front end: reads an XMLTV document (file, URL or stdin) and
prints its object model or node tree as JSON, normalizes it, or writes XMLTV
back from an object model JSON document.
"""

import json
import logging
import sys
import time
import xml.etree.ElementTree as ET
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, Optional

import requests

from .args import ArgumentParser
from .config import ConfigManager
from .dom import XmltvNode
from .errors import XmltvError
from .sources import SourceLoader
from .xmltv import parse_xmltv, write_xmltv

# Package version
from . import __version__

# Object model fields holding instants, stored as ISO 8601 strings in JSON
INSTANT_FIELDS = ("start", "stop", "pdcStart", "vpsStart", "date")


def setup_logging(logging_config: dict):
    """Setup logging configuration"""
    if logging_config["level"] == "warning":
        level = logging.WARNING
    elif logging_config["level"] == "debug":
        level = logging.DEBUG
    else:  # default
        level = logging.INFO

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.handlers.clear()

    log_file: Optional[Path] = logging_config.get("log_file")
    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(level)
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s %(levelname)-8s %(message)s", datefmt="%Y/%m/%d %H:%M:%S")
        )
        root_logger.addHandler(file_handler)

    # Console shows the active level with --console, only problems otherwise
    if not logging_config["quiet"]:
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setLevel(level if logging_config["console"] else logging.WARNING)
        console_handler.setFormatter(logging.Formatter("%(levelname)s: %(message)s"))
        root_logger.addHandler(console_handler)


def json_default(value: Any):
    """json.dumps hook for object model and node tree values"""
    if isinstance(value, datetime):
        return value.isoformat()
    if isinstance(value, XmltvNode):
        return value.to_dict()
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


def restore_instants(record: Dict[str, Any]) -> Dict[str, Any]:
    """json.loads object hook turning ISO strings under instant fields back into datetimes"""
    for field in INSTANT_FIELDS:
        value = record.get(field)
        if not isinstance(value, str):
            continue
        try:
            instant = datetime.fromisoformat(value.replace("Z", "+00:00"))
        except ValueError:
            logging.debug("Keeping %s as text: %r", field, value)
            continue
        if instant.tzinfo is None:
            instant = instant.replace(tzinfo=timezone.utc)
        record[field] = instant.astimezone(timezone.utc)
    return record


def convert(text: str, output_format: str, from_json: bool, indent: int, registry) -> str:
    """Run one conversion and return the output document"""
    json_indent = indent or None

    if from_json:
        xmltv = json.loads(text, object_hook=restore_instants)
        return write_xmltv(xmltv, registry=registry)

    if output_format == "dom":
        dom = parse_xmltv(text, as_dom=True, registry=registry)
        return json.dumps(dom, indent=json_indent, default=json_default, ensure_ascii=False)

    xmltv = parse_xmltv(text, registry=registry)
    if output_format == "xml":
        return write_xmltv(xmltv, registry=registry)
    return json.dumps(xmltv, indent=json_indent, default=json_default, ensure_ascii=False)


def main(argv=None):
    """Main application entry point"""
    start_time = time.time()

    # Parse command line arguments
    arg_parser = ArgumentParser()
    args = arg_parser.parse_args(argv)

    logging_config = arg_parser.get_logging_config(args)
    setup_logging(logging_config)

    logging.info("pyxmltv session started - Version %s", __version__)
    if logging_config["level"] == "debug":
        logging.info("Debug logging enabled - all debug information will be logged")

    try:
        config_manager = ConfigManager(args.config)
        config = config_manager.load_config(
            format=args.format,
            indent=args.indent,
            timeout=args.timeout,
        )
        if args.config:
            logging.info("Configuration loaded from: %s", args.config)
        config_manager.log_config_summary()

        registry = config_manager.build_registry()

        with SourceLoader(timeout=config["timeout"], retries=config["retries"]) as loader:
            text = loader.load(args.input)

        output_format = "xml" if args.from_json else config["format"]
        result = convert(text, output_format, args.from_json, config["indent"], registry)

        if args.output is None:
            sys.stdout.write(result)
            if not result.endswith("\n"):
                sys.stdout.write("\n")
        else:
            args.output.parent.mkdir(parents=True, exist_ok=True)
            args.output.write_text(result, encoding="utf-8")
            logging.info("%s output written to: %s", output_format, args.output)

        logging.info("Conversion completed in %.2f seconds", time.time() - start_time)
        return 0

    except XmltvError as e:
        logging.error("Invalid XMLTV: %s", str(e))
        return 1
    except json.JSONDecodeError as e:
        logging.error("Invalid JSON input: %s", str(e))
        return 1
    except ET.ParseError as e:
        logging.error("Invalid configuration file: %s", str(e))
        return 1
    except requests.exceptions.RequestException as e:
        logging.error("Download failed: %s", str(e))
        return 1
    except (OSError, ValueError) as e:
        logging.error("%s", str(e))
        return 1
    except KeyboardInterrupt:
        logging.info("Interrupted by user")
        return 1
    except Exception as e:
        logging.exception("Critical error: %s", str(e))
        return 1


if __name__ == "__main__":
    sys.exit(main())
