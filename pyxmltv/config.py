"""
pyxmltv.config - Configuration management

Handles the optional XML settings file: output format, JSON indentation,
network options for remote sources and custom tag/attribute translations.
"""

import logging
import xml.etree.ElementTree as ET
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

from .translations import TranslationRegistry, get_default_registry


class ConfigManager:
    """Manages the pyxmltv settings file"""

    DEFAULT_CONFIG = """<?xml version="1.0" encoding="utf-8"?>
<settings version="1">
  <!-- Output: object (JSON), dom (JSON node tree) or xml (normalized XMLTV) -->
  <setting id="format">object</setting>
  <setting id="indent">2</setting>

  <!-- Remote sources -->
  <setting id="timeout">30</setting>
  <setting id="retries">3</setting>

  <!-- Custom names, eg:
  <translation type="tag" id="programme">shows</translation>
  <translation type="attribute" id="start">begins</translation>
  -->
</settings>"""

    # Valid settings and their types
    VALID_SETTINGS = {
        "format": str,
        "indent": int,
        "timeout": int,
        "retries": int,
    }

    DEFAULTS = {
        "format": "object",
        "indent": 2,
        "timeout": 30,
        "retries": 3,
    }

    FORMATS = ("object", "dom", "xml")
    TRANSLATION_TYPES = ("tag", "attribute")

    def __init__(self, config_file: Optional[Path] = None):
        self.config_file = Path(config_file) if config_file else None
        self.settings: Dict[str, Any] = dict(self.DEFAULTS)
        self.translations: List[Tuple[str, str, str]] = []
        self.version: str = "1"
        self.config_changes: Dict[str, str] = {}

    def load_config(self, **overrides) -> Dict[str, Any]:
        """
        Load the settings file (if any) and apply command line overrides

        Args:
            **overrides: setting id -> value; None values are ignored

        Returns:
            The effective settings

        Raises:
            ValueError: a setting has an invalid value
            ET.ParseError: the settings file isn't well-formed
        """
        if self.config_file is not None:
            if not self.config_file.exists():
                self._create_default_config()
            self._parse_config_file()

        self.config_changes = {}
        for setting_id, value in overrides.items():
            if value is None:
                continue
            if setting_id not in self.VALID_SETTINGS:
                raise ValueError(f"Unknown setting: {setting_id}")
            original = self.settings.get(setting_id)
            value = self._convert(setting_id, value)
            if original != value:
                self.config_changes[setting_id] = f"{original} → {value}"
            self.settings[setting_id] = value

        self._validate_config()
        return self.settings

    def _create_default_config(self):
        """Create default configuration file"""
        logging.info("Creating default configuration: %s", self.config_file)
        self.config_file.parent.mkdir(parents=True, exist_ok=True)
        with open(self.config_file, "w", encoding="utf-8") as f:
            f.write(self.DEFAULT_CONFIG)

    def _parse_config_file(self):
        """Parse XML configuration file"""
        try:
            tree = ET.parse(self.config_file)
        except ET.ParseError as e:
            logging.error("Cannot parse configuration file %s: %s", self.config_file, e)
            raise

        root = tree.getroot()
        logging.info("Reading configuration from: %s", self.config_file)
        self.version = root.attrib.get("version", "1")

        for setting in root.findall("setting"):
            setting_id = setting.get("id")
            setting_value = setting.get("value")
            if setting_value is None:
                setting_value = (setting.text or "").strip()

            if setting_id not in self.VALID_SETTINGS:
                logging.warning(
                    "Unknown configuration setting: %s = %s (ignored)", setting_id, setting_value
                )
                continue

            if setting_value == "":
                continue

            self.settings[setting_id] = self._convert(setting_id, setting_value)
            logging.debug("Config setting: %s = %s", setting_id, self.settings[setting_id])

        self.translations = []
        for translation in root.findall("translation"):
            kind = translation.get("type", "tag")
            name = translation.get("id")
            canonical = (translation.text or "").strip()

            if kind not in self.TRANSLATION_TYPES or not name or not canonical:
                logging.warning(
                    "Incomplete translation entry ignored: type=%s id=%s value=%s",
                    kind,
                    name,
                    canonical,
                )
                continue

            self.translations.append((kind, name, canonical))
            logging.debug("Config translation: %s %s -> %s", kind, name, canonical)

    def _convert(self, setting_id: str, value: Any) -> Any:
        expected_type = self.VALID_SETTINGS[setting_id]
        if expected_type == int:
            try:
                return int(value)
            except (TypeError, ValueError):
                raise ValueError(f'Setting "{setting_id}" must be an integer, got: {value}')
        return str(value).strip()

    def _validate_config(self):
        """Validate setting values"""
        output_format = self.settings["format"]
        if output_format not in self.FORMATS:
            raise ValueError(
                f'Invalid format "{output_format}", expected one of: {", ".join(self.FORMATS)}'
            )

        if self.settings["indent"] < 0:
            raise ValueError(f'Invalid indent {self.settings["indent"]}, must be 0 or more')

        if self.settings["timeout"] <= 0:
            logging.warning("Invalid timeout %d, using default 30", self.settings["timeout"])
            self.settings["timeout"] = 30

        if self.settings["retries"] < 0:
            logging.warning("Invalid retries %d, using default 3", self.settings["retries"])
            self.settings["retries"] = 3

    def build_registry(self, base: Optional[TranslationRegistry] = None) -> TranslationRegistry:
        """
        Get a registry with the configured translations applied

        The base registry (the default one if omitted) is copied, never modified.

        Raises:
            InvalidSchemaName: a translation names an unknown tag or attribute
        """
        registry = (base or get_default_registry()).copy()
        for kind, name, canonical in self.translations:
            if kind == "tag":
                registry.add_tag_translation(name, canonical)
            else:
                registry.add_attribute_translation(name, canonical)
        return registry

    def log_config_summary(self):
        """Log the effective configuration"""
        logging.info("Configuration values processed:")
        for setting_id in self.VALID_SETTINGS:
            logging.info("  %s: %s", setting_id, self.settings.get(setting_id))
        if self.translations:
            logging.info("  translations: %d custom", len(self.translations))
        for setting_id, change in self.config_changes.items():
            logging.info("  %s changed from command line: %s", setting_id, change)
