# splash_builder/project.py
import logging
import xml.etree.ElementTree as ET
from pathlib import Path

from .errors import ConfigParseError

logger = logging.getLogger(__name__)


def _local_name(tag: str) -> str:
    # "{http://www.w3.org/ns/widgets}name" -> "name"
    return tag.rsplit("}", 1)[-1]


def get_project_name(config_path: str | Path) -> str:
    """Read cordova's config.xml and return the <widget><name> text."""
    try:
        data = Path(config_path).read_bytes()
    except OSError as e:
        raise ConfigParseError(f"cannot read {config_path}: {e}") from e

    try:
        root = ET.fromstring(data)
    except ET.ParseError as e:
        raise ConfigParseError(f"{config_path} is not valid XML: {e}") from e

    if _local_name(root.tag) != "widget":
        raise ConfigParseError(f"{config_path}: root element is <{_local_name(root.tag)}>, expected <widget>")

    for child in root:
        if _local_name(child.tag) == "name":
            name = (child.text or "").strip()
            if name:
                logger.debug("project name %r read from %s", name, config_path)
                return name
            break

    raise ConfigParseError(f"{config_path}: <widget> has no <name>")
