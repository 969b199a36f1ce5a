"""
Configuration file loaders.

Supported formats: json, ini, xml and yaml (also yml). The format is taken
from the file extension unless given explicitly.
"""

import configparser
import json
import os
import xml.etree.ElementTree as ET
from collections.abc import Mapping
from pathlib import Path
from typing import Any, Callable, Dict, Optional, Union

import yaml

from microconfig.core.exceptions import (
    InvalidParseResult, ParseFailure, SourceUnreadable, UnsupportedFormat
)
from microconfig.logger import get_microconfig_logger

logger = get_microconfig_logger().bind(component="ConfigLoader")

Source = Union[str, os.PathLike]

INI_ROOT_SECTION = '__microconfig_root__'


def _load_json(path: Path) -> Any:
    with open(path, 'r', encoding='utf-8') as f:
        try:
            return json.load(f)
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise ParseFailure(str(path), 'json', str(e)) from e


def _load_ini(path: Path) -> Any:
    parser = configparser.ConfigParser(interpolation=None, strict=False)
    parser.optionxform = str
    try:
        text = path.read_text(encoding='utf-8')
        # Keys above the first section header land in a synthetic section
        parser.read_string(f"[{INI_ROOT_SECTION}]\n{text}", source=str(path))
    except (configparser.Error, UnicodeDecodeError) as e:
        raise ParseFailure(str(path), 'ini', str(e)) from e

    # Sections are flattened into a single level
    data = dict(parser.defaults())
    for section in parser.sections():
        data.update(parser.items(section))
    return data


def _xml_element_to_value(element: ET.Element) -> Any:
    children = list(element)
    if not children and not element.attrib:
        text = (element.text or '').strip()
        return text if text else {}

    value: Dict[str, Any] = {}
    if element.attrib:
        value['@attributes'] = dict(element.attrib)
    for child in children:
        child_value = _xml_element_to_value(child)
        if child.tag in value:
            if not isinstance(value[child.tag], list):
                value[child.tag] = [value[child.tag]]
            value[child.tag].append(child_value)
        else:
            value[child.tag] = child_value
    return value


def _load_xml(path: Path) -> Any:
    try:
        root = ET.parse(path).getroot()
    except ET.ParseError as e:
        raise ParseFailure(str(path), 'xml', str(e)) from e
    value = _xml_element_to_value(root)
    # A text-only root keeps its text under the key '0'
    return value if isinstance(value, dict) else {'0': value}


def _load_yaml(path: Path) -> Any:
    with open(path, 'r', encoding='utf-8') as f:
        try:
            return yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ParseFailure(str(path), 'yaml', str(e)) from e


LOADERS: Dict[str, Callable[[Path], Any]] = {
    'json': _load_json,
    'ini': _load_ini,
    'xml': _load_xml,
    'yaml': _load_yaml,
    'yml': _load_yaml,
}


def load(source: Source, fmt: Optional[str] = None) -> Dict[str, Any]:
    """
    Load configuration data from a file.

    Args:
        source: Path to the configuration file
        fmt: Format name (json, ini, xml, yaml). Optional unless the format
            cannot be determined from the file extension.

    Returns:
        Configuration tree

    Raises:
        SourceUnreadable: the file is missing or not readable
        UnsupportedFormat: no loader for the format
        ParseFailure: the file content could not be parsed
        InvalidParseResult: the parsed data is not a mapping
    """
    path = Path(source)
    if not path.is_file() or not os.access(path, os.R_OK):
        raise SourceUnreadable(str(path))

    fmt = (fmt or path.suffix.lstrip('.')).lower()
    loader = LOADERS.get(fmt)
    if loader is None:
        raise UnsupportedFormat(fmt, str(path))

    data = loader(path)
    if not isinstance(data, Mapping):
        raise InvalidParseResult(str(path), type(data).__name__)

    logger.debug("Configuration loaded", source=str(path), format=fmt, keys=len(data))
    return dict(data)
