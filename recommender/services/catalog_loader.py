"""
Catalog Loader

Loads the smartphone catalog from a comma-separated text file. The first line
is a header; every following line is `device name, charging time, OS`.
Charging time is written as "<N>h <M>min" or "<N>h" and is normalized to minutes.

Usage:
    loader = CatalogLoader(catalog_path)
    catalog = loader.load()
    print(f"Loaded {len(catalog)} smartphones")
"""

import logging
import re
from pathlib import Path
from typing import List

from pydantic import ValidationError

from ..errors import LoadError
from ..models.smartphone import Smartphone

logger = logging.getLogger(__name__)

# Fields per record: device name, charging time, operating system
MIN_FIELDS = 3

_CHARGING_TIME_SEPARATORS = re.compile(r"[h\s]+")


def _parse_component(raw: str, text: str) -> int:
    try:
        return int(raw)
    except ValueError as e:
        raise LoadError(f"Invalid charging time {text!r}: {raw!r} is not a whole number") from e


def parse_charging_time(text: str) -> int:
    """
    Convert "<N>h <M>min" / "<N>h" to whole minutes.

    Examples: "1h 30min" -> 90, "2h" -> 120, "0h 45min" -> 45. Empty text is 0.

    Raises:
        LoadError: If the hour or minute component is not an integer
    """
    parts = [p for p in _CHARGING_TIME_SEPARATORS.split(text) if p]
    total_minutes = 0
    if len(parts) > 0:
        total_minutes += _parse_component(parts[0], text) * 60
    if len(parts) > 1:
        total_minutes += _parse_component(parts[1].replace("min", ""), text)
    return total_minutes


def parse_catalog(text: str) -> List[Smartphone]:
    """
    Parse catalog text into Smartphone records, preserving line order.

    The header line is skipped. Lines with fewer than three fields are dropped.

    Raises:
        LoadError: If a charging time or device name is invalid
    """
    smartphones: List[Smartphone] = []
    dropped = 0
    lines = text.splitlines()

    # First line is the header
    for line_number, line in enumerate(lines[1:], start=2):
        values = line.split(",")
        if len(values) < MIN_FIELDS:
            logger.debug("Dropping short catalog line %d: %r", line_number, line)
            dropped += 1
            continue

        device_name = values[0].strip()
        charging_time = parse_charging_time(values[1].strip())
        operating_system = values[2].strip()
        try:
            smartphones.append(
                Smartphone(
                    device_name=device_name,
                    charging_time_minutes=charging_time,
                    operating_system=operating_system,
                )
            )
        except ValidationError as e:
            raise LoadError(f"Invalid catalog record on line {line_number}: {line!r}") from e

    logger.info("Parsed %d smartphones (%d short lines dropped)", len(smartphones), dropped)
    return smartphones


class CatalogLoader:
    """Loads the smartphone catalog from a text file."""

    def __init__(self, catalog_path: Path, encoding: str = "utf-8"):
        """
        Initialize the catalog loader.

        Args:
            catalog_path: Path to the catalog file (header + comma-separated lines)
            encoding: Text encoding of the file
        """
        self.catalog_path = Path(catalog_path)
        self.encoding = encoding

    def load(self) -> List[Smartphone]:
        """
        Read and parse the catalog.

        Returns:
            Smartphones in file order

        Raises:
            LoadError: If the file can't be read or a record is invalid
        """
        try:
            text = self.catalog_path.read_text(encoding=self.encoding)
        except (OSError, UnicodeDecodeError) as e:
            raise LoadError(f"Cannot read catalog {self.catalog_path}: {e}") from e

        catalog = parse_catalog(text)
        logger.info("CatalogLoader: Loaded %d smartphones from %s", len(catalog), self.catalog_path)
        return catalog
