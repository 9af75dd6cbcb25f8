"""
Dataset loader for superhero records.

Reads the hero dataset (JSON or YAML) and parses it into Pydantic models.
Any problem with the file is raised once, as a typed DatasetLoadError, so
callers never receive a partially loaded collection.
"""

import json
import logging
from pathlib import Path

import yaml
from pydantic import ValidationError

from .models import Hero

logger = logging.getLogger(__name__)

JSON_SUFFIXES = (".json",)
YAML_SUFFIXES = (".yaml", ".yml")


class DatasetLoadError(Exception):
    """The hero dataset could not be loaded."""

    def __init__(self, message: str, path: Path | None = None):
        super().__init__(message)
        self.path = path


class DatasetNotFoundError(DatasetLoadError, FileNotFoundError):
    """The dataset file does not exist."""


class DatasetFormatError(DatasetLoadError):
    """The dataset file exists but its contents are malformed."""


class HeroDataLoader:
    """
    Loads the hero collection from a single data file.

    Accepted layouts are a top-level list of hero mappings, or a mapping
    with a "heroes" list.
    """

    def __init__(self, data_file: str | Path):
        """
        Initialize the data loader.

        Args:
            data_file: Path to the dataset (.json, .yaml or .yml).
        """
        self.data_file = Path(data_file)

    def _validate_data_file(self) -> None:
        """Validate that the dataset file exists and has a known format."""
        if not self.data_file.is_file():
            logger.error(f"Dataset not found: {self.data_file}")
            raise DatasetNotFoundError(f"Dataset not found: {self.data_file}", self.data_file)

        if self.data_file.suffix.lower() not in JSON_SUFFIXES + YAML_SUFFIXES:
            raise DatasetFormatError(
                f"Unsupported dataset format '{self.data_file.suffix}': {self.data_file}",
                self.data_file,
            )

    def _read_raw(self) -> object:
        """Parse the file into plain Python data."""
        with open(self.data_file, encoding="utf-8") as f:
            if self.data_file.suffix.lower() in JSON_SUFFIXES:
                return json.load(f)
            return yaml.safe_load(f)

    def _extract_records(self, raw: object) -> list:
        """Pull the list of hero records out of the parsed document."""
        if isinstance(raw, dict) and "heroes" in raw:
            raw = raw["heroes"]

        if not isinstance(raw, list):
            raise DatasetFormatError(
                f"Expected a list of heroes in {self.data_file}, got {type(raw).__name__}",
                self.data_file,
            )
        return raw

    def _parse_heroes(self, records: list) -> tuple[Hero, ...]:
        heroes = []
        seen_ids: set[str] = set()

        for index, record in enumerate(records):
            try:
                hero = Hero.model_validate(record)
            except ValidationError as e:
                logger.error(f"Validation error in {self.data_file} (record {index}):\n{e}")
                raise DatasetFormatError(
                    f"Invalid hero record at index {index} in {self.data_file}: {e}",
                    self.data_file,
                ) from e

            if hero.id_key in seen_ids:
                raise DatasetFormatError(
                    f"Duplicate hero id '{hero.id}' at index {index} in {self.data_file}",
                    self.data_file,
                )
            seen_ids.add(hero.id_key)
            heroes.append(hero)
            logger.debug(f"Loaded hero: {hero.id} ({hero.name})")

        return tuple(heroes)

    def load_heroes(self) -> tuple[Hero, ...]:
        """
        Load every hero in the dataset, in file order.

        Returns:
            Tuple of parsed Hero models.

        Raises:
            DatasetNotFoundError: The file does not exist.
            DatasetFormatError: The file cannot be parsed or a record is invalid.
        """
        self._validate_data_file()

        try:
            raw = self._read_raw()
        except json.JSONDecodeError as e:
            logger.error(f"JSON parse error in {self.data_file}:\n{e}")
            raise DatasetFormatError(f"JSON parse error in {self.data_file}: {e}", self.data_file) from e
        except yaml.YAMLError as e:
            logger.error(f"YAML parse error in {self.data_file}:\n{e}")
            raise DatasetFormatError(f"YAML parse error in {self.data_file}: {e}", self.data_file) from e

        heroes = self._parse_heroes(self._extract_records(raw))
        logger.info(f"Loaded {len(heroes)} heroes from {self.data_file}")
        return heroes
