"""Loader for the bundled vulnerable-class dataset."""

import json
import logging
from pathlib import Path
from typing import Any, List, Optional, Union

from ..models import Component

DEFAULT_DATASET = Path(__file__).parent / "resources" / "jc_dataset.json"


class DatasetError(Exception):
    """Base class for fatal dataset errors."""


class ResourceNotFound(DatasetError):
    """The dataset resource does not exist."""


class ParseError(DatasetError):
    """The dataset is not valid JSON or does not have the expected shape."""


class DatasetLoader:
    """
    Reads a JSON array of component records.

    Each element looks like
    ``{"component": str, "maven": str | null, "vulnerableClasses": [str, ...]}``.
    Unknown fields are ignored.
    """

    def __init__(
            self,
            path: Optional[Union[str, Path]] = None,
            logger: Optional[logging.Logger] = None
    ):
        """
        Initialize the loader.

        Args:
            path: Dataset file; defaults to the bundled jc_dataset.json
            logger: Logger to report through
        """
        self.path = Path(path) if path else DEFAULT_DATASET
        self.logger = logger or logging.getLogger(__name__)

    def load(self) -> List[Component]:
        """
        Load all components from the dataset file.

        Raises:
            ResourceNotFound: if the file is missing
            ParseError: if the content is malformed
        """
        if not self.path.is_file():
            raise ResourceNotFound(f"Could not find dataset resource: {self.path}")

        try:
            with open(self.path, 'r', encoding='utf-8') as f:
                content = f.read()
        except UnicodeDecodeError as e:
            raise ParseError(f"Dataset {self.path} is not valid UTF-8: {e}") from e
        except OSError as e:
            raise DatasetError(f"Could not read dataset {self.path}: {e}") from e

        components = self.load_string(content, source=str(self.path))
        self.logger.info(f"Loaded {len(components)} components from {self.path.name}")
        return components

    def load_string(self, content: str, source: str = "<string>") -> List[Component]:
        """Parse components from a JSON string."""
        try:
            data = json.loads(content)
        except json.JSONDecodeError as e:
            raise ParseError(f"Invalid JSON in {source}: {e}") from e

        if not isinstance(data, list):
            raise ParseError(f"Expected a JSON array in {source}, got {type(data).__name__}")

        return [self._parse_component(item, i, source) for i, item in enumerate(data)]

    def _parse_component(self, item: Any, index: int, source: str) -> Component:
        if not isinstance(item, dict):
            raise ParseError(f"{source}[{index}]: expected an object, got {type(item).__name__}")

        name = item.get("component", "")
        if not isinstance(name, str):
            raise ParseError(f"{source}[{index}].component: expected a string")

        maven = item.get("maven")
        if maven is not None and not isinstance(maven, str):
            raise ParseError(f"{source}[{index}].maven: expected a string or null")

        classes = item.get("vulnerableClasses")
        if classes is None:
            classes = []
        if not isinstance(classes, list) or not all(isinstance(c, str) for c in classes):
            raise ParseError(f"{source}[{index}].vulnerableClasses: expected an array of strings")

        return Component(name=name, coordinates=maven, vulnerable_classes=tuple(classes))


def load_components(
        path: Optional[Union[str, Path]] = None,
        logger: Optional[logging.Logger] = None
) -> List[Component]:
    """Load components from `path`, or the bundled dataset."""
    return DatasetLoader(path, logger=logger).load()
