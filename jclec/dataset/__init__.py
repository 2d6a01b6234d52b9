"""Dataset loading."""

from .loader import (
    DatasetLoader,
    DatasetError,
    ResourceNotFound,
    ParseError,
    DEFAULT_DATASET,
    load_components
)

__all__ = [
    "DatasetLoader",
    "DatasetError",
    "ResourceNotFound",
    "ParseError",
    "DEFAULT_DATASET",
    "load_components"
]
