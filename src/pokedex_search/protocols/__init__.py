"""Protocol interfaces for swappable implementations.

This package contains protocol definitions using structural typing.
Services depend on these, so the remote catalog and the language model
can be replaced by in-memory fakes in tests.
"""

from .catalog_source import CatalogSource
from .text_generator import TextGenerator

__all__ = [
    "CatalogSource",
    "TextGenerator",
]
