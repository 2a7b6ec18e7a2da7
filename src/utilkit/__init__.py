"""UTILKIT

Small, stateless helpers for strings and sequences: case conversion,
validation, sanitization, and generic list transforms such as chunking,
grouping, deduplication and searching.
"""

import logging

__all__ = ["__version__"]
__version__ = "0.1.0"

# Silent until the application configures logging.
logging.getLogger(__name__).addHandler(logging.NullHandler())
