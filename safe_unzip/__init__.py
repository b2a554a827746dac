"""safe-unzip - extract untrusted ZIP archives.

Public helpers:
* `extract` / `Extractor` - validate entry names, then bulk-extract
* `is_valid_path` - default entry name policy, replaceable per Extractor
* `status_to_text` - archive status code diagnostics
* Thin CLI wrapper (`safe-unzip`)
"""

from .errors import (  # noqa: F401
    ArchiveOpenError,
    ExtractionError,
    InvalidPathError,
    SafeUnzipError,
)
from .extractor import Extractor, extract, normalize_target_directory  # noqa: F401
from .logging_config import configure_logging  # noqa: F401
from .reader import EntryStat, ZipArchiveReader  # noqa: F401
from .status import status_to_text  # noqa: F401
from .validation import PathValidator, is_valid_path, normalize_entry_name  # noqa: F401

__version__ = "1.0.0"

__all__ = [
    "__version__",
    "configure_logging",
    "extract",
    "Extractor",
    "normalize_target_directory",
    "ZipArchiveReader",
    "EntryStat",
    "is_valid_path",
    "normalize_entry_name",
    "PathValidator",
    "status_to_text",
    "SafeUnzipError",
    "ArchiveOpenError",
    "InvalidPathError",
    "ExtractionError",
]
