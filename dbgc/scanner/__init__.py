"""Statement reconstruction and debug classification engine.

Pipeline per file:
    raw lines -> line_classifier -> reconstructor -> classifier -> Classification
"""

from .classifier import DebugClassifier
from .config import ScanConfig
from .engine import (
    disabled_view,
    read_source_lines,
    scan_batch,
    scan_disabled_lines,
    scan_file,
    scan_lines,
    to_source_lines,
)
from .exceptions import ConfigurationError, DbgcError, MalformedStatement
from .line_classifier import classify_line, classify_lines
from .models import (
    Classification,
    ClassificationReason,
    CommentState,
    FileScanResult,
    SourceLine,
    Statement,
)
from .profiles import (
    PROFILES,
    SUPPORTED_EXTENSIONS,
    LanguageProfile,
    get_profile,
    profile_for_path,
)
from .reconstructor import StatementReconstructor, reconstruct

__all__ = [
    "Classification",
    "ClassificationReason",
    "CommentState",
    "ConfigurationError",
    "DbgcError",
    "DebugClassifier",
    "FileScanResult",
    "LanguageProfile",
    "MalformedStatement",
    "PROFILES",
    "SUPPORTED_EXTENSIONS",
    "ScanConfig",
    "SourceLine",
    "Statement",
    "StatementReconstructor",
    "classify_line",
    "classify_lines",
    "disabled_view",
    "get_profile",
    "profile_for_path",
    "read_source_lines",
    "reconstruct",
    "scan_batch",
    "scan_disabled_lines",
    "scan_file",
    "scan_lines",
    "to_source_lines",
]
