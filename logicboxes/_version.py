"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
LogicBoxes SDK, a product of Garudex Labs

Version information for the LogicBoxes SDK.

Installed copies report the distribution's metadata version; a source
checkout falls back to the VERSION file at the repository root.
"""

from importlib.metadata import PackageNotFoundError, version
from pathlib import Path

DISTRIBUTION = "logicboxes"


def get_version() -> str:
    """
    Resolve the SDK version.
    
    Returns:
        str: The version string (e.g., "1.0.0"), or "unknown"
    """
    try:
        return version(DISTRIBUTION)
    except PackageNotFoundError:
        pass

    version_file = Path(__file__).parent.parent / "VERSION"
    if version_file.exists():
        return version_file.read_text().strip()
    return "unknown"

__version__ = get_version()
