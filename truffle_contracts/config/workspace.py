"""
Workspace references and filesystem root lookup.

A workspace is the directory holding a Truffle project together with the
name of the configuration file that describes it.
"""

import os
import re
import sys
from dataclasses import dataclass
from typing import Optional

WORKSPACE_ROOT_ENV = "TRUFFLE_WORKSPACE_ROOT"

# URI-style Windows paths carry a leading slash before the drive letter
_WINDOWS_URI_DRIVE = re.compile(r"^/([a-zA-Z]:)")


@dataclass(frozen=True)
class Workspace:
    """
    Reference to a Truffle project on disk.

    Attributes:
        workspace: Root directory of the project
        config_name: Optional configuration file name (e.g. 'truffle-config.json')
    """

    workspace: str
    config_name: Optional[str] = None


def get_path_by_platform(path: str, platform: Optional[str] = None) -> str:
    """
    Normalize a workspace path for the current platform.

    On Windows '/c:/projects/token' becomes 'c:/projects/token'; on other
    platforms the path is returned unchanged.
    """
    platform = platform or sys.platform
    if platform.startswith("win"):
        return _WINDOWS_URI_DRIVE.sub(r"\1", path)
    return path


def get_workspace_root() -> Optional[str]:
    """Return the ambient workspace root (environment override or cwd)."""
    return os.environ.get(WORKSPACE_ROOT_ENV) or os.getcwd()
