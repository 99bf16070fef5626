"""Project layout resolution from Truffle configuration."""
from .paths import (
    DirectoryRole,
    PathResolver,
    get_build_folder_path,
    get_contracts_folder_path,
    get_migration_folder_path,
    resolve_directory,
)
from .truffle import get_truffle_configuration
from .workspace import Workspace, get_path_by_platform, get_workspace_root

__all__ = [
    "DirectoryRole",
    "PathResolver",
    "Workspace",
    "get_build_folder_path",
    "get_contracts_folder_path",
    "get_migration_folder_path",
    "get_path_by_platform",
    "get_truffle_configuration",
    "get_workspace_root",
    "resolve_directory",
]
