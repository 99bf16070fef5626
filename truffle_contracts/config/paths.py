"""
Directory resolution for Truffle projects.

Sources, migrations and build output locations come from the Truffle
configuration; relative settings are resolved against the workspace root.
"""

import logging
import os
from enum import Enum
from typing import Any, Callable, Dict, Optional, Tuple

from ..exceptions import WorkspaceRootNotFound
from .truffle import get_truffle_configuration
from .workspace import Workspace, get_path_by_platform, get_workspace_root

logger = logging.getLogger(__name__)

ConfigurationProvider = Callable[[str, Optional[str]], Dict[str, Any]]
WorkspaceRootProvider = Callable[[], Optional[str]]


class DirectoryRole(Enum):
    """Project directories, keyed by their Truffle configuration name."""

    SOURCES = "contracts_directory"
    MIGRATIONS = "migrations_directory"
    BUILD = "contracts_build_directory"


class PathResolver:
    """
    Resolve project directories from Truffle configuration.

    Both collaborators can be replaced, which is how tests and editor
    integrations supply their own configuration source.
    """

    def __init__(
        self,
        configuration_provider: Optional[ConfigurationProvider] = None,
        workspace_root_provider: Optional[WorkspaceRootProvider] = None
    ):
        self.configuration_provider = configuration_provider or get_truffle_configuration
        self.workspace_root_provider = workspace_root_provider or get_workspace_root

    def resolve_directory(
        self,
        role: DirectoryRole,
        workspace: Optional[Workspace] = None
    ) -> str:
        """
        Get the absolute path of a project directory.

        Args:
            role: Which directory to resolve
            workspace: Project to resolve for; defaults to the ambient root

        Returns:
            The configured path if it is absolute, otherwise the configured
            path joined to the workspace root

        Raises:
            WorkspaceRootNotFound: If no workspace is given and there is no
                ambient workspace root
        """
        if workspace is not None:
            work_dir, config_name = self._from_workspace(workspace)
        else:
            work_dir, config_name = self._from_ambient_root()

        configuration = self.configuration_provider(work_dir, config_name)
        directory = configuration.get(role.value)

        if directory and os.path.isabs(directory):
            return directory

        resolved = os.path.normpath(os.path.join(work_dir, directory or ""))
        logger.debug("Resolved %s to %s", role.value, resolved)
        return resolved

    @staticmethod
    def _from_workspace(workspace: Workspace) -> Tuple[str, Optional[str]]:
        return get_path_by_platform(workspace.workspace), workspace.config_name

    def _from_ambient_root(self) -> Tuple[str, Optional[str]]:
        work_dir = self.workspace_root_provider()
        if work_dir is None:
            raise WorkspaceRootNotFound()
        return work_dir, None

    def get_contracts_folder_path(self, workspace: Workspace) -> str:
        return self.resolve_directory(DirectoryRole.SOURCES, workspace)

    def get_migration_folder_path(self) -> str:
        return self.resolve_directory(DirectoryRole.MIGRATIONS)

    def get_build_folder_path(self, workspace: Optional[Workspace] = None) -> str:
        return self.resolve_directory(DirectoryRole.BUILD, workspace)


def resolve_directory(role: DirectoryRole, workspace: Optional[Workspace] = None) -> str:
    """Resolve a project directory using the default collaborators."""
    return PathResolver().resolve_directory(role, workspace)


def get_contracts_folder_path(workspace: Workspace) -> str:
    """Get the Solidity sources directory of a workspace."""
    return PathResolver().get_contracts_folder_path(workspace)


def get_migration_folder_path() -> str:
    """Get the migrations directory of the ambient workspace."""
    return PathResolver().get_migration_folder_path()


def get_build_folder_path(workspace: Optional[Workspace] = None) -> str:
    """Get the build output directory, for a workspace or the ambient root."""
    return PathResolver().get_build_folder_path(workspace)
