"""
Truffle project contracts package

Resolves a Truffle project's source, migration and build directories,
loads compiled contract artifacts, and fetches deployed bytecode for
on-chain verification.
"""

__version__ = "1.0.0"
__author__ = "Truffle Tooling"

from .artifacts.loader import (
    ArtifactLoader,
    contract_name_from_source_path,
    get_compiled_contracts_metadata,
    load_all_artifacts,
    load_artifact,
)
from .config.paths import (
    DirectoryRole,
    PathResolver,
    get_build_folder_path,
    get_contracts_folder_path,
    get_migration_folder_path,
    resolve_directory,
)
from .config.workspace import Workspace
from .contracts.contract import ContractMetadata
from .exceptions import (
    ArtifactParseError,
    BuildDirectoryMissing,
    ConfigurationError,
    RpcError,
    TruffleContractsError,
    WorkspaceRootNotFound,
)
from .rpc.bytecode import (
    BytecodeFetcher,
    fetch_deployed_bytecode,
    get_deployed_bytecode_by_address,
)

__all__ = [
    'ArtifactLoader',
    'ArtifactParseError',
    'BuildDirectoryMissing',
    'BytecodeFetcher',
    'ConfigurationError',
    'ContractMetadata',
    'DirectoryRole',
    'PathResolver',
    'RpcError',
    'TruffleContractsError',
    'Workspace',
    'WorkspaceRootNotFound',
    'contract_name_from_source_path',
    'fetch_deployed_bytecode',
    'get_build_folder_path',
    'get_compiled_contracts_metadata',
    'get_contracts_folder_path',
    'get_deployed_bytecode_by_address',
    'get_migration_folder_path',
    'load_all_artifacts',
    'load_artifact',
    'resolve_directory',
]
