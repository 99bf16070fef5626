"""
Artifact loader for compiled smart contracts.

This module reads the Truffle build directory and turns every compiled
artifact that has both an ABI and bytecode into ContractMetadata.
"""

import json
import logging
import os
import stat
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from typing import List, Optional

from ..config.paths import PathResolver
from ..contracts.contract import ContractMetadata
from ..exceptions import ArtifactParseError, BuildDirectoryMissing

logger = logging.getLogger(__name__)

ARTIFACT_EXTENSION = ".json"
SOLIDITY_EXTENSION = ".sol"


def contract_name_from_source_path(source_path: str) -> str:
    """
    Get the contract name for a Solidity source file.

    Args:
        source_path: Path to the source (e.g., 'contracts/Token.sol')

    Returns:
        Base name without the '.sol' extension (e.g., 'Token')
    """
    name = os.path.basename(source_path)
    if name.endswith(SOLIDITY_EXTENSION) and name != SOLIDITY_EXTENSION:
        return name[:-len(SOLIDITY_EXTENSION)]
    return name


def load_artifact(artifact_path: str) -> Optional[ContractMetadata]:
    """
    Load metadata from a single artifact file.

    Args:
        artifact_path: Path to the artifact JSON

    Returns:
        ContractMetadata, or None if the file is gone or lacks ABI/bytecode

    Raises:
        ArtifactParseError: If the file is not valid UTF-8 JSON
    """
    if not os.path.exists(artifact_path):
        logger.debug("Artifact %s disappeared before it was read", artifact_path)
        return None

    with open(artifact_path, "rb") as f:
        content = f.read()

    try:
        artifact = json.loads(content.decode("utf-8"))
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise ArtifactParseError(artifact_path, e) from e

    metadata = ContractMetadata.from_artifact(artifact, artifact_path)
    if metadata is None:
        logger.debug("Skipping %s: no ABI or bytecode", artifact_path)
    return metadata


class ArtifactLoader:
    """Loads every compiled contract from the project's build directory."""

    def __init__(
        self,
        path_resolver: Optional[PathResolver] = None,
        max_workers: Optional[int] = None
    ):
        self.path_resolver = path_resolver or PathResolver()
        self.max_workers = max_workers

    def get_artifact_paths(self) -> List[str]:
        """
        List artifact files in the build directory.

        Returns:
            Paths of regular '.json' files, sorted by name

        Raises:
            BuildDirectoryMissing: If the build directory does not exist
        """
        build_dir = self.path_resolver.get_build_folder_path()

        if not os.path.exists(build_dir):
            raise BuildDirectoryMissing(build_dir)

        paths = []
        for entry in sorted(os.listdir(build_dir)):
            if Path(entry).suffix != ARTIFACT_EXTENSION:
                continue
            path = os.path.join(build_dir, entry)
            if stat.S_ISREG(os.lstat(path).st_mode):
                paths.append(path)
        return paths

    def load_all(self) -> List[ContractMetadata]:
        """
        Load metadata for every complete artifact in the build directory.

        Files are read concurrently. A corrupt artifact fails the whole
        call; missing or incomplete ones are left out.

        Raises:
            BuildDirectoryMissing: If the build directory does not exist
            ArtifactParseError: If any artifact is not valid JSON
        """
        artifact_paths = self.get_artifact_paths()
        if not artifact_paths:
            return []

        with ThreadPoolExecutor(max_workers=self.max_workers) as executor:
            results = list(executor.map(load_artifact, artifact_paths))

        contracts = [metadata for metadata in results if metadata is not None]
        logger.debug(
            "Loaded %d of %d artifacts", len(contracts), len(artifact_paths)
        )
        return contracts


def load_all_artifacts() -> List[ContractMetadata]:
    """Load every complete artifact from the ambient project's build directory."""
    return ArtifactLoader().load_all()


get_compiled_contracts_metadata = load_all_artifacts
