"""Artifact loading utilities for compiled smart contracts."""
from .loader import (
    ArtifactLoader,
    contract_name_from_source_path,
    get_compiled_contracts_metadata,
    load_all_artifacts,
    load_artifact,
)

__all__ = [
    "ArtifactLoader",
    "contract_name_from_source_path",
    "get_compiled_contracts_metadata",
    "load_all_artifacts",
    "load_artifact",
]
