#!/usr/bin/env python3
"""Summarize the compiled artifacts in a Truffle project's build directory"""

import sys
from pathlib import Path

# Add parent directory to path so we can import the package
sys.path.insert(0, str(Path(__file__).parent.parent))

from truffle_contracts.artifacts.loader import ArtifactLoader
from truffle_contracts.config.paths import PathResolver
from truffle_contracts.exceptions import TruffleContractsError


def validate(project_root=None):
    """Load every artifact and report which contracts are deployable"""
    resolver = PathResolver(
        workspace_root_provider=(lambda: project_root) if project_root else None
    )
    loader = ArtifactLoader(path_resolver=resolver)

    print(f"Validating build directory {resolver.get_build_folder_path()}...")

    try:
        artifact_paths = loader.get_artifact_paths()
        contracts = loader.load_all()
    except TruffleContractsError as e:
        print(f"  ❌ {e}")
        return 1

    print(f"\nFound {len(artifact_paths)} artifact files:")

    loaded = {Path(c.artifact_path).name for c in contracts}
    for contract in contracts:
        print(
            f"  ✅ {contract.contract_name}: {len(contract.abi)} ABI items, "
            f"{len(contract.bytecode)} bytecode chars"
        )
    for path in artifact_paths:
        if Path(path).name not in loaded:
            print(f"  ⚠️  {Path(path).stem}: no ABI or bytecode (interface?)")

    print()
    if contracts:
        print(f"✅ {len(contracts)} deployable contracts")
        return 0
    else:
        print("❌ No deployable contracts found")
        return 1


if __name__ == "__main__":
    sys.exit(validate(sys.argv[1] if len(sys.argv) > 1 else None))
