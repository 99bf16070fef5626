"""
Contract metadata parsed from a compiled Truffle artifact.

Only artifacts carrying both an ABI and creation bytecode produce metadata;
interfaces and abstract contracts compile without bytecode and are skipped.
"""

from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional

from web3 import Web3


# abi and networks are left out of the hash; networks is a read-only view
@dataclass(frozen=True)
class ContractMetadata:
    """
    A compiled contract ready for deployment or verification.

    Attributes:
        contract_name: Name of the contract (e.g., 'MetaCoin')
        abi: Contract ABI, kept as found in the artifact
        bytecode: Creation bytecode as a hex string
        deployed_bytecode: Runtime bytecode, if the artifact has it
        source_path: Path of the Solidity source the artifact was built from
        networks: Deployments recorded by Truffle, keyed by network id
        artifact_path: File the metadata was loaded from
    """

    contract_name: str
    abi: Any = field(hash=False)
    bytecode: str
    deployed_bytecode: Optional[str] = None
    source_path: Optional[str] = None
    networks: Mapping[str, Any] = field(default_factory=dict, hash=False)
    artifact_path: Optional[str] = None

    @classmethod
    def from_artifact(
        cls,
        artifact: Dict[str, Any],
        artifact_path: Optional[str] = None
    ) -> Optional["ContractMetadata"]:
        """
        Build metadata from a parsed artifact.

        Args:
            artifact: Artifact JSON as a dictionary
            artifact_path: File the artifact was read from

        Returns:
            ContractMetadata, or None if the ABI or bytecode is missing
        """
        if not isinstance(artifact, dict):
            return None

        abi = artifact.get("abi")
        bytecode = artifact.get("bytecode")
        if not abi or not bytecode:
            return None

        networks = artifact.get("networks")
        contract_name = artifact.get("contractName")
        if not contract_name and artifact_path:
            contract_name = Path(artifact_path).stem

        return cls(
            contract_name=contract_name or "",
            abi=abi,
            bytecode=bytecode,
            deployed_bytecode=artifact.get("deployedBytecode"),
            source_path=artifact.get("sourcePath"),
            networks=MappingProxyType(dict(networks) if isinstance(networks, dict) else {}),
            artifact_path=str(artifact_path) if artifact_path else None,
        )

    def function_abi(self, function_name: str) -> Optional[Dict[str, Any]]:
        """Find the ABI entry for a function, or None if it is not declared."""
        if not isinstance(self.abi, list):
            return None
        for item in self.abi:
            if not isinstance(item, dict):
                continue
            if item.get("type") == "function" and item.get("name") == function_name:
                return item
        return None

    def function_selector(self, function_name: str) -> Optional[str]:
        """
        Get the function selector (4-byte signature) for a function.

        Args:
            function_name: Name of the function

        Returns:
            Selector as a '0x' hex string, or None if not found
        """
        item = self.function_abi(function_name)
        if item is None:
            return None

        inputs = ",".join(inp["type"] for inp in item.get("inputs", []))
        signature = f"{function_name}({inputs})"
        return Web3.to_hex(Web3.keccak(text=signature)[:4])
