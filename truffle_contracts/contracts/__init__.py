"""Compiled contract metadata."""
from .contract import ContractMetadata

__all__ = ["ContractMetadata"]
