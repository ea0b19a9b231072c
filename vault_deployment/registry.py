from pathlib import Path
from typing import List, NamedTuple, Optional

from eth_typing import ChecksumAddress
from eth_utils import to_checksum_address
from web3.types import ABI

from vault_deployment.utils import _load_json

ChainId = int
ContractName = str


class DeploymentNotFound(LookupError):
    """Raised when a contract has no recorded deployment for the active chain."""


class RegistryEntry(NamedTuple):
    """Represents a single deployment record in the registry."""

    chain_id: ChainId
    name: ContractName
    address: ChecksumAddress
    abi: ABI
    tx_hash: str
    block_number: int
    deployer: str


def read_registry(filepath: Path) -> List[RegistryEntry]:
    data = _load_json(filepath)
    registry_entries = list()
    for chain_id, entries in data.items():
        for contract_name, artifacts in entries.items():
            registry_entry = RegistryEntry(
                chain_id=int(chain_id),
                name=contract_name,
                address=to_checksum_address(artifacts["address"]),
                abi=artifacts["abi"],
                tx_hash=artifacts["tx_hash"],
                block_number=int(artifacts["block_number"]),
                deployer=artifacts["deployer"],
            )
            registry_entries.append(registry_entry)
    return registry_entries


def find_deployment(
    filepath: Path, chain_id: ChainId, name: ContractName
) -> Optional[RegistryEntry]:
    """Returns the registry entry for `name` on `chain_id`, if there is one."""
    for entry in read_registry(filepath=filepath):
        if entry.chain_id == chain_id and entry.name == name:
            return entry
    return None


def get_deployment(filepath: Path, chain_id: ChainId, name: ContractName) -> RegistryEntry:
    """Returns the registry entry for `name` on `chain_id`; raises if it was never deployed."""
    entry = find_deployment(filepath=filepath, chain_id=chain_id, name=name)
    if entry is None:
        raise DeploymentNotFound(
            f"No deployment found for '{name}' in registry '{filepath}' for chain {chain_id}"
        )
    return entry
