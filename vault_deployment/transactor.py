import typing
from pathlib import Path
from typing import Any, List, Optional, Sequence

from ape import Contract, networks
from ape.api import AccountAPI, ReceiptAPI
from ape.contracts.base import ContractTransactionHandler
from ape_accounts import KeyfileAccount
from eth_typing import ChecksumAddress
from eth_utils import to_checksum_address, to_hex
from ethpm_types import ContractType, MethodABI
from web3 import Web3

from vault_deployment.accounts import (
    ConfigurationError,
    NamedAccounts,
    is_literal_address,
    load_account,
)
from vault_deployment.confirm import _confirm_transaction
from vault_deployment.environment import DeploymentEnvironment
from vault_deployment.events import Event, Receipt
from vault_deployment.registry import RegistryEntry, get_deployment
from vault_deployment.utils import get_network_choice

w3 = Web3()


def _validate_method_args(
    method_abis: List[MethodABI], args: typing.Sequence[Any]
) -> typing.Dict[str, Any]:
    """Validates the transaction arguments against the function ABI."""
    if len(method_abis) == 0:
        raise ValueError("No method abis provided for validation of args")

    abis_matching_args_length = [abi for abi in method_abis if len(abi.inputs) == len(args)]
    for abi in abis_matching_args_length:
        named_args = {}
        for arg, abi_input in zip(args, abi.inputs):
            if not w3.codec.is_encodable(abi_input.canonical_type, arg):
                break
            named_args[abi_input.name] = arg
        else:
            return named_args
    raise ValueError(
        f"Could not find ABI for '{method_abis[0].name}' with {len(args)} arg(s) and given type(s)"
    )


def _to_receipt(receipt: ReceiptAPI) -> Receipt:
    """Converts an ape receipt into a Receipt with its decoded events."""
    events = tuple(
        Event(name=log.event_name, args=tuple(log.event_arguments.values()))
        for log in receipt.events
    )
    txn_hash = receipt.txn_hash
    if not isinstance(txn_hash, str):
        txn_hash = to_hex(txn_hash)
    return Receipt(txn_hash=txn_hash, block_number=receipt.block_number, events=events)


class Transactor:
    """
    Represents an ape account plus validated/annotated transaction execution.
    """

    def __init__(self, account: AccountAPI, autosign: bool = False):
        self._account = account
        if autosign:
            print("WARNING: Autosign is enabled. Transactions will be signed automatically.")
        self._autosign = autosign
        if isinstance(self._account, KeyfileAccount):
            # test accounts always sign without prompting
            self._account.set_autosign(autosign)

    def transact(self, method: ContractTransactionHandler, *args) -> ReceiptAPI:
        named_args = _validate_method_args(method_abis=method.abis, args=args)
        description = (
            f"{method.contract.contract_type.name}[{method.contract.address[:10]}].{method}"
        )
        base_message = f"\nTransacting {description} from {self._account.address}"
        if named_args:
            pretty_args = "\n\t".join(f"{k}={v}" for k, v in named_args.items())
            message = f"{base_message} with arguments:\n\t{pretty_args}"
        else:
            message = f"{base_message} with no arguments"
        print(message)
        if not self._autosign:
            _confirm_transaction(description)

        # blocks until the transaction is mined; reverts raise from ape
        return method(*args, sender=self._account)


class ApeEnvironment(DeploymentEnvironment):
    """
    Deployment environment backed by the connected ape provider, a named accounts
    config and a deployment registry.
    """

    def __init__(
        self,
        named_accounts: NamedAccounts,
        registry_filepath: Path,
        chain_id: int,
        autosign: bool = False,
    ):
        self.named_accounts = named_accounts
        self.registry_filepath = registry_filepath
        self.chain_id = chain_id
        self.autosign = autosign
        self._named_addresses = set()
        self._transactors: typing.Dict[ChecksumAddress, Transactor] = dict()

    @classmethod
    def from_yaml(
        cls, accounts_filepath: Path, registry_filepath: Path, autosign: bool = False
    ) -> "ApeEnvironment":
        chain_id = networks.provider.network.chain_id
        named_accounts = NamedAccounts.from_yaml(
            accounts_filepath, network_choice=get_network_choice(), chain_id=chain_id
        )
        environment = cls(
            named_accounts=named_accounts,
            registry_filepath=registry_filepath,
            chain_id=chain_id,
            autosign=autosign,
        )
        environment._print_environment_info(accounts_filepath)
        return environment

    def resolve_account(self, role: str) -> Optional[ChecksumAddress]:
        value = self.named_accounts.get_value(role)
        if value is None:
            return None

        if is_literal_address(value):
            # the signer is looked up on first use
            address = to_checksum_address(value)
        else:
            account = load_account(value)
            address = account.address
            self._transactors[address] = Transactor(account, autosign=self.autosign)

        self._named_addresses.add(address)
        return address

    def get_deployment(self, name: str) -> RegistryEntry:
        return get_deployment(filepath=self.registry_filepath, chain_id=self.chain_id, name=name)

    def execute(
        self, contract_name: str, sender: ChecksumAddress, method: str, args: Sequence[Any]
    ) -> Receipt:
        transactor = self._get_transactor(sender)
        deployment = self.get_deployment(contract_name)
        contract_type = ContractType.model_validate(
            {"contractName": contract_name, "abi": deployment.abi}
        )
        contract = Contract(deployment.address, contract_type=contract_type)
        receipt = transactor.transact(getattr(contract, method), *args)
        return _to_receipt(receipt)

    def _get_transactor(self, sender: ChecksumAddress) -> Transactor:
        sender = to_checksum_address(sender)
        if sender not in self._named_addresses:
            raise ConfigurationError(f"Sender {sender} is not a resolved named account.")
        transactor = self._transactors.get(sender)
        if transactor is None:
            transactor = Transactor(load_account(sender), autosign=self.autosign)
            self._transactors[sender] = transactor
        return transactor

    def _print_environment_info(self, accounts_filepath: Path):
        print(
            f"Named accounts: {accounts_filepath}",
            f"Registry: {self.registry_filepath}",
            f"Ecosystem: {networks.provider.network.ecosystem.name}",
            f"Network: {networks.provider.network.name}",
            f"Chain ID: {self.chain_id}",
            f"Gas Price: {networks.provider.gas_price}",
            sep="\n",
        )
