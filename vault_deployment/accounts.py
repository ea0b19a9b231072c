import typing
from pathlib import Path
from typing import Any, Optional, Union

from ape import accounts
from ape.api import AccountAPI
from eth_utils import is_hex_address, to_checksum_address

from vault_deployment.constants import DEFAULT_NETWORK_KEY
from vault_deployment.utils import _load_yaml

NAMED_ACCOUNTS_KEY = "named_accounts"

AccountValue = Union[int, str]


class ConfigurationError(ValueError):
    """Raised when a named account is unset or the named accounts config is malformed."""


def _is_unset(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


class NamedAccounts:
    """
    Maps logical roles (e.g. 'deployer') to accounts, per network.

    A role maps either to a single value used on every network, or to a mapping
    keyed by network choice ('ethereum:sepolia'), chain id, or 'default'.
    Values are a test account index, a literal address, or an ape account alias.
    """

    def __init__(self, config: typing.Dict, network_choice: str, chain_id: int):
        named_accounts = (config or dict()).get(NAMED_ACCOUNTS_KEY)
        if not isinstance(named_accounts, dict):
            raise ConfigurationError(
                f"Named accounts config missing '{NAMED_ACCOUNTS_KEY}' mapping."
            )
        self.named_accounts = named_accounts
        self.network_choice = network_choice
        self.chain_id = chain_id

    @classmethod
    def from_yaml(cls, filepath: Path, *args, **kwargs) -> "NamedAccounts":
        config = _load_yaml(filepath)
        return cls(config, *args, **kwargs)

    def get_value(self, role: str) -> Optional[AccountValue]:
        """Returns the raw configured value for `role` on the active network, if any."""
        value = self.named_accounts.get(role)
        if isinstance(value, dict):
            for key in (self.network_choice, self.chain_id, str(self.chain_id)):
                if key in value:
                    value = value[key]
                    break
            else:
                value = value.get(DEFAULT_NETWORK_KEY)

        if _is_unset(value):
            return None
        if isinstance(value, bool) or not isinstance(value, (int, str)):
            raise ConfigurationError(f"Invalid value '{value}' for named account '{role}'.")
        return value


def is_literal_address(value: AccountValue) -> bool:
    return isinstance(value, str) and is_hex_address(value)


def load_account(value: AccountValue) -> AccountAPI:
    """Loads the ape account a named account value refers to."""
    if isinstance(value, int):
        return accounts.test_accounts[value]
    if is_literal_address(value):
        return accounts[to_checksum_address(value)]
    return accounts.load(value)
