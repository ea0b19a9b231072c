from abc import ABC, abstractmethod
from typing import Any, Optional, Sequence

from eth_typing import ChecksumAddress

from vault_deployment.events import Receipt
from vault_deployment.registry import RegistryEntry


class DeploymentEnvironment(ABC):
    """
    The services a deployment task is allowed to use: named accounts,
    the deployment registry, and contract method execution.
    Tasks receive an environment explicitly instead of reaching for globals.
    """

    @abstractmethod
    def resolve_account(self, role: str) -> Optional[ChecksumAddress]:
        """Returns the address bound to a named account, or None if it is unset."""
        raise NotImplementedError

    @abstractmethod
    def get_deployment(self, name: str) -> RegistryEntry:
        """Returns the recorded deployment of `name`; raises DeploymentNotFound if absent."""
        raise NotImplementedError

    @abstractmethod
    def execute(
        self, contract_name: str, sender: ChecksumAddress, method: str, args: Sequence[Any]
    ) -> Receipt:
        """Sends `method(*args)` to a deployed contract and waits for the receipt."""
        raise NotImplementedError

    def log(self, message: str) -> None:
        print(message)
