import json

import pytest

from vault_deployment.constants import DEPLOYER, YIELD_VAULT_FACTORY
from vault_deployment.environment import DeploymentEnvironment
from vault_deployment.events import Receipt
from vault_deployment.registry import DeploymentNotFound, RegistryEntry

# EIP-55 checksum test vectors
DEPLOYER_ADDRESS = "0x5aAeb6053F3E94C9b9A09f33669435E7Ef1BeAed"
FACTORY_ADDRESS = "0xfB6916095ca1df60bB79Ce92cE3Ea74c37c5d359"
OTHER_ADDRESS = "0xdbF03B407c01E7cD3CBea99509d93f8DDDC8C6FB"

CHAIN_ID = 11155111
OTHER_CHAIN_ID = 1


class FakeEnvironment(DeploymentEnvironment):
    """In-memory environment recording every call made to it, in order."""

    def __init__(self, named_accounts=None, deployments=None, events=()):
        self.named_accounts = named_accounts or dict()
        self.deployments = deployments or dict()
        self.events = tuple(events)
        self.calls = list()

    def resolve_account(self, role):
        self.calls.append(("resolve_account", role))
        return self.named_accounts.get(role)

    def get_deployment(self, name):
        self.calls.append(("get_deployment", name))
        try:
            return self.deployments[name]
        except KeyError:
            raise DeploymentNotFound(f"No deployment found for '{name}'")

    def execute(self, contract_name, sender, method, args):
        self.calls.append(("execute", contract_name, sender, method, list(args)))
        return Receipt(txn_hash="0x01", block_number=1, events=self.events)

    def log(self, message):
        self.calls.append(("log", message))

    def calls_to(self, name):
        return [call for call in self.calls if call[0] == name]


@pytest.fixture
def factory_deployment():
    return RegistryEntry(
        chain_id=CHAIN_ID,
        name=YIELD_VAULT_FACTORY,
        address=FACTORY_ADDRESS,
        abi=[],
        tx_hash="0xabc",
        block_number=100,
        deployer=DEPLOYER_ADDRESS,
    )


@pytest.fixture
def make_environment(factory_deployment):
    def make_environment(events=(), deployer=DEPLOYER_ADDRESS, deployments=None):
        if deployments is None:
            deployments = {YIELD_VAULT_FACTORY: factory_deployment}
        return FakeEnvironment(
            named_accounts={DEPLOYER: deployer},
            deployments=deployments,
            events=events,
        )

    return make_environment


@pytest.fixture
def registry_filepath(tmp_path):
    data = {
        str(CHAIN_ID): {
            YIELD_VAULT_FACTORY: {
                "address": FACTORY_ADDRESS.lower(),
                "abi": [],
                "tx_hash": "0xabc",
                "block_number": 100,
                "deployer": DEPLOYER_ADDRESS,
            },
        },
        str(OTHER_CHAIN_ID): {
            YIELD_VAULT_FACTORY: {
                "address": OTHER_ADDRESS,
                "abi": [],
                "tx_hash": "0xdef",
                "block_number": "200",
                "deployer": DEPLOYER_ADDRESS,
            },
            "VaultAuth": {
                "address": DEPLOYER_ADDRESS,
                "abi": [],
                "tx_hash": "0x123",
                "block_number": 201,
                "deployer": DEPLOYER_ADDRESS,
            },
        },
    }
    filepath = tmp_path / "deployments.json"
    with open(filepath, "w") as file:
        json.dump(data, file, indent=4)
    return filepath
