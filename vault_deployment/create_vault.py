from typing import Optional

from eth_typing import ChecksumAddress

from vault_deployment.accounts import ConfigurationError
from vault_deployment.constants import (
    CREATE_VAULT_METHOD,
    CREATE_VAULT_TAG,
    DEPLOYER,
    VAULT_ASSET,
    VAULT_CREATED_EVENT,
    VAULT_NAME,
    VAULT_SYMBOL,
    YIELD_VAULT_FACTORY,
)
from vault_deployment.environment import DeploymentEnvironment
from vault_deployment.events import find_event
from vault_deployment.tasks import TASKS


@TASKS.task(tags=[CREATE_VAULT_TAG], dependencies=[YIELD_VAULT_FACTORY])
def create_vault(environment: DeploymentEnvironment) -> Optional[ChecksumAddress]:
    """
    Creates a vault through the deployed YieldVaultFactory, owned by the deployer.

    Returns the new vault address announced by the factory, or None when the
    receipt carries no UpgradableVaultCreated event.
    """
    deployer = environment.resolve_account(DEPLOYER)
    if not deployer:
        raise ConfigurationError(f"The '{DEPLOYER}' named account wasn't set")

    factory = environment.get_deployment(YIELD_VAULT_FACTORY)
    environment.log(f"Using {YIELD_VAULT_FACTORY} at: {factory.address}")

    receipt = environment.execute(
        YIELD_VAULT_FACTORY,
        sender=deployer,
        method=CREATE_VAULT_METHOD,
        args=[VAULT_NAME, VAULT_SYMBOL, VAULT_ASSET, deployer],
    )

    event = find_event(receipt.events, VAULT_CREATED_EVENT)
    if event is None:
        return None

    vault_address = event.args[0]
    print("Vault is deployed at:", vault_address)
    return vault_address
