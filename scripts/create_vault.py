#!/usr/bin/python3
import click
from ape.cli import ConnectedProviderCommand, network_option

from vault_deployment.create_vault import TASKS
from vault_deployment.options import (
    accounts_filepath_option,
    autosign_option,
    registry_filepath_option,
    tag_option,
)
from vault_deployment.transactor import ApeEnvironment
from vault_deployment.utils import check_plugins


@click.command(cls=ConnectedProviderCommand)
@network_option(required=True)
@tag_option
@registry_filepath_option
@accounts_filepath_option
@autosign_option
def cli(network, tags, registry_filepath, accounts_filepath, autosign):
    """
    Create a yield vault through the deployed YieldVaultFactory.

    ape run create_vault --network ethereum:sepolia:infura
    """
    check_plugins()
    environment = ApeEnvironment.from_yaml(
        accounts_filepath=accounts_filepath,
        registry_filepath=registry_filepath,
        autosign=autosign,
    )
    TASKS.run(environment=environment, tags=tags)


if __name__ == "__main__":
    cli()
