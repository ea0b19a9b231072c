from pathlib import Path

import click

from vault_deployment.constants import (
    CREATE_VAULT_TAG,
    NAMED_ACCOUNTS_FILEPATH,
    REGISTRY_FILEPATH,
)


registry_filepath_option = click.option(
    "--registry-filepath",
    "-f",
    help="Filepath of the deployment registry",
    type=click.Path(dir_okay=False, exists=True, path_type=Path),
    default=REGISTRY_FILEPATH,
    show_default=True,
)

accounts_filepath_option = click.option(
    "--accounts-filepath",
    "-n",
    help="Filepath of the named accounts YAML",
    type=click.Path(dir_okay=False, exists=True, path_type=Path),
    default=NAMED_ACCOUNTS_FILEPATH,
    show_default=True,
)

tag_option = click.option(
    "--tag",
    "-t",
    "tags",
    help="Tag of the deployment task(s) to run; dependencies run first.",
    multiple=True,
    default=[CREATE_VAULT_TAG],
    show_default=True,
)

autosign_option = click.option(
    "--autosign",
    help="Sign transactions without asking for confirmation.",
    is_flag=True,
    default=False,
)
