import json
import os
from pathlib import Path

import yaml
from ape import networks

from vault_deployment.constants import LOCAL_NETWORKS


def _load_yaml(filepath: Path) -> dict:
    """Loads a YAML file."""
    with open(filepath, "r") as file:
        return yaml.safe_load(file)


def _load_json(filepath: Path) -> dict:
    """Loads a JSON file."""
    with open(filepath, "r") as file:
        return json.load(file)


def is_local_network() -> bool:
    return networks.provider.network.name in LOCAL_NETWORKS


def get_network_choice() -> str:
    """Returns the active network as '<ecosystem>:<network>', e.g. 'ethereum:sepolia'."""
    network = networks.provider.network
    return f"{network.ecosystem.name}:{network.name}"


def check_infura_plugin() -> None:
    """Checks that the ape-infura plugin is installed."""
    if is_local_network():
        return  # unnecessary for local deployment
    if networks.provider.name != "infura":
        return  # unnecessary when using a provider different than infura
    try:
        import ape_infura  # noqa: F401
        from ape_infura.provider import _ENVIRONMENT_VARIABLE_NAMES  # noqa: F401
    except ImportError:
        raise ImportError("Please install the ape-infura plugin to use this script.")
    for envvar in _ENVIRONMENT_VARIABLE_NAMES:
        api_key = os.environ.get(envvar)
        if api_key:
            break
    else:
        raise ValueError(
            f"No Infura API key found in "
            f"environment variables: {', '.join(_ENVIRONMENT_VARIABLE_NAMES)}"
        )


def check_plugins() -> None:
    print("Checking plugins...")
    check_infura_plugin()


def get_chain_name(chain_id: int) -> str:
    """Returns the name of the chain given its chain ID."""
    for ecosystem_name, ecosystem in networks.ecosystems.items():
        for network_name, network in ecosystem.networks.items():
            if network.chain_id == chain_id:
                return f"{ecosystem_name} {network_name}"
    raise ValueError(f"Chain ID {chain_id} not found in networks.")
