from pathlib import Path

import vault_deployment

#
# Filesystem
#

DEPLOYMENT_DIR = Path(vault_deployment.__file__).parent
ARTIFACTS_DIR = DEPLOYMENT_DIR / "artifacts"
NAMED_ACCOUNTS_FILEPATH = DEPLOYMENT_DIR / "named_accounts.yml"
REGISTRY_FILEPATH = ARTIFACTS_DIR / "deployments.json"

#
# Named accounts
#

DEPLOYER = "deployer"
DEFAULT_NETWORK_KEY = "default"

#
# Contracts
#

YIELD_VAULT_FACTORY = "YieldVaultFactory"
CREATE_VAULT_METHOD = "createVault"
VAULT_CREATED_EVENT = "UpgradableVaultCreated"

#
# Vault parameters
#

VAULT_NAME = "Test Yield Vault"
VAULT_SYMBOL = "TYV"
VAULT_ASSET = "0xAA40c0c7644e0b2B224509571e10ad20d9C4ef28"

#
# Task tags
#

CREATE_VAULT_TAG = "CreateVault"

#
# Networks
#

LOCAL_NETWORKS = ["local"]
