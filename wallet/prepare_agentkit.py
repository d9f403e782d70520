import json
import logging
import os

from coinbase_agentkit import (
    AgentKit,
    AgentKitConfig,

    CdpWalletProvider,
    CdpWalletProviderConfig,
    cdp_wallet_action_provider,

    cdp_api_action_provider,
    erc20_action_provider,
    pyth_action_provider,
    wallet_action_provider,
    weth_action_provider,
)

import config
from tools.basescan import basescan_action_provider
from wallet.nft_minter import nft_minter_action_provider


"""
AgentKit Configuration

This file configures the wallet provider and the action providers the agent can use.
It handles wallet setup and persistence, and initializes AgentKit with the
built-in providers plus the project's own BaseScan and NFT minting actions.

The wallet data file is an opaque blob produced by the wallet provider. It is
read verbatim at startup and rewritten once the agent has been fully initialized.
"""

logger = logging.getLogger(__name__)


def load_wallet_data(wallet_data_file):
    """Return persisted wallet data, or None if there is none to reuse."""
    if not os.path.exists(wallet_data_file):
        return None

    try:
        with open(wallet_data_file) as f:
            return f.read()
    except OSError as e:
        logger.error("Error reading wallet data: %s", e)
        return None


def save_wallet_data(wallet_provider, wallet_data_file):
    """Export the wallet and overwrite the data file with it."""
    wallet_data_json = json.dumps(wallet_provider.export_wallet().to_dict())
    with open(wallet_data_file, "w") as f:
        f.write(wallet_data_json)
    return wallet_data_json


def prepare_agentkit(wallet_data_file=None):
    """Initialize CDP AgentKit and return it together with its wallet provider.

    The wallet data file is only read here. Callers persist the wallet with
    save_wallet_data once the rest of their setup has succeeded.
    """
    if wallet_data_file is None:
        wallet_data_file = config.get_wallet_data_file()

    # Initialize WalletProvider
    wallet_data = load_wallet_data(wallet_data_file)

    cdp_config = CdpWalletProviderConfig(
        api_key_name=config.cdp_api_key_name(),
        api_key_private_key=config.cdp_private_key(),
        network_id=config.get_network_id(),
        wallet_data=wallet_data or None,
    )
    wallet_provider = CdpWalletProvider(cdp_config)

    # Initialize AgentKit
    agentkit = AgentKit(AgentKitConfig(
        wallet_provider=wallet_provider,
        action_providers=[
            weth_action_provider(),
            pyth_action_provider(),
            wallet_action_provider(),
            erc20_action_provider(),
            cdp_api_action_provider(),
            cdp_wallet_action_provider(),
            basescan_action_provider(),
            nft_minter_action_provider(),
        ]
    ))

    return agentkit, wallet_provider
