import logging
from typing import Any

from coinbase_agentkit import ActionProvider, EvmWalletProvider, create_action
from coinbase_agentkit.network import Network
from pydantic import BaseModel, Field
from web3 import Web3

logger = logging.getLogger(__name__)

ERC721_SAFE_MINT_ABI = [
    {
        "type": "function",
        "name": "safeMint",
        "inputs": [
            {"name": "to", "type": "address", "internalType": "address"},
            {"name": "uri", "type": "string", "internalType": "string"},
        ],
        "outputs": [],
        "stateMutability": "nonpayable",
    }
]


class MintErc721Schema(BaseModel):
    recipient: str = Field(..., description="Recipient wallet address")
    token_uri: str = Field(..., description="IPFS URI for NFT metadata")
    contract_address: str = Field(..., description="ERC721 contract address")


class NftMinterActionProvider(ActionProvider[EvmWalletProvider]):
    """Mints ERC721 tokens through the agent's own wallet."""

    def __init__(self):
        super().__init__("nft_minter", [])

    @create_action(
        name="mint_erc721",
        description="Mint ERC721 NFT to specified address",
        schema=MintErc721Schema,
    )
    def mint_erc721(self, wallet_provider: EvmWalletProvider, args: dict[str, Any]) -> str:
        try:
            validated = MintErc721Schema(**args)
            contract = Web3().eth.contract(
                address=Web3.to_checksum_address(validated.contract_address),
                abi=ERC721_SAFE_MINT_ABI,
            )
            data = contract.encode_abi(
                "safeMint",
                args=[Web3.to_checksum_address(validated.recipient), validated.token_uri],
            )

            tx_hash = wallet_provider.send_transaction(
                {"to": contract.address, "data": data}
            )
            wallet_provider.wait_for_transaction_receipt(tx_hash)
            return f"NFT minted successfully: {tx_hash}"
        except Exception as e:
            logger.warning("Minting failed: %s", e)
            return f"Minting failed: {str(e)}"

    def supports_network(self, network: Network) -> bool:
        return network.protocol_family == "evm"


def nft_minter_action_provider() -> NftMinterActionProvider:
    return NftMinterActionProvider()
