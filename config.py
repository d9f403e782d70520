"""
Environment configuration for the onchain chatbot.

Values are read from the process environment after loading an optional .env
file. Required secrets are checked up front so the bot never reaches the
wallet or the LLM with a half-configured environment.
"""

import os
import sys

from dotenv import load_dotenv

load_dotenv()

REQUIRED_VARS = ["OPENAI_API_KEY", "CDP_API_KEY_NAME", "CDP_API_KEY_PRIVATE_KEY"]

DEFAULT_NETWORK_ID = "base-sepolia"
DEFAULT_MODEL = "gpt-4o-mini"
DEFAULT_WALLET_DATA_FILE = "wallet_data.txt"
DEFAULT_AUTONOMOUS_INTERVAL = 10


def validate_environment():
    """Exit with status 1 if any required environment variable is missing."""
    missing_vars = [var_name for var_name in REQUIRED_VARS if not os.getenv(var_name)]

    if missing_vars:
        print("Error: Required environment variables are not set", file=sys.stderr)
        for var_name in missing_vars:
            print(f"{var_name}=your_{var_name.lower()}_here", file=sys.stderr)
        sys.exit(1)

    if not os.getenv("NETWORK_ID"):
        print("Warning: NETWORK_ID not set, defaulting to base-sepolia testnet")


def get_network_id() -> str:
    return os.getenv("NETWORK_ID") or DEFAULT_NETWORK_ID


def get_model_name() -> str:
    return os.getenv("OPENAI_MODEL") or DEFAULT_MODEL


def get_wallet_data_file() -> str:
    return os.getenv("WALLET_DATA_FILE") or DEFAULT_WALLET_DATA_FILE


def get_basescan_api_key() -> str:
    return os.getenv("BASESCAN_API_KEY", "")


def get_autonomous_interval() -> float:
    """Seconds to wait between autonomous turns."""
    value = os.getenv("AUTONOMOUS_INTERVAL")
    if not value:
        return DEFAULT_AUTONOMOUS_INTERVAL
    try:
        return float(value)
    except ValueError:
        print(f"Warning: invalid AUTONOMOUS_INTERVAL '{value}', using {DEFAULT_AUTONOMOUS_INTERVAL}s")
        return DEFAULT_AUTONOMOUS_INTERVAL


def get_log_level() -> str:
    return (os.getenv("LOG_LEVEL") or "WARNING").upper()


def get_openai_api_key() -> str:
    return os.getenv("OPENAI_API_KEY", "")


def cdp_api_key_name() -> str:
    return os.getenv("CDP_API_KEY_NAME", "")


def cdp_private_key() -> str:
    """CDP private key with escaped newlines restored, as PEM keys in .env are one line."""
    return os.getenv("CDP_API_KEY_PRIVATE_KEY", "").replace("\\n", "\n")
