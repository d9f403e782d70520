#!/usr/bin/env python3
"""
Onchain Chatbot

An LLM agent with a CDP wallet that can act on the blockchain, either in an
interactive chat or autonomously on a timer.

Architecture:
              +----------------+
              |  ReAct agent   |  (langgraph + OpenAI)
              +----------------+
                       |
        _______________|________________
       |               |                |
  AgentKit tools   BaseScan tools   DALL-E tool
       |
  CDP wallet provider  <-->  wallet_data.txt
"""

import logging
import sys

import config
from modes import choose_mode, run_autonomous_mode, run_chat_mode
from wallet.create_agent import create_agent


def main():
    """Validate the environment, build the agent, then run the chosen mode."""
    print("Starting Agent...")
    logging.basicConfig(
        level=config.get_log_level(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    config.validate_environment()

    try:
        agent_executor, agent_config = create_agent()

        mode = choose_mode()
        if mode == "chat":
            run_chat_mode(agent_executor, agent_config)
        else:
            run_autonomous_mode(agent_executor, agent_config, interval=config.get_autonomous_interval())
    except KeyboardInterrupt:
        print("Goodbye Agent!")
        sys.exit(0)
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
