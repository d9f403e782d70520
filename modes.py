"""
Chat and autonomous run loops for the agent.

Both loops hand every turn to the langgraph agent and print its streamed
output. Any error raised by the agent ends the process with exit status 1.
"""

import logging
import sys
import time

from langchain_core.messages import HumanMessage

logger = logging.getLogger(__name__)

EXIT_COMMAND = "exit"
SEPARATOR = "-------------------"

AUTONOMOUS_PROMPT = (
    "Be creative and do something interesting on the blockchain. "
    "Choose an action or set of actions and execute it that highlights your abilities."
)


def print_stream(agent_executor, config, text):
    """Send one message to the agent and print each streamed step as it arrives."""
    messages = [HumanMessage(content=text)]
    for chunk in agent_executor.stream({"messages": messages}, config):
        if "agent" in chunk:
            print(chunk["agent"]["messages"][0].content)
        elif "tools" in chunk:
            print(chunk["tools"]["messages"][0].content)
        print(SEPARATOR)


def _fail(error):
    logger.debug("Agent loop aborted", exc_info=error)
    print(f"Error: {error}", file=sys.stderr)
    sys.exit(1)


def run_autonomous_mode(agent_executor, config, interval=10):
    """Run the agent autonomously, waiting `interval` seconds between turns."""
    print("Starting autonomous mode...")
    while True:
        try:
            print_stream(agent_executor, config, AUTONOMOUS_PROMPT)
            time.sleep(interval)
        except Exception as e:
            _fail(e)


def run_chat_mode(agent_executor, config):
    """Run the agent interactively until the user types 'exit'."""
    print(f"Starting chat mode... Type '{EXIT_COMMAND}' to end.")
    while True:
        try:
            user_input = input("\nPrompt: ")
        except EOFError:
            break

        if user_input.lower() == EXIT_COMMAND:
            break

        try:
            print_stream(agent_executor, config, user_input)
        except Exception as e:
            _fail(e)


def choose_mode():
    """Ask the user for a run mode and return "chat" or "auto"."""
    while True:
        print("\nAvailable modes:")
        print("1. chat    - Interactive chat mode")
        print("2. auto    - Autonomous action mode")

        try:
            choice = input("\nChoose a mode (enter number or name): ").lower().strip()
        except EOFError:
            raise EOFError("end of input while choosing a mode") from None

        if choice in ("1", "chat"):
            return "chat"
        elif choice in ("2", "auto"):
            return "auto"
        print("Invalid choice. Please try again.")
