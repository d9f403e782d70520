import logging

from coinbase_agentkit_langchain import get_langchain_tools
from langchain_openai import ChatOpenAI
from langgraph.checkpoint.memory import MemorySaver
from langgraph.prebuilt import create_react_agent

import config
from tools.image_generation import dalle_tool
from wallet.prepare_agentkit import prepare_agentkit, save_wallet_data

logger = logging.getLogger(__name__)

THREAD_ID = "CDP AgentKit Chatbot Example!"

AGENT_INSTRUCTIONS = (
    "You are a helpful agent that can interact onchain using the Coinbase Developer Platform AgentKit. "
    "You are empowered to interact onchain using your tools. If you ever need funds, you can request them "
    "from the faucet if you are on network ID 'base-sepolia'. If not, you can provide your wallet details and "
    "request funds from the user. Before executing your first action, get the wallet details to see what "
    "network you're on. If there is a 5XX (internal) HTTP error code, ask the user to try again later. If "
    "someone asks you to do something you can't do with your currently available tools, you must say so, and "
    "encourage them to implement it themselves using the CDP SDK + Agentkit. Be concise and helpful with "
    "your responses."
)


def create_agent(wallet_data_file=None):
    """Initialize the langgraph agent with AgentKit tools.

    Returns the agent executor and the run config that pins the conversation
    thread for the in-memory checkpointer.
    """
    if wallet_data_file is None:
        wallet_data_file = config.get_wallet_data_file()

    try:
        llm = ChatOpenAI(model=config.get_model_name())

        agentkit, wallet_provider = prepare_agentkit(wallet_data_file)
        tools = get_langchain_tools(agentkit)
        tools.append(dalle_tool(api_key=config.get_openai_api_key()))

        # Store buffered conversation history in memory
        memory = MemorySaver()
        agent_config = {"configurable": {"thread_id": THREAD_ID}}

        agent_executor = create_react_agent(
            llm,
            tools=tools,
            checkpointer=memory,
            prompt=AGENT_INSTRUCTIONS,
        )

        # Save wallet to file for reuse
        save_wallet_data(wallet_provider, wallet_data_file)
        logger.info("Wallet data saved to %s", wallet_data_file)
    except Exception as e:
        logger.error("Failed to initialize agent: %s", e)
        raise

    return agent_executor, agent_config
