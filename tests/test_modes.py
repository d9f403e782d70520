"""
Tests for the chat and autonomous loops and the mode menu.
"""

from unittest.mock import MagicMock, patch

import pytest
from langchain_core.messages import AIMessage, ToolMessage

import modes


def make_agent(chunks=None):
    agent = MagicMock()
    agent.stream.side_effect = lambda *args, **kwargs: iter(chunks or [])
    return agent


def feed_input(monkeypatch, lines):
    answers = iter(lines)

    def fake_input(prompt=""):
        try:
            return next(answers)
        except StopIteration:
            raise EOFError

    monkeypatch.setattr("builtins.input", fake_input)


def sent_texts(agent):
    return [c.args[0]["messages"][0].content for c in agent.stream.call_args_list]


class TestPrintStream:

    def test_prints_agent_and_tool_output(self, capsys):
        chunks = [
            {"tools": {"messages": [ToolMessage(content="Wallet: 0xabc", tool_call_id="1")]}},
            {"agent": {"messages": [AIMessage(content="Your wallet is 0xabc")]}},
        ]
        agent = make_agent(chunks)
        run_config = {"configurable": {"thread_id": "t"}}

        modes.print_stream(agent, run_config, "who am I?")

        out = capsys.readouterr().out.splitlines()
        assert out == ["Wallet: 0xabc", modes.SEPARATOR, "Your wallet is 0xabc", modes.SEPARATOR]
        assert agent.stream.call_args.args[1] is run_config
        assert sent_texts(agent) == ["who am I?"]


class TestChatMode:

    @pytest.mark.parametrize("sentinel", ["exit", "EXIT", "Exit", "eXiT"])
    def test_exit_is_case_insensitive(self, monkeypatch, sentinel):
        agent = make_agent()
        feed_input(monkeypatch, ["hello", sentinel, "never sent"])

        modes.run_chat_mode(agent, {})

        assert sent_texts(agent) == ["hello"]

    @pytest.mark.parametrize("text", [" exit", "exit ", "exit now", "quit", ""])
    def test_other_input_is_sent_to_agent(self, monkeypatch, text):
        agent = make_agent()
        feed_input(monkeypatch, [text, "exit"])

        modes.run_chat_mode(agent, {})

        assert sent_texts(agent) == [text]

    def test_end_of_input_ends_loop(self, monkeypatch):
        agent = make_agent()
        feed_input(monkeypatch, ["one", "two"])

        modes.run_chat_mode(agent, {})

        assert sent_texts(agent) == ["one", "two"]

    def test_agent_error_exits_process(self, monkeypatch, capsys):
        agent = MagicMock()
        agent.stream.side_effect = RuntimeError("rate limited")
        feed_input(monkeypatch, ["hello", "exit"])

        with pytest.raises(SystemExit) as exc_info:
            modes.run_chat_mode(agent, {})

        assert exc_info.value.code == 1
        assert "Error: rate limited" in capsys.readouterr().err


class TestAutonomousMode:

    def test_sends_fixed_prompt_and_sleeps_between_turns(self):
        agent = make_agent()

        with patch("modes.time.sleep", side_effect=[None, KeyboardInterrupt]) as sleep:
            with pytest.raises(KeyboardInterrupt):
                modes.run_autonomous_mode(agent, {}, interval=7)

        assert sent_texts(agent) == [modes.AUTONOMOUS_PROMPT, modes.AUTONOMOUS_PROMPT]
        sleep.assert_called_with(7)
        assert sleep.call_count == 2

    def test_agent_error_exits_process(self, capsys):
        agent = MagicMock()
        agent.stream.side_effect = RuntimeError("boom")

        with patch("modes.time.sleep") as sleep:
            with pytest.raises(SystemExit) as exc_info:
                modes.run_autonomous_mode(agent, {})

        assert exc_info.value.code == 1
        sleep.assert_not_called()
        assert "Error: boom" in capsys.readouterr().err


class TestChooseMode:

    @pytest.mark.parametrize(
        "answer, expected",
        [("1", "chat"), ("chat", "chat"), (" CHAT ", "chat"), ("2", "auto"), ("Auto", "auto")],
    )
    def test_valid_choices(self, monkeypatch, answer, expected):
        feed_input(monkeypatch, [answer])
        assert modes.choose_mode() == expected

    def test_reprompts_on_invalid_choice(self, monkeypatch, capsys):
        feed_input(monkeypatch, ["3", "talk", "2"])

        assert modes.choose_mode() == "auto"
        assert capsys.readouterr().out.count("Invalid choice. Please try again.") == 2

    def test_end_of_input_raises_descriptive_error(self, monkeypatch):
        feed_input(monkeypatch, [])

        with pytest.raises(EOFError, match="end of input"):
            modes.choose_mode()
