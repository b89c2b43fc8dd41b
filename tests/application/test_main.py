"""
Test suite for the interactive shell.

System role: Verification of the chat loop and startup error handling
"""

import asyncio
import logging
from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from ragchat.configs.chat import ChatSettings
from ragchat.configs.settings import Settings
from ragchat.core.exceptions import IngestionError, InvalidConfig
from ragchat.main import GOODBYE_MESSAGE, chat_loop, is_exit_command, parse_args, run


def feed_input(monkeypatch, lines: list[str]) -> None:
    """Replace input() with a scripted sequence ending in EOF."""
    remaining = list(lines)

    def fake_input(prompt: str = "") -> str:
        if not remaining:
            raise EOFError
        return remaining.pop(0)

    monkeypatch.setattr("builtins.input", fake_input)


@pytest.fixture
def settings() -> Settings:
    return Settings(chat=ChatSettings(exit_command="sair", answer_label="AI: "))


class TestExitCommand:
    """Reserved exit input."""

    @pytest.mark.parametrize("line", ["sair", "  SAIR ", "Sair\n"])
    def test_exit_word_matches_trimmed_casefolded(self, line: str) -> None:
        assert is_exit_command(line, "sair")

    @pytest.mark.parametrize("line", ["sair agora", "", "exit"])
    def test_other_input_is_not_exit(self, line: str) -> None:
        assert not is_exit_command(line, "sair")


@pytest.fixture
def runner():
    with asyncio.Runner() as r:
        yield r


class TestChatLoop:
    """Reading turns from stdin."""

    def test_answers_each_line_until_exit(self, monkeypatch, capsys, runner, settings) -> None:
        feed_input(monkeypatch, ["When is the meeting?", "   ", "sair", "never asked"])
        service = MagicMock()
        service.ask = AsyncMock(return_value="At 3pm.")

        chat_loop(runner, service, settings)

        service.ask.assert_awaited_once_with("When is the meeting?")
        out = capsys.readouterr().out
        assert "AI: At 3pm." in out
        assert GOODBYE_MESSAGE in out

    def test_eof_ends_session(self, monkeypatch, capsys, runner, settings) -> None:
        feed_input(monkeypatch, [])
        service = MagicMock()
        service.ask = AsyncMock()

        chat_loop(runner, service, settings)

        service.ask.assert_not_awaited()
        assert GOODBYE_MESSAGE in capsys.readouterr().out

    def test_ctrl_c_at_prompt_ends_session(self, monkeypatch, capsys, runner, settings) -> None:
        def interrupted(prompt: str = "") -> str:
            raise KeyboardInterrupt

        monkeypatch.setattr("builtins.input", interrupted)
        service = MagicMock()
        service.ask = AsyncMock()

        chat_loop(runner, service, settings)

        service.ask.assert_not_awaited()
        assert GOODBYE_MESSAGE in capsys.readouterr().out

    def test_turns_share_one_event_loop(self, monkeypatch, runner, settings) -> None:
        feed_input(monkeypatch, ["first question", "second question"])
        loops = []

        async def ask(question: str) -> str:
            loops.append(asyncio.get_running_loop())
            return "ok"

        service = MagicMock()
        service.ask = ask

        chat_loop(runner, service, settings)

        assert len(loops) == 2
        assert loops[0] is loops[1]


class TestRun:
    """Startup."""

    @pytest.fixture(autouse=True)
    def quiet_startup(self):
        with patch("ragchat.main.configure_logging"), patch("ragchat.main.load_dotenv"):
            yield

    def test_parse_args(self) -> None:
        args = parse_args(["--corpus", "notes.txt", "--log-level", "DEBUG"])

        assert args.corpus == "notes.txt"
        assert args.log_level == "DEBUG"

    def test_startup_failure_exits_nonzero(self) -> None:
        service = MagicMock()
        service.prepare = AsyncMock(side_effect=IngestionError("cannot read", path="x.txt"))

        with patch("ragchat.main.ChatService.from_settings", return_value=service) as from_settings, patch(
            "ragchat.main.chat_loop"
        ) as loop:
            code = run(["--corpus", "x.txt"])

        assert code == 1
        assert from_settings.call_args.kwargs["corpus_path"] == "x.txt"
        loop.assert_not_called()

    def test_invalid_configuration_exits_nonzero(self, caplog) -> None:
        error = InvalidConfig(message="Invalid configuration (VectorStoreSettings)")

        with patch("ragchat.main.get_settings", side_effect=error), patch(
            "ragchat.main.ChatService.from_settings"
        ) as from_settings, caplog.at_level(logging.ERROR):
            code = run([])

        assert code == 1
        from_settings.assert_not_called()
        assert "Configuration FAILED" in caplog.text

    def test_backend_construction_failure_exits_nonzero(self, caplog) -> None:
        with patch(
            "ragchat.main.ChatService.from_settings",
            side_effect=ValueError("Unsupported LLM_PROVIDER"),
        ), patch("ragchat.main.chat_loop") as loop, caplog.at_level(logging.ERROR):
            code = run([])

        assert code == 1
        loop.assert_not_called()
        assert "Startup FAILED" in caplog.text

    def test_successful_startup_runs_loop(self) -> None:
        service = MagicMock()
        service.prepare = AsyncMock(return_value=3)

        with patch("ragchat.main.ChatService.from_settings", return_value=service), patch(
            "ragchat.main.chat_loop"
        ) as loop:
            code = run([])

        assert code == 0
        loop.assert_called_once()
        assert loop.call_args.args[1] is service
