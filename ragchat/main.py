"""
Interactive chat entry point.

Loads environment and settings, ingests the corpus, then reads one line per
turn and prints the answer until the exit command, EOF or Ctrl-C. Input is
read on the main thread and every turn runs on one long-lived event loop, so
an interrupt lands either in input() or in the running turn.

Dependencies: argparse, asyncio, python-dotenv, ragchat.application
System role: Interactive shell around the conversational core
"""

import argparse
import asyncio
import logging
import sys

from dotenv import load_dotenv

from ragchat.application.chat_service import ChatService
from ragchat.configs import get_settings
from ragchat.configs.settings import Settings
from ragchat.core.exceptions import InvalidConfig, RAGChatException
from ragchat.observability.logger import configure_logging

logger = logging.getLogger(__name__)

GOODBYE_MESSAGE = "Closing the chat. Goodbye!"


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="ragchat",
        description="Chat with a private text corpus. Prefix a message with [update] to add a fact.",
    )
    parser.add_argument("--corpus", help="Corpus file path (overrides CHAT_CORPUS_PATH)")
    parser.add_argument("--log-level", help="Logging level (overrides LOG_LEVEL)")
    return parser.parse_args(argv)


def is_exit_command(line: str, exit_command: str) -> bool:
    """True when the trimmed, case-folded input is the reserved exit word."""
    return line.strip().casefold() == exit_command.strip().casefold()


def chat_loop(runner: asyncio.Runner, service: ChatService, settings: Settings) -> None:
    """
    Read questions until the session ends.

    Args:
        runner: Event loop runner shared by every turn
        service: Prepared chat service
        settings: Application settings (labels and exit command)
    """
    chat = settings.chat
    print(f"Ready. Ask a question or add a fact with [update]. Type '{chat.exit_command}' to quit.")

    while True:
        try:
            line = input(chat.prompt_label)
            if is_exit_command(line, chat.exit_command):
                break
            if not line.strip():
                continue
            answer = runner.run(service.ask(line))
        except (EOFError, KeyboardInterrupt):
            print()
            break
        print(f"{chat.answer_label}{answer}")

    print(GOODBYE_MESSAGE)


def run(argv: list[str] | None = None) -> int:
    """
    Bootstrap the service and run the chat loop.

    Returns:
        int: Process exit code
    """
    args = parse_args(argv)
    load_dotenv()

    try:
        settings = get_settings()
    except InvalidConfig as e:
        configure_logging(args.log_level or "INFO")
        logger.error(f"{__name__}:run - Configuration FAILED: {e}")
        return 1
    configure_logging(args.log_level or settings.log_level)

    with asyncio.Runner() as runner:
        try:
            logger.info(f"{__name__}:run - Starting RAG system")
            service = ChatService.from_settings(settings, corpus_path=args.corpus)
            runner.run(service.prepare())
            logger.info(f"{__name__}:run - RAG system ready")
        except RAGChatException as e:
            logger.error(f"{__name__}:run - Startup FAILED: {type(e).__name__}: {e}")
            return 1
        except Exception as e:
            logger.exception(f"{__name__}:run - Startup FAILED: {type(e).__name__}: {e}")
            return 1

        chat_loop(runner, service, settings)
    return 0


def main() -> None:
    """Console script entry point."""
    try:
        sys.exit(run())
    except KeyboardInterrupt:
        print(f"\n{GOODBYE_MESSAGE}")
        sys.exit(130)


if __name__ == "__main__":
    main()
