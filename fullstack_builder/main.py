from dotenv import load_dotenv
load_dotenv()

import argparse
import asyncio
import logging
import sys
from typing import Optional, Sequence

from fullstack_builder.config import Settings, load_settings
from fullstack_builder.llm.errors import GenerationError
from fullstack_builder.llm.generation_client import GenerationClient
from fullstack_builder.ui.clipboard import MemoryClipboard, SystemClipboard
from fullstack_builder.ui.render import render_entry, render_project, render_result
from fullstack_builder.ui.result_screen import Tab
from fullstack_builder.ui.session import BuilderSession
from fullstack_builder.utils.logger import get_logger, set_level

QUIT = ":quit"


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Full-Stack Project Builder: turn a one-line idea into a Flask + HTML/JS project."
    )
    parser.add_argument(
        "--idea",
        type=str,
        default=None,
        help="Generate once for this idea and print the result, e.g. 'Build a calculator'.",
    )
    parser.add_argument(
        "--config",
        type=str,
        default="config.yaml",
        help="Optional YAML settings file (default: config.yaml, ignored if missing).",
    )
    parser.add_argument("--model", type=str, default=None, help="Gemini model name override.")
    parser.add_argument(
        "--no-clipboard",
        action="store_true",
        help="Keep copied code in memory instead of writing it to the system clipboard.",
    )
    return parser.parse_args(argv)


async def handle_command(session: BuilderSession, line: str) -> bool:
    """
    Apply one line of user input to the session. Returns False to quit.

    Entry screen:  <text> sets the idea, :1-:4 picks a preset, :build submits
    Result screen: <n> opens file n, :code / :guide switch tabs, :copy, :back
    """
    command = line.strip()
    if command == QUIT:
        return False

    result = session.result
    if result is not None:
        if command.isdigit():
            result.select_file(int(command) - 1)
        elif command == ":code":
            result.select_tab(Tab.CODE)
        elif command == ":guide":
            result.select_tab(Tab.GUIDE)
        elif command == ":copy":
            result.copy()
        elif command == ":back":
            result.reset()
        else:
            raise ValueError(f"Unknown command: {command!r}")
        return True

    entry = session.entry
    if command == ":build" or (command == "" and entry.can_submit):
        await session.submit()
    elif len(command) > 1 and command.startswith(":") and command[1:].isdigit():
        entry.select_preset(int(command[1:]) - 1)
    elif command.startswith(":"):
        raise ValueError(f"Unknown command: {command!r}")
    else:
        entry.set_idea(line)
    return True


def _draw(session: BuilderSession) -> None:
    screen = render_result(session.result) if session.result is not None else render_entry(session.entry)
    print("\n" + screen + "\n")


async def run_interactive(session: BuilderSession) -> None:
    logger = get_logger("main")
    try:
        while True:
            _draw(session)
            line = await asyncio.to_thread(input, "> ")
            try:
                if not await handle_command(session, line):
                    break
            except (IndexError, ValueError) as exc:
                logger.warning("%s", exc)
    except (EOFError, KeyboardInterrupt):
        pass
    finally:
        session.close()


async def run_once(client: GenerationClient, idea: str) -> int:
    try:
        project = await client.generate(idea)
    except GenerationError as exc:
        print(f"Generation Failed: {exc.message}", file=sys.stderr)
        return 1
    print(render_project(project))
    return 0


def build_settings(args: argparse.Namespace) -> Settings:
    settings = load_settings(args.config)
    if args.model:
        settings.model = args.model
    return settings


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = parse_args(argv)
    settings = build_settings(args)

    logger = get_logger("main")
    set_level(logging.DEBUG if settings.verbose else logging.INFO)
    logger.info("Using model: %s", settings.model)

    client = GenerationClient(settings=settings)

    if args.idea is not None:
        if not args.idea.strip():
            print("Idea must not be empty.", file=sys.stderr)
            sys.exit(2)
        sys.exit(asyncio.run(run_once(client, args.idea)))

    clipboard = MemoryClipboard() if args.no_clipboard else SystemClipboard()
    asyncio.run(run_interactive(BuilderSession(client, clipboard=clipboard)))


if __name__ == "__main__":
    main()
