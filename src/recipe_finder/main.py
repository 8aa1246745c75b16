"""
Recipe Finder CLI Entry Point

Searches AllRecipes.com through a browser-driving agent and prints the
recipe it finds.

Usage:
    recipe-finder "chocolate chip cookies"
    python -m recipe_finder.main "vegan lasagna" --verbose --model sonnet
    recipe-finder            # interactive mode
"""

import argparse
import asyncio
import logging
import sys
from dataclasses import dataclass
from typing import Optional

from claude_agent_sdk import CLINotFoundError
from dotenv import load_dotenv

from recipe_finder.agent import (
    AgentEvent,
    DoneEvent,
    ResultEvent,
    TextEvent,
    ToolEvent,
    UsageEvent,
    stream_agent,
)
from recipe_finder.config import MODEL_TIERS, AgentConfig, configure_logging, get_logger
from recipe_finder.tui import (
    AgentConsole,
    get_console,
    print_error,
    print_result,
    print_thought,
    print_tool_call,
    print_usage,
)

logger = get_logger(__name__)


@dataclass
class UsageTotals:
    """Token usage summed over one search."""

    input: int = 0
    output: int = 0

    def add(self, event: UsageEvent) -> None:
        self.input += event.input
        self.output += event.output

    @property
    def total(self) -> int:
        return self.input + self.output


def parse_args(argv: Optional[list[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Find recipes on AllRecipes.com with a browser agent",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    recipe-finder "chocolate chip cookies"
    recipe-finder "chicken tikka masala" --verbose
    recipe-finder "banana bread" --model sonnet --max-turns 30
        """,
    )

    parser.add_argument(
        "query",
        nargs="?",
        help="Recipe to search for",
    )

    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Show agent narration and every tool call",
    )

    parser.add_argument(
        "--model", "-m",
        choices=MODEL_TIERS,
        default=None,
        help="Model tier (default: RECIPE_FINDER_MODEL or haiku)",
    )

    parser.add_argument(
        "--max-turns",
        type=int,
        default=None,
        help="Maximum agent turns (default: RECIPE_FINDER_MAX_TURNS or 50)",
    )

    parser.add_argument(
        "--dev",
        action="store_true",
        help="Development mode with debug logging",
    )

    return parser.parse_args(argv)


def build_config(args: argparse.Namespace) -> AgentConfig:
    """Merge command line overrides onto the environment configuration."""
    config = AgentConfig.from_env()
    if args.model:
        config.model = args.model
    if args.max_turns is not None:
        if args.max_turns < 1:
            logger.warning("--max-turns must be positive, keeping %d", config.max_turns)
        else:
            config.max_turns = args.max_turns
    return config


def display_event(
    event: AgentEvent,
    totals: UsageTotals,
    verbose: bool,
    console: Optional[AgentConsole] = None,
) -> None:
    """
    Render one stream event.

    Args:
        event: Event from stream_agent()
        totals: Usage accumulator for the current search
        verbose: Show agent narration and full tool blocks
        console: Console to use (defaults to global console)
    """
    console = console or get_console()

    if isinstance(event, TextEvent):
        if verbose:
            text = event.text.strip()
            if text:
                print_thought(text, console=console)

    elif isinstance(event, ToolEvent):
        print_tool_call(event.name, compact=not verbose, console=console)

    elif isinstance(event, UsageEvent):
        totals.add(event)

    elif isinstance(event, ResultEvent):
        print_result(event.text, console=console)

    elif isinstance(event, DoneEvent):
        if totals.total:
            print_usage(totals.input, totals.output, console=console)


async def run_search(
    query: str,
    config: AgentConfig,
    verbose: bool = False,
    console: Optional[AgentConsole] = None,
) -> bool:
    """
    Run one recipe search and render its events.

    Args:
        query: Recipe to search for
        config: Agent runtime settings
        verbose: Show detailed output
        console: Console to use (defaults to global console)

    Returns:
        True if the agent stream completed, False otherwise
    """
    console = console or get_console()
    totals = UsageTotals()

    console.print(f"[bold]Searching:[/bold] {query}\n")

    try:
        async for event in stream_agent(query, config=config):
            display_event(event, totals, verbose, console)
        return True

    except CLINotFoundError as e:
        print_error(
            str(e),
            error_type="CLINotFound",
            suggestion="Install Claude Code: npm install -g @anthropic-ai/claude-code",
            console=console,
        )
        return False
    except Exception as e:
        logger.debug("Search failed", exc_info=True)
        print_error(str(e), error_type=type(e).__name__, console=console)
        return False


async def run_interactive_session(
    config: AgentConfig,
    verbose: bool = False,
    console: Optional[AgentConsole] = None,
) -> None:
    """
    Prompt for recipe searches until the user quits.

    Each search is an independent agent session.
    """
    console = console or get_console()

    console.print("[bold]Recipe Finder[/bold] (Interactive)")
    console.print("Enter a dish to search for. Commands: 'quit' to exit\n")

    while True:
        try:
            query = console.input("[bold green]>[/bold green] ").strip()
        except EOFError:
            break
        if not query:
            continue
        if query.lower() in ("quit", "exit", "q"):
            break

        try:
            await run_search(query, config, verbose, console)
        except KeyboardInterrupt:
            console.print("\n[yellow]Interrupted. Type 'quit' to exit or search again.[/yellow]")
        console.print()


def main(argv: Optional[list[str]] = None) -> int:
    """Main entry point."""
    load_dotenv()
    args = parse_args(argv)

    if args.dev:
        configure_logging(level=logging.DEBUG, verbose=True)
    else:
        configure_logging()

    config = build_config(args)

    try:
        if not args.query:
            asyncio.run(run_interactive_session(config, args.verbose))
            return 0

        success = asyncio.run(run_search(args.query, config, args.verbose))
    except KeyboardInterrupt:
        get_console().print("\n[dim]Goodbye![/dim]")
        return 130

    return 0 if success else 1


if __name__ == "__main__":
    sys.exit(main())
