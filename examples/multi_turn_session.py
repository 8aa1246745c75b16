#!/usr/bin/env python
"""
Multi-turn Session Example

Embeds the recipe finder in a host that owns the MCP server registration
and keeps one conversation open, so follow-ups ("show me an alternative")
see the earlier search.

Usage:
    python examples/multi_turn_session.py

Requirements:
    - ANTHROPIC_API_KEY environment variable set
    - Node.js (npx) for chrome-devtools-mcp
    - Recipe finder installed: pip install -e .
"""

import asyncio

from claude_agent_sdk import ClaudeSDKClient

from recipe_finder.agent import get_options, iter_events
from recipe_finder.chrome_devtools import MCP_SERVER_NAME, chrome_devtools_server_config
from recipe_finder.tui import get_console, print_result, print_tool_call


async def main():
    """Run interactive session."""
    console = get_console()

    console.print("[bold]Recipe Finder - Multi-turn Session[/bold]")
    console.print("Context is preserved between requests.")
    console.print("Type 'quit' to exit.\n")

    # Host-managed MCP servers: the recipe finder options come without them
    options = get_options(standalone=False)
    options.mcp_servers = {MCP_SERVER_NAME: chrome_devtools_server_config()}

    async with ClaudeSDKClient(options=options) as client:
        while True:
            try:
                request = console.input("[bold green]>[/bold green] ").strip()

                if not request:
                    continue
                if request.lower() in ("quit", "exit", "q"):
                    break

                console.print()

                await client.query(request)
                async for message in client.receive_response():
                    for event in iter_events(message):
                        if event.type == "tool":
                            print_tool_call(event.name, compact=True)
                        elif event.type == "result":
                            print_result(event.text)

                console.print()

            except KeyboardInterrupt:
                console.print("\n[yellow]Interrupted. Type 'quit' to exit.[/yellow]")
                continue

    console.print("[dim]Goodbye![/dim]")


if __name__ == "__main__":
    asyncio.run(main())
