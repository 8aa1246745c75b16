#!/usr/bin/env python
"""
Find Recipe Example

Streams one recipe search and prints the raw events.

Usage:
    python examples/find_recipe.py "chocolate chip cookies"

Requirements:
    - ANTHROPIC_API_KEY environment variable set
    - Node.js (npx) for chrome-devtools-mcp
    - Recipe finder installed: pip install -e .
"""

import asyncio
import sys

from recipe_finder import stream_agent


async def main(query: str):
    """Run a single search."""
    print(f"Searching: {query}\n")

    async for event in stream_agent(query):
        # Simple output - recipe-finder CLI has better formatting
        print(event.model_dump())


if __name__ == "__main__":
    asyncio.run(main(sys.argv[1] if len(sys.argv) > 1 else "chocolate chip cookies"))
