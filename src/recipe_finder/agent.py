"""
Recipe Finder Agent

Builds Claude Agent SDK options for the recipe search session and streams
the runtime's messages back as a small set of typed events:

- TextEvent: assistant text fragment
- ToolEvent: the agent invoked a tool (name only)
- UsageEvent: token counters reported by the runtime
- ResultEvent: final answer
- DoneEvent: the runtime's stream has ended

Usage:
    async for event in stream_agent("chocolate chip cookies"):
        print(event.model_dump())
"""

import os
from typing import Annotated, Any, AsyncIterator, Iterator, Literal, Optional, Union

from claude_agent_sdk import (
    AssistantMessage,
    ClaudeAgentOptions,
    ResultMessage,
    TextBlock,
    ToolUseBlock,
    query,
)
from pydantic import BaseModel, ConfigDict, Field

from .chrome_devtools import ALLOWED_TOOLS, MCP_SERVER_NAME, chrome_devtools_server_config
from .config import AgentConfig, get_logger
from .prompts import SYSTEM_PROMPT

logger = get_logger(__name__)


class _Event(BaseModel):
    model_config = ConfigDict(frozen=True)


class TextEvent(_Event):
    """Assistant text as it arrives."""

    type: Literal["text"] = "text"
    text: str


class ToolEvent(_Event):
    """Tool invocation notice (what the agent is doing)."""

    type: Literal["tool"] = "tool"
    name: str


class UsageEvent(_Event):
    """Token usage counters."""

    type: Literal["usage"] = "usage"
    input: int = Field(default=0, ge=0)
    output: int = Field(default=0, ge=0)


class ResultEvent(_Event):
    """Final result text of the query."""

    type: Literal["result"] = "result"
    text: str


class DoneEvent(_Event):
    """Terminal marker emitted once the runtime stream is exhausted."""

    type: Literal["done"] = "done"


AgentEvent = Annotated[
    Union[TextEvent, ToolEvent, UsageEvent, ResultEvent, DoneEvent],
    Field(discriminator="type"),
]


def get_options(
    standalone: bool = False,
    config: Optional[AgentConfig] = None,
) -> ClaudeAgentOptions:
    """
    Create Claude Agent SDK options for the recipe finder.

    Args:
        standalone: Attach the chrome-devtools MCP server. Hosts that already
            register the server pass False and supply their own mcp_servers.
        config: Model and turn limits (default: AgentConfig defaults)

    Returns:
        Configured ClaudeAgentOptions
    """
    if config is None:
        config = AgentConfig()

    kwargs: dict[str, Any] = {
        "env": dict(os.environ),
        "system_prompt": SYSTEM_PROMPT,
        "model": config.model,
        "allowed_tools": list(ALLOWED_TOOLS),
        "max_turns": config.max_turns,
    }
    if standalone:
        kwargs["mcp_servers"] = {MCP_SERVER_NAME: chrome_devtools_server_config()}

    return ClaudeAgentOptions(**kwargs)


def _usage_counts(usage: Any) -> tuple[int, int]:
    """Read input/output token counts from a usage dict or object."""
    if isinstance(usage, dict):
        input_tokens = usage.get("input_tokens")
        output_tokens = usage.get("output_tokens")
    else:
        input_tokens = getattr(usage, "input_tokens", None)
        output_tokens = getattr(usage, "output_tokens", None)
    return input_tokens or 0, output_tokens or 0


def iter_events(message: Any) -> Iterator[AgentEvent]:
    """
    Reshape one SDK message into stream events.

    Assistant turns yield their text blocks, then tool-use blocks, then
    the per-turn usage. Result messages yield the final text; their usage
    is the session total and is not re-emitted. Other messages (system,
    task progress, user) yield nothing.

    Args:
        message: Message from claude_agent_sdk.query()

    Yields:
        Events derived from the message, in emission order
    """
    if isinstance(message, AssistantMessage):
        content = message.content or []
        for block in content:
            if isinstance(block, TextBlock) and block.text:
                yield TextEvent(text=block.text)

        for block in content:
            if isinstance(block, ToolUseBlock):
                yield ToolEvent(name=block.name)

        usage = getattr(message, "usage", None)
        if usage is not None:
            input_tokens, output_tokens = _usage_counts(usage)
            yield UsageEvent(input=input_tokens, output=output_tokens)

    elif isinstance(message, ResultMessage) and message.result:
        yield ResultEvent(text=str(message.result))


async def stream_agent(
    prompt: str,
    config: Optional[AgentConfig] = None,
) -> AsyncIterator[AgentEvent]:
    """
    Run one recipe search and stream its events.

    The chrome-devtools MCP server is attached (standalone mode). Errors
    raised by the agent runtime propagate to the caller; DoneEvent is only
    emitted after the runtime stream ends normally.

    Args:
        prompt: What to search for, in natural language
        config: Model and turn limits (default: AgentConfig defaults)

    Yields:
        AgentEvent instances in arrival order, terminated by DoneEvent
    """
    options = get_options(standalone=True, config=config)
    logger.info("Starting recipe search (model=%s, max_turns=%s)", options.model, options.max_turns)

    async for message in query(prompt=prompt, options=options):
        logger.debug("Received %s", type(message).__name__)
        for event in iter_events(message):
            yield event

    logger.debug("Agent stream finished")
    yield DoneEvent()
