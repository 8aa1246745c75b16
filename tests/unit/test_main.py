"""
Unit tests for the CLI: argument handling and event rendering.

stream_agent is patched, so no agent runtime is started.
"""

from unittest.mock import patch

import pytest
from claude_agent_sdk import AssistantMessage, ResultMessage, TextBlock
from rich.console import Console

from recipe_finder.agent import (
    DoneEvent,
    ResultEvent,
    TextEvent,
    ToolEvent,
    UsageEvent,
    iter_events,
)
from recipe_finder.config import AgentConfig
from recipe_finder.main import (
    UsageTotals,
    build_config,
    display_event,
    main,
    parse_args,
    run_interactive_session,
    run_search,
)
from recipe_finder.tui import TUIConfig, create_console


@pytest.fixture
def console():
    """Recording console without timestamps."""
    return create_console(
        TUIConfig(show_timestamps=False),
        Console(record=True, width=100, force_terminal=False),
    )


def output(console) -> str:
    return console.console.export_text()


def fake_stream(events, error=None):
    async def _stream(query, config=None):
        for event in events:
            yield event
        if error is not None:
            raise error

    return _stream


class TestArgs:
    """Command line parsing."""

    def test_query_and_flags(self):
        args = parse_args(["banana bread", "-v", "--model", "sonnet", "--max-turns", "10"])

        assert args.query == "banana bread"
        assert args.verbose is True
        assert args.model == "sonnet"
        assert args.max_turns == 10

    def test_no_query_means_interactive(self):
        assert parse_args([]).query is None

    def test_build_config_applies_overrides(self, monkeypatch):
        monkeypatch.delenv("RECIPE_FINDER_MODEL", raising=False)
        monkeypatch.delenv("RECIPE_FINDER_MAX_TURNS", raising=False)

        config = build_config(parse_args(["x", "-m", "opus", "--max-turns", "7"]))

        assert config.model == "opus"
        assert config.max_turns == 7

    def test_build_config_ignores_non_positive_turns(self, monkeypatch):
        monkeypatch.delenv("RECIPE_FINDER_MAX_TURNS", raising=False)

        config = build_config(parse_args(["x", "--max-turns", "0"]))

        assert config.max_turns == 50


class TestDisplayEvent:
    """Rendering of individual events."""

    def test_text_hidden_unless_verbose(self, console):
        display_event(TextEvent(text="Searching now"), UsageTotals(), False, console)
        assert "Searching now" not in output(console)

        display_event(TextEvent(text="Searching now"), UsageTotals(), True, console)
        assert "Searching now" in output(console)

    def test_tool_shows_short_name(self, console):
        display_event(
            ToolEvent(name="mcp__chrome-devtools__take_snapshot"), UsageTotals(), False, console
        )

        assert "take_snapshot" in output(console)

    def test_result_rendered(self, console):
        display_event(ResultEvent(text="# Banana Bread\n\n- 3 bananas"), UsageTotals(), False, console)

        text = output(console)
        assert "Banana Bread" in text
        assert "3 bananas" in text

    def test_usage_accumulates_and_prints_on_done(self, console):
        totals = UsageTotals()

        display_event(UsageEvent(input=1000, output=200), totals, False, console)
        display_event(UsageEvent(input=500, output=50), totals, False, console)
        assert "USAGE" not in output(console)

        display_event(DoneEvent(), totals, False, console)

        assert (totals.input, totals.output, totals.total) == (1500, 250, 1750)
        text = output(console)
        assert "1,500" in text
        assert "1,750" in text

    def test_done_without_usage_prints_nothing(self, console):
        display_event(DoneEvent(), UsageTotals(), False, console)

        assert output(console).strip() == ""


class TestRunSearch:
    """End-to-end rendering of a patched stream."""

    @pytest.mark.asyncio
    async def test_successful_search(self, console):
        events = [
            ToolEvent(name="mcp__chrome-devtools__navigate_page"),
            UsageEvent(input=10, output=5),
            ResultEvent(text="# Pancakes"),
            DoneEvent(),
        ]

        with patch("recipe_finder.main.stream_agent", fake_stream(events)):
            ok = await run_search("pancakes", AgentConfig(), console=console)

        assert ok is True
        text = output(console)
        assert "navigate_page" in text
        assert "Pancakes" in text

    @pytest.mark.asyncio
    async def test_runtime_error_reported(self, console):
        with patch(
            "recipe_finder.main.stream_agent",
            fake_stream([], error=RuntimeError("npx not found")),
        ):
            ok = await run_search("pancakes", AgentConfig(), console=console)

        assert ok is False
        text = output(console)
        assert "RuntimeError" in text
        assert "npx not found" in text


class TestMain:
    """Process exit codes."""

    def test_exit_code_success(self):
        with patch("recipe_finder.main.stream_agent", fake_stream([DoneEvent()])), \
                patch("recipe_finder.main.load_dotenv"):
            assert main(["pancakes"]) == 0

    def test_exit_code_failure(self):
        with patch("recipe_finder.main.stream_agent", fake_stream([], error=RuntimeError("boom"))), \
                patch("recipe_finder.main.load_dotenv"):
            assert main(["pancakes"]) == 1


class TestUsageTotals:
    """Token totals printed at the end of a search."""

    def test_total_is_sum_of_assistant_turns(self, console):
        messages = [
            AssistantMessage(
                content=[TextBlock(text="one")],
                model="claude-haiku",
                usage={"input_tokens": 100, "output_tokens": 10},
            ),
            AssistantMessage(
                content=[TextBlock(text="two")],
                model="claude-haiku",
                usage={"input_tokens": 200, "output_tokens": 20},
            ),
            ResultMessage(
                subtype="success",
                duration_ms=10,
                duration_api_ms=8,
                is_error=False,
                num_turns=2,
                session_id="session-1",
                usage={"input_tokens": 300, "output_tokens": 30},
                result="# Soup",
            ),
        ]
        totals = UsageTotals()

        for message in messages:
            for event in iter_events(message):
                display_event(event, totals, False, console)
        display_event(DoneEvent(), totals, False, console)

        assert (totals.input, totals.output) == (300, 30)
        assert "330" in output(console)


class TestInteractiveSession:
    """Prompt loop driven by scripted input."""

    @pytest.mark.asyncio
    async def test_skips_blank_runs_search_and_quits(self, console):
        searches = []

        async def _stream(query, config=None):
            searches.append(query)
            yield ResultEvent(text="# Banana Bread")
            yield DoneEvent()

        with patch.object(console, "input", side_effect=["", "  ", "banana bread", "q"]) as prompt, \
                patch("recipe_finder.main.stream_agent", _stream):
            await run_interactive_session(AgentConfig(), console=console)

        assert searches == ["banana bread"]
        assert prompt.call_count == 4
        assert "Banana Bread" in output(console)

    @pytest.mark.asyncio
    @pytest.mark.parametrize("command", ["quit", "exit", "Q"])
    async def test_quit_commands(self, console, command):
        searches = []

        async def _stream(query, config=None):
            searches.append(query)
            yield DoneEvent()

        with patch.object(console, "input", side_effect=[command, "never read"]), \
                patch("recipe_finder.main.stream_agent", _stream):
            await run_interactive_session(AgentConfig(), console=console)

        assert searches == []

    @pytest.mark.asyncio
    async def test_eof_ends_session(self, console):
        searches = []

        async def _stream(query, config=None):
            searches.append(query)
            yield DoneEvent()

        with patch.object(console, "input", side_effect=["pancakes", EOFError()]), \
                patch("recipe_finder.main.stream_agent", _stream):
            await run_interactive_session(AgentConfig(), console=console)

        assert searches == ["pancakes"]
