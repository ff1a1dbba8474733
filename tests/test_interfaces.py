"""Tests for the MCP tool and the CLI entry points."""

from __future__ import annotations

import asyncio

import pytest
from fastmcp import Client
from fastmcp.exceptions import ToolError
from typer.testing import CliRunner

from how_person import mcp_server
from how_person.cli import app

runner = CliRunner()


# ── MCP tool ─────────────────────────────────────────────────────────


class TestMcpTool:
    def test_tool_is_registered(self):
        async def list_names():
            async with Client(mcp_server.mcp) as client:
                return [tool.name for tool in await client.list_tools()]

        assert "how-person" in asyncio.run(list_names())

    def test_missing_urls_raise_tool_error(self):
        async def call():
            async with Client(mcp_server.mcp) as client:
                await client.call_tool("how-person", {})

        with pytest.raises(ToolError, match="At least one URL"):
            asyncio.run(call())

    def test_malformed_url_raises_tool_error(self):
        async def call():
            async with Client(mcp_server.mcp) as client:
                await client.call_tool("how-person", {"github": "https://gitlab.com/octocat"})

        with pytest.raises(ToolError, match="Invalid GitHub URL"):
            asyncio.run(call())


# ── CLI ──────────────────────────────────────────────────────────────


class TestCli:
    def test_sources_lists_platforms(self):
        result = runner.invoke(app, ["sources"])
        assert result.exit_code == 0
        for name in ("github", "twitter", "speakerdeck", "blog"):
            assert name in result.output

    def test_analyze_without_urls_fails(self):
        result = runner.invoke(app, ["analyze"])
        assert result.exit_code == 1
        assert "At least one URL" in result.output
