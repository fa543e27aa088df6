"""
Agentic Dev Standards MCP Server - on-demand access to development standards.

A Model Context Protocol (MCP) server that serves a fixed set of markdown
documents (core standards, workflow patterns and integration guides) by
name, plus keyword search across all of them, to AI coding assistants
like Claude Code, Cursor, OpenCode and GitHub Copilot.
"""

from .mcp_server import mcp, main
from .dispatch import ToolDispatcher, ToolResponse
from .registry import DocumentRegistry, Namespace

__all__ = ["mcp", "main", "ToolDispatcher", "ToolResponse", "DocumentRegistry", "Namespace"]
