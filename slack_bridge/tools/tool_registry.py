"""
Tool registry for Slack tool discovery and execution.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Callable

from ..slack.credentials import Credentials


# Tools receive the caller's credentials explicitly; nothing is held globally.
ToolFn = Callable[[Credentials, dict[str, Any]], dict[str, Any]]


class ToolRegistry(ABC):
    """Registry for tools exposed to callers."""

    @abstractmethod
    def get_tool(self, tool_name: str) -> tuple[dict[str, Any], ToolFn] | None:
        """Get a tool by name."""
        pass

    @abstractmethod
    def list_tools(self) -> dict[str, tuple[dict[str, Any], ToolFn]]:
        """List all available tools."""
        pass

    @abstractmethod
    def register_tool(self, name: str, tool_def: dict[str, Any], tool_fn: ToolFn) -> None:
        """Register a tool."""
        pass
