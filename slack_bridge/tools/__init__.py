from __future__ import annotations

from .slack_tools import build_slack_tools, get_slack_registry, invoke
from .tool_registry import ToolFn, ToolRegistry
from .tool_registry_impl import ToolRegistryImpl

__all__ = [
    "ToolFn",
    "ToolRegistry",
    "ToolRegistryImpl",
    "build_slack_tools",
    "get_slack_registry",
    "invoke",
]
