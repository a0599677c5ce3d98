from __future__ import annotations

from typing import Any, Iterable

from ..observability.logging import get_logger
from .tool_registry import ToolFn, ToolRegistry

log = get_logger("tool_registry")

ToolEntry = tuple[dict[str, Any], ToolFn]


def _key(name: Any) -> str:
    return str(name or "").strip()


class ToolRegistryImpl(ToolRegistry):
    """
    In-memory tool table keyed by tool name, kept in registration order.

    A name can be registered once; the definition's own "name" must agree
    with the key callers look it up by.
    """

    def __init__(self, entries: Iterable[tuple[str, dict[str, Any], ToolFn]] = ()):
        self._tools: dict[str, ToolEntry] = {}
        for name, definition, fn in entries:
            self.register_tool(name, definition, fn)

    def __contains__(self, tool_name: object) -> bool:
        return _key(tool_name) in self._tools

    def __len__(self) -> int:
        return len(self._tools)

    def get_tool(self, tool_name: str) -> ToolEntry | None:
        return self._tools.get(_key(tool_name))

    def list_tools(self) -> dict[str, ToolEntry]:
        return dict(self._tools)

    def register_tool(self, name: str, tool_def: dict[str, Any], tool_fn: ToolFn) -> None:
        key = _key(name)
        if not key:
            raise ValueError("Tool name must not be blank")
        declared = tool_def.get("name")
        if declared is not None and declared != key:
            raise ValueError(f"Tool {key!r} is defined as {declared!r}")
        if key in self._tools:
            raise ValueError(f"Tool already registered: {key}")
        self._tools[key] = (tool_def, tool_fn)
        log.debug("tool_registered", tool_name=key)
