"""Searchlight MCP server entrypoint using FastMCP.

Exposes the search engine over MCP (stdio) so a launcher UI can query it.
Run with:
  - searchlight-mcp
  - or: python -m searchlight.mcp.server (ensure PYTHONPATH includes ./src)
"""
from __future__ import annotations

import asyncio
import logging
from typing import List, Optional

from fastmcp import FastMCP

from searchlight.config import Settings, load_settings
from searchlight.core.search_engine import SearchEngine
from searchlight.logging_config import configure_logging
from searchlight.mcp.tools import register_search_tools
from searchlight.plugins.base_plugin import SearchPlugin
from searchlight.plugins.loader import load_plugins

logger = logging.getLogger(__name__)


class AppState:
    """Application state shared by MCP tools."""

    def __init__(self, settings: Settings) -> None:
        self.settings = settings
        self.plugins: List[SearchPlugin] = []
        self.engine: Optional[SearchEngine] = None
        self._start_lock = asyncio.Lock()

    def init_engine(self) -> None:
        """Load plugins from configuration and build the engine."""
        cfg = self.settings.plugins
        self.plugins = load_plugins(cfg.paths, cfg.temporary_folder)
        self.engine = SearchEngine(self.settings.search_engine, self.plugins)
        logger.info("Loaded %d search plugin(s)", len(self.plugins))

    async def start(self) -> None:
        """Initialize the engine on first use; later calls return immediately."""
        if self.engine is None:
            raise RuntimeError("Search engine is not configured. Call init_engine() first.")
        async with self._start_lock:
            if not self.engine.is_initialized:
                await self.engine.initialize()


# Global state and server instance
_state: Optional[AppState] = None
mcp = FastMCP("Searchlight")


# ----- Tools -----

@mcp.tool
def health() -> str:
    """Simple health check tool."""
    return "ok"


# ----- Entrypoint -----

def main() -> None:
    """Initialize state and run the MCP server."""
    global _state
    settings = load_settings()
    configure_logging(settings.app.log_level)
    _state = AppState(settings)
    _state.init_engine()
    register_search_tools(mcp, get_state=lambda: _state)
    try:
        mcp.run()
    finally:
        if _state.engine is not None:
            _state.engine.shutdown()


if __name__ == "__main__":  # pragma: no cover
    main()
