"""Search engine tools for FastMCP.

These tools expose the engine's public surface (search, rescan, cache
clearing, settings) so a UI process can drive it over MCP.
"""
from __future__ import annotations

import logging
from typing import Any, Callable, Dict, Optional

from fastmcp import FastMCP

from searchlight.config import SearchEngineSettings
from searchlight.core.searchable import SearchResultItem
from searchlight.exceptions import CacheClearError

logger = logging.getLogger(__name__)


def _serialize_search_result_item(item: SearchResultItem) -> Dict[str, Any]:
    return {
        "name": item.name,
        "description": item.description,
        "execution_argument": item.execution_argument,
        "open_location_argument": item.open_location_argument,
        "icon": {"icon": item.icon.icon, "type": item.icon.type.value},
        "executor_id": item.executor_id,
        "location_opener_id": item.location_opener_id,
    }


def register_search_tools(mcp: FastMCP, get_state: Callable[[], Any]) -> None:
    """Register search engine tools on the given FastMCP instance.

    The `get_state` callable should return an object with an `engine` attribute
    and an async `start()` that initializes the engine once.
    """

    async def _started_engine() -> Any:
        state = get_state()
        if state is None or getattr(state, "engine", None) is None:
            raise RuntimeError("Search engine is not configured.")
        await state.start()
        return state.engine

    @mcp.tool
    async def search(term: str) -> Dict[str, Any]:
        """Search the index for items whose name matches `term`.

        Matching is case-insensitive; fuzzy matching depends on the configured
        threshold. Results keep index order.
        """
        engine = await _started_engine()
        items = engine.search(term)
        return {"term": term, "results": [_serialize_search_result_item(i) for i in items]}

    @mcp.tool
    async def rescan() -> str:
        """Rescan every enabled plugin and rebuild the index."""
        engine = await _started_engine()
        await engine.rescan()
        return "ok"

    @mcp.tool
    async def clear_caches() -> str:
        """Delete all plugin caches and rebuild the index from scratch."""
        engine = await _started_engine()
        try:
            await engine.clear_caches()
        except CacheClearError as err:
            logger.error("Failed to clear caches. Reason: %s", err)
            raise
        logger.info("Successfully cleared caches")
        return "ok"

    @mcp.tool
    async def get_settings() -> Dict[str, Any]:
        """Return the current search engine settings."""
        engine = await _started_engine()
        return engine.settings.model_dump()

    @mcp.tool
    async def update_settings(
        threshold: Optional[float] = None,
        automatic_rescan_enabled: Optional[bool] = None,
        automatic_rescan_interval_in_seconds: Optional[int] = None,
        rescan_timeout_in_seconds: Optional[float] = None,
        plugin_enabled: Optional[Dict[str, bool]] = None,
    ) -> Dict[str, Any]:
        """Update search engine settings; omitted values stay unchanged.

        Parameters
        ----------
        threshold: float | None
            Fuzzy threshold in [0, 1]; 0 disables fuzzy matching.
        automatic_rescan_enabled: bool | None
            Enable or disable the recurring rescan.
        automatic_rescan_interval_in_seconds: int | None
            Period of the recurring rescan; 0 disables it.
        rescan_timeout_in_seconds: float | None
            Upper bound for a single plugin rescan.
        plugin_enabled: dict[str, bool] | None
            Enabled flags by plugin id, merged into the current overrides.
        """
        engine = await _started_engine()
        merged = engine.settings.model_dump()
        updates = {
            "threshold": threshold,
            "automatic_rescan_enabled": automatic_rescan_enabled,
            "automatic_rescan_interval_in_seconds": automatic_rescan_interval_in_seconds,
            "rescan_timeout_in_seconds": rescan_timeout_in_seconds,
        }
        merged.update({k: v for k, v in updates.items() if v is not None})
        if plugin_enabled:
            merged["plugin_enabled"] = {**merged["plugin_enabled"], **plugin_enabled}
        await engine.update_settings(SearchEngineSettings.model_validate(merged))
        return engine.settings.model_dump()
