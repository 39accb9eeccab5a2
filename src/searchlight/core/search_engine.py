"""SearchEngine - orchestrates search plugins and answers queries.

Provides:
- initialize(): first rescan cycle over all enabled plugins, then ready
- search(): synchronous exact/fuzzy matching over the current index snapshot
- rescan(): refresh every enabled plugin and swap in a new snapshot
- clear_caches(): wipe plugin temporary folders, then rescan
- update_settings(): swap settings and re-arm the automatic rescan timer

Concurrency:
- Plugin rescans of one cycle run concurrently (asyncio.gather)
- Cycles are serialized by an asyncio.Lock
- The index is published with a single reference swap, so search() never
  needs a lock and never sees a partially rebuilt index
"""

from __future__ import annotations

import asyncio
import logging
from datetime import timedelta
from typing import Dict, List, Optional, Sequence, Tuple

from searchlight.config import SearchEngineSettings
from searchlight.core.index import IndexSnapshot, SearchIndex
from searchlight.core.matcher import is_match
from searchlight.core.scheduler import RescanScheduler
from searchlight.core.searchable import Searchable, SearchResultItem
from searchlight.exceptions import CacheClearError, PluginError, SettingsUpdateError, StorageError
from searchlight.plugins.base_plugin import SearchPlugin
from searchlight.utilities.file_system import delete_folder_recursively, ensure_folder

logger = logging.getLogger(__name__)


class SearchEngine:
    """
    Owns the index and the lifecycle of every search plugin.

    Plugin failures during a cycle are logged and never propagated: a plugin
    whose folder creation, rescan or listing fails keeps the items it
    contributed to the previous snapshot. Only clear_caches() and
    update_settings() raise, because their failure leaves state the caller
    has to react to.
    """

    def __init__(
        self,
        settings: SearchEngineSettings,
        plugins: Sequence[SearchPlugin],
        *,
        scheduler: Optional[RescanScheduler] = None,
    ) -> None:
        self._settings = settings.model_copy(deep=True)
        self._plugins: List[SearchPlugin] = list(plugins)
        self._index = SearchIndex()
        self._scheduler = scheduler or RescanScheduler()
        self._cycle_lock = asyncio.Lock()
        self._initialized = False
        self._apply_plugin_overrides()

    @property
    def is_initialized(self) -> bool:
        return self._initialized

    @property
    def settings(self) -> SearchEngineSettings:
        """A copy of the current settings."""
        return self._settings.model_copy(deep=True)

    @property
    def snapshot(self) -> IndexSnapshot:
        return self._index.snapshot

    @property
    def plugins(self) -> Tuple[SearchPlugin, ...]:
        return tuple(self._plugins)

    @property
    def automatic_rescan_scheduled(self) -> bool:
        return self._scheduler.is_scheduled

    # ----- Public surface -----

    async def initialize(self) -> None:
        """Run the first rescan cycle, then mark the engine ready."""
        await self.rescan()
        self._initialized = True
        logger.info(
            "Search engine initialized with %d item(s) from %d enabled plugin(s)",
            len(self._index.snapshot),
            len(self._enabled_plugins()),
        )
        try:
            self._arm_rescan_timer()
        except Exception:
            logger.exception("Failed to schedule automatic rescan; manual rescans still work")

    def search(self, term: str) -> List[SearchResultItem]:
        """Return the items whose name matches `term`, in index order.

        Never raises and never blocks: an uninitialized engine or an empty
        term yields an empty list. Whitespace is not trimmed.
        """
        if not self._initialized or term == "":
            return []
        # Read both once so a concurrent swap cannot change them mid-call
        snapshot = self._index.snapshot
        threshold = self._settings.threshold
        results: List[SearchResultItem] = []
        for searchable in snapshot.searchables:
            item = searchable.to_search_result_item()
            if is_match(term, item.name, threshold):
                results.append(item)
        return results

    async def rescan(self) -> None:
        """Rescan every enabled plugin and publish a new index snapshot."""
        async with self._cycle_lock:
            await self._run_cycle()

    async def clear_caches(self) -> None:
        """Delete every plugin's temporary folder, then rescan.

        Raises
        ------
        CacheClearError
            If a folder cannot be deleted or the rescan fails.
        """
        async with self._cycle_lock:
            for plugin in self._plugins:
                try:
                    folder = plugin.get_temporary_folder_path()
                    await delete_folder_recursively(folder)
                except Exception as err:
                    raise CacheClearError(
                        f"Failed to clear cache of plugin '{plugin.id}': {err}"
                    ) from err
                logger.debug("Deleted temporary folder %s of plugin '%s'", folder, plugin.id)
            try:
                await self._run_cycle()
            except Exception as err:
                raise CacheClearError(f"Rescan after clearing caches failed: {err}") from err

    async def update_settings(self, settings: SearchEngineSettings) -> None:
        """Swap in new settings and re-arm the automatic rescan timer.

        Does not trigger a rescan.

        Raises
        ------
        SettingsUpdateError
            If the automatic rescan timer cannot be reprogrammed.
        """
        self._settings = settings.model_copy(deep=True)
        self._apply_plugin_overrides()
        if not self._initialized:
            return
        try:
            self._arm_rescan_timer()
        except Exception as err:
            raise SettingsUpdateError(f"Failed to reschedule automatic rescan: {err}") from err

    def shutdown(self) -> None:
        """Stop the automatic rescan timer."""
        self._scheduler.shutdown(wait=False)

    # ----- Internals -----

    def _enabled_plugins(self) -> List[SearchPlugin]:
        return [plugin for plugin in self._plugins if plugin.is_enabled()]

    def _apply_plugin_overrides(self) -> None:
        overrides: Dict[str, bool] = self._settings.plugin_enabled
        for plugin in self._plugins:
            if plugin.id in overrides:
                plugin.set_enabled(overrides[plugin.id])

    def _arm_rescan_timer(self) -> None:
        interval = self._settings.automatic_rescan_interval_in_seconds
        if self._settings.automatic_rescan_enabled and interval > 0:
            self._scheduler.schedule_rescan(self.rescan, interval=timedelta(seconds=interval))
            logger.debug("Automatic rescan scheduled every %d second(s)", interval)
        else:
            self._scheduler.cancel_rescan()

    async def _run_cycle(self) -> IndexSnapshot:
        # Caller must hold _cycle_lock
        plugins = self._enabled_plugins()
        previous = self._index.snapshot
        outcomes = await asyncio.gather(*(self._rescan_plugin(plugin) for plugin in plugins))

        contributions: List[Tuple[str, Sequence[Searchable]]] = []
        for plugin, rescanned in zip(plugins, outcomes):
            items: Sequence[Searchable] = previous.contribution(plugin.id)
            if rescanned:
                try:
                    items = self._collect(plugin)
                except PluginError as err:
                    logger.warning("%s; keeping %d previous item(s)", err, len(items))
            contributions.append((plugin.id, items))

        snapshot = self._index.replace(contributions)
        logger.info(
            "Rescan finished: generation %d with %d item(s)", snapshot.generation, len(snapshot)
        )
        return snapshot

    async def _rescan_plugin(self, plugin: SearchPlugin) -> bool:
        try:
            await ensure_folder(plugin.get_temporary_folder_path())
        except StorageError as err:
            logger.warning("Skipping plugin '%s' for this cycle: %s", plugin.id, err)
            return False
        except Exception:
            logger.exception(
                "Skipping plugin '%s' for this cycle: no usable temporary folder", plugin.id
            )
            return False

        timeout = self._settings.rescan_timeout_in_seconds
        try:
            if timeout is None:
                await plugin.rescan()
            else:
                await asyncio.wait_for(plugin.rescan(), timeout=timeout)
        except asyncio.TimeoutError:
            logger.warning("Rescan of plugin '%s' timed out after %ss", plugin.id, timeout)
            return False
        except Exception:
            logger.exception("Rescan of plugin '%s' failed", plugin.id)
            return False
        return True

    @staticmethod
    def _collect(plugin: SearchPlugin) -> List[Searchable]:
        try:
            return list(plugin.get_all())
        except Exception as err:
            raise PluginError(f"Plugin '{plugin.id}' failed to list its items: {err}") from err
