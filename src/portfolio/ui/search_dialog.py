"""Keyboard-driven search overlay state.

States::

    CLOSED --open--> IDLE --non-empty query--> LOADING --results--> RESULTS
    any --close / Escape / select--> CLOSED

A search only runs once typing has paused for the debounce delay; every
keystroke restarts the timer, so rapid typing dispatches a single query.
"""

import asyncio
from collections.abc import Callable
from enum import Enum

from src.portfolio.core.config import Settings
from src.portfolio.core.logging import get_logger
from src.portfolio.schemas.search import SearchResult
from src.portfolio.search.index import SearchIndex
from src.portfolio.search.results import MAX_SEARCH_RESULTS, to_results
from src.portfolio.ui.focus_trap import FocusTrap

logger = get_logger(__name__)

DEBOUNCE_DELAY_SECONDS = 0.2

_EDITABLE_TAGS = frozenset({"input", "textarea"})


class DialogState(str, Enum):
    CLOSED = "closed"
    IDLE = "idle"
    LOADING = "loading"
    RESULTS = "results"


class SearchDialog:
    """Search session state for a single modal overlay.

    Args:
        index: Index to query; expected to degrade to zero results on failure.
        navigate: Called with the URL of a selected result.
        debounce: Seconds typing must pause before a search is dispatched.
        max_results: Cap on displayed results.
        focus_trap: Trap activated while the dialog is open.
    """

    def __init__(
        self,
        index: SearchIndex,
        navigate: Callable[[str], object],
        *,
        debounce: float = DEBOUNCE_DELAY_SECONDS,
        max_results: int = MAX_SEARCH_RESULTS,
        focus_trap: FocusTrap | None = None,
    ):
        self.index = index
        self.navigate = navigate
        self.debounce = debounce
        self.max_results = max_results
        self.focus_trap = focus_trap

        self.state = DialogState.CLOSED
        self.query = ""
        self.results: list[SearchResult] = []
        self.selected_index = 0
        self._pending: asyncio.Task[None] | None = None

    @classmethod
    def from_settings(
        cls,
        index: SearchIndex,
        navigate: Callable[[str], object],
        settings: Settings,
        focus_trap: FocusTrap | None = None,
    ) -> "SearchDialog":
        return cls(
            index,
            navigate,
            debounce=settings.search_debounce_ms / 1000,
            max_results=settings.search_max_results,
            focus_trap=focus_trap,
        )

    @property
    def is_open(self) -> bool:
        return self.state is not DialogState.CLOSED

    @property
    def is_loading(self) -> bool:
        return self.state is DialogState.LOADING

    @property
    def selected(self) -> SearchResult | None:
        if not self.results:
            return None
        return self.results[self.selected_index]

    # Open / close

    def open(self) -> None:
        if self.is_open:
            return
        self._reset()
        self.state = DialogState.IDLE
        if self.focus_trap is not None:
            self.focus_trap.activate()

    def close(self) -> None:
        if not self.is_open:
            return
        self._cancel_pending()
        self.state = DialogState.CLOSED
        if self.focus_trap is not None:
            self.focus_trap.deactivate()

    def toggle(self) -> None:
        if self.is_open:
            self.close()
        else:
            self.open()

    def handle_shortcut(
        self,
        key: str,
        *,
        meta: bool = False,
        ctrl: bool = False,
        target_tag: str | None = None,
        target_editable: bool = False,
    ) -> bool:
        """Global Cmd/Ctrl+K toggle. Ignored while typing in another field."""
        if target_editable or (target_tag or "").lower() in _EDITABLE_TAGS:
            return False
        if (meta or ctrl) and key.lower() == "k":
            self.toggle()
            return True
        return False

    # Query

    def set_query(self, text: str) -> None:
        """Update the query text and (re)start the debounce timer."""
        if not self.is_open:
            return
        self.query = text
        self._cancel_pending()

        if not text.strip():
            self.results = []
            self.selected_index = 0
            self.state = DialogState.IDLE
            return

        self.state = DialogState.LOADING
        self._pending = asyncio.get_running_loop().create_task(self._search_after_delay(text))

    async def wait_for_search(self) -> None:
        """Wait until the pending debounced search (if any) has finished."""
        if self._pending is not None:
            try:
                await self._pending
            except asyncio.CancelledError:
                pass

    async def _search_after_delay(self, query: str) -> None:
        await asyncio.sleep(self.debounce)
        await self._run_search(query)

    async def _run_search(self, query: str) -> None:
        try:
            hits = await self.index.search(query)
        except Exception as e:
            logger.warning("Search failed", query=query, error=str(e))
            hits = []

        # Closed or retyped while the search was in flight
        if self.state is not DialogState.LOADING or query != self.query:
            return

        self.results = to_results(hits, self.max_results)
        self.selected_index = 0
        self.state = DialogState.RESULTS

    # Keyboard

    def handle_key(self, key: str, shift: bool = False) -> bool:
        """Handle a keydown inside the dialog. Returns True if it was consumed."""
        if not self.is_open:
            return False

        if key == "Escape":
            self.close()
            return True
        if key == "Tab" and self.focus_trap is not None:
            return self.focus_trap.handle_key(key, shift=shift)

        if key in ("ArrowDown", "ArrowUp", "Enter") and not self.results:
            return False

        if key == "ArrowDown":
            self.selected_index = min(self.selected_index + 1, len(self.results) - 1)
            return True
        if key == "ArrowUp":
            self.selected_index = max(self.selected_index - 1, 0)
            return True
        if key == "Enter":
            self.select()
            return True
        return False

    def hover(self, index: int) -> None:
        if 0 <= index < len(self.results):
            self.selected_index = index

    def select(self, index: int | None = None) -> str | None:
        """Close the dialog and navigate to a result. No-op without results."""
        if not self.results:
            return None
        if index is None:
            index = self.selected_index
        if not 0 <= index < len(self.results):
            return None

        url = self.results[index].url
        self.close()
        self.navigate(url)
        return url

    # Internals

    def _reset(self) -> None:
        self._cancel_pending()
        self.query = ""
        self.results = []
        self.selected_index = 0

    def _cancel_pending(self) -> None:
        if self._pending is not None and not self._pending.done():
            self._pending.cancel()
        self._pending = None
