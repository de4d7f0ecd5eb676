"""The root container the dashboard paints into.

Markup and click listeners are swapped together: every render replaces
the whole listener table, so a listener can never outlive the markup it
was bound to and re-rendering never stacks duplicates.
"""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable, Mapping

_logger = logging.getLogger(__name__)

ClickListener = Callable[[], Awaitable[None]]


class Root:
    """Stand-in for the page's ``#root`` element."""

    def __init__(self) -> None:
        self._inner_html = ""
        self._listeners: dict[str, ClickListener] = {}
        self._renders = 0

    @property
    def inner_html(self) -> str:
        return self._inner_html

    @property
    def listener_ids(self) -> frozenset[str]:
        return frozenset(self._listeners)

    @property
    def renders(self) -> int:
        """How many times the content was replaced."""
        return self._renders

    def replace(self, markup: str, listeners: Mapping[str, ClickListener] | None = None) -> None:
        self._inner_html = markup
        self._listeners = dict(listeners) if listeners else {}
        self._renders += 1
        _logger.debug("Root rendered (%d listener(s))", len(self._listeners))

    async def click(self, element_id: str | int) -> bool:
        """Run the listener bound to *element_id*; ``False`` when none is bound."""
        listener = self._listeners.get(str(element_id))
        if listener is None:
            _logger.debug("Click on %s ignored: no listener bound", element_id)
            return False
        await listener()
        return True
