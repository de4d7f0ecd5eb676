"""Dashboard controller: turns clicks into decisions, fetches and renders.

Control flow for every trigger (start, menu click, card click):

1. decide against the current snapshot (:mod:`marsdash.view.decision`)
2. if the decision asks for data, fetch it from the proxy and publish a
   new snapshot through the :class:`~marsdash.state.StoreHolder`
3. decide again against the new snapshot and paint the root

A chain follows at most one fetch. If the second decision still asks
for data (an empty photo set, for instance) the chain renders what it
has instead of fetching again.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Callable

from marsdash.client import ProxyClient
from marsdash.config import DashboardConfig
from marsdash.exceptions import MarsDashError
from marsdash.models.rover import Rover
from marsdash.state.events import LoadingFailed, RoverPhotosLoaded, RoversLoaded
from marsdash.state.store import Store, StoreHolder, find_rover_or_raise
from marsdash.view import templates
from marsdash.view.decision import (
    Action,
    FetchRoverPhotos,
    FetchRovers,
    RenderError,
    RenderRover,
    RenderRovers,
    try_render_rover,
    try_render_rovers,
)
from marsdash.view.surface import ClickListener, Root

_logger = logging.getLogger(__name__)


class Dashboard:
    """Drives the rover list and rover detail screens.

    Usage::

        async with ProxyClient(config) as client:
            dashboard = Dashboard(client)
            await dashboard.start()
            await dashboard.root.click(templates.card_id(rover))
    """

    def __init__(
        self,
        client: ProxyClient,
        root: Root | None = None,
        *,
        holder: StoreHolder | None = None,
        config: DashboardConfig | None = None,
    ) -> None:
        self._client = client
        self._root = root if root is not None else Root()
        self._holder = holder if holder is not None else StoreHolder()
        self._config = config if config is not None else client.config
        self._inflight: dict[tuple[str, ...], asyncio.Task[None]] = {}

    @property
    def root(self) -> Root:
        return self._root

    @property
    def store(self) -> Store:
        return self._holder.current

    # ------------------------------------------------------------------
    # Triggers
    # ------------------------------------------------------------------

    async def start(self) -> None:
        """Show the rover list (page load)."""
        await self.dispatch(try_render_rovers(self._holder.current))

    async def menu_click(self) -> None:
        """The "Rovers" menu entry re-opens the list view."""
        await self.start()

    async def show_rover(self, name: str) -> None:
        """Open a rover's detail view (card click)."""
        await self.dispatch(try_render_rover(self._holder.current, name))

    # ------------------------------------------------------------------
    # Dispatch
    # ------------------------------------------------------------------

    async def dispatch(self, action: Action, *, fetch_allowed: bool = True) -> None:
        """Carry out a decision."""
        _logger.debug("Dispatching %s (fetch_allowed=%s)", type(action).__name__, fetch_allowed)

        if isinstance(action, RenderRovers):
            self._render_rovers(action.rovers)
        elif isinstance(action, RenderRover):
            self._render_rover(action.rover)
        elif isinstance(action, RenderError):
            _logger.warning("Rendering error view: %s", action.reason)
            self._root.replace(templates.error_view())
        elif isinstance(action, FetchRovers):
            if fetch_allowed:
                await self.fetch_rovers()
            else:
                self._render_rovers(self._holder.current.rovers)
        elif isinstance(action, FetchRoverPhotos):
            if fetch_allowed:
                await self.fetch_rover_photos(action.rover_name, action.earth_date)
            else:
                try:
                    rover = find_rover_or_raise(self._holder.current, action.rover_name)
                except MarsDashError as exc:
                    self._fail(action.rover_name, exc)
                    return
                self._render_rover(rover)
        else:
            raise TypeError(f"Unsupported action: {type(action).__name__}")

    # ------------------------------------------------------------------
    # Fetch chains
    # ------------------------------------------------------------------

    async def fetch_rovers(self) -> None:
        """Load the rover list, publish it and render the list view."""
        await self._run_chain(("rovers",), self._fetch_rovers_chain)

    async def fetch_rover_photos(self, name: str, earth_date: str | None) -> None:
        """Load *name*'s photos for *earth_date*, publish them and render the detail view."""
        await self._run_chain(("photos", name), lambda: self._fetch_rover_photos_chain(name, earth_date))

    async def _fetch_rovers_chain(self) -> None:
        try:
            success, rovers = await self._client.get_rovers()
        except MarsDashError as exc:
            self._fail("rover list", exc)
            return

        new_store = self._holder.apply(RoversLoaded(rovers_charged=success, rovers=rovers))
        _logger.debug("Rover list published as store v%d", self._holder.version)
        await self.dispatch(try_render_rovers(new_store), fetch_allowed=False)

    async def _fetch_rover_photos_chain(self, name: str, earth_date: str | None) -> None:
        try:
            photos = await self._client.get_latest_photos(name, earth_date)
        except MarsDashError as exc:
            self._fail(f"photos of {name}", exc)
            return

        new_store = self._holder.apply(RoverPhotosLoaded(rover_name=name, photos=photos))
        _logger.debug("Photos of %s published as store v%d", name, self._holder.version)
        await self.dispatch(try_render_rover(new_store, name), fetch_allowed=False)

    async def _run_chain(self, key: tuple[str, ...], chain: Callable[[], Awaitable[None]]) -> None:
        """Run a fetch chain, sharing one in-flight run per key when de-duplication is on.

        Without de-duplication concurrent chains race and the last one to
        complete publishes the final snapshot.
        """
        if not self._config.dedupe_requests:
            await chain()
            return

        task = self._inflight.get(key)
        if task is None or task.done():
            task = asyncio.ensure_future(chain())
            self._inflight[key] = task
            task.add_done_callback(lambda done: self._forget(key, done))
        else:
            _logger.debug("Joining in-flight %s", "/".join(key))
        await asyncio.shield(task)

    def _forget(self, key: tuple[str, ...], task: asyncio.Task[None]) -> None:
        if self._inflight.get(key) is task:
            del self._inflight[key]

    def _fail(self, what: str, exc: MarsDashError) -> None:
        _logger.warning("Loading %s failed: %s", what, exc)
        self._holder.apply(LoadingFailed(reason=str(exc)))
        self._root.replace(templates.error_view())

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def _render_rovers(self, rovers: tuple[Rover, ...]) -> None:
        listeners: dict[str, ClickListener] = {}
        for rover in rovers:
            if rover.name is not None:
                listeners[templates.card_id(rover)] = self._card_listener(rover.name)
        self._root.replace(templates.rovers_view(rovers, self._config.image_dir), listeners)

    def _render_rover(self, rover: Rover) -> None:
        # Detail view has no cards: the previous card listeners go with the old markup.
        self._root.replace(templates.rover_view(rover))

    def _card_listener(self, name: str) -> ClickListener:
        async def _on_click() -> None:
            await self.show_rover(name)

        return _on_click
