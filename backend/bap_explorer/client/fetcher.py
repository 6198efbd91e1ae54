"""BAP Explorer — Fetch/refresh controller.

One controller backs one view. It issues a request whenever its parameters
change, tracks idle/loading/success/error, keeps the last good payload, exposes
`refetch()`, and can poll on a fixed interval.

Lifecycle::

    async with resources.blocks(client, page=1) as blocks:   # mount
        ...
        blocks.set_params(page=2)                             # supersedes page 1
        await blocks.wait()
        render(blocks.state)
                                                              # unmount on exit

Rules:

* Every request is tagged with a generation number. A response is applied only
  if its generation is still current; superseded in-flight requests are also
  cancelled.
* Stale data stays visible while reloading and after a failure; it is replaced
  only by a successful response.
* The loading flag is released on every exit path of a request, including
  cancellation and unexpected exceptions.
* Failures are stored in `state.error` and logged, never retried; `refetch()`
  is the only retry.
* The polling task is owned by the controller and cancelled on `close()` or
  `set_auto_refresh(False)`.
"""
import asyncio
import logging
from contextlib import contextmanager, suppress
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Awaitable, Callable, Generic, Iterator, Mapping, TypeVar

from bap_explorer.core.errors import FetchError

logger = logging.getLogger(__name__)

T = TypeVar("T")

RequestFn = Callable[[Mapping[str, Any]], Awaitable[T]]
SleepFn = Callable[[float], Awaitable[Any]]


class FetchStatus(str, Enum):
    IDLE = "idle"
    LOADING = "loading"
    SUCCESS = "success"
    ERROR = "error"


@dataclass
class FetchState(Generic[T]):
    data: T
    loading: bool = True
    error: Exception | None = None
    params: dict[str, Any] = field(default_factory=dict)
    status: FetchStatus = FetchStatus.LOADING


class FetchController(Generic[T]):
    """Generic fetch/refresh state machine."""

    def __init__(
        self,
        request: RequestFn[T],
        params: Mapping[str, Any] | None = None,
        *,
        default: T,
        name: str = "resource",
        auto_refresh: bool = False,
        refresh_interval: float = 30.0,
        ready: Callable[[Mapping[str, Any]], bool] | None = None,
        sleep: SleepFn = asyncio.sleep,
    ):
        if refresh_interval <= 0:
            raise ValueError("refresh_interval must be positive")
        self.name = name
        self.refresh_interval = refresh_interval
        self.state: FetchState[T] = FetchState(data=default, params=dict(params or {}))
        self._request = request
        self._ready = ready
        self._sleep = sleep
        self._auto_refresh = auto_refresh
        self._generation = 0
        self._inflight: asyncio.Task | None = None
        self._refresh_task: asyncio.Task | None = None
        self._started = False
        self._closed = False

    # ── Read-only view of the state ──────────────────────────────────────────

    @property
    def data(self) -> T:
        return self.state.data

    @property
    def loading(self) -> bool:
        return self.state.loading

    @property
    def error(self) -> Exception | None:
        return self.state.error

    @property
    def params(self) -> dict[str, Any]:
        return dict(self.state.params)

    @property
    def status(self) -> FetchStatus:
        return self.state.status

    @property
    def auto_refresh(self) -> bool:
        return self._auto_refresh

    # ── Mount / unmount ──────────────────────────────────────────────────────

    async def start(self) -> None:
        """Mount: issue the first request and start polling if enabled."""
        if self._started:
            return
        if self._closed:
            raise RuntimeError(f"{self.name} controller is closed")
        self._started = True
        self._issue()
        if self._auto_refresh:
            self._start_timer()

    async def close(self) -> None:
        """Unmount: stop polling and abandon the in-flight request."""
        if self._closed:
            return
        self._closed = True
        # nothing that completes after this point is applied
        self._generation += 1
        for task in (self._refresh_task, self._inflight):
            if task is not None and not task.done():
                task.cancel()
                with suppress(asyncio.CancelledError):
                    await task
        self._refresh_task = None
        self._inflight = None
        self.state.loading = False

    async def __aenter__(self) -> "FetchController[T]":
        await self.start()
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.close()

    # ── Triggers ─────────────────────────────────────────────────────────────

    def set_params(self, **changes: Any) -> asyncio.Task | None:
        """Merge parameter changes; a real change supersedes the current request."""
        params = {**self.state.params, **changes}
        if params == self.state.params:
            return None
        self.state.params = params
        if not self._started:
            return None
        return self._issue()

    def refetch(self) -> asyncio.Task | None:
        """Re-issue the request for the current parameters."""
        if not self._started:
            raise RuntimeError(f"{self.name} controller has not been started")
        return self._issue()

    def set_auto_refresh(self, enabled: bool, interval: float | None = None) -> None:
        if interval is not None:
            if interval <= 0:
                raise ValueError("refresh_interval must be positive")
            self.refresh_interval = interval
        self._auto_refresh = enabled
        self._stop_timer()
        if enabled and self._started and not self._closed:
            self._start_timer()

    async def wait(self) -> None:
        """Wait until no request is in flight, following any superseding ones."""
        while self._inflight is not None and not self._inflight.done():
            await asyncio.wait({self._inflight})

    # ── Internals ────────────────────────────────────────────────────────────

    def _is_current(self, generation: int) -> bool:
        return generation == self._generation and not self._closed

    def _issue(self) -> asyncio.Task | None:
        if self._closed:
            logger.debug("Ignoring request on closed %s controller", self.name)
            return None
        self._generation += 1
        generation = self._generation
        if self._inflight is not None and not self._inflight.done():
            self._inflight.cancel()
        self._inflight = None

        params = dict(self.state.params)
        if self._ready is not None and not self._ready(params):
            self.state.status = FetchStatus.IDLE
            self.state.loading = False
            self.state.error = None
            return None

        self.state.status = FetchStatus.LOADING
        self.state.loading = True
        self.state.error = None
        self._inflight = asyncio.create_task(self._run(generation, params), name=f"fetch:{self.name}")
        return self._inflight

    @contextmanager
    def _loading_scope(self, generation: int) -> Iterator[None]:
        """Hold the loading flag for one request; release it on every exit path."""
        if self._is_current(generation):
            self.state.loading = True
        try:
            yield
        finally:
            if self._is_current(generation):
                self.state.loading = False

    async def _run(self, generation: int, params: dict[str, Any]) -> None:
        with self._loading_scope(generation):
            try:
                data = await self._request(params)
            except FetchError as exc:
                if self._is_current(generation):
                    logger.warning("Error fetching %s %s: %s", self.name, params, exc)
                    self._fail(exc)
                return
            except Exception as exc:
                if self._is_current(generation):
                    logger.exception("Unexpected error fetching %s %s", self.name, params)
                    self._fail(exc)
                return

            if not self._is_current(generation):
                logger.debug("Discarding stale %s response for %s", self.name, params)
                return
            self.state.data = data
            self.state.error = None
            self.state.status = FetchStatus.SUCCESS

    def _fail(self, exc: Exception) -> None:
        self.state.error = exc
        self.state.status = FetchStatus.ERROR

    def _start_timer(self) -> None:
        self._refresh_task = asyncio.create_task(self._refresh_loop(), name=f"refresh:{self.name}")

    def _stop_timer(self) -> None:
        if self._refresh_task is not None and not self._refresh_task.done():
            self._refresh_task.cancel()
        self._refresh_task = None

    async def _refresh_loop(self) -> None:
        try:
            while True:
                await self._sleep(self.refresh_interval)
                logger.debug("Auto-refreshing %s", self.name)
                self._issue()
        except Exception:
            # polling stops; requests already issued keep their own state
            logger.exception("Auto-refresh of %s stopped", self.name)
