"""FetchController state machine: supersession, stale data, polling, unmount."""
import asyncio
import heapq
import itertools
import logging

import httpx
import pytest

from bap_explorer.client import resources
from bap_explorer.client.api import ExplorerClient
from bap_explorer.client.fetcher import FetchController, FetchStatus
from bap_explorer.core.errors import UpstreamFailure


async def settle(rounds: int = 20) -> None:
    for _ in range(rounds):
        await asyncio.sleep(0)


class FakeClock:
    """Manually advanced clock; pass `clock.sleep` as the controller's sleep."""

    def __init__(self):
        self.now = 0.0
        self._sleepers = []
        self._seq = itertools.count()

    async def sleep(self, delay: float) -> None:
        future = asyncio.get_running_loop().create_future()
        heapq.heappush(self._sleepers, (self.now + delay, next(self._seq), future))
        await future

    async def advance(self, amount: float) -> None:
        target = self.now + amount
        await settle()
        while self._sleepers and self._sleepers[0][0] <= target:
            deadline, _, future = heapq.heappop(self._sleepers)
            self.now = deadline
            if not future.done():
                future.set_result(None)
            await settle()
        self.now = target


class Recorder:
    """Request function that records calls and answers with the page number."""

    def __init__(self):
        self.calls = []

    async def __call__(self, params):
        self.calls.append(dict(params))
        return params.get("page")


class Gated:
    """Request function whose responses are released by hand, per page."""

    def __init__(self, stubborn: bool = False):
        self.gates = {}
        self.calls = []
        self.stubborn = stubborn

    def gate(self, page) -> asyncio.Future:
        if page not in self.gates:
            self.gates[page] = asyncio.get_running_loop().create_future()
        return self.gates[page]

    async def __call__(self, params):
        page = params["page"]
        self.calls.append(page)
        future = self.gate(page)
        if not self.stubborn:
            return await future
        try:
            return await asyncio.shield(future)
        except asyncio.CancelledError:
            # ignores the cancellation and answers late anyway
            return await future


class TestInitialState:

    def test_before_mount(self):
        controller = FetchController(Recorder(), {"page": 1}, default="empty")
        assert controller.status is FetchStatus.LOADING
        assert controller.loading
        assert controller.data == "empty"
        assert controller.error is None

    def test_refetch_requires_mount(self):
        controller = FetchController(Recorder(), {"page": 1}, default=None)
        with pytest.raises(RuntimeError):
            controller.refetch()

    def test_interval_must_be_positive(self):
        with pytest.raises(ValueError):
            FetchController(Recorder(), default=None, refresh_interval=0)


class TestRequests:

    @pytest.mark.asyncio
    async def test_success_clears_loading(self):
        request = Recorder()
        async with FetchController(request, {"page": 1}, default=None) as controller:
            await controller.wait()
            assert controller.status is FetchStatus.SUCCESS
            assert not controller.loading
            assert controller.data == 1
        assert request.calls == [{"page": 1}]

    @pytest.mark.asyncio
    async def test_failure_keeps_last_good_data(self):
        responses = [7, UpstreamFailure("down", 500)]

        async def request(params):
            result = responses.pop(0)
            if isinstance(result, Exception):
                raise result
            return result

        async with FetchController(request, {"page": 1}, default=None) as controller:
            await controller.wait()
            controller.refetch()
            assert controller.loading
            assert controller.data == 7
            await controller.wait()
            assert controller.status is FetchStatus.ERROR
            assert isinstance(controller.error, UpstreamFailure)
            assert controller.data == 7
            assert not controller.loading

    @pytest.mark.asyncio
    async def test_unexpected_exception_is_captured(self):
        async def request(params):
            raise RuntimeError("boom")

        async with FetchController(request, default="empty") as controller:
            await controller.wait()
            assert controller.status is FetchStatus.ERROR
            assert isinstance(controller.error, RuntimeError)
            assert not controller.loading
            assert controller.data == "empty"

    @pytest.mark.asyncio
    async def test_refetch_issues_same_params(self):
        request = Recorder()
        async with FetchController(request, {"page": 3}, default=None) as controller:
            await controller.wait()
            controller.refetch()
            await controller.wait()
        assert request.calls == [{"page": 3}, {"page": 3}]

    @pytest.mark.asyncio
    async def test_unchanged_params_do_not_refetch(self):
        request = Recorder()
        async with FetchController(request, {"page": 1}, default=None) as controller:
            await controller.wait()
            assert controller.set_params(page=1) is None
        assert len(request.calls) == 1

    @pytest.mark.asyncio
    async def test_params_before_mount_are_used_on_mount(self):
        request = Recorder()
        controller = FetchController(request, {"page": 1}, default=None)
        assert controller.set_params(page=4) is None
        async with controller:
            await controller.wait()
        assert request.calls == [{"page": 4}]


class TestSupersession:

    @pytest.mark.asyncio
    async def test_param_change_cancels_previous_request(self):
        request = Gated()
        async with FetchController(request, {"page": 1}, default=None) as controller:
            await settle()
            first = controller._inflight
            controller.set_params(page=2)
            await settle()
            assert first.cancelled()
            assert controller.loading
            request.gate(2).set_result("page two")
            await controller.wait()
            assert controller.data == "page two"
            assert controller.status is FetchStatus.SUCCESS
        assert request.calls == [1, 2]

    @pytest.mark.asyncio
    async def test_late_response_from_superseded_request_is_discarded(self):
        request = Gated(stubborn=True)
        async with FetchController(request, {"page": 1}, default=None) as controller:
            await settle()
            controller.set_params(page=2)
            await settle()
            request.gate(2).set_result("page two")
            await controller.wait()
            request.gate(1).set_result("page one")
            await settle()
            assert controller.data == "page two"
            assert controller.status is FetchStatus.SUCCESS
            assert not controller.loading

    @pytest.mark.asyncio
    async def test_late_failure_from_superseded_request_is_discarded(self):
        request = Gated(stubborn=True)
        async with FetchController(request, {"page": 1}, default=None) as controller:
            await settle()
            controller.set_params(page=2)
            await settle()
            request.gate(2).set_result("page two")
            await controller.wait()
            request.gate(1).set_exception(UpstreamFailure("late", 502))
            await settle()
            assert controller.error is None
            assert controller.status is FetchStatus.SUCCESS


class TestReadiness:

    @pytest.mark.asyncio
    async def test_idle_until_ready(self):
        request = Recorder()
        controller = FetchController(
            request, {"id": None}, default=None, ready=lambda params: params.get("id") is not None
        )
        async with controller:
            assert controller.status is FetchStatus.IDLE
            assert not controller.loading
            assert request.calls == []

            controller.set_params(id="nfx-1", page=1)
            await controller.wait()
            assert controller.status is FetchStatus.SUCCESS
        assert request.calls == [{"id": "nfx-1", "page": 1}]

    @pytest.mark.asyncio
    async def test_detail_factory_waits_for_id(self, app):
        async with ExplorerClient("http://testserver", transport=httpx.ASGITransport(app=app)) as client:
            async with resources.nfx_status(client, None) as status:
                assert status.status is FetchStatus.IDLE
                status.set_params(nfx_id="nfx-2")
                await status.wait()
                assert status.data.nfx.id == "nfx-2"


class TestAutoRefresh:

    @pytest.mark.asyncio
    async def test_polls_on_interval(self):
        clock = FakeClock()
        request = Recorder()
        controller = FetchController(
            request, {"page": 1}, default=None, auto_refresh=True, refresh_interval=30000, sleep=clock.sleep
        )
        async with controller:
            await clock.advance(65000)
            assert len(request.calls) == 3
        await clock.advance(60000)
        assert len(request.calls) == 3

    @pytest.mark.asyncio
    async def test_disabling_stops_polling(self):
        clock = FakeClock()
        request = Recorder()
        controller = FetchController(
            request, {"page": 1}, default=None, auto_refresh=True, refresh_interval=10, sleep=clock.sleep
        )
        async with controller:
            await clock.advance(10)
            assert len(request.calls) == 2
            controller.set_auto_refresh(False)
            await clock.advance(100)
            assert len(request.calls) == 2
            assert not controller.auto_refresh

    @pytest.mark.asyncio
    async def test_enabling_after_mount(self):
        clock = FakeClock()
        request = Recorder()
        async with FetchController(request, {"page": 1}, default=None, sleep=clock.sleep) as controller:
            await clock.advance(100)
            assert len(request.calls) == 1
            controller.set_auto_refresh(True, interval=20)
            await clock.advance(45)
            assert len(request.calls) == 3

    @pytest.mark.asyncio
    async def test_metrics_factory_polls(self, app):
        clock = FakeClock()
        async with ExplorerClient("http://testserver", transport=httpx.ASGITransport(app=app)) as client:
            metrics = resources.metrics(client, auto_refresh=True, refresh_interval=30, sleep=clock.sleep)
            async with metrics:
                await metrics.wait()
                assert metrics.data.block_height == 10000
                await clock.advance(30)
                await metrics.wait()
                assert metrics.status is FetchStatus.SUCCESS

    @pytest.mark.asyncio
    async def test_failing_timer_is_logged_and_stops(self, caplog):
        async def broken_sleep(delay):
            raise OSError("timer unavailable")

        request = Recorder()
        controller = FetchController(
            request, {"page": 1}, default=None, name="ticker", auto_refresh=True, sleep=broken_sleep
        )
        with caplog.at_level(logging.ERROR, logger="bap_explorer.client.fetcher"):
            async with controller:
                await controller.wait()
                await settle()
                timer = controller._refresh_task
                assert timer.done()
                assert timer.exception() is None
        assert "Auto-refresh of ticker stopped" in caplog.text
        assert len(request.calls) == 1


class TestUnmount:

    @pytest.mark.asyncio
    async def test_close_cancels_inflight_request(self):
        request = Gated()
        controller = FetchController(request, {"page": 1}, default="empty")
        await controller.start()
        await settle()
        task = controller._inflight
        await controller.close()
        assert task.cancelled()
        assert not controller.loading
        assert controller.data == "empty"

    @pytest.mark.asyncio
    async def test_closed_controller_ignores_triggers(self):
        request = Recorder()
        controller = FetchController(request, {"page": 1}, default=None)
        async with controller:
            await controller.wait()
        assert controller.set_params(page=2) is None
        assert controller.refetch() is None
        assert len(request.calls) == 1

    @pytest.mark.asyncio
    async def test_closed_controller_cannot_remount(self):
        controller = FetchController(Recorder(), default=None)
        await controller.close()
        with pytest.raises(RuntimeError):
            await controller.start()


class TestResources:

    @pytest.mark.asyncio
    async def test_blocks_pages_through_app(self, app):
        async with ExplorerClient("http://testserver", transport=httpx.ASGITransport(app=app)) as client:
            async with resources.blocks(client, page=1, limit=20) as blocks:
                await blocks.wait()
                assert len(blocks.data.blocks) == 20
                assert blocks.data.total == 10000

                blocks.set_params(page=501)
                await blocks.wait()
                assert blocks.data.blocks == []
                assert blocks.data.total == 10000

    @pytest.mark.asyncio
    async def test_invalid_params_surface_as_error(self, app):
        async with ExplorerClient("http://testserver", transport=httpx.ASGITransport(app=app)) as client:
            async with resources.pools(client) as pools:
                await pools.wait()
                good = pools.data
                pools.set_params(limit=1000)
                await pools.wait()
                assert isinstance(pools.error, UpstreamFailure)
                assert pools.error.status_code == 400
                assert pools.data == good
