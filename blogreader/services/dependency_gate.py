import asyncio
import logging
from typing import Optional

from blogreader.errors import RenderingUnavailable

logger = logging.getLogger(__name__)


class DependencyGate:
    """
    Holds the single-post render path until every dependency reports ready.

    Readiness is polled every `poll_interval` seconds with `asyncio.sleep`, so the
    event loop keeps serving other requests meanwhile. With `timeout=None` the wait
    is unbounded; otherwise `RenderingUnavailable` is raised once it elapses.
    """

    def __init__(
        self,
        *dependencies,
        poll_interval: float = 0.1,
        timeout: Optional[float] = None,
    ):
        self.dependencies = dependencies
        self.poll_interval = poll_interval
        self.timeout = timeout

    def is_ready(self) -> bool:
        return all(dep.is_ready() for dep in self.dependencies)

    async def wait_until_ready(self) -> None:
        if self.is_ready():
            return

        logger.debug("Waiting for rendering dependencies...")
        try:
            await asyncio.wait_for(self._poll(), timeout=self.timeout)
        except asyncio.TimeoutError as e:
            raise RenderingUnavailable(
                f"Rendering dependencies not ready after {self.timeout}s"
            ) from e

    async def _poll(self) -> None:
        while not self.is_ready():
            await asyncio.sleep(self.poll_interval)
