"""
Background poller feeding the live price ticker.
"""
import asyncio
from datetime import datetime
from typing import Callable, Optional

from loguru import logger

from quickdigest.core.config import settings
from quickdigest.core.constants import TickerConfig
from quickdigest.core.exceptions import PriceFetchError
from quickdigest.models.api import TickerDisplay
from quickdigest.models.ticker import PriceQuote, PriceSample
from quickdigest.services.price import PriceClient, PriceHistory
from quickdigest.services.rendering import NullRenderer, Renderer


class PricePoller:
    """
    Polls the exchange at a fixed interval and re-renders the ticker.

    Runs as an asyncio task. A failed tick is logged and shown on the
    renderer; the loop keeps going and the next tick tries again.
    """

    def __init__(
        self,
        client: PriceClient,
        history: Optional[PriceHistory] = None,
        renderer: Optional[Renderer] = None,
        interval: float = settings.PRICE_POLL_INTERVAL_SECONDS,
        clock: Callable[[], datetime] = datetime.now,
    ) -> None:
        """
        Initialize the PricePoller.

        Args:
            client: Ticker client for the tracked symbol.
            history: Buffer owned by this poller.
            renderer: Display surface that receives every update.
            interval: Seconds between tick starts.
            clock: Source of the sample timestamp labels.
        """
        self.client = client
        self.history = history if history is not None else PriceHistory()
        self.renderer = renderer if renderer is not None else NullRenderer()
        self.interval = interval
        self.clock = clock
        self._last_quote: Optional[PriceQuote] = None
        self._last_error: Optional[str] = None
        self._running = False
        self._task: Optional[asyncio.Task] = None

    @property
    def running(self) -> bool:
        return self._running

    def snapshot(self) -> TickerDisplay:
        """Current ticker payload with an immutable copy of the history."""
        return TickerDisplay(
            symbol=self.client.symbol,
            price=self._last_quote.last_price if self._last_quote else None,
            change_percent=self._last_quote.price_change_percent if self._last_quote else None,
            history=self.history.snapshot(),
            error=self._last_error,
        )

    async def tick(self) -> None:
        """
        Fetch one quote, record it, and re-render. Never raises PriceFetchError.

        A failed tick re-renders the previous price and history with the error
        attached.
        """
        try:
            quote = await self.client.fetch_quote()
        except PriceFetchError as e:
            self._last_error = e.detail
            logger.warning(f"Price tick failed: {e.detail}")
            self.renderer.render(self.snapshot())
            self.renderer.show_error(e.detail)
            return

        self._last_quote = quote
        self._last_error = None
        self.history.append(
            PriceSample(
                price=quote.last_price,
                timestamp_label=self.clock().strftime(TickerConfig.LABEL_FORMAT),
            )
        )
        self.renderer.render(self.snapshot())

    async def start(self) -> None:
        """Start the polling loop as a background task."""
        if self._running:
            logger.warning("PricePoller already running")
            return

        self._running = True
        self._task = asyncio.create_task(self._run_loop())
        logger.info(f"PricePoller started for {self.client.symbol} every {self.interval}s")

    async def stop(self) -> None:
        """Gracefully stop the poller."""
        if not self._running:
            return

        self._running = False
        if self._task:
            self._task.cancel()
            try:
                await self._task
            except asyncio.CancelledError:
                pass
            self._task = None
        logger.info("PricePoller stopped")

    async def _run_loop(self) -> None:
        """Main polling loop. Ticks start every ``interval`` seconds."""
        loop = asyncio.get_running_loop()
        while self._running:
            started = loop.time()
            try:
                await self.tick()
            except Exception as e:
                logger.error(f"Error in price poller loop: {e}")

            elapsed = loop.time() - started
            await asyncio.sleep(max(0.0, self.interval - elapsed))
