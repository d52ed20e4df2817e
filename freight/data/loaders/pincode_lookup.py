"""
Pincode Lookup

Resolves a pincode to a (city, state) pair to fill in location fields while
a user types. This sits outside the cost engine: the engine only ever sees
the resulting Location, never the lookup itself.

DEBOUNCING
----------
Pincode fields change on every keystroke. DebouncedPincodeLookup waits for
the input to settle (default 0.8s) before calling the lookup, and cancels
any pending lookup superseded by a newer submit. Results are delivered to a
callback as an updated Location.
"""

import asyncio
import logging
from typing import Callable, Protocol

import polars as pl

from ...models import Location
from .serviceability import lookup_serviceability


logger = logging.getLogger(__name__)

DEFAULT_DELAY_SECONDS = 0.8
MIN_PINCODE_LENGTH = 3


class PincodeLookup(Protocol):
    """Anything that can resolve a pincode to (city, state)."""

    def lookup(self, pincode: str) -> tuple[str, str] | None:
        ...


class ServiceabilityPincodeLookup:
    """Answers lookups from a loaded serviceability table."""

    def __init__(self, serviceability: pl.DataFrame | None):
        self.serviceability = serviceability

    def lookup(self, pincode: str) -> tuple[str, str] | None:
        pincode = (pincode or "").strip()
        if len(pincode) < MIN_PINCODE_LENGTH:
            return None

        record = lookup_serviceability(self.serviceability, pincode)
        if record is None or not record.city:
            return None
        return record.city, record.state


class DebouncedPincodeLookup:
    """
    Debounced, cancellable wrapper around a PincodeLookup.

    Usage:
        debouncer = DebouncedPincodeLookup(lookup, on_result=update_form)
        debouncer.submit("110001", current_location)   # on every keystroke
        await debouncer.wait()                          # optional
    """

    def __init__(
        self,
        lookup: PincodeLookup,
        on_result: Callable[[Location], None],
        delay: float = DEFAULT_DELAY_SECONDS,
    ):
        self.lookup = lookup
        self.on_result = on_result
        self.delay = delay
        self._pending: asyncio.Task | None = None

    def submit(self, pincode: str, location: Location) -> asyncio.Task:
        """
        Schedule a lookup, replacing any lookup still waiting to run.

        Must be called from inside a running event loop.
        """
        self.cancel()
        self._pending = asyncio.get_running_loop().create_task(
            self._run(pincode, location)
        )
        return self._pending

    def cancel(self) -> None:
        """Cancel the pending lookup, if any."""
        if self._pending is not None and not self._pending.done():
            self._pending.cancel()
        self._pending = None

    async def wait(self) -> None:
        """Wait for the pending lookup to finish (cancelled counts as finished)."""
        if self._pending is None:
            return
        try:
            await self._pending
        except asyncio.CancelledError:
            pass

    async def _run(self, pincode: str, location: Location) -> None:
        await asyncio.sleep(self.delay)

        found = await asyncio.to_thread(self.lookup.lookup, pincode)
        if found is None:
            logger.debug("No location found for pincode %s", pincode)
            self.on_result(location._replace(pincode=pincode))
            return

        city, state = found
        self.on_result(location._replace(pincode=pincode, city=city, state=state))


__all__ = [
    "PincodeLookup",
    "ServiceabilityPincodeLookup",
    "DebouncedPincodeLookup",
    "DEFAULT_DELAY_SECONDS",
    "MIN_PINCODE_LENGTH",
]
