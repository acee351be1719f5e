"""
Call-count request throttle for the Reporting API.

The API console default quota is 100 requests per 100 seconds per user.
Rather than tracking wall-clock windows, every call after the first
``threshold`` calls of a run is preceded by a pause of about one second.
"""

from __future__ import annotations

import logging
import random
import time
from typing import Protocol

from ga_extractor.config import THROTTLE_REQUEST_THRESHOLD
from ga_extractor.logging_utils import log_event

logger = logging.getLogger(__name__)


class Delay(Protocol):
    """
    Pause strategy invoked by the throttle.
    """

    def __call__(self) -> None:
        ...


class SleepDelay:
    """
    Sleep ``seconds`` plus or minus a uniform random jitter.
    """

    def __init__(
        self,
        *,
        seconds: float = 1.0,
        jitter_seconds: float = 0.5,
        rng: random.Random | None = None,
    ) -> None:
        self.seconds = max(0.0, seconds)
        self.jitter_seconds = max(0.0, jitter_seconds)
        self._rng = rng or random.Random()

    def __call__(self) -> None:
        jitter = self._rng.uniform(-self.jitter_seconds, self.jitter_seconds)
        time.sleep(max(0.0, self.seconds + jitter))


class NullDelay:
    def __call__(self) -> None:
        return None


class CountingDelay:
    """
    Records how many times a delay was requested without pausing.
    """

    def __init__(self) -> None:
        self.calls = 0

    def __call__(self) -> None:
        self.calls += 1


class RequestThrottle:
    """
    Per-run request counter that delays calls once the threshold is reached.

    The counter is never decremented; create one throttle per run.
    """

    def __init__(
        self,
        *,
        threshold: int = THROTTLE_REQUEST_THRESHOLD,
        delay: Delay | None = None,
    ) -> None:
        self.threshold = max(0, threshold)
        self.request_count = 0
        self._delay: Delay = delay if delay is not None else SleepDelay()

    def should_delay(self, request_count: int) -> bool:
        return request_count >= self.threshold

    def on_request(self) -> None:
        self.request_count += 1

    def before_request(self) -> None:
        """
        Apply the delay policy for the next outbound call and count it.
        """

        if self.should_delay(self.request_count):
            log_event(
                logger,
                logging.DEBUG,
                "throttle_delay",
                request_count=self.request_count,
                threshold=self.threshold,
            )
            self._delay()
        self.on_request()
