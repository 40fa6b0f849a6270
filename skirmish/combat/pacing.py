"""
Pacing helpers for the adversary turn.

The combat manager resolves the adversary turn synchronously; a pacer is an
optional zero-argument callable invoked right before it, so front-ends can
slow the fight down without the core depending on real time.
"""

import time
from collections.abc import Callable

Pacer = Callable[[], None]


def sleep_pacer(delay: float) -> Pacer:
    """
    Returns a pacer that blocks for a fixed delay.

    Args:
        delay (float): The delay, in seconds.

    Returns:
        Pacer: The pacer.

    """
    if delay < 0:
        raise ValueError(f"Pacing delay must be non-negative, got {delay}")

    def _pace() -> None:
        time.sleep(delay)

    return _pace
