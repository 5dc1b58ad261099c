from __future__ import annotations
import sys
import time
from typing import Optional

from tictactoe import config

FRAMES = ("|", "/", "-", "\\")


def ai_thinking(label: str = "Computer is thinking", delay: Optional[float] = None) -> None:
    """Short pause, with a spinner when enabled, so the reply is not instant."""
    delay = config.AI_THINK_DELAY_SEC if delay is None else delay
    if delay <= 0:
        return

    if not config.AI_THINKING_SPINNER:
        time.sleep(delay)
        return

    deadline = time.monotonic() + delay
    i = 0
    while time.monotonic() < deadline:
        sys.stdout.write(f"\r{label}... {FRAMES[i % len(FRAMES)]}")
        sys.stdout.flush()
        time.sleep(0.08)
        i += 1
    # wipe the spinner line
    sys.stdout.write("\r" + " " * (len(label) + 6) + "\r")
    sys.stdout.flush()
