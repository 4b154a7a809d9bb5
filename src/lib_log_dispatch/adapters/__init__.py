"""Concrete backends and stages shipped with the package."""

from __future__ import annotations

from .console.rich_console import CONSOLE_STYLE_THEMES, RichConsoleBackend
from .enrich import ContextEnricher
from .memory import RingBufferBackend
from .rate_limiter import SlidingWindowRateLimiter
from .scrubber import RegexScrubber

__all__ = [
    "CONSOLE_STYLE_THEMES",
    "ContextEnricher",
    "RegexScrubber",
    "RichConsoleBackend",
    "RingBufferBackend",
    "SlidingWindowRateLimiter",
]
