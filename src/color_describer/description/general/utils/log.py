"""
log.py.

Does: Lightweight topic tracer controlled by COLOR_DESCRIBER_DEBUG_TOPICS (comma-sep or 'all').
Returns: Prints timestamped lines with topic + level. Used by the parser, matcher and CLI.
"""

import os
import sys
from datetime import datetime
from typing import TextIO

__all__ = ["debug", "reload_topics", "TOPICS_ENV_VAR"]

TOPICS_ENV_VAR = "COLOR_DESCRIBER_DEBUG_TOPICS"


def _load_topics() -> set[str]:
    raw = os.getenv(TOPICS_ENV_VAR, "")
    return {t.strip().lower() for t in raw.split(",") if t.strip()}


_DEBUG_TOPICS = _load_topics()


def reload_topics() -> None:
    """Does: Reload topics from environment variable COLOR_DESCRIBER_DEBUG_TOPICS."""
    global _DEBUG_TOPICS
    _DEBUG_TOPICS = _load_topics()


def debug(
    msg: str,
    topic: str = "description",
    *,
    level: str = "DEBUG",
    stream: TextIO | None = None,
) -> None:
    """Does: Print a timestamped debug line with topic and level
    when the topic is enabled (an empty topic list enables everything).
    """
    if stream is None:
        stream = sys.stderr
    topic_key = topic.lower().strip()
    if not _DEBUG_TOPICS or "all" in _DEBUG_TOPICS or topic_key in _DEBUG_TOPICS:
        ts = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
        print(f"[{ts}] [{topic_key}][{level.upper()}] {msg}", file=stream)
