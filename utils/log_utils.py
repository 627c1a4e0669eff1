"""Timestamped console logging with [SYSTEM][VARIANT] tags."""

from __future__ import annotations

import builtins
import os
import re
import time
from typing import Any

_VARIANTS = {"DEEP", "DEBUG", "INFO", "WARN", "ERROR"}
_TAG_RE = re.compile(r"\[([^\[\]]+)\]")
_TRUTHY = {"1", "true", "yes", "on"}


def _leading_tags(message: str) -> tuple[list[str], str]:
    tags: list[str] = []
    rest = message.lstrip()
    while match := _TAG_RE.match(rest):
        tag = match.group(1).strip()
        if not tag:
            break
        tags.append(tag)
        rest = rest[match.end():].lstrip()
    return tags, rest


def format_line(message: str, timestamp: str) -> str:
    """Render ``message`` as ``[timestamp][SYSTEM][VARIANT] text``.

    A leading variant tag (``[ERROR][CONFIG] ...``) is moved after the system
    tag so every line reads system first. Untagged messages go under ``APP``.
    """
    tags, rest = _leading_tags(message)
    if tags and tags[0].upper() in _VARIANTS:
        variant: str | None = tags[0].upper()
        system = tags[1] if len(tags) > 1 else "APP"
        extra = tags[2:]
    else:
        system = tags[0] if tags else "APP"
        variant = tags[1].upper() if len(tags) > 1 else None
        extra = tags[2:]
    head = f"[{timestamp}][{system}]"
    if variant:
        head += f"[{variant}]"
    if extra:
        head += f" [{' '.join(extra)}]"
    return f"{head} {rest}" if rest else head


def tprint(*args: Any, **kwargs: Any) -> None:
    """Print with a timestamp prefix and normalized tag order."""
    message = " ".join(str(arg) for arg in args)
    builtins.print(format_line(message, time.strftime("%Y-%m-%d %H:%M:%S")), **kwargs)


def log(system: str, message: str, variant: str | None = None) -> None:
    """Log with explicit system and optional variant."""
    if variant:
        tprint(f"[{system}][{variant}] {message}")
    else:
        tprint(f"[{system}] {message}")


def is_deep_logging() -> bool:
    """Return True when CONFIG_DEEP_LOG asks for verbose tracing."""
    return os.getenv("CONFIG_DEEP_LOG", "").strip().lower() in _TRUTHY


def deep_log(message: str) -> None:
    if not is_deep_logging():
        return
    tags, rest = _leading_tags(message)
    tags = [tag for tag in tags if tag.upper() != "DEEP"]
    prefix = "".join(f"[{tag}]" for tag in tags)
    tprint(f"[DEEP]{prefix} {rest}")
