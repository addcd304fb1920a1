"""
Message normalization.

Callers hand the Logger one of three shapes of input:

  - a plain string:          logger.info("Server started")
  - an exception:            logger.fatal(exc)
  - an options mapping:      logger.info({"message": "Started", "prefix": "[api]"})

normalize_message() turns any of them into a MessageRecord with every field
defined, so the renderer never has to guess. The input shape is resolved with
isinstance checks in this order:

  1. Exception. Serialized with serialize_error(). icon/color/underline come
     from the Logger's base config only; attributes on the exception that
     happen to share those names are ignored.
  2. String. Base config plus the text.
  3. Mapping whose "message" is an exception. The nested exception is
     serialized and icon/color/underline are taken from the base config
     merged with the mapping, so the mapping's values win here.
  4. Any other mapping. Base config merged with the mapping, mapping wins.

Cases 1 and 3 resolve the style flags differently. Both are kept as is for
compatibility with existing callers. Exception records carry no prefix or
suffix in either case.

Anything else (None, numbers, arbitrary objects) is rendered through str().
"""

import traceback
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, TypedDict

from .config import LoggerConfig


class MessageOptions(TypedDict, total=False):
    """Per-call options. Any key left out falls back to the Logger's config."""

    message: str | BaseException
    prefix: str
    suffix: str
    icon: bool
    color: bool
    underline: bool


MessageInput = str | BaseException | MessageOptions

STYLE_FLAGS = ("icon", "color", "underline")


@dataclass(frozen=True)
class MessageRecord:
    """A log call after normalization, ready to render.

    Records are what the deferred queue stores while the Logger is paused,
    and what a resume filter receives.
    """

    action: str
    text: str = ""
    prefix: str | None = None
    suffix: str | None = None
    icon: bool = True
    color: bool = True
    underline: bool = True
    args: tuple[Any, ...] = ()
    stack: str | None = None
    name: str | None = None


def format_stack(exc: BaseException) -> str:
    """Header line ("ValueError: boom") followed by one line per frame line."""
    message = str(exc)
    header = f"{type(exc).__name__}: {message}" if message else type(exc).__name__
    frames = "".join(traceback.format_tb(exc.__traceback__)).splitlines()
    return "\n".join([header, *frames])


def serialize_error(exc: BaseException) -> dict[str, str]:
    """Flatten an exception into the name, message and stack a record needs.

    Other attributes on the exception are not copied: a record never renders
    them, and attributes named like style flags (icon, color, underline) must
    not leak into the line.
    """
    return {
        "name": type(exc).__name__,
        "message": str(exc),
        "stack": format_stack(exc),
    }


def _style_flags(options: Mapping[str, Any]) -> dict[str, bool]:
    return {flag: bool(options.get(flag)) for flag in STYLE_FLAGS}


def _base_options(config: LoggerConfig) -> dict[str, Any]:
    return {
        "icon": config.icon,
        "color": config.color,
        "underline": config.underline,
        "prefix": config.prefix,
        "suffix": config.suffix,
    }


def _error_record(
    action: str, exc: BaseException, flags: dict[str, bool], args: tuple[Any, ...]
) -> MessageRecord:
    serialized = serialize_error(exc)
    return MessageRecord(
        action=action,
        text=serialized["message"],
        stack=serialized["stack"],
        name=serialized["name"],
        args=args,
        **flags,
    )


def normalize_message(
    action: str,
    message: Any,
    args: tuple[Any, ...],
    config: LoggerConfig,
) -> MessageRecord:
    """Build the MessageRecord for one log call."""
    base = _base_options(config)

    if isinstance(message, BaseException):
        return _error_record(action, message, _style_flags(base), args)

    if isinstance(message, str):
        return MessageRecord(action=action, text=message, args=args, **base)

    if isinstance(message, Mapping):
        options = {**base, **message}
        inner = options.pop("message", "")

        if isinstance(inner, BaseException):
            return _error_record(action, inner, _style_flags(options), args)

        return MessageRecord(
            action=action,
            text="" if inner is None else str(inner),
            prefix=options.get("prefix"),
            suffix=options.get("suffix"),
            args=args,
            **_style_flags(options),
        )

    return MessageRecord(action=action, text=str(message), args=args, **base)
