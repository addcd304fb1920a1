"""fancy-logs - Tagged, colorized, aligned log lines for command line tools"""

from .actions import DEFAULT_ACTIONS, Action, ActionDefinition, ActionRegistry
from .colors import Colors, FakeColors, visual_width
from .config import LoggerConfig, load_logger_config
from .deferred import DeferredQueue
from .exceptions import ActionRegistrationError, FancyLogsError, UnknownActionError
from .formatting import format_message
from .logger import Logger
from .messages import MessageOptions, MessageRecord, normalize_message, serialize_error
from .renderer import Renderer, compute_biggest_label
from .sink import ConsoleSink, FakeSink, Sink

__all__ = [
    # Actions
    "DEFAULT_ACTIONS",
    "Action",
    "ActionDefinition",
    "ActionRegistry",
    # Colors
    "Colors",
    "FakeColors",
    "visual_width",
    # Config
    "LoggerConfig",
    "load_logger_config",
    # Errors
    "ActionRegistrationError",
    "FancyLogsError",
    "UnknownActionError",
    # Messages
    "MessageOptions",
    "MessageRecord",
    "format_message",
    "normalize_message",
    "serialize_error",
    # Rendering
    "ConsoleSink",
    "DeferredQueue",
    "FakeSink",
    "Logger",
    "Renderer",
    "Sink",
    "compute_biggest_label",
]
