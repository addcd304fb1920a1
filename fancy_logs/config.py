import json
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from dotenv import load_dotenv

from .console import err_console

# Load environment variables from .env file
load_dotenv()

# Configuration Defaults
DEFAULT_CONFIG = {
    "FANCY_LOGS_COLOR": "true",
    "FANCY_LOGS_ICON": "true",
    "FANCY_LOGS_UNDERLINE": "true",
    "FANCY_LOGS_FAKE": "false",
    "FANCY_LOGS_PREFIX": "",
    "FANCY_LOGS_SUFFIX": "",
}

# File Paths
FANCY_LOGS_DIR = Path(os.getenv("FANCY_LOGS_DIR", str(Path.home() / ".fancy_logs")))
CONFIG_FILE = Path(os.getenv("FANCY_LOGS_CONFIG_FILE", str(FANCY_LOGS_DIR / "config.json")))


@dataclass(frozen=True)
class LoggerConfig:
    """Base options shared by every line a Logger prints.

    Call-site options (see MessageOptions) override these per message,
    except when the message is a bare exception.
    """

    color: bool = True
    icon: bool = True
    underline: bool = True
    fake: bool = False
    prefix: str | None = None
    suffix: str | None = None


def load_config(config_file: Path | None = None) -> dict[str, Any]:
    """Load configuration from file"""
    path = config_file or CONFIG_FILE
    if path.exists():
        try:
            with open(path) as f:
                config: dict[str, Any] = json.load(f)
                return config
        except Exception as e:
            err_console.print(f"[yellow]Warning: Could not load config file: {e}[/yellow]")
    return {}


def get_setting(key: str, default: str, config: dict[str, Any] | None = None) -> str:
    """Get setting with priority: Env Var > Config File > Default"""
    # 1. Environment Variable
    env_val = os.getenv(key)
    if env_val:
        return env_val

    # 2. Config File
    if config is None:
        config = load_config()
    if key in config:
        return str(config[key])

    # 3. Default
    return default


def get_bool_setting(key: str, default: bool, config: dict[str, Any] | None = None) -> bool:
    """Get boolean setting with priority: Env Var > Config File > Default"""
    value = get_setting(key, str(default).lower(), config)
    return value.lower() in ("true", "1", "yes", "on")


def load_logger_config(config_file: Path | None = None) -> LoggerConfig:
    """Build a LoggerConfig from the environment and the config file.

    The config file is read once and shared by every lookup. A non-empty
    NO_COLOR variable turns colors off regardless of FANCY_LOGS_COLOR.
    """
    config = load_config(config_file)
    color = get_bool_setting("FANCY_LOGS_COLOR", True, config)
    if os.getenv("NO_COLOR"):
        color = False

    return LoggerConfig(
        color=color,
        icon=get_bool_setting("FANCY_LOGS_ICON", True, config),
        underline=get_bool_setting("FANCY_LOGS_UNDERLINE", True, config),
        fake=get_bool_setting("FANCY_LOGS_FAKE", False, config),
        prefix=get_setting("FANCY_LOGS_PREFIX", DEFAULT_CONFIG["FANCY_LOGS_PREFIX"], config) or None,
        suffix=get_setting("FANCY_LOGS_SUFFIX", DEFAULT_CONFIG["FANCY_LOGS_SUFFIX"], config) or None,
    )
