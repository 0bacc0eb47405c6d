"""
Configuration management for symbdiff.

Settings come from environment variables, optionally loaded from a .env
file, and may be overridden on the command line.
"""

import logging
import os

from dotenv import load_dotenv

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DEFAULT_PROMPT = "> "

TRUTHY = ("1", "true", "yes", "on")


def env_flag(name, default=False):
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in TRUTHY


class Settings:
    def __init__(self, log_level="WARNING", show_ast=False, prompt=DEFAULT_PROMPT,
                 graph_dir=None):
        self.log_level = log_level
        self.show_ast = show_ast
        self.prompt = prompt
        self.graph_dir = graph_dir

    def __repr__(self):
        return (f"Settings(log_level={self.log_level!r}, show_ast={self.show_ast!r}, "
                f"prompt={self.prompt!r}, graph_dir={self.graph_dir!r})")


def load_settings(dotenv=True):
    if dotenv:
        load_dotenv()
    return Settings(
        log_level=os.getenv("SYMBDIFF_LOG_LEVEL", "WARNING").upper(),
        show_ast=env_flag("SYMBDIFF_SHOW_AST"),
        prompt=os.getenv("SYMBDIFF_PROMPT", DEFAULT_PROMPT),
        graph_dir=os.getenv("SYMBDIFF_GRAPH_DIR") or None,
    )


def setup_logging(level):
    numeric_level = getattr(logging, str(level).upper(), None)
    if not isinstance(numeric_level, int):
        raise ValueError(f"Invalid log level: {level}")
    logging.basicConfig(
        level=numeric_level,
        format=LOG_FORMAT,
        handlers=[logging.StreamHandler()]
    )
