from .config import Config, get_config, set_config
from .logging_setup import setup_logging

__all__ = ["Config", "get_config", "set_config", "setup_logging"]
