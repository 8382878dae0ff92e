"""Configuration management for target runner resolution."""

from target_runners.config.loader import Config, get_default_config, load_config

__all__ = ["Config", "get_default_config", "load_config"]
