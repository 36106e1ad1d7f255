"""Configuration loading and validation."""

from rpcmsg.config.loader import load_config
from rpcmsg.config.schema import DEFAULT_CONFIG, CodecConfig

__all__ = [
    "CodecConfig",
    "DEFAULT_CONFIG",
    "load_config",
]
