"""Pydantic models for rpcmsg configuration validation."""

from pydantic import BaseModel, ConfigDict, Field


class CodecConfig(BaseModel):
    """Limits and encoder options shared by the builder and the parser.

    Example in config.json:
        {
            "max_message_size": 1048576,
            "max_batch_size": 100,
            "ensure_ascii": false
        }
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    max_message_size: int | None = Field(default=None, gt=0)
    """Longest inbound text accepted, in characters. None means unlimited."""

    max_batch_size: int | None = Field(default=None, gt=0)
    """Most elements accepted in one inbound batch. None means unlimited."""

    ensure_ascii: bool = False
    """Escape non-ASCII characters in serialized output."""


DEFAULT_CONFIG = CodecConfig()
