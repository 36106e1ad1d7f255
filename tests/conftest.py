"""Shared pytest fixtures for rpcmsg tests."""

import pytest

from rpcmsg.config.schema import CodecConfig


@pytest.fixture
def request_batch_text() -> str:
    """Six requests: four valid, one without jsonrpc/method, one on version 1.0."""
    return """[
        {"jsonrpc": "2.0", "method": "sum", "params": [1,2,4], "id": "1"},
        {"jsonrpc": "2.0", "method": "notify_hello", "params": [7]},
        {"jsonrpc": "2.0", "method": "subtract", "params": [42,23], "id": "2"},
        {"foo": "boo"},
        {"jsonrpc": "2.0", "method": "foo.get", "params": {"name": "myself"}, "id": "5"},
        {"jsonrpc": "1.0", "method": "get_data", "id": "9"}
    ]"""


@pytest.fixture
def response_batch_text() -> str:
    """Five responses mixing results and errors."""
    return """[
        {"jsonrpc": "2.0", "result": 7, "id": "1"},
        {"jsonrpc": "2.0", "result": 19, "id": "2"},
        {"jsonrpc": "2.0", "error": {"code": -32600, "message": "Invalid Request"}, "id": null},
        {"jsonrpc": "2.0", "error": {"code": -32601, "message": "Method not found"}, "id": 5},
        {"jsonrpc": "2.0", "result": ["hello", 5], "id": "9"}
    ]"""


@pytest.fixture
def strict_config() -> CodecConfig:
    """Config with small inbound limits."""
    return CodecConfig(max_message_size=256, max_batch_size=3)
