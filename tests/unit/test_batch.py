"""Unit tests for batch parsing in rpcmsg.rpc.protocol."""

import pytest

from rpcmsg.core.errors import (
    BatchTooLargeError,
    EmptyMessageError,
    MalformedMessageError,
    MalformedObjectError,
    MessageTooLargeError,
    VersionMismatchError,
)
from rpcmsg.core.types import Kind
from rpcmsg.rpc.protocol import parse_request_batch, parse_response_batch


class TestParseRequestBatch:
    """Tests for parse_request_batch()."""

    def test_isolates_invalid_elements(self, request_batch_text):
        """Bad elements are INVALID; the rest parse and order is kept."""
        parsed = parse_request_batch(request_batch_text)

        assert len(parsed) == 6
        assert [p.kind for p in parsed] == [
            Kind.REQUEST,
            Kind.NOTIFICATION,
            Kind.REQUEST,
            Kind.INVALID,
            Kind.REQUEST,
            Kind.INVALID,
        ]
        assert parsed[0].payload.id == "1"
        assert parsed[1].payload.method == "notify_hello"
        assert parsed[2].payload.params == [42, 23]
        assert parsed[4].payload.params["name"] == "myself"

    def test_invalid_elements_carry_errors(self, request_batch_text):
        """Each INVALID element keeps its own error."""
        parsed = parse_request_batch(request_batch_text)
        assert isinstance(parsed[3].error, VersionMismatchError)
        assert isinstance(parsed[5].error, VersionMismatchError)
        assert parsed[5].payload.jsonrpc == "1.0"

    def test_missing_method_element(self):
        """An element without method is INVALID with MalformedObjectError."""
        parsed = parse_request_batch('[{"jsonrpc":"2.0","id":1},{"jsonrpc":"2.0","method":"a"}]')
        assert isinstance(parsed[0].error, MalformedObjectError)
        assert parsed[1].kind is Kind.NOTIFICATION

    def test_empty_array(self):
        """An empty array gives no entries."""
        assert parse_request_batch("[]") == []

    @pytest.mark.parametrize("text", ["", "[", " "])
    def test_too_short(self, text):
        """Input shorter than "[]" raises EmptyMessageError."""
        with pytest.raises(EmptyMessageError, match="empty message"):
            parse_request_batch(text)

    def test_single_object_is_not_a_batch(self):
        """A bare object raises MalformedMessageError."""
        with pytest.raises(MalformedMessageError):
            parse_request_batch('{"jsonrpc":"2.0","method":"update","id":1}')

    def test_malformed_json(self):
        """Broken JSON fails the whole batch."""
        with pytest.raises(MalformedMessageError):
            parse_request_batch('[{"jsonrpc":"2.0","method":"a"},]')

    def test_overlong_integer_literal(self):
        """An element holding a huge integer literal fails the whole batch."""
        text = '[{"jsonrpc":"2.0","method":"a","id":' + "1" * 5000 + "}]"
        with pytest.raises(MalformedMessageError):
            parse_request_batch(text)

    def test_deep_nesting(self):
        """Nesting deeper than the decoder can recurse fails the whole batch."""
        with pytest.raises(MalformedMessageError):
            parse_request_batch("[" * 100000)

    def test_nan_element(self):
        """NaN inside an element fails the whole batch."""
        with pytest.raises(MalformedMessageError):
            parse_response_batch('[{"jsonrpc":"2.0","result":NaN,"id":1}]')

    @pytest.mark.parametrize("text", ["[1,2]", '[{"jsonrpc":"2.0","method":"a"},"x"]', "[null]"])
    def test_non_object_elements(self, text):
        """Elements that are not objects fail the whole batch."""
        with pytest.raises(MalformedMessageError):
            parse_request_batch(text)

    def test_batch_size_limit(self, strict_config):
        """More elements than max_batch_size raises BatchTooLargeError."""
        text = "[" + ",".join(['{"jsonrpc":"2.0","method":"a"}'] * 4) + "]"
        with pytest.raises(BatchTooLargeError) as exc_info:
            parse_request_batch(text, config=strict_config)
        assert exc_info.value.count == 4
        assert exc_info.value.limit == 3

    def test_batch_at_limit(self, strict_config):
        """Exactly max_batch_size elements is accepted."""
        text = "[" + ",".join(['{"jsonrpc":"2.0","method":"a"}'] * 3) + "]"
        assert len(parse_request_batch(text, config=strict_config)) == 3

    def test_message_size_limit(self, request_batch_text, strict_config):
        """Text over max_message_size raises MessageTooLargeError."""
        with pytest.raises(MessageTooLargeError):
            parse_request_batch(request_batch_text, config=strict_config)


class TestParseResponseBatch:
    """Tests for parse_response_batch()."""

    def test_errors(self):
        """Every element of an all-error batch is read."""
        text = (
            '[{"jsonrpc": "2.0", "error": {"code": -32601, "message": "Method not found"},'
            ' "id": null},'
            '{"jsonrpc": "2.0", "error": {"code": -32601, "message": "Method not found"},'
            ' "id": "1"},'
            '{"jsonrpc": "2.0", "error": {"code": -32601, "message": "Method not found"},'
            ' "id": "2"}]'
        )
        parsed = parse_response_batch(text)

        assert len(parsed) == 3
        assert [p.payload.id for p in parsed] == [None, "1", "2"]
        for entry in parsed:
            assert entry.kind is Kind.ERROR
            assert entry.payload.error.code == -32601
            assert entry.payload.error.message == "Method not found"

    def test_mixed(self, response_batch_text):
        """Results and errors are classified per element."""
        parsed = parse_response_batch(response_batch_text)

        assert [p.kind for p in parsed] == [
            Kind.SUCCESS,
            Kind.SUCCESS,
            Kind.ERROR,
            Kind.ERROR,
            Kind.SUCCESS,
        ]
        assert parsed[0].payload.id == "1"
        assert parsed[1].payload.result == 19
        assert parsed[2].payload.error.message == "Invalid Request"
        assert parsed[3].payload.id == 5
        assert parsed[4].payload.result == ["hello", 5]

    def test_invalid_element_does_not_fail_batch(self):
        """Elements missing result and error are INVALID, others still parse."""
        parsed = parse_response_batch(
            '[{"jsonrpc":"2.0","id":1},{"jsonrpc":"2.0","result":0,"id":2}]'
        )
        assert parsed[0].kind is Kind.INVALID
        assert isinstance(parsed[0].error, MalformedObjectError)
        assert parsed[1].kind is Kind.SUCCESS

    def test_empty(self):
        """Empty input raises EmptyMessageError."""
        with pytest.raises(EmptyMessageError, match="empty message"):
            parse_response_batch("")

    def test_single_object_is_not_a_batch(self):
        """A bare object raises MalformedMessageError."""
        with pytest.raises(MalformedMessageError):
            parse_response_batch('{"jsonrpc":"2.0","result":"OK","id":"123"}')
