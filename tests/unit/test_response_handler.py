"""Tests for envelope decoding and result shapes."""
import pytest

from openloadpy.core.api import (
    ResponseHandler,
    Envelope,
    Record,
    MappingOf,
    ListOf,
    Boolean,
    String,
)
from openloadpy.core.exceptions import (
    APIError,
    DecodeError,
    ResultShapeError,
    OpenloadException,
)
from openloadpy.core.models import AccountInfo, FileInfo

from canned import ACCOUNT_INFO_BODY, BAD_LOGIN_BODY, TRUE_BODY


class TestParseEnvelope:
    """Test suite for ResponseHandler.parse_envelope."""

    def test_parse_success(self):
        """Test parsing a success envelope."""
        envelope = ResponseHandler.parse_envelope(TRUE_BODY.encode())

        assert envelope.status == 200
        assert envelope.msg == "OK"
        assert envelope.result is True
        assert envelope.ok

    def test_parse_error_without_result(self):
        """Test error envelopes may omit result."""
        envelope = ResponseHandler.parse_envelope(BAD_LOGIN_BODY)

        assert envelope.status == 400
        assert envelope.msg == "Bad login/key"
        assert not envelope.has_result
        assert not envelope.ok

    @pytest.mark.parametrize("body", [
        b"",
        b"<html>502 Bad Gateway</html>",
        b'{"status":200,"msg":"OK","result":',
        b"\xff\xfe\x00",
    ])
    def test_invalid_json(self, body):
        """Test malformed bodies raise DecodeError."""
        with pytest.raises(DecodeError):
            ResponseHandler.parse_envelope(body)

    @pytest.mark.parametrize("body", ['[]', '"OK"', '200', 'null'])
    def test_not_an_object(self, body):
        """Test non-object documents raise DecodeError."""
        with pytest.raises(DecodeError, match="not a JSON object"):
            ResponseHandler.parse_envelope(body)

    @pytest.mark.parametrize("body", [
        '{"msg":"OK","result":true}',
        '{"status":"200","msg":"OK","result":true}',
        '{"status":true,"msg":"OK","result":true}',
        '{"status":null,"msg":"OK"}',
    ])
    def test_bad_status(self, body):
        """Test missing or mistyped status raises DecodeError."""
        with pytest.raises(DecodeError, match="status"):
            ResponseHandler.parse_envelope(body)

    @pytest.mark.parametrize("body", [
        '{"status":200,"result":true}',
        '{"status":200,"msg":1,"result":true}',
        '{"status":400,"msg":null}',
    ])
    def test_bad_msg(self, body):
        """Test missing or mistyped msg raises DecodeError."""
        with pytest.raises(DecodeError, match="msg"):
            ResponseHandler.parse_envelope(body)

    def test_decode_error_is_not_api_error(self):
        """Test decode and API errors are distinct."""
        with pytest.raises(DecodeError) as exc_info:
            ResponseHandler.parse_envelope("nope")

        assert not isinstance(exc_info.value, APIError)
        assert isinstance(exc_info.value, OpenloadException)


class TestCheckStatus:
    """Test suite for ResponseHandler.check_status."""

    def test_success_passes(self):
        """Test status 200 does not raise."""
        ResponseHandler.check_status(Envelope(status=200, msg="OK", result=True))

    @pytest.mark.parametrize("status", [201, 400, 403, 404, 500, 509])
    def test_non_success_raises_msg(self, status):
        """Test any non-200 status raises with msg as message."""
        envelope = Envelope(status=status, msg="Something went wrong", result={"x": 1})

        with pytest.raises(APIError) as exc_info:
            ResponseHandler.check_status(envelope)

        assert str(exc_info.value) == "Something went wrong"
        assert exc_info.value.message == "Something went wrong"
        assert exc_info.value.status == status


class TestProcess:
    """Test suite for ResponseHandler.process."""

    def test_process_record(self):
        """Test full decode into a model."""
        info = ResponseHandler.process(ACCOUNT_INFO_BODY, Record(AccountInfo))

        assert info.email == "jeff@openload.io"
        assert info.storage_left == -1

    def test_api_error_ignores_result(self):
        """Test result is never decoded on error status."""
        body = '{"status":403,"msg":"Forbidden","result":"not an object"}'

        with pytest.raises(APIError, match="Forbidden"):
            ResponseHandler.process(body, Record(AccountInfo))

    def test_success_without_result(self):
        """Test success envelope lacking result raises DecodeError."""
        with pytest.raises(DecodeError, match="result"):
            ResponseHandler.process('{"status":200,"msg":"OK"}', Boolean())

    def test_shape_mismatch(self):
        """Test scalar where object expected raises ResultShapeError."""
        with pytest.raises(ResultShapeError) as exc_info:
            ResponseHandler.process(TRUE_BODY, Record(AccountInfo))

        assert not isinstance(exc_info.value, APIError)
        assert "object" in str(exc_info.value)


class TestShapes:
    """Test suite for result shapes."""

    def test_boolean(self):
        """Test boolean shape."""
        assert Boolean().decode(False) is False

    @pytest.mark.parametrize("value", [1, "true", None, {}])
    def test_boolean_rejects(self, value):
        """Test boolean shape rejects non-booleans."""
        with pytest.raises(ResultShapeError):
            Boolean().decode(value)

    def test_string(self):
        """Test string shape."""
        assert String().decode("https://x") == "https://x"

    def test_string_rejects(self):
        """Test string shape rejects false."""
        with pytest.raises(ResultShapeError, match="boolean"):
            String().decode(False)

    def test_list_of(self):
        """Test list shape decodes each item."""
        result = ListOf(Boolean()).decode([True, False])

        assert result == [True, False]

    def test_list_of_rejects_object(self):
        """Test list shape rejects objects."""
        with pytest.raises(ResultShapeError, match="array"):
            ListOf(Boolean()).decode({})

    def test_mapping_of(self):
        """Test mapping shape keeps keys."""
        result = MappingOf(Record(FileInfo)).decode({"a": {"id": "a"}, "b": {"id": "b"}})

        assert set(result) == {"a", "b"}
        assert result["b"].id == "b"

    def test_mapping_of_empty_array(self):
        """Test empty array is read as empty mapping."""
        assert MappingOf(Record(FileInfo)).decode([]) == {}

    def test_mapping_of_rejects_scalar_value(self):
        """Test nested mismatch is reported."""
        with pytest.raises(ResultShapeError):
            MappingOf(Record(FileInfo)).decode({"a": False})

    def test_repr(self):
        """Test shapes describe themselves."""
        assert repr(MappingOf(Record(FileInfo))) == "MappingOf(Record(FileInfo))"
