"""Response handler for API envelopes."""
import json
from dataclasses import dataclass
from typing import Any, Union

from .shapes import ResultShape
from ...exceptions import APIError, DecodeError

STATUS_OK = 200

_MISSING = object()


@dataclass(frozen=True)
class Envelope:
    """The ``{status, msg, result}`` wrapper of every API response."""
    status: int
    msg: str
    result: Any = _MISSING

    @property
    def ok(self) -> bool:
        return self.status == STATUS_OK

    @property
    def has_result(self) -> bool:
        return self.result is not _MISSING


class ResponseHandler:
    """Handles API responses."""

    @staticmethod
    def parse_envelope(body: Union[bytes, str]) -> Envelope:
        """Parses a response body into an Envelope.

        Raises:
            DecodeError: body is not a JSON object with an integer
                ``status`` and a string ``msg``
        """
        try:
            data = json.loads(body)
        except (ValueError, UnicodeDecodeError) as e:
            raise DecodeError(f"Invalid JSON response: {e}", body=body) from e

        if not isinstance(data, dict):
            raise DecodeError("Response is not a JSON object", body=body)

        status = data.get('status')
        if isinstance(status, bool) or not isinstance(status, int):
            raise DecodeError("Response envelope has no integer 'status'", body=body)

        msg = data.get('msg')
        if not isinstance(msg, str):
            raise DecodeError("Response envelope has no string 'msg'", body=body, status=status)

        return Envelope(status=status, msg=msg, result=data.get('result', _MISSING))

    @staticmethod
    def check_status(envelope: Envelope) -> None:
        """Raises APIError carrying msg unless status is success."""
        if not envelope.ok:
            raise APIError(envelope.msg, status=envelope.status)

    @staticmethod
    def decode_result(envelope: Envelope, shape: ResultShape) -> Any:
        """Decodes the result of a checked envelope with shape."""
        if not envelope.has_result:
            raise DecodeError(
                "Response envelope has no 'result'", status=envelope.status
            )
        return shape.decode(envelope.result)

    @classmethod
    def process(cls, body: Union[bytes, str], shape: ResultShape) -> Any:
        """Parses, checks and decodes a body in one go."""
        envelope = cls.parse_envelope(body)
        cls.check_status(envelope)
        return cls.decode_result(envelope, shape)
