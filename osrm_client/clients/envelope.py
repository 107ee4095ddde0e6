"""Response envelope handling: status code dispatch and payload extraction."""

import logging
from typing import Any, Optional, TypeVar

from pydantic import BaseModel, ConfigDict, ValidationError

from ..errors import DecodeError, ProtocolError
from ..models.common import StatusCode

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=BaseModel)


class ResponseEnvelope(BaseModel):
    """
    Fields shared by every JSON response.

    The service payload is flattened into the same object, so payload models
    must never define "code", "message" or "data_version".
    """
    model_config = ConfigDict(frozen=True, extra="ignore")

    code: StatusCode
    message: Optional[str] = None
    data_version: Optional[str] = None


ENVELOPE_FIELDS = frozenset(ResponseEnvelope.model_fields)


def unwrap_envelope(data: Any, payload_model: type[T]) -> T:
    """
    Turn a decoded JSON body into the typed payload.

    Raises:
        ProtocolError: the status code is not "Ok"; only the code drives this,
            the message is attached for diagnostics.
        DecodeError: the body is not an envelope, carries an unknown code, or
            the payload does not match payload_model.
    """
    if not isinstance(data, dict):
        raise DecodeError(f"response envelope must be a JSON object, got {type(data).__name__}")

    try:
        envelope = ResponseEnvelope.model_validate(data)
    except ValidationError as e:
        raise DecodeError(f"invalid response envelope: {e}") from e

    if envelope.code is not StatusCode.OK:
        logger.warning(f"OSRM returned {envelope.code.value}: {envelope.message or envelope.code.description}")
        raise ProtocolError(envelope.code, envelope.message)

    if envelope.data_version:
        logger.debug(f"OSRM data version {envelope.data_version}")

    payload = {key: value for key, value in data.items() if key not in ENVELOPE_FIELDS}
    try:
        return payload_model.model_validate(payload)
    except ValidationError as e:
        raise DecodeError(f"unexpected {payload_model.__name__} payload: {e}") from e
