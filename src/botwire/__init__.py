from __future__ import annotations

__version__ = "0.4.0"

from .client import BotApi, BoundOperation  # noqa: E402
from .codec import DecodeError  # noqa: E402
from .envelope import ApiError, Failed, Ok, ResponseParameters, decode_envelope, unwrap  # noqa: E402
from .operations import OPERATIONS, HttpVerb, Operation, operation  # noqa: E402
from .transport import HttpxTransport, Transport, TransportError  # noqa: E402

__all__ = [
    "OPERATIONS",
    "ApiError",
    "BotApi",
    "BoundOperation",
    "DecodeError",
    "Failed",
    "HttpVerb",
    "HttpxTransport",
    "Ok",
    "Operation",
    "ResponseParameters",
    "Transport",
    "TransportError",
    "__version__",
    "decode_envelope",
    "operation",
    "unwrap",
]
