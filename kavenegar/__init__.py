"""
Python client for the Kavenegar SMS and voice-call gateway.
"""

__version__ = "1.2.3"

from kavenegar.client import KavenegarAPI
from kavenegar.enums import ApiLogs, MessageStatus, Status, VerifyType
from kavenegar.exceptions import ApiError, KavenegarError, RemovedMethodError, TransportError
from kavenegar.verify import UNSET

__all__ = [
    "KavenegarAPI",
    "ApiLogs",
    "MessageStatus",
    "Status",
    "VerifyType",
    "ApiError",
    "KavenegarError",
    "RemovedMethodError",
    "TransportError",
    "UNSET",
]
