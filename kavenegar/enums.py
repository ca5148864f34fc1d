from enum import Enum


class ApiLogs(Enum):
    JUST_FAULTS = "justfaults"
    SHOW_ALL = "showall"


class Status(Enum):
    ENABLED = "enabled"
    DISABLED = "disabled"


class VerifyType(Enum):
    SMS = "sms"
    CALL = "call"


# Delivery states reported in sms/status entries, also accepted by countoutbox.
class MessageStatus(Enum):
    ALL = 0
    QUEUED = 1
    SCHEDULED = 2
    SENT_TO_OPERATOR = 4
    SENT_TO_OPERATOR_ALT = 5
    FAILED = 6
    DELIVERED = 10
    UNDELIVERED = 11
    CANCELED = 13
    BLOCKED = 14
    INVALID_ID = 100
