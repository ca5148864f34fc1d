from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class ReturnStatus:
    status: int
    message: str

    @property
    def ok(self) -> bool:
        return self.status == 200


@dataclass(frozen=True)
class Envelope:
    ret: ReturnStatus
    entries: Any = None

    @staticmethod
    def from_dict(d: dict) -> "Envelope":
        """Build from a decoded response body.

        Raises KeyError/TypeError/ValueError when the 'return' block is missing
        or its status is not numeric.
        """
        ret = d["return"]
        if not isinstance(ret, dict):
            raise TypeError("'return' is not an object")
        return Envelope(
            ret=ReturnStatus(status=int(ret["status"]), message=str(ret.get("message", ""))),
            entries=d.get("entries"),
        )
