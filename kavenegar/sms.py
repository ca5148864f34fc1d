"""
SMS API module: sending, delivery status, outbox/inbox queries and cancellation.
"""
import json
from typing import TYPE_CHECKING, Any

from kavenegar.exceptions import RemovedMethodError
from kavenegar.utils import as_list, parse_input, wire_value

if TYPE_CHECKING:
    from kavenegar.client import KavenegarAPI


class SmsAPI:
    """SMS endpoints."""

    def __init__(self, client: "KavenegarAPI"):
        self.client = client

    def _post(self, method: str, params: dict | None = None) -> Any:
        return self.client.http.post_form(self.client.get_path(method, "sms"), params)

    def send(self, sender, receptor, message, date=None, type=None, localid=None, hide=0, tag=None) -> Any:
        """Send one message to one or more receptors (POST sms/send)."""
        params = {
            "receptor": parse_input(receptor),
            "sender": sender,
            "message": message,
            "date": date,
            "type": type,
            "localid": parse_input(localid),
            "hide": hide,
            "tag": tag,
        }
        return self._post("send", params)

    def send_array(self, sender, receptor, message, date=None, type=None, local_message_id=None, hide=0, tag=None) -> Any:
        """
        Send a batch of messages as parallel arrays (POST sms/sendarray).
        A scalar type or local_message_id is repeated once per receptor.
        """
        receptor = as_list(receptor)
        repeat = len(receptor)
        if type is not None and not isinstance(type, (list, tuple)):
            type = [type] * repeat
        if local_message_id is not None and not isinstance(local_message_id, (list, tuple)):
            local_message_id = [local_message_id] * repeat
        params = {
            "receptor": _json_array(receptor),
            "sender": _json_array(as_list(sender)),
            "message": _json_array(as_list(message)),
            "date": date,
            "type": _json_array(type) if type is not None else None,
            "localmessageid": _json_array(local_message_id) if local_message_id is not None else None,
            "hide": hide,
            "tag": tag,
        }
        return self._post("sendarray", params)

    def status(self, messageid) -> Any:
        """Delivery status by Kavenegar message ID(s) (POST sms/status)."""
        return self._post("status", {"messageid": parse_input(messageid)})

    def status_local_message_id(self, localid) -> Any:
        """Delivery status by local ID(s) (POST sms/statuslocalmessageid)."""
        return self._post("statuslocalmessageid", {"localid": parse_input(localid)})

    def select(self, messageid) -> Any:
        return self._post("select", {"messageid": parse_input(messageid)})

    def select_outbox(self, startdate, enddate, sender=None) -> Any:
        """Outbox messages between two UNIX timestamps (POST sms/selectoutbox)."""
        params = {"startdate": startdate, "enddate": enddate, "sender": sender}
        return self._post("selectoutbox", params)

    def latest_outbox(self, pagesize=None, sender=None) -> Any:
        return self._post("latestoutbox", {"pagesize": pagesize, "sender": sender})

    def count_outbox(self, startdate, enddate, status=0) -> Any:
        params = {"startdate": startdate, "enddate": enddate, "status": status}
        return self._post("countoutbox", params)

    def cancel(self, messageid) -> Any:
        """Cancel scheduled message(s) (POST sms/cancel)."""
        return self._post("cancel", {"messageid": parse_input(messageid)})

    def receive(self, linenumber, isread=0) -> Any:
        """Inbox messages of a line; isread=0 returns unread ones (POST sms/receive)."""
        return self._post("receive", {"linenumber": linenumber, "isread": isread})

    def count_inbox(self, startdate, enddate=None, linenumber=None, isread=0) -> Any:
        params = {
            "startdate": startdate,
            "enddate": enddate,
            "linenumber": linenumber,
            "isread": isread,
        }
        return self._post("countinbox", params)

    def count_postalcode(self, *args, **kwargs):
        raise RemovedMethodError()

    def send_by_postalcode(self, *args, **kwargs):
        raise RemovedMethodError()


def _json_array(values) -> str:
    return json.dumps([wire_value(v) for v in values], ensure_ascii=False)
