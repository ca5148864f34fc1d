"""
SMS endpoints: parameter encoding per endpoint and removed methods.
"""

import json

import pytest

from kavenegar import RemovedMethodError
from kavenegar.enums import MessageStatus

from conftest import API_KEY

BASE = f"https://api.kavenegar.com/v1/{API_KEY}/sms"


class TestSend:
    def test_send_single(self, api, session):
        session.reply([{"messageid": 8792343, "status": 1}])
        out = api.send("10004346", "09123456789", "خدمات پیام کوتاه کاوه نگار")
        assert out == [{"messageid": 8792343, "status": 1}]
        assert session.last["url"] == f"{BASE}/send.json/"
        assert session.last["data"] == {
            "receptor": "09123456789",
            "sender": "10004346",
            "message": "خدمات پیام کوتاه کاوه نگار",
            "hide": 0,
        }

    def test_send_many_receptors_and_local_ids(self, api, session):
        api.send("10004346", ["09121111111", "09122222222"], "hi", localid=[11, 12], tag="promo")
        data = session.last["data"]
        assert data["receptor"] == "09121111111,09122222222"
        assert data["localid"] == "11,12"
        assert data["tag"] == "promo"

    def test_scalar_and_single_element_list_match(self, api, session):
        api.send("10004346", "09121111111", "hi", localid=77)
        scalar = session.last["data"]
        api.send("10004346", ["09121111111"], "hi", localid=[77])
        listed = session.last["data"]
        assert str(scalar["localid"]) == listed["localid"]
        assert scalar["receptor"] == listed["receptor"]

    def test_group_api_matches_flat_api(self, api, session):
        api.sms.send("10004346", "09121111111", "hi")
        grouped = session.last
        api.send("10004346", "09121111111", "hi")
        assert session.last == grouped


class TestSendArray:
    def test_scalar_type_is_broadcast(self, api, session):
        receptors = ["09121111111", "09122222222", "09123333333"]
        api.send_array("10004346", receptors, ["a", "b", "c"], type=1)
        data = session.last["data"]
        assert session.last["url"] == f"{BASE}/sendarray.json/"
        assert json.loads(data["type"]) == [1, 1, 1]
        assert json.loads(data["receptor"]) == receptors
        assert json.loads(data["sender"]) == ["10004346"]
        assert json.loads(data["message"]) == ["a", "b", "c"]
        assert "localmessageid" not in data

    def test_scalar_local_id_is_broadcast(self, api, session):
        api.send_array(["1000", "2000"], ["09121111111", "09122222222"], ["a", "b"], local_message_id="x")
        assert json.loads(session.last["data"]["localmessageid"]) == ["x", "x"]

    def test_list_type_is_kept(self, api, session):
        api.send_array(["1000", "2000"], ["09121111111", "09122222222"], ["a", "b"], type=[1, 2])
        assert json.loads(session.last["data"]["type"]) == [1, 2]

    def test_scalar_receptor_becomes_array(self, api, session):
        api.send_array("1000", "09121111111", "a", type=2)
        data = session.last["data"]
        assert json.loads(data["receptor"]) == ["09121111111"]
        assert json.loads(data["type"]) == [2]

    def test_unicode_is_not_escaped(self, api, session):
        api.send_array("1000", "09121111111", "سلام")
        assert session.last["data"]["message"] == '["سلام"]'


class TestQueries:
    @pytest.mark.parametrize(
        "call, action, field",
        [
            ("status", "status", "messageid"),
            ("select", "select", "messageid"),
            ("cancel", "cancel", "messageid"),
            ("status_local_message_id", "statuslocalmessageid", "localid"),
        ],
    )
    def test_id_lists(self, api, session, call, action, field):
        getattr(api, call)([85546, 85547])
        assert session.last["url"] == f"{BASE}/{action}.json/"
        assert session.last["data"] == {field: "85546,85547"}

        getattr(api, call)("85546")
        single = session.last["data"][field]
        getattr(api, call)(["85546"])
        assert session.last["data"][field] == single

    def test_select_outbox(self, api, session):
        api.select_outbox(1410570000, 1410600000)
        assert session.last["url"] == f"{BASE}/selectoutbox.json/"
        assert session.last["data"] == {"startdate": 1410570000, "enddate": 1410600000}

    def test_latest_outbox(self, api, session):
        api.latest_outbox(pagesize=50, sender="10004346")
        assert session.last["data"] == {"pagesize": 50, "sender": "10004346"}

    def test_count_outbox_default_status(self, api, session):
        session.reply([{"startdate": 1410570000, "enddate": 1410600000, "sumpart": 12, "sumcount": 8, "cost": 960}])
        out = api.count_outbox(1410570000, 1410600000)
        assert out[0]["sumcount"] == 8
        assert session.last["data"]["status"] == 0

    def test_count_outbox_status_enum(self, api, session):
        api.count_outbox(1410570000, 1410600000, MessageStatus.DELIVERED)
        assert session.last["data"]["status"] == 10

    def test_receive(self, api, session):
        api.receive("30002225")
        assert session.last["url"] == f"{BASE}/receive.json/"
        assert session.last["data"] == {"linenumber": "30002225", "isread": 0}

    def test_count_inbox(self, api, session):
        api.count_inbox(1410570000, linenumber="30002225", isread=1)
        assert session.last["url"] == f"{BASE}/countinbox.json/"
        assert session.last["data"] == {"startdate": 1410570000, "linenumber": "30002225", "isread": 1}


class TestRemoved:
    def test_count_postalcode(self, api, session):
        with pytest.raises(RemovedMethodError) as exc:
            api.count_postalcode("1234567890")
        assert exc.value.message == "Method is removed"
        assert session.calls == []

    def test_send_by_postalcode(self, api, session):
        with pytest.raises(RemovedMethodError):
            api.send_by_postalcode("10004346", "1234567890", "hi", 0, 10, 0, 10, 0)
        with pytest.raises(RemovedMethodError):
            api.sms.send_by_postalcode()
        assert session.calls == []
