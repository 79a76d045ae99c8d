import pytest

from paynotify.engine import InvalidPayloadError
from paynotify.services.notifications import process_notification, record_from_payload


def _payload(**over):
    data = {"bankName": "SCB", "amount": 1500.25, "senderInfo": "นาย ก", "timestamp": 1760772600.0}
    data.update(over)
    return data


def test_payload_is_trusted_as_is():
    rec = record_from_payload(_payload(accountNumber="xxx-x-x1234-x"))
    assert rec.bank == "SCB"
    assert rec.amount == 1500.25
    assert rec.sender == "นาย ก"
    assert rec.account_number == "xxx-x-x1234-x"
    assert rec.timestamp == 1760772600.0
    assert rec.raw_text == ""
    assert rec.identified_by == "payload"


@pytest.mark.parametrize(
    "payload",
    [
        {"bankName": "SCB", "amount": 1.0, "senderInfo": "x"},
        _payload(amount=-1),
        _payload(amount="abc"),
        ["SCB", 1.0],
        None,
    ],
)
def test_payload_rejected(payload):
    with pytest.raises(InvalidPayloadError):
        record_from_payload(payload)


def test_bank_app_notification_uses_package_bank():
    rec = process_notification(
        "com.kasikorn.retail.mbanking.wap",
        "K PLUS",
        "เงินเข้า 2,500.00 บาท จาก นาย ทดสอบ",
    )
    assert rec is not None
    assert rec.bank == "KBANK"
    assert rec.identified_by == "package"
    assert rec.amount == 2500.0
    assert rec.sender == "นาย ทดสอบ"
    assert rec.raw_text == "K PLUS\nเงินเข้า 2,500.00 บาท จาก นาย ทดสอบ"


@pytest.mark.parametrize("title,text", [("", "เงินเข้า 100 บาท"), ("K PLUS", ""), (None, None)])
def test_incomplete_notification_skipped(title, text):
    assert process_notification("com.kasikorn.retail.mbanking", title, text) is None


def test_unknown_package_falls_back_to_text():
    rec = process_notification("com.example.chat", "แจ้งเตือน", "SCB รับเงิน 100 บาท")
    assert rec.bank == "SCB"
    assert rec.identified_by == "text"
    assert rec.amount == 100.0
