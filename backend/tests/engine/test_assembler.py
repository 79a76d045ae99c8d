from concurrent.futures import ThreadPoolExecutor

import pytest

from paynotify.banks import DEFAULT_LIBRARY
from paynotify.engine import InvalidCorpusError, TextCorpus, TransactionRecord, assemble, assemble_lines


def test_scb_transfer_slip():
    rec = assemble_lines(["SCB Easy", "โอนเงิน 1,234.56 บาท", "จาก สมชาย ใจดี", "a/c 123-4-56789-0"])
    assert rec.bank == "SCB"
    assert rec.amount == 1234.56
    assert rec.sender == "สมชาย ใจดี"
    assert rec.account_number == "123-4-56789-0"
    assert rec.timestamp is None
    assert rec.identified_by == "text"


def test_unknown_bank_generic_amount():
    rec = assemble_lines(["รับเงิน 500 บาท"])
    assert rec.bank == "Unknown"
    assert not rec.bank_known
    assert rec.amount == 500.0
    assert rec.sender is None
    assert rec.account_number is None


def test_currency_symbol_amount_before_fallback():
    rec = assemble_lines(["฿2,000.00", "KBANK"])
    assert rec.bank == "KBANK"
    assert rec.amount == 2000.0


def test_malformed_amount_is_absent():
    rec = assemble_lines(["1.234.56"])
    assert rec.amount is None
    assert rec.raw_text == "1.234.56"


def test_raw_text_is_verbatim_join():
    lines = ["SCB Easy  ", "โอนเงิน 10 บาท"]
    assert assemble_lines(lines).raw_text == "SCB Easy  \nโอนเงิน 10 บาท"


def test_timestamps_are_captured_as_text():
    rec = assemble_lines(["SCB", "รับเงิน 1,000.00 บาท", "18/10/2026 14:30"])
    assert rec.amount == 1000.0
    assert rec.timestamp == "18/10/2026 14:30"
    rec2 = assemble_lines(["KBANK", "เงินเข้า ฿350.00", "18 ต.ค. 2569 09:05"])
    assert rec2.amount == 350.0
    assert rec2.timestamp == "18 ต.ค. 2569 09:05"


def test_region_identification_flows_into_record():
    rec = assemble_lines(["logo", "KBANK ฿99.00"], [[0.06, 0.06, 0.1, 0.05], None])
    assert rec.bank == "SCB"
    assert rec.identified_by == "region"
    assert rec.amount == 99.0


def test_bank_hint_skips_identification():
    rec = assemble_lines(["รับเงิน 500 บาท"], bank_hint="KTB")
    assert rec.bank == "KTB"
    assert rec.identified_by == "package"
    # Unsupported hints are ignored.
    assert assemble_lines(["รับเงิน 500 บาท"], bank_hint="XYZ").bank == "Unknown"


def test_same_corpus_same_record():
    c = TextCorpus.from_lines(["SCB Easy", "โอนเงิน 1,234.56 บาท"])
    assert assemble(c) == assemble(c)
    assert isinstance(assemble(c, DEFAULT_LIBRARY), TransactionRecord)


def test_concurrent_assembly_shares_library():
    c = TextCorpus.from_lines(["SCB Easy", "โอนเงิน 1,234.56 บาท", "จาก สมชาย ใจดี"])
    expected = assemble(c)
    with ThreadPoolExecutor(max_workers=8) as pool:
        results = list(pool.map(lambda _: assemble(c, DEFAULT_LIBRARY), range(64)))
    assert all(r == expected for r in results)


@pytest.mark.parametrize("bad", [None, "SCB Easy", ["SCB"]])
def test_assemble_requires_corpus(bad):
    with pytest.raises(InvalidCorpusError):
        assemble(bad)


def test_assemble_lines_rejects_empty():
    with pytest.raises(InvalidCorpusError):
        assemble_lines([])
    with pytest.raises(InvalidCorpusError):
        assemble_lines(None)


def test_record_dict_keys():
    d = assemble_lines(["รับเงิน 500 บาท"]).to_dict()
    assert d == {
        "bankName": "Unknown",
        "amount": 500.0,
        "senderInfo": None,
        "accountNumber": None,
        "timestamp": None,
        "rawText": "รับเงิน 500 บาท",
        "identifiedBy": "none",
    }
