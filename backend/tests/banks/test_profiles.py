import pytest

from paynotify.banks import (
    DEFAULT_LIBRARY,
    BankLabel,
    BankProfile,
    FieldKind,
    PatternLibrary,
)
from paynotify.banks.patterns import BANK_AMOUNT, GENERIC_AMOUNT, GENERIC_TIMESTAMP


def test_default_library_priority_order_and_unique_codes():
    codes = DEFAULT_LIBRARY.codes
    assert codes[:4] == ("SCB", "KBANK", "KTB", "BBL")
    assert len(codes) == len(set(codes))
    assert BankLabel.UNKNOWN.value not in codes


def test_duplicate_codes_rejected():
    p = BankProfile(code="SCB", display_name="x", name_keywords=("scb",))
    with pytest.raises(ValueError):
        PatternLibrary([p, p])


def test_bank_rules_precede_generic_rules():
    rules = DEFAULT_LIBRARY.rules_for(FieldKind.AMOUNT, "SCB")
    assert rules[: len(BANK_AMOUNT)] == BANK_AMOUNT
    assert rules[len(BANK_AMOUNT):] == GENERIC_AMOUNT


def test_unknown_bank_uses_generic_rules_only():
    assert DEFAULT_LIBRARY.rules_for(FieldKind.AMOUNT, None) == GENERIC_AMOUNT
    assert DEFAULT_LIBRARY.rules_for(FieldKind.AMOUNT, "Unknown") == GENERIC_AMOUNT


def test_bank_without_timestamp_rules_falls_back_to_generic():
    assert DEFAULT_LIBRARY.rules_for(FieldKind.TIMESTAMP, "KBANK") == GENERIC_TIMESTAMP


def test_package_lookup():
    assert DEFAULT_LIBRARY.by_package("com.scb.phone").code == "SCB"
    assert DEFAULT_LIBRARY.by_package("com.kasikorn.retail.mbanking.wap").code == "KBANK"
    assert DEFAULT_LIBRARY.is_monitored_package("com.ktb.netbank")
    assert not DEFAULT_LIBRARY.is_monitored_package("com.whatsapp")
    assert DEFAULT_LIBRARY.by_package(None) is None


def test_profile_name_pattern_matches_localized_name():
    scb = DEFAULT_LIBRARY.get("SCB")
    (name_rule,) = scb.rules_for(FieldKind.BANK_NAME)
    assert name_rule.pattern.search("ธนาคารไทยพาณิชย์")
    assert name_rule.pattern.search("Siam Commercial Bank")
    assert DEFAULT_LIBRARY.get("NOPE") is None


def test_library_iterates_profiles_in_priority_order():
    assert [p.code for p in DEFAULT_LIBRARY] == list(DEFAULT_LIBRARY.codes)
    assert len(DEFAULT_LIBRARY) == 8
    with_logo = [p.code for p in DEFAULT_LIBRARY if p.logo_region is not None]
    assert with_logo == ["SCB", "KBANK", "KTB", "BBL"]
