from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Dict, Iterable, Mapping, Optional, Tuple

from paynotify.banks.labels import BankLabel
from paynotify.banks.patterns import BANK_NAME_PATTERNS, GENERIC_RULES, bank_rules
from paynotify.banks.rules import FieldKind, Rule
from paynotify.geometry import BoundingBox


@dataclass(frozen=True)
class BankProfile:
    """Rule bundle for one bank.

    name_keywords are matched against lower-cased text, so they must be
    lower-case themselves. logo_region is where the bank's app draws its
    logo on a screen capture, in fractional coordinates.
    """

    code: str
    display_name: str
    name_keywords: Tuple[str, ...]
    rules: Mapping[FieldKind, Tuple[Rule, ...]] = field(default_factory=dict)
    logo_region: Optional[BoundingBox] = None
    package_names: Tuple[str, ...] = ()

    def rules_for(self, kind: FieldKind) -> Tuple[Rule, ...]:
        return tuple(self.rules.get(kind, ()))

    def matches_text(self, lowered: str) -> bool:
        return any(kw in lowered for kw in self.name_keywords)


class PatternLibrary:
    """Immutable set of bank profiles plus the generic fallback rules.

    Profiles keep their construction order; that order is the bank priority
    used when identifying banks.
    """

    def __init__(
        self,
        profiles: Iterable[BankProfile],
        generic_rules: Optional[Mapping[FieldKind, Tuple[Rule, ...]]] = None,
    ) -> None:
        ordered = tuple(profiles)
        by_code: Dict[str, BankProfile] = {}
        by_package: Dict[str, BankProfile] = {}
        for p in ordered:
            if p.code in by_code:
                raise ValueError(f"Duplicate bank profile code: {p.code}")
            by_code[p.code] = p
            for pkg in p.package_names:
                by_package.setdefault(pkg, p)
        self._profiles = ordered
        self._by_code = MappingProxyType(by_code)
        self._by_package = MappingProxyType(by_package)
        self._generic = MappingProxyType(dict(generic_rules if generic_rules is not None else GENERIC_RULES))

    @property
    def profiles(self) -> Tuple[BankProfile, ...]:
        return self._profiles

    @property
    def codes(self) -> Tuple[str, ...]:
        return tuple(p.code for p in self._profiles)

    def get(self, code: Optional[str]) -> Optional[BankProfile]:
        if not code:
            return None
        return self._by_code.get(code)

    def by_package(self, package_name: Optional[str]) -> Optional[BankProfile]:
        if not package_name:
            return None
        return self._by_package.get(package_name)

    def is_monitored_package(self, package_name: Optional[str]) -> bool:
        return self.by_package(package_name) is not None

    def generic_rules(self, kind: FieldKind) -> Tuple[Rule, ...]:
        return tuple(self._generic.get(kind, ()))

    def rules_for(self, kind: FieldKind, bank: Optional[str] = None) -> Tuple[Rule, ...]:
        """Bank-specific rules (when the bank is known) followed by generic rules."""
        profile = self.get(bank)
        bank_part = profile.rules_for(kind) if profile is not None else ()
        return bank_part + self.generic_rules(kind)

    def __len__(self) -> int:
        return len(self._profiles)

    def __iter__(self):
        return iter(self._profiles)


# Bank app logo sits in the top-left corner of the transfer slip screens.
_TOP_LEFT_LOGO = BoundingBox(0.05, 0.05, 0.2, 0.1)


def _profile(
    label: BankLabel,
    display_name: str,
    keywords: Tuple[str, ...],
    *,
    logo_region: Optional[BoundingBox] = None,
    package_names: Tuple[str, ...] = (),
) -> BankProfile:
    return BankProfile(
        code=label.value,
        display_name=display_name,
        name_keywords=keywords,
        rules=MappingProxyType(bank_rules(BANK_NAME_PATTERNS[label.value])),
        logo_region=logo_region,
        package_names=package_names,
    )


def build_default_library() -> PatternLibrary:
    return PatternLibrary(
        [
            _profile(
                BankLabel.SCB,
                "Siam Commercial Bank",
                ("scb", "ไทยพาณิชย์", "siam commercial"),
                logo_region=_TOP_LEFT_LOGO,
                package_names=("com.scb.phone",),
            ),
            _profile(
                BankLabel.KBANK,
                "Kasikornbank",
                ("kbank", "กสิกร", "kasikorn"),
                logo_region=_TOP_LEFT_LOGO,
                package_names=("com.kasikorn.retail.mbanking.wap", "com.kasikorn.retail.mbanking"),
            ),
            _profile(
                BankLabel.KTB,
                "Krungthai Bank",
                ("ktb", "กรุงไทย"),
                logo_region=_TOP_LEFT_LOGO,
                package_names=("com.ktb.netbank",),
            ),
            _profile(
                BankLabel.BBL,
                "Bangkok Bank",
                ("bbl", "กรุงเทพ"),
                logo_region=_TOP_LEFT_LOGO,
                package_names=("com.bbl.mobilebanking",),
            ),
            _profile(
                BankLabel.TTB,
                "TMBThanachart Bank",
                ("ttb", "ทหารไทย", "ธนชาต"),
                package_names=("com.tmb.droid.mybiz", "com.tmbbank.tmb.retail.ios"),
            ),
            _profile(BankLabel.BAY, "Bank of Ayudhya (Krungsri)", ("bay", "กรุงศรี")),
            _profile(BankLabel.GSB, "Government Savings Bank", ("gsb", "ออมสิน")),
            _profile(
                BankLabel.UOB,
                "United Overseas Bank (Thai)",
                ("uob", "ยูโอบี"),
                package_names=("th.co.uob.uobmbk",),
            ),
        ]
    )


DEFAULT_LIBRARY = build_default_library()


__all__ = ["BankProfile", "PatternLibrary", "DEFAULT_LIBRARY", "build_default_library"]
