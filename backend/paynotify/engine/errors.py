from __future__ import annotations


class PayNotifyError(Exception):
    """Base class for structural misuse of the extraction engine."""


class InvalidCorpusError(PayNotifyError, ValueError):
    pass


class InvalidPayloadError(PayNotifyError, ValueError):
    pass


class UnreadableImageError(PayNotifyError, OSError):
    pass
