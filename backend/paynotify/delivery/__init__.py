from .formatting import (
    format_amount_display,
    format_timestamp,
    notification_title,
    notification_body,
    display_fields,
)

__all__ = [
    "format_amount_display",
    "format_timestamp",
    "notification_title",
    "notification_body",
    "display_fields",
]
