"""Domain-level error types raised by the store and the draft workflows.

Every error carries a stable ``code`` next to its message so presenters can
map failures to UI feedback without parsing text.
"""

from __future__ import annotations


class SubscriptionError(Exception):
    """Base class for subscription errors (recoverable, caller-facing)."""

    def __init__(self, code: str, message: str):
        super().__init__(message)
        self.code = code
        self.message = message


class IndexOutOfRange(SubscriptionError, IndexError):
    """Store mutator called with a position outside ``[0, len)``."""

    def __init__(self, index: int, length: int):
        super().__init__(
            "INDEX_OUT_OF_RANGE",
            f"Index {index} is out of range for {length} subscription(s).",
        )
        self.index = index
        self.length = length


class InvalidDraft(SubscriptionError):
    """Commit attempted on a draft that cannot be written."""

    def __init__(self, message: str):
        super().__init__("INVALID_DRAFT", message)


class DuplicateSubscriptionId(SubscriptionError):
    """Write would place the same subscription id at two positions."""

    def __init__(self, subscription_id: object):
        super().__init__(
            "DUPLICATE_ID",
            f"Subscription {subscription_id} is already stored.",
        )
        self.subscription_id = subscription_id


__all__ = [
    "DuplicateSubscriptionId",
    "IndexOutOfRange",
    "InvalidDraft",
    "SubscriptionError",
]
