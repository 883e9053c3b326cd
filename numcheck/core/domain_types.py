"""Domain Types: rich types that replace bare primitives across the codebase.

Invariants:
    - RecordId and NumberValue wrap int; any int is a legal id, including
      negative and zero
    - MAX_VALID_RESULT is the only validation threshold; comparison is strict (>)
    - Every per-call outcome is one CheckOutcome member

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enum for outcomes: serializes to JSON without custom encoders
"""

from enum import Enum
from typing import NewType


# ─── Identity & Value Types ──────────────────────────────────────

RecordId = NewType("RecordId", int)
NumberValue = NewType("NumberValue", int)


# ─── Constants ───────────────────────────────────────────────────

MAX_VALID_RESULT = 10


# ─── Enums ───────────────────────────────────────────────────────

class CheckOutcome(str, Enum):
    """Result of a single get_number call."""
    VALID = "valid"
    LOOKUP_FAILED = "lookup_failed"
    TOO_HIGH = "too_high"
