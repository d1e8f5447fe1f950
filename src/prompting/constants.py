"""Application-wide constants for prompting.

Fixed values that define the encoding and validation limits of the
prompting value types. Nothing here is user-configurable.
"""

__all__ = [
    # Application identity
    "APP_NAME",
    # Identifier encoding
    "ID_HEX_LENGTH",
    "MAX_ID_VALUE",
    # Duration parsing
    "DURATION_UNIT_NANOSECONDS",
    "MAX_DURATION_NANOSECONDS",
]

APP_NAME = "prompting"

# =============================================================================
# Identifier encoding
# =============================================================================

# 64 bits = 16 hex digits
ID_HEX_LENGTH: int = 16

MAX_ID_VALUE: int = (1 << 64) - 1

# =============================================================================
# Duration parsing
# =============================================================================

# Unit suffixes accepted in duration text, mapped to nanoseconds.
# Both the micro sign (U+00B5) and Greek mu (U+03BC) spell microseconds.
DURATION_UNIT_NANOSECONDS: dict[str, int] = {
    "ns": 1,
    "us": 1_000,
    "µs": 1_000,
    "μs": 1_000,
    "ms": 1_000_000,
    "s": 1_000_000_000,
    "m": 60 * 1_000_000_000,
    "h": 60 * 60 * 1_000_000_000,
}

# Durations are bounded by a signed 64-bit nanosecond count (~292 years)
MAX_DURATION_NANOSECONDS: int = (1 << 63) - 1
