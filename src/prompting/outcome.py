"""Outcome enum for prompt replies and rules.

An outcome is the user's decision: allow or deny. UNSET is the default
value of an outcome field that was omitted; it is never a legal resolved
decision.

Deserialization is three-way when fields are declared with the Outcome
annotated type and an UNSET default:
    - field absent             -> OutcomeType.UNSET, no error
    - "allow" / "deny"         -> OutcomeType.ALLOW / OutcomeType.DENY
    - anything else, even ""   -> ValidationError (invalid outcome)

Resolving UNSET to a boolean is always an error.
"""

from __future__ import annotations

__all__ = [
    "Outcome",
    "OutcomeType",
    "outcome_as_bool",
    "parse_outcome",
]

from enum import Enum
from typing import Annotated, Any

from pydantic import BeforeValidator

from prompting.exceptions import InvalidOutcomeError


class OutcomeType(str, Enum):
    """Outcome of a prompt reply or rule.

    Inherits from str for easy serialization and comparison.

    Attributes:
        UNSET: Field omitted, caller must decide later.
        ALLOW: Access is permitted.
        DENY: Access is refused.
    """

    UNSET = ""
    ALLOW = "allow"
    DENY = "deny"

    def as_bool(self) -> bool:
        """Resolve the outcome to a permission decision.

        Returns:
            True for ALLOW, False for DENY.

        Raises:
            InvalidOutcomeError: For UNSET.
        """
        return outcome_as_bool(self)


def outcome_as_bool(outcome: OutcomeType | str) -> bool:
    """Resolve an outcome, or raw outcome text, to a permission decision.

    Args:
        outcome: OutcomeType member or its textual form.

    Returns:
        True for allow, False for deny.

    Raises:
        InvalidOutcomeError: For UNSET or any unrecognized text, quoting
            the original textual form.
    """
    if outcome == OutcomeType.ALLOW:
        return True
    if outcome == OutcomeType.DENY:
        return False
    raise InvalidOutcomeError(outcome.value if isinstance(outcome, OutcomeType) else str(outcome))


def parse_outcome(value: Any) -> OutcomeType:
    """Parse explicit outcome text.

    Only "allow" and "deny" are accepted. An explicitly empty value is an
    error; only a missing field may leave an outcome UNSET.

    Args:
        value: Text (or OutcomeType) to parse.

    Returns:
        OutcomeType.ALLOW or OutcomeType.DENY.

    Raises:
        InvalidOutcomeError: For any other value.
    """
    if isinstance(value, OutcomeType):
        text = value.value
    elif isinstance(value, str):
        text = value
    else:
        text = repr(value)

    if text == OutcomeType.ALLOW.value:
        return OutcomeType.ALLOW
    if text == OutcomeType.DENY.value:
        return OutcomeType.DENY
    raise InvalidOutcomeError(text)


# Field type for models: declare as `field: Outcome = OutcomeType.UNSET`
# for optional outcomes. Pydantic does not validate defaults, so only an
# explicitly present value passes through parse_outcome.
Outcome = Annotated[OutcomeType, BeforeValidator(parse_outcome)]
