"""Custom exceptions for prompting.

This module contains all custom exceptions used throughout the package.
Every exception is a local validation failure: the input was malformed or
violates a lifespan policy. None of them are transient, so retrying with the
same input always fails the same way.

Validation Errors (caller rejects the whole rule):
    - PromptingError: Base for all prompting validation failures
    - InvalidIDError: Identifier text is not 16 hex digits
    - InvalidOutcomeError: Outcome text unknown, or UNSET asked to resolve
    - InvalidLifespanError: Lifespan text unknown, or UNSET used on a rule
    - InvalidExpirationError: Expiration/session ID presence violates policy
    - InvalidDurationError: Duration presence, syntax, sign or range is illegal

All exceptions inherit from ValueError so they can be raised directly from
pydantic validators, which wrap them in a ValidationError.

Usage:
    from prompting.exceptions import InvalidDurationError, PromptingError
"""

from __future__ import annotations

__all__ = [
    "DurationProblem",
    "InvalidDurationError",
    "InvalidExpirationError",
    "InvalidIDError",
    "InvalidLifespanError",
    "InvalidOutcomeError",
    "PromptingError",
]

import json
from enum import Enum
from typing import Literal


def _quote(value: str) -> str:
    """Quote text the way it is shown in error messages ("foo", "")."""
    return json.dumps(value, ensure_ascii=False)


class PromptingError(ValueError):
    """Base exception for prompting validation failures.

    Attributes:
        kind: Short category string used as the message prefix.
    """

    kind: str = "invalid value"

    def __init__(self, detail: str) -> None:
        self.detail = detail
        super().__init__(f"{self.kind}: {detail}")


class InvalidIDError(PromptingError):
    """Identifier text is malformed.

    Raised when text is not exactly 16 hexadecimal digits, or when an
    integer falls outside the unsigned 64-bit range.

    Attributes:
        value: The offending text or integer.
    """

    kind = "invalid ID"

    def __init__(self, value: str | int, reason: str) -> None:
        self.value = value
        shown = _quote(value) if isinstance(value, str) else str(value)
        super().__init__(f"{shown}: {reason}")


class InvalidOutcomeError(PromptingError):
    """Outcome cannot be parsed or resolved.

    Raised when:
    - Text other than "allow" or "deny" is deserialized
    - OutcomeType.UNSET (or unknown text) is resolved to a boolean

    Attributes:
        value: The original textual form ("" for UNSET).
    """

    kind = "invalid outcome"

    def __init__(self, value: str) -> None:
        self.value = value
        super().__init__(_quote(value))


class InvalidLifespanError(PromptingError):
    """Lifespan text is unknown, or UNSET was used where a lifespan is required.

    Attributes:
        value: The original textual form ("" for UNSET).
    """

    kind = "invalid lifespan"

    def __init__(self, value: str) -> None:
        self.value = value
        super().__init__(_quote(value))


class InvalidExpirationError(PromptingError):
    """Expiration or session ID presence violates the lifespan policy.

    The message distinguishes the two failure directions:
    "cannot have specified ..." for forbidden attributes and
    "cannot have unspecified ..." for missing required ones.

    Attributes:
        lifespan: Textual lifespan the check was made against.
        attribute: Which attribute failed, "expiration" or "session ID".
        specified: True if the attribute was present but forbidden,
            False if it was required but absent.
    """

    kind = "invalid expiration"

    def __init__(
        self,
        lifespan: str,
        attribute: Literal["expiration", "session ID"],
        *,
        specified: bool,
    ) -> None:
        self.lifespan = lifespan
        self.attribute = attribute
        self.specified = specified
        presence = "specified" if specified else "unspecified"
        super().__init__(f"cannot have {presence} {attribute} when lifespan is {_quote(lifespan)}")


class DurationProblem(str, Enum):
    """Category of a duration failure.

    Attributes:
        SPECIFIED: Duration given for a lifespan that forbids one.
        UNSPECIFIED: Duration missing for a lifespan that requires one.
        UNPARSABLE: Duration text is not valid duration syntax.
        NOT_POSITIVE: Duration parsed to zero or a negative value.
        OUT_OF_RANGE: Expiration computed from the duration is not a
            representable timestamp.
    """

    SPECIFIED = "specified"
    UNSPECIFIED = "unspecified"
    UNPARSABLE = "unparsable"
    NOT_POSITIVE = "not_positive"
    OUT_OF_RANGE = "out_of_range"


class InvalidDurationError(PromptingError):
    """Duration text violates the lifespan policy or cannot be used.

    Attributes:
        lifespan: Textual lifespan the check was made against.
        duration: The offending duration text.
        reason: DurationProblem category.
    """

    kind = "invalid duration"

    def __init__(
        self,
        lifespan: str,
        duration: str,
        reason: DurationProblem,
        cause: str | None = None,
    ) -> None:
        self.lifespan = lifespan
        self.duration = duration
        self.reason = reason

        lifespan_clause = f"when lifespan is {_quote(lifespan)}"
        if reason is DurationProblem.SPECIFIED:
            detail = f"cannot have specified duration {lifespan_clause}: {_quote(duration)}"
        elif reason is DurationProblem.UNSPECIFIED:
            detail = f"cannot have unspecified duration {lifespan_clause}"
        elif reason is DurationProblem.UNPARSABLE:
            detail = f"cannot parse duration: {cause or _quote(duration)}"
        elif reason is DurationProblem.NOT_POSITIVE:
            detail = f"cannot have zero or negative duration: {_quote(duration)}"
        else:
            detail = f"duration {_quote(duration)} puts the expiration out of range"
        super().__init__(detail)
