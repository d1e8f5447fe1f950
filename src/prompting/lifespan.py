"""Lifespan policy for prompting rules.

A lifespan says how long a rule's decision stays valid and what the rule
may be bound to. Each lifespan fixes which companion attributes are legal:

    lifespan   expiration   session ID   duration text
    --------   ----------   ----------   -------------
    forever    forbidden    forbidden    forbidden
    single     forbidden    forbidden    forbidden
    timespan   required     forbidden    required
    session    forbidden    required     forbidden

UNSET is the value of an omitted lifespan field and is rejected by every
check. Lifespans are static classifications; nothing here holds state.
"""

from __future__ import annotations

__all__ = [
    "Lifespan",
    "LifespanType",
    "parse_lifespan",
]

from datetime import datetime, timedelta
from enum import Enum
from typing import Annotated, Any, assert_never

from pydantic import BeforeValidator

from prompting.duration import duration_nanoseconds
from prompting.exceptions import (
    DurationProblem,
    InvalidDurationError,
    InvalidExpirationError,
    InvalidLifespanError,
)


class LifespanType(str, Enum):
    """Lifespan of a prompting rule.

    Attributes:
        UNSET: Field omitted; never legal on a concrete rule.
        FOREVER: Rule never expires and is not bound to a session.
        SINGLE: Rule is consumed after one use.
        TIMESPAN: Rule expires at an absolute point in time.
        SESSION: Rule is valid only while a given session is active.
    """

    UNSET = ""
    FOREVER = "forever"
    SINGLE = "single"
    TIMESPAN = "timespan"
    SESSION = "session"

    def validate_expiration(self, expiration: datetime | None, session_id: int | None) -> None:
        """Check that expiration and session ID are legal for this lifespan.

        An expiration is set when it is not None. A session ID is set when it
        is neither None nor zero. At most one error is raised; expiration
        violations are reported before session ID violations.

        Args:
            expiration: Absolute expiration time, or None.
            session_id: IDType of the bound session, or None/0.

        Raises:
            InvalidExpirationError: If either attribute violates the policy.
            InvalidLifespanError: If the lifespan is UNSET.
        """
        has_expiration = expiration is not None
        has_session = bool(session_id)

        if self is LifespanType.FOREVER or self is LifespanType.SINGLE:
            if has_expiration:
                raise InvalidExpirationError(self.value, "expiration", specified=True)
            if has_session:
                raise InvalidExpirationError(self.value, "session ID", specified=True)
        elif self is LifespanType.TIMESPAN:
            if not has_expiration:
                raise InvalidExpirationError(self.value, "expiration", specified=False)
            if has_session:
                raise InvalidExpirationError(self.value, "session ID", specified=True)
        elif self is LifespanType.SESSION:
            if has_expiration:
                raise InvalidExpirationError(self.value, "expiration", specified=True)
            if not has_session:
                raise InvalidExpirationError(self.value, "session ID", specified=False)
        elif self is LifespanType.UNSET:
            raise InvalidLifespanError(self.value)
        else:
            assert_never(self)

    def parse_duration(self, duration: str, current_time: datetime) -> datetime | None:
        """Convert duration text into an absolute expiration.

        Only TIMESPAN accepts a duration; every other lifespan requires the
        text to be empty and yields no expiration. The result depends only
        on the arguments, never on the wall clock.

        Args:
            duration: Duration text such as "10m", or "" for none.
            current_time: Reference time the duration is added to.

        Returns:
            current_time + duration for TIMESPAN, otherwise None.

        Raises:
            InvalidDurationError: If the duration is present when forbidden,
                missing when required, unparsable, not positive, or too
                large to add to current_time.
            InvalidLifespanError: If the lifespan is UNSET.
        """
        if self is LifespanType.FOREVER or self is LifespanType.SINGLE or self is LifespanType.SESSION:
            if duration:
                raise InvalidDurationError(self.value, duration, DurationProblem.SPECIFIED)
            return None
        elif self is LifespanType.TIMESPAN:
            return self._expiration_from_duration(duration, current_time)
        elif self is LifespanType.UNSET:
            raise InvalidLifespanError(self.value)
        else:
            assert_never(self)

    def _expiration_from_duration(self, duration: str, current_time: datetime) -> datetime:
        if not duration:
            raise InvalidDurationError(self.value, duration, DurationProblem.UNSPECIFIED)

        try:
            nanoseconds = duration_nanoseconds(duration)
        except ValueError as e:
            raise InvalidDurationError(self.value, duration, DurationProblem.UNPARSABLE, cause=str(e)) from e

        if nanoseconds <= 0:
            raise InvalidDurationError(self.value, duration, DurationProblem.NOT_POSITIVE)

        # Round sub-microsecond remainders up so the expiration is always
        # strictly after current_time
        delta = timedelta(microseconds=-(-nanoseconds // 1000))

        try:
            return current_time + delta
        except OverflowError as e:
            raise InvalidDurationError(self.value, duration, DurationProblem.OUT_OF_RANGE) from e


def parse_lifespan(value: Any) -> LifespanType:
    """Parse explicit lifespan text.

    Args:
        value: Text (or LifespanType) to parse.

    Returns:
        Any LifespanType except UNSET.

    Raises:
        InvalidLifespanError: For "" or unrecognized text.
    """
    if isinstance(value, LifespanType):
        text = value.value
    elif isinstance(value, str):
        text = value
    else:
        text = repr(value)

    if text == LifespanType.UNSET.value:
        raise InvalidLifespanError(text)
    try:
        return LifespanType(text)
    except ValueError:
        raise InvalidLifespanError(text) from None


# Field type for models: declare as `field: Lifespan = LifespanType.UNSET`
# so an omitted field stays UNSET while explicit text is always parsed.
Lifespan = Annotated[LifespanType, BeforeValidator(parse_lifespan)]
