"""Validated lifespan record for rules.

RuleLifespan groups the lifespan-related attributes a rule embeds and
refuses to exist in an illegal combination: construction either succeeds
with a record that satisfies the lifespan policy, or fails as a whole.

JSON form (unset attributes omitted):
    {"lifespan": "timespan", "expiration": "2026-10-18T12:10:00Z"}
    {"lifespan": "session", "session-id": "0000000000012345"}
"""

from __future__ import annotations

__all__ = ["RuleLifespan"]

import logging
from datetime import datetime
from typing import Any, Self

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from prompting.constants import APP_NAME
from prompting.exceptions import PromptingError
from prompting.ids import IDType
from prompting.lifespan import Lifespan, LifespanType, parse_lifespan

_logger = logging.getLogger(f"{APP_NAME}.models")


class RuleLifespan(BaseModel):
    """Lifespan, expiration and session binding of a single rule.

    Attributes:
        lifespan: How long the rule stays valid. Required.
        expiration: Absolute expiry, only for TIMESPAN rules.
        session_id: Bound session, only for SESSION rules.
    """

    lifespan: Lifespan
    expiration: datetime | None = None
    session_id: IDType | None = Field(default=None, alias="session-id")

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    @field_validator("session_id", mode="after")
    @classmethod
    def drop_unset_session_id(cls, v: IDType | None) -> IDType | None:
        """Store the zero session ID as None so it is omitted when dumped."""
        if v is not None and v.is_unset:
            return None
        return v

    @model_validator(mode="after")
    def check_lifespan_policy(self) -> Self:
        """Reject expiration/session ID combinations the lifespan forbids."""
        try:
            self.lifespan.validate_expiration(self.expiration, self.session_id)
        except PromptingError as e:
            _logger.debug(
                "Rejected rule lifespan",
                extra={
                    "lifespan": self.lifespan.value,
                    "has_expiration": self.expiration is not None,
                    "session_id": str(self.session_id) if self.session_id is not None else None,
                    "error": str(e),
                },
            )
            raise
        return self

    @classmethod
    def from_duration(
        cls,
        lifespan: LifespanType | str,
        duration: str,
        current_time: datetime,
        session_id: int | None = None,
    ) -> Self:
        """Build a record from a reply that carries a duration instead of an expiration.

        Args:
            lifespan: Lifespan member or its text.
            duration: Duration text, "" unless lifespan is TIMESPAN.
            current_time: Reference time the duration is added to.
            session_id: Session to bind to, for SESSION rules.

        Returns:
            Validated RuleLifespan.

        Raises:
            InvalidLifespanError: If lifespan text is unknown or empty.
            InvalidDurationError: If the duration is illegal for the lifespan.
            pydantic.ValidationError: If the resulting record violates the
                lifespan policy (wrapping InvalidExpirationError).
        """
        parsed = parse_lifespan(lifespan)
        expiration = parsed.parse_duration(duration, current_time)
        data: dict[str, Any] = {"lifespan": parsed, "expiration": expiration}
        if session_id is not None:
            data["session_id"] = IDType(session_id)
        return cls.model_validate(data)

    def is_expired(self, at: datetime) -> bool:
        """Check whether the rule has expired by time.

        Only TIMESPAN rules expire by time; SINGLE and SESSION rules end
        through use or session end, which is tracked elsewhere.

        Args:
            at: Time to check against.

        Returns:
            True if the rule is a TIMESPAN rule and at >= expiration.
        """
        if self.lifespan is not LifespanType.TIMESPAN or self.expiration is None:
            return False
        return at >= self.expiration

    def to_json_dict(self) -> dict[str, Any]:
        """Serialize to a JSON-compatible dict with unset attributes omitted."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)
