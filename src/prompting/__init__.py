"""Value types for local access-control prompting.

Provides the building blocks a prompting engine embeds in its rules and
replies:

    ids.py        - IDType, 64-bit identifier with 16-digit hex text form
    outcome.py    - OutcomeType (unset/allow/deny) and boolean resolution
    lifespan.py   - LifespanType and its expiration/duration policy
    duration.py   - Signed duration text parsing ("10m", "-5s", "1h30m")
    models.py     - RuleLifespan, an all-or-nothing validated record
    exceptions.py - Validation error taxonomy

Rule storage, sessions, and prompt delivery live outside this package.
"""

from prompting.exceptions import (
    DurationProblem,
    InvalidDurationError,
    InvalidExpirationError,
    InvalidIDError,
    InvalidLifespanError,
    InvalidOutcomeError,
    PromptingError,
)
from prompting.ids import IDType
from prompting.lifespan import Lifespan, LifespanType, parse_lifespan
from prompting.models import RuleLifespan
from prompting.outcome import Outcome, OutcomeType, outcome_as_bool, parse_outcome

__all__ = [
    # Identifiers
    "IDType",
    # Outcomes
    "Outcome",
    "OutcomeType",
    "outcome_as_bool",
    "parse_outcome",
    # Lifespans
    "Lifespan",
    "LifespanType",
    "parse_lifespan",
    "RuleLifespan",
    # Errors
    "DurationProblem",
    "InvalidDurationError",
    "InvalidExpirationError",
    "InvalidIDError",
    "InvalidLifespanError",
    "InvalidOutcomeError",
    "PromptingError",
]
