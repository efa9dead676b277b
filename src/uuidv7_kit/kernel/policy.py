"""
Generator Policy - runtime parameters for clock waiting

The policy bounds how long a clock-driven generator may wait for the system
clock to move forward (after an NTP step backwards, or after both counters
are exhausted inside one millisecond). Waiting never emits an identifier
out of order; when the bound is hit the generator gives up with an error.
"""

import os

from pydantic import BaseModel, Field, model_validator

ENV_PREFIX = "UUIDV7_"


class GeneratorPolicy(BaseModel):
    """
    Clock wait parameters

    The defaults tolerate a few seconds of clock regression, which covers
    ordinary NTP slews, while keeping a stuck clock from hanging a caller
    forever. Set both bounds to None to restore unbounded waiting.
    """

    max_clock_wait_seconds: float | None = Field(
        default=5.0,
        gt=0.0,
        description=(
            "Give up waiting for the clock once the backoff sleeps add up to this "
            "many seconds (None = never)"
        ),
    )

    max_clock_wait_attempts: int | None = Field(
        default=None,
        ge=1,
        description="Give up waiting for the clock after this many attempts (None = never)",
    )

    backoff_min_seconds: float = Field(
        default=0.001,
        gt=0.0,
        description="Shortest sleep between clock readings",
    )

    backoff_max_seconds: float = Field(
        default=0.05,
        gt=0.0,
        description="Longest sleep between clock readings",
    )

    model_config = {
        "frozen": True,
    }

    @model_validator(mode="after")
    def check_backoff_order(self) -> "GeneratorPolicy":
        if self.backoff_min_seconds > self.backoff_max_seconds:
            raise ValueError("backoff_min_seconds must not exceed backoff_max_seconds")
        return self

    @property
    def is_bounded(self) -> bool:
        return self.max_clock_wait_seconds is not None or self.max_clock_wait_attempts is not None

    @classmethod
    def from_env(cls) -> "GeneratorPolicy":
        """
        Build a policy from UUIDV7_* environment variables

        Unset variables keep their defaults; the literal "none" disables a bound.

        Example:
            UUIDV7_MAX_CLOCK_WAIT_SECONDS=none UUIDV7_MAX_CLOCK_WAIT_ATTEMPTS=100
        """
        overrides: dict[str, object] = {}
        for name in cls.model_fields:
            raw = os.getenv(ENV_PREFIX + name.upper())
            if raw is None:
                continue
            overrides[name] = None if raw.strip().lower() == "none" else raw.strip()
        return cls.model_validate(overrides)


default_policy = GeneratorPolicy()
