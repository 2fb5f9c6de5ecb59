"""
Configuration for argument handling

The history of these helpers disagrees on what to do with a missing
auxiliary argument (predicate, failure object, factory, mapper), so the
choice is exposed as a flag instead of being hard-coded.
"""

import os

from pydantic import BaseModel, ConfigDict, Field

STRICT_ARGUMENTS_ENV = "THINGS_STRICT_ARGUMENTS"


class ThingsConfig(BaseModel):
    """
    Behaviour switches shared by all helpers

    strict_arguments:
        True  -> an explicitly missing auxiliary argument raises
                 ArgumentNotSpecifiedError
        False -> a missing predicate always passes, a missing mapper is the
                 identity, a missing factory is dict and a missing failure
                 object falls back to MissingValueError
    """

    strict_arguments: bool = Field(
        True, description="Reject None for predicate/failure/factory/mapper arguments"
    )

    model_config = ConfigDict(frozen=True)

    @classmethod
    def from_env(cls) -> "ThingsConfig":
        """Build a config from THINGS_STRICT_ARGUMENTS (unset keeps the default)"""
        raw = os.environ.get(STRICT_ARGUMENTS_ENV)
        if raw is None or not raw.strip():
            return cls()
        # pydantic accepts 1/0, true/false, yes/no, on/off
        return cls(strict_arguments=raw.strip())


# Shared default (strict, matching the latest revision of the helpers)
DEFAULT_CONFIG = ThingsConfig()
LENIENT_CONFIG = ThingsConfig(strict_arguments=False)
