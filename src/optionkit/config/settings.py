"""Unified settings — CLI flags and env vars in one object.

Priority chain (highest to lowest):
  1. Init kwargs  — CLI flags passed by Click
  2. Env vars     — ``OPTIONKIT_*`` prefix
  3. Code defaults
"""

from __future__ import annotations

from typing import Any

from pydantic_settings import BaseSettings


class OptionkitSettings(BaseSettings):
    """Settings for the optionkit CLI, frozen after construction.

    Attributes:
        default_fallback: Fallback text ``probe`` returns for an empty
            result when no ``--default`` is given.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "OPTIONKIT_",
    }

    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    log_json: bool = False
    default_fallback: str | None = None

    @classmethod
    def from_cli(cls, **cli_flags: Any) -> OptionkitSettings:
        """Construct settings from a CLI invocation.

        Flags left unset (``None``) or off (``False``) are dropped so they
        don't shadow values coming from the environment.
        """
        overrides = {key: value for key, value in cli_flags.items() if value not in (None, False)}
        return cls(**overrides)
