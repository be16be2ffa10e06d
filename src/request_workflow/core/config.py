# This project was developed with assistance from AI tools.
"""
Workflow status configuration.

All settings read from environment variables (``WORKFLOW_`` prefix) with
defaults matching the admin portal's behaviour.
"""

from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from ..enums import RequestStatus


class WorkflowSettings(BaseSettings):
    """Settings for status resolution and display descriptors."""

    model_config = SettingsConfigDict(
        env_prefix="WORKFLOW_",
        extra="ignore",
    )

    # -- Resolution --
    DEFAULT_FALLBACK_STATUS: RequestStatus = Field(
        default=RequestStatus.DRAFT,
        description="Status shown when a raw value cannot be resolved at the display boundary.",
    )
    LOG_FALLBACKS: bool = Field(
        default=True,
        description="Log a warning whenever resolve_or_default falls back.",
    )

    # -- Display --
    STATUS_LABEL_LOCALE: Literal["it", "en"] = Field(
        default="it",
        description="Language of status and priority labels.",
    )


settings = WorkflowSettings()
