# This project was developed with assistance from AI tools.
"""Status and priority display schemas."""

from pydantic import BaseModel, ConfigDict

from ..enums import RequestStatus


class StatusDescriptor(BaseModel):
    """How a canonical status is shown in badges and summary lines."""

    model_config = ConfigDict(frozen=True)

    label: str
    color: str
    bg_class: str
    text_class: str
    color_class: str
    is_terminal_success: bool = False
    is_terminal_failure: bool = False


class PriorityDescriptor(BaseModel):
    """How a request priority is shown in badges."""

    model_config = ConfigDict(frozen=True)

    label: str
    color: str
    bg_class: str
    text_class: str


class StatusResolution(BaseModel):
    """Outcome of resolving a raw status at the display boundary.

    ``fell_back`` is True when ``raw`` was not recognised and ``status``
    is the configured default rather than the resolved value.
    """

    model_config = ConfigDict(frozen=True)

    raw: str | None
    status: RequestStatus
    fell_back: bool = False
