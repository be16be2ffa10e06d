# This project was developed with assistance from AI tools.
"""Workflow progress schemas."""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from ..enums import StepState, WorkflowStep
from . import CamelModel


class ServiceRequestSummary(CamelModel):
    """The slice of a service request the workflow projector reads.

    The full request entity (notes, history, assignee...) is owned by the
    API client; any extra keys are ignored.
    """

    status: str
    payment_id: str | None = None
    form_completed_at: datetime | None = None
    form_data: dict[str, Any] | None = None
    documents_uploaded_at: datetime | None = None
    documents: list[Any] | None = None

    @field_validator("form_completed_at", "documents_uploaded_at", mode="before")
    @classmethod
    def _blank_timestamp_is_absent(cls, value: Any) -> Any:
        if isinstance(value, str) and not value.strip():
            return None
        return value


class WorkflowProgress(CamelModel):
    """Where a request sits in the five-step workflow."""

    current_step: WorkflowStep
    current_step_index: int = Field(ge=0, le=4)
    completed_steps: tuple[WorkflowStep, ...]
    payment_completed: bool
    questionnaire_completed: bool
    documents_uploaded: bool
    is_in_review: bool
    is_completed: bool
    is_rejected: bool
    progress_percentage: float = Field(ge=0, le=100)

    @model_validator(mode="after")
    def _check_step_prefix(self) -> "WorkflowProgress":
        order = WorkflowStep.ordered()
        if self.current_step != order[self.current_step_index]:
            raise ValueError(
                f"current_step '{self.current_step.value}' does not match "
                f"index {self.current_step_index}"
            )
        if self.completed_steps != order[: self.current_step_index]:
            raise ValueError(
                "completed_steps must be the step order up to the current step"
            )
        return self


class StepInfo(BaseModel):
    """Human-readable info about a workflow step."""

    model_config = ConfigDict(frozen=True)

    label: str
    description: str


class StepView(BaseModel):
    """One entry of a rendered stepper."""

    model_config = ConfigDict(frozen=True)

    step: WorkflowStep
    index: int
    label: str
    description: str
    state: StepState
