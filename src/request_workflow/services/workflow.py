# This project was developed with assistance from AI tools.
"""Workflow progress projection.

Pure functions that place a service request in the five-step pipeline
(payment -> questionnaire -> documents -> review -> completed). Two inputs
are supported:

- a bare status, as shown in compact list views, projected through a fixed
  status table;
- a request record, where milestones are read from evidence on the record
  (payment id, form timestamps, uploaded documents) instead of being implied
  by the status.

Both paths agree on step index and terminal flags whenever the record's
evidence is consistent with its status.
"""

import logging
from collections.abc import Mapping
from types import MappingProxyType
from typing import Any, Literal

from ..enums import RequestStatus, StatusAlias, StepState, WorkflowStep
from ..schemas.workflow import ServiceRequestSummary, StepInfo, StepView, WorkflowProgress
from .status import resolve_alias

logger = logging.getLogger(__name__)

STEP_ORDER = WorkflowStep.ordered()
_LAST_INDEX = len(STEP_ORDER) - 1

STEP_INFO: Mapping[WorkflowStep, StepInfo] = MappingProxyType(
    {
        WorkflowStep.PAYMENT: StepInfo(label="Payment", description="Awaiting payment"),
        WorkflowStep.QUESTIONNAIRE: StepInfo(label="Questionnaire", description="Form completion"),
        WorkflowStep.DOCUMENTS: StepInfo(label="Documents", description="Document upload"),
        WorkflowStep.REVIEW: StepInfo(label="Review", description="Under staff review"),
        WorkflowStep.COMPLETED: StepInfo(label="Completed", description="Request completed"),
    }
)

# status -> (step index, payment, questionnaire, documents)
STATUS_MILESTONES: Mapping[RequestStatus, tuple[int, bool, bool, bool]] = MappingProxyType(
    {
        RequestStatus.DRAFT: (0, False, False, False),
        RequestStatus.PAYMENT_PENDING: (0, False, False, False),
        RequestStatus.AWAITING_FORM: (1, True, False, False),
        RequestStatus.AWAITING_DOCUMENTS: (2, True, True, False),
        RequestStatus.MISSING_DOCUMENTS: (2, True, True, False),
        RequestStatus.SUBMITTED: (3, True, True, True),
        RequestStatus.IN_REVIEW: (3, True, True, True),
        # Rejections happen during review
        RequestStatus.REJECTED: (3, True, True, True),
        RequestStatus.COMPLETED: (4, True, True, True),
        RequestStatus.CLOSED: (4, True, True, True),
    }
)

# Statuses rendered as a one-line summary instead of the full stepper.
_SUMMARY_STATUSES = frozenset({RequestStatus.DRAFT, RequestStatus.CLOSED, RequestStatus.REJECTED})


def _build_progress(
    status: RequestStatus,
    step_index: int,
    *,
    payment_completed: bool,
    questionnaire_completed: bool,
    documents_uploaded: bool,
) -> WorkflowProgress:
    return WorkflowProgress(
        current_step=STEP_ORDER[step_index],
        current_step_index=step_index,
        completed_steps=STEP_ORDER[:step_index],
        payment_completed=payment_completed,
        questionnaire_completed=questionnaire_completed,
        documents_uploaded=documents_uploaded,
        is_in_review=status in RequestStatus.review_statuses(),
        is_completed=status in RequestStatus.completed_statuses(),
        is_rejected=status == RequestStatus.REJECTED,
        progress_percentage=step_index / _LAST_INDEX * 100,
    )


def project_status(status: str | RequestStatus | StatusAlias) -> WorkflowProgress:
    """Project a bare status onto the workflow.

    Raises:
        UnknownStatusError: ``status`` cannot be resolved.
    """
    canonical = resolve_alias(status)
    step_index, payment, questionnaire, documents = STATUS_MILESTONES[canonical]
    return _build_progress(
        canonical,
        step_index,
        payment_completed=payment,
        questionnaire_completed=questionnaire,
        documents_uploaded=documents,
    )


def _as_summary(request: Any) -> ServiceRequestSummary:
    if isinstance(request, ServiceRequestSummary):
        return request
    if isinstance(request, Mapping):
        return ServiceRequestSummary.model_validate(dict(request))
    return ServiceRequestSummary.model_validate(request, from_attributes=True)


def project_request(request: ServiceRequestSummary | Mapping[str, Any] | Any) -> WorkflowProgress:
    """Project a request record onto the workflow using the evidence it carries.

    Milestones come from the record: a payment id, a form timestamp or
    non-empty form data, a documents timestamp or a non-empty document list.
    The step index walks the milestones in order and stops at the first one
    missing. Review counts as done once all milestones are met and the
    request is in review; completed/closed requests always sit on the last
    step. Contradictory evidence (documents but no payment...) is reported
    as found.

    Raises:
        UnknownStatusError: the record's status cannot be resolved.
        pydantic.ValidationError: the record cannot be read as a summary.
    """
    summary = _as_summary(request)
    status = resolve_alias(summary.status)

    payment_completed = bool(summary.payment_id) or status != RequestStatus.PAYMENT_PENDING
    questionnaire_completed = summary.form_completed_at is not None or bool(summary.form_data)
    documents_uploaded = summary.documents_uploaded_at is not None or bool(summary.documents)

    step_index = 0
    for done in (payment_completed, questionnaire_completed, documents_uploaded):
        if not done:
            break
        step_index += 1
    else:
        if status in RequestStatus.review_statuses():
            step_index = _LAST_INDEX

    if status in RequestStatus.completed_statuses():
        step_index = _LAST_INDEX

    logger.debug(
        "Projected request status=%s payment=%s questionnaire=%s documents=%s -> step %d",
        status.value,
        payment_completed,
        questionnaire_completed,
        documents_uploaded,
        step_index,
    )
    return _build_progress(
        status,
        step_index,
        payment_completed=payment_completed,
        questionnaire_completed=questionnaire_completed,
        documents_uploaded=documents_uploaded,
    )


def get_workflow_progress(request_or_status: Any) -> WorkflowProgress:
    """Project a status value or a request record onto the workflow.

    Strings (including enum members) take the status path; mappings,
    ``ServiceRequestSummary`` instances and objects with a ``status``
    attribute take the record path.
    """
    if isinstance(request_or_status, str):
        return project_status(request_or_status)
    if isinstance(request_or_status, (ServiceRequestSummary, Mapping)) or hasattr(
        request_or_status, "status"
    ):
        return project_request(request_or_status)
    raise TypeError(
        f"Expected a status string or a service request, got {type(request_or_status).__name__}"
    )


def step_state(step_index: int, progress: WorkflowProgress) -> StepState:
    """State of one stepper entry relative to the request's progress.

    A rejected request marks its current step as ``error``.
    """
    if step_index < progress.current_step_index:
        return StepState.COMPLETED
    if step_index == progress.current_step_index:
        return StepState.ERROR if progress.is_rejected else StepState.CURRENT
    return StepState.PENDING


def build_stepper(progress: WorkflowProgress) -> list[StepView]:
    """Return one view entry per workflow step, in pipeline order."""
    return [
        StepView(
            step=step,
            index=index,
            label=STEP_INFO[step].label,
            description=STEP_INFO[step].description,
            state=step_state(index, progress),
        )
        for index, step in enumerate(STEP_ORDER)
    ]


def display_mode(status: str | RequestStatus) -> Literal["summary", "stepper"]:
    """Whether a status is shown as a one-line summary or the full stepper.

    Drafts have not entered the workflow yet; closed and rejected requests
    have left it.
    """
    return "summary" if resolve_alias(status) in _SUMMARY_STATUSES else "stepper"
