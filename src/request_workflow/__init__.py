# This project was developed with assistance from AI tools.
__version__ = "0.1.0"

from .enums import (
    RequestPriority,
    RequestStatus,
    StatusAlias,
    StepState,
    WorkflowStep,
)
from .schemas.status import PriorityDescriptor, StatusDescriptor, StatusResolution
from .schemas.workflow import ServiceRequestSummary, StepView, WorkflowProgress
from .services.status import (
    MissingDescriptorError,
    UnknownStatusError,
    describe,
    describe_priority,
    resolve_alias,
    resolve_or_default,
)
from .services.workflow import (
    build_stepper,
    display_mode,
    get_workflow_progress,
    project_request,
    project_status,
    step_state,
)

__all__ = [
    "__version__",
    # Enums
    "RequestStatus",
    "StatusAlias",
    "WorkflowStep",
    "StepState",
    "RequestPriority",
    # Schemas
    "StatusDescriptor",
    "StatusResolution",
    "PriorityDescriptor",
    "ServiceRequestSummary",
    "WorkflowProgress",
    "StepView",
    # Errors
    "UnknownStatusError",
    "MissingDescriptorError",
    # Operations
    "resolve_alias",
    "resolve_or_default",
    "describe",
    "describe_priority",
    "project_status",
    "project_request",
    "get_workflow_progress",
    "step_state",
    "build_stepper",
    "display_mode",
]
