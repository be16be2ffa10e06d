# This project was developed with assistance from AI tools.
"""
Domain enums for the service-request lifecycle.

Canonical values match what the backend API stores and returns. The
historical frontend vocabulary lives in ``StatusAlias`` and is resolved
onto these values by ``services.status.resolve_alias``.
"""

import enum


class RequestStatus(str, enum.Enum):
    DRAFT = "draft"
    SUBMITTED = "submitted"
    PAYMENT_PENDING = "payment_pending"
    AWAITING_FORM = "awaiting_form"
    AWAITING_DOCUMENTS = "awaiting_documents"
    IN_REVIEW = "in_review"
    MISSING_DOCUMENTS = "missing_documents"
    COMPLETED = "completed"
    CLOSED = "closed"
    REJECTED = "rejected"

    @classmethod
    def completed_statuses(cls) -> frozenset["RequestStatus"]:
        """Statuses where the request finished successfully."""
        return frozenset({cls.COMPLETED, cls.CLOSED})

    @classmethod
    def review_statuses(cls) -> frozenset["RequestStatus"]:
        """Statuses where staff is looking at the request."""
        return frozenset({cls.SUBMITTED, cls.IN_REVIEW})

    @classmethod
    def terminal_statuses(cls) -> frozenset["RequestStatus"]:
        """Statuses where a request is no longer active."""
        return frozenset({cls.COMPLETED, cls.CLOSED, cls.REJECTED})


class StatusAlias(str, enum.Enum):
    """Legacy display names that differ from the canonical backend value.

    The remaining legacy names (``DRAFT``, ``COMPLETED``...) share their
    value with ``RequestStatus`` and need no entry here.
    """

    PENDING = "pending"
    IN_PROGRESS = "in_progress"
    UNDER_REVIEW = "under_review"
    CANCELLED = "cancelled"


class WorkflowStep(str, enum.Enum):
    PAYMENT = "payment"
    QUESTIONNAIRE = "questionnaire"
    DOCUMENTS = "documents"
    REVIEW = "review"
    COMPLETED = "completed"

    @classmethod
    def ordered(cls) -> tuple["WorkflowStep", ...]:
        """Steps in pipeline order."""
        return (cls.PAYMENT, cls.QUESTIONNAIRE, cls.DOCUMENTS, cls.REVIEW, cls.COMPLETED)


class StepState(str, enum.Enum):
    COMPLETED = "completed"
    CURRENT = "current"
    PENDING = "pending"
    ERROR = "error"


class RequestPriority(str, enum.Enum):
    LOW = "low"
    NORMAL = "normal"
    HIGH = "high"
    URGENT = "urgent"
