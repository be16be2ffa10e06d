# This project was developed with assistance from AI tools.
"""Status taxonomy: alias resolution and display descriptors.

Single source of truth for turning whatever status string the API or a
legacy screen hands us into a canonical ``RequestStatus``, and for the
label/colour each status is shown with.
"""

import logging
from collections.abc import Mapping
from types import MappingProxyType

from ..core.config import settings
from ..enums import RequestPriority, RequestStatus, StatusAlias
from ..schemas.status import PriorityDescriptor, StatusDescriptor, StatusResolution

logger = logging.getLogger(__name__)

LOCALES = ("it", "en")


class UnknownStatusError(ValueError):
    """Raised when a raw value is neither a canonical status nor a known alias."""

    def __init__(self, value: object):
        self.value = value
        super().__init__(f"Unknown service request status: {value!r}")


class MissingDescriptorError(LookupError):
    """Raised when a canonical status has no display descriptor configured."""

    def __init__(self, status: RequestStatus, locale: str):
        self.status = status
        self.locale = locale
        super().__init__(f"No '{locale}' descriptor configured for status '{status.value}'")


# Legacy frontend names whose value differs from the backend value.
STATUS_ALIASES: Mapping[StatusAlias, RequestStatus] = MappingProxyType(
    {
        StatusAlias.PENDING: RequestStatus.SUBMITTED,
        StatusAlias.IN_PROGRESS: RequestStatus.IN_REVIEW,
        StatusAlias.UNDER_REVIEW: RequestStatus.IN_REVIEW,
        StatusAlias.CANCELLED: RequestStatus.CLOSED,
    }
)

# status -> (colour, Italian label, English label)
_STATUS_STYLE: dict[RequestStatus, tuple[str, str, str]] = {
    RequestStatus.DRAFT: ("gray", "Bozza", "Draft"),
    RequestStatus.SUBMITTED: ("blue", "Inviato", "Submitted"),
    RequestStatus.PAYMENT_PENDING: ("yellow", "In Attesa Pagamento", "Awaiting Payment"),
    RequestStatus.AWAITING_FORM: ("yellow", "In Attesa Modulo", "Awaiting Form"),
    RequestStatus.AWAITING_DOCUMENTS: ("orange", "In Attesa Documenti", "Awaiting Documents"),
    RequestStatus.IN_REVIEW: ("purple", "In Lavorazione", "In Review"),
    RequestStatus.MISSING_DOCUMENTS: ("orange", "Documenti Mancanti", "Missing Documents"),
    RequestStatus.COMPLETED: ("green", "Completato", "Completed"),
    RequestStatus.CLOSED: ("gray", "Chiuso", "Closed"),
    RequestStatus.REJECTED: ("red", "Rifiutato", "Rejected"),
}

_PRIORITY_STYLE: dict[RequestPriority, tuple[str, str, str]] = {
    RequestPriority.LOW: ("gray", "Bassa", "Low"),
    RequestPriority.NORMAL: ("blue", "Normale", "Normal"),
    RequestPriority.HIGH: ("orange", "Alta", "High"),
    RequestPriority.URGENT: ("red", "Urgente", "Urgent"),
}


# Terminal statuses that did not finish successfully
_FAILED_STATUSES = RequestStatus.terminal_statuses() - RequestStatus.completed_statuses()


def _status_descriptor(status: RequestStatus, color: str, label: str) -> StatusDescriptor:
    return StatusDescriptor(
        label=label,
        color=color,
        bg_class=f"bg-{color}-100",
        text_class=f"text-{color}-700",
        color_class=f"text-{color}-600 dark:text-{color}-400",
        is_terminal_success=status in RequestStatus.completed_statuses(),
        is_terminal_failure=status in _FAILED_STATUSES,
    )


def _build_status_info() -> Mapping[str, Mapping[RequestStatus, StatusDescriptor]]:
    info = {}
    for i, locale in enumerate(LOCALES, start=1):
        info[locale] = MappingProxyType(
            {
                status: _status_descriptor(status, style[0], style[i])
                for status, style in _STATUS_STYLE.items()
            }
        )
    return MappingProxyType(info)


def _build_priority_info() -> Mapping[str, Mapping[RequestPriority, PriorityDescriptor]]:
    info = {}
    for i, locale in enumerate(LOCALES, start=1):
        info[locale] = MappingProxyType(
            {
                priority: PriorityDescriptor(
                    label=style[i],
                    color=style[0],
                    bg_class=f"bg-{style[0]}-100",
                    text_class=f"text-{style[0]}-600",
                )
                for priority, style in _PRIORITY_STYLE.items()
            }
        )
    return MappingProxyType(info)


# locale -> status -> descriptor
STATUS_INFO = _build_status_info()
PRIORITY_INFO = _build_priority_info()


def resolve_alias(raw: str | RequestStatus | StatusAlias) -> RequestStatus:
    """Resolve a canonical value or legacy alias to a ``RequestStatus``.

    Canonical values win over aliases. Lookup is exact: no case folding
    and no trimming.

    Raises:
        UnknownStatusError: ``raw`` matches neither table.
    """
    if not isinstance(raw, str):
        raise UnknownStatusError(raw)
    try:
        return RequestStatus(raw)
    except ValueError:
        pass
    try:
        alias = StatusAlias(raw)
    except ValueError:
        raise UnknownStatusError(raw) from None
    return STATUS_ALIASES[alias]


def resolve_or_default(
    raw: str | None,
    default: str | RequestStatus | None = None,
) -> StatusResolution:
    """Resolve ``raw`` for display, falling back instead of raising.

    Meant for the outermost display code only. The fallback is reported
    through ``StatusResolution.fell_back`` and logged so the anomaly stays
    visible. The default is only resolved when it is needed; an explicit
    ``default`` that cannot be resolved raises ``UnknownStatusError``.
    """
    if raw:
        try:
            return StatusResolution(raw=raw, status=resolve_alias(raw))
        except UnknownStatusError as exc:
            fallback = _fallback_status(default)
            if settings.LOG_FALLBACKS:
                logger.warning("%s; displaying '%s' instead", exc, fallback.value)
            return StatusResolution(raw=str(raw), status=fallback, fell_back=True)

    return StatusResolution(raw=raw, status=_fallback_status(default), fell_back=True)


def _fallback_status(default: str | RequestStatus | None) -> RequestStatus:
    if default is None:
        return settings.DEFAULT_FALLBACK_STATUS
    return resolve_alias(default)


def _check_locale(locale: str | None) -> str:
    locale = locale or settings.STATUS_LABEL_LOCALE
    if locale not in LOCALES:
        raise ValueError(f"Unsupported label locale '{locale}'. Expected one of {LOCALES}.")
    return locale


def describe(status: str | RequestStatus, locale: str | None = None) -> StatusDescriptor:
    """Return the display descriptor for a status.

    Strings are resolved through ``resolve_alias`` first, so legacy
    aliases describe as their canonical status.

    Raises:
        UnknownStatusError: ``status`` cannot be resolved.
        MissingDescriptorError: the canonical status has no descriptor.
        ValueError: ``locale`` is not supported.
    """
    locale = _check_locale(locale)
    canonical = resolve_alias(status)
    descriptor = STATUS_INFO.get(locale, {}).get(canonical)
    if descriptor is None:
        raise MissingDescriptorError(canonical, locale)
    return descriptor


def describe_priority(
    priority: str | RequestPriority,
    locale: str | None = None,
) -> PriorityDescriptor:
    """Return the badge descriptor for a request priority."""
    locale = _check_locale(locale)
    return PRIORITY_INFO[locale][RequestPriority(priority)]
