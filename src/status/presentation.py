"""Status badge presentation lookup.

Maps an opaque status code to the label and color class rendered by the
dashboard's status badge. Unknown codes fall back to a neutral default.
"""

from enum import Enum
from types import MappingProxyType

from pydantic import BaseModel, ConfigDict, Field


class StatusPresentation(BaseModel):
    """Display label and color class for a status badge.

    The color class is an opaque styling token for the presentation layer.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    label: str = Field(min_length=1)
    color_class: str = Field(min_length=1)


# Color classes shared by several statuses
_SUCCESS = "bg-success/20 text-success"
_WARNING = "bg-warning/20 text-warning"
_INFO = "bg-info/20 text-info"
_DANGER = "bg-danger/20 text-danger"
_MUTED = "bg-muted/20 text-muted"
_AI = "bg-purple-900/30 text-purple-400"

DEFAULT_PRESENTATION = StatusPresentation(label="Tidak Diketahui", color_class=_MUTED)

_CANCELLED = StatusPresentation(label="Dibatalkan", color_class=_MUTED)

STATUS_PRESENTATIONS: MappingProxyType[str, StatusPresentation] = MappingProxyType(
    {
        "done": StatusPresentation(label="Selesai", color_class=_SUCCESS),
        "pending": StatusPresentation(label="Menunggu", color_class=_WARNING),
        "notified": StatusPresentation(label="Dinotifikasi", color_class=_INFO),
        "late": StatusPresentation(label="Terlambat", color_class=_DANGER),
        "missed": StatusPresentation(
            label="Terlewat", color_class="bg-red-900/30 text-red-400"
        ),
        "draft": StatusPresentation(label="Draft", color_class=_MUTED),
        "ai_generating": StatusPresentation(label="AI Proses", color_class=_AI),
        "ai_done": StatusPresentation(
            label="AI Selesai", color_class="bg-secondary/20 text-secondary"
        ),
        "ai_generated": StatusPresentation(label="AI Selesai", color_class=_AI),
        "ready": StatusPresentation(label="Siap Upload", color_class=_SUCCESS),
        "used": StatusPresentation(label="Terpakai", color_class=_DANGER),
        "finalized": StatusPresentation(label="Final", color_class=_SUCCESS),
        "scheduled": StatusPresentation(label="Terjadwal", color_class=_INFO),
        "preview": StatusPresentation(label="Preview", color_class=_WARNING),
        "published": StatusPresentation(label="Dipublish", color_class=_SUCCESS),
        "cancelled": _CANCELLED,
        # Backend enums spell it with a single "l"
        "canceled": _CANCELLED,
    }
)


def classify_status(code: str) -> StatusPresentation:
    """Return the badge presentation for a status code.

    Lookup is exact and case-sensitive. Unknown codes, including the empty
    string, resolve to DEFAULT_PRESENTATION.

    Args:
        code: Status code, or a str-valued status enum member.

    Returns:
        Configured presentation, or the default one.
    """
    key = code.value if isinstance(code, Enum) else code
    return STATUS_PRESENTATIONS.get(key, DEFAULT_PRESENTATION)


def status_label(code: str) -> str:
    """Return only the badge label for a status code."""
    return classify_status(code).label


def status_color(code: str) -> str:
    """Return only the badge color class for a status code."""
    return classify_status(code).color_class
