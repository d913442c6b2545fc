"""Status badge classification.

This module provides:
- StatusPresentation for (label, color class) badge pairs
- classify_status for the code-to-presentation lookup with fallback
- Status enums for the codes the backend produces
"""

from src.status.codes import (
    BatchStatus,
    ContentStatus,
    NotificationStatus,
    PostStatus,
    UploadStatus,
)
from src.status.presentation import (
    DEFAULT_PRESENTATION,
    STATUS_PRESENTATIONS,
    StatusPresentation,
    classify_status,
    status_color,
    status_label,
)


__all__ = [
    "DEFAULT_PRESENTATION",
    "STATUS_PRESENTATIONS",
    "BatchStatus",
    "ContentStatus",
    "NotificationStatus",
    "PostStatus",
    "StatusPresentation",
    "UploadStatus",
    "classify_status",
    "status_color",
    "status_label",
]
