"""Status codes produced by the dashboard backend.

Each enum mirrors a workflow state stored by the backend. Values are the
raw strings the UI receives, so enum members can be passed straight to
classify_status.
"""

from enum import Enum


class PostStatus(str, Enum):
    """Status of a scheduled post."""

    SCHEDULED = "scheduled"
    DUE = "due"
    OVERDUE = "overdue"
    MISSED = "missed"
    DONE = "done"
    CANCELED = "canceled"


class ContentStatus(str, Enum):
    """Status of a content item."""

    DRAFT = "draft"
    AI_GENERATED = "ai_generated"
    READY = "ready"
    USED = "used"


class BatchStatus(str, Enum):
    """Status of a bulk scheduling batch."""

    PREVIEW = "preview"
    PUBLISHED = "published"
    CANCELED = "canceled"


class NotificationStatus(str, Enum):
    """Delivery status of a reminder notification."""

    PENDING = "pending"
    SENT = "sent"
    FAILED = "failed"


class UploadStatus(str, Enum):
    """Progress of a direct upload."""

    IDLE = "idle"
    DOWNLOADING = "downloading"
    UPLOADING = "uploading"
    PROCESSING = "processing"
    PUBLISHED = "published"
    FAILED = "failed"
