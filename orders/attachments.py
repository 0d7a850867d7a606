"""
Purpose: Validate prescription uploads before they reach the gate.
Accepts: JPG, PNG, PDF. Max size: 5 MB (inclusive).
"""

from __future__ import annotations

from typing import Optional

from .exceptions import InvalidAttachment
from .models import PrescriptionAttachment
from .policy import OrderPolicy, default_order_policy


def validate_attachment(
    attachment: PrescriptionAttachment,
    policy: Optional[OrderPolicy] = None,
) -> PrescriptionAttachment:
    """
    Returns the attachment unchanged, or raises InvalidAttachment.
    Size is checked before type.
    """
    policy = policy or default_order_policy()

    if attachment.size_bytes < 0:
        raise InvalidAttachment(f"Invalid file size: {attachment.size_bytes}")

    if attachment.size_bytes > policy.max_attachment_bytes:
        limit_mb = policy.max_attachment_bytes / (1024 * 1024)
        raise InvalidAttachment(f"File size must be less than {limit_mb:g}MB")

    if (attachment.mime_type or "").lower() not in policy.allowed_mime_types:
        raise InvalidAttachment("Only JPG, PNG, or PDF files allowed")

    return attachment
