# Copyright (C) 2026 Baila Kids Dance
# SPDX-License-Identifier: LGPL-3.0-or-later
"""mailto: links for emailing a group of parents at once."""

from __future__ import annotations

from collections.abc import Iterable
from urllib.parse import quote

from baila_admin.models.reports import MailtoLink

WAITLIST_SUBJECT = "Baila Kids – Waitlist Update"

# Characters encodeURIComponent leaves as-is besides the unreserved set
_URI_COMPONENT_SAFE = "!'()*"


def unique_emails(emails: Iterable[str | None]) -> list[str]:
    """Trimmed, non-empty addresses in first-seen order without repeats."""
    seen: dict[str, None] = {}
    for email in emails:
        address = (email or "").strip()
        if address:
            seen.setdefault(address, None)
    return list(seen)


def build_bcc_mailto(
    emails: Iterable[str | None],
    subject: str | None = None,
) -> MailtoLink:
    """Build a mailto: link that BCCs every address.

    The recipient list and subject are percent-encoded the way
    encodeURIComponent does it, so commas become %2C.

    Example:
        >>> build_bcc_mailto(["a@x.com", " a@x.com", "b@y.com"]).href
        'mailto:?bcc=a%40x.com%2Cb%40y.com'
    """
    recipients = unique_emails(emails)

    href = "mailto:?bcc=" + quote(",".join(recipients), safe=_URI_COMPONENT_SAFE)
    if subject:
        href += "&subject=" + quote(subject, safe=_URI_COMPONENT_SAFE)

    return MailtoLink(href=href, recipients=recipients)
