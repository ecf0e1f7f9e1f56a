"""
Student Council API — PDF Generation Seam
===========================================

What:  Abstract contract for rendering meeting documents, and the
       placeholder implementation the API ships with.
How:   create_app() installs a PdfRenderer on `app.state.pdf_renderer`;
       routes/documents.py calls it through the interface only.

PlaceholderPdfRenderer does not produce a document. It returns a
synthesized URL under /api/pdf/ that nothing serves. A real renderer must
delegate to a document-rendering service and return a URL only once the
artifact exists.
"""

import logging
from abc import ABC, abstractmethod
from datetime import datetime, timezone
from typing import Callable, Optional, Union

logger = logging.getLogger(__name__)

MeetingRef = Optional[Union[int, str]]


class PdfRenderer(ABC):
    """Contract for turning a meeting into a downloadable document."""

    @abstractmethod
    async def render(self, meeting_id: MeetingRef, template: Optional[str]) -> str:
        """
        Render the document and return its download URL.

        Args:
            meeting_id: Meeting to render (as sent by the client).
            template: Layout name; None selects the renderer's default.
        """
        ...


class PlaceholderPdfRenderer(PdfRenderer):
    """Returns a timestamped placeholder URL without rendering anything."""

    def __init__(self, clock: Optional[Callable[[], datetime]] = None):
        self._clock = clock or (lambda: datetime.now(timezone.utc))

    async def render(self, meeting_id: MeetingRef, template: Optional[str]) -> str:
        millis = int(self._clock().timestamp() * 1000)
        logger.info(
            "Placeholder PDF requested for meeting %s (template=%s)",
            meeting_id,
            template or "default",
        )
        return f"/api/pdf/{millis}.pdf"
