"""
Student Council API — Document Generation Route
=================================================

What:  POST /api/generate-pdf. Delegates to the application's PdfRenderer,
       which today only synthesizes a placeholder download URL.
"""

from fastapi import APIRouter, Depends, Request

from council.schemas.upload import PdfRequest, PdfResponse
from council.security import Identity, require_auth
from council.services.pdf_service import PdfRenderer

router = APIRouter(prefix="/api", tags=["Documents"])


def get_pdf_renderer(request: Request) -> PdfRenderer:
    return request.app.state.pdf_renderer


@router.post("/generate-pdf", response_model=PdfResponse, summary="Generate meeting PDF (stub)")
async def generate_pdf(
    body: PdfRequest,
    identity: Identity = Depends(require_auth),
    renderer: PdfRenderer = Depends(get_pdf_renderer),
) -> PdfResponse:
    download_url = await renderer.render(body.meeting_id, body.template)
    return PdfResponse(download_url=download_url)
