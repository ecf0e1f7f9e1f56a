"""
Student Council API — Upload and Document Schemas
===================================================

What:  Response contracts for POST /api/upload and the PDF generation stub.
"""

from typing import List, Optional, Union

from pydantic import Field

from council.schemas.common import CamelModel


class UploadedFileDescriptor(CamelModel):
    name: str = Field(description="Original client-side filename")
    url: str = Field(description="Retrieval URL under /uploads/")
    size: int = Field(description="Stored size in bytes")
    type: str = Field(description="Media type declared by the client")


class UploadResponse(CamelModel):
    success: bool = True
    files: List[UploadedFileDescriptor]


class PdfRequest(CamelModel):
    meeting_id: Optional[Union[int, str]] = Field(default=None)
    template: Optional[str] = Field(default=None, description="Layout name, e.g. 'standard'")


class PdfResponse(CamelModel):
    success: bool = True
    message: str = "PDF generated successfully"
    download_url: str
