from pydantic import BaseModel


class UploadResponse(BaseModel):
    """Response schema for a successful POST /upload."""
    success: bool = True
    message: str
    fileUrl: str
    fileName: str


class UploadFailureResponse(BaseModel):
    """Response schema for POST /upload when the storage backend fails."""
    success: bool = False
    message: str
    error: str


class ErrorResponse(BaseModel):
    """Response schema for a rejected upload."""
    error: str
