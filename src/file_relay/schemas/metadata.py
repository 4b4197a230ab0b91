from pydantic import BaseModel


class MetadataResponse(BaseModel):
    """Response schema for GET /metadata."""
    serviceName: str
    domain: str
    supportedFileTypes: list[str]
    maxFileSize: str
