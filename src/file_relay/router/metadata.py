"""Router – service description."""

from fastapi import APIRouter

from src.file_relay.config import settings
from src.file_relay.schemas.metadata import MetadataResponse

router = APIRouter(tags=["Metadata"])


@router.get("/metadata", response_model=MetadataResponse)
def get_metadata() -> MetadataResponse:
    """Describe the service: name, custom domain, file types and size ceiling."""
    return MetadataResponse(
        serviceName=settings.service_name,
        domain=settings.custom_domain,
        supportedFileTypes=settings.supported_file_types_list,
        maxFileSize=settings.max_upload_size_label,
    )
