from typing import Annotated

from fastapi import APIRouter, Depends

from commerce_api.config import Settings, get_settings
from commerce_api.feature_flags import get_feature_flags
from commerce_api.infrastructure.common.schemas import AppSettingsResponse, CredentialHeaders

router = APIRouter(prefix="/settings", tags=["settings"])


@router.get("")
async def get_app_settings(
    settings: Annotated[Settings, Depends(get_settings)],
) -> AppSettingsResponse:
    """
    Get public application settings.

    Public endpoint: no credentials required.
    """
    return AppSettingsResponse(
        project_name=settings.PROJECT_NAME,
        version=settings.VERSION,
        credential_headers=CredentialHeaders(
            login_id=settings.LOGIN_ID_HEADER, password=settings.LOGIN_PASSWORD_HEADER
        ),
        feature_flags=get_feature_flags(),
    )
