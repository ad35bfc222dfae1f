from fastapi import Depends, HTTPException, Security
from fastapi.security.api_key import APIKeyHeader
from starlette.status import HTTP_403_FORBIDDEN

from wpapi.settings import Settings, get_settings

API_KEY_NAME = "X-WPAPI-Key"
api_key_header = APIKeyHeader(name=API_KEY_NAME, auto_error=False)


def get_api_key(
    api_key_header: str = Security(api_key_header),
    current_settings: Settings = Depends(get_settings),
):
    # An unset key never matches, so a misconfigured service stays closed.
    if current_settings.WPAPI_API_KEY and api_key_header == current_settings.WPAPI_API_KEY:
        return api_key_header
    raise HTTPException(
        status_code=HTTP_403_FORBIDDEN,
        detail="Could not validate API key",
    )
