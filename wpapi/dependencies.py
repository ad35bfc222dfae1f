import logging

import httpx
from fastapi import Depends, HTTPException

from wpapi.errors import ConfigurationError
from wpapi.services.wordpress_service import WordpressClient
from wpapi.settings import Settings, get_settings

logger = logging.getLogger(__name__)


def get_transport(settings: Settings = Depends(get_settings)):
    """One httpx client per request, closed once the response is sent."""
    with httpx.Client(timeout=settings.WORDPRESS_TIMEOUT_SECONDS) as client:
        yield client


def get_wordpress_client(
    settings: Settings = Depends(get_settings),
    transport=Depends(get_transport),
):
    try:
        return WordpressClient.from_settings(settings, transport)
    except ConfigurationError as e:
        logger.error(f"WordPress client misconfigured: {e}")
        raise HTTPException(status_code=500, detail="WordPress client is not configured")
