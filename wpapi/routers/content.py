import logging
from typing import Callable, List, Optional, TypeVar

import httpx
from fastapi import APIRouter, Depends, HTTPException, Query
from fastapi.responses import PlainTextResponse

from wpapi import dependencies as deps
from wpapi.errors import WordpressError
from wpapi.schemas.wordpress import (
    Category,
    PageDetail,
    PostDetail,
    PostOverview,
    PostsOverviewResult,
    Tag,
    WpStatus,
)
from wpapi.services.wordpress_service import WordpressClient

logger = logging.getLogger(__name__)

router = APIRouter()

T = TypeVar("T")


def _fetch(what: str, load: Callable[[], T]) -> T:
    try:
        return load()
    except HTTPException:
        raise
    except WordpressError as e:
        raise HTTPException(status_code=502, detail=e.message)
    except httpx.HTTPError as e:
        logger.error(f"WordPress request failed while loading {what}: {e}")
        raise HTTPException(status_code=502, detail="WordPress request failed")
    except Exception as e:
        logger.error(f"Unexpected error loading {what}: {e}")
        raise HTTPException(status_code=500, detail=f"Failed to retrieve {what}")


def _first_or_404(items: List[T], what: str) -> T:
    if not items:
        raise HTTPException(status_code=404, detail=f"{what} not found")
    return items[0]


@router.get("/categories/{slug}", response_model=List[Category])
def get_categories(
    slug: str, client: WordpressClient = Depends(deps.get_wordpress_client)
):
    return _fetch("categories", lambda: client.load_categories(slug))


@router.get("/tags/{slug}", response_model=List[Tag])
def get_tags(slug: str, client: WordpressClient = Depends(deps.get_wordpress_client)):
    return _fetch("tags", lambda: client.load_tags(slug))


@router.get("/pages", response_model=List[PostOverview])
def list_pages(
    category_ids: Optional[List[int]] = Query(None),
    status: Optional[WpStatus] = None,
    client: WordpressClient = Depends(deps.get_wordpress_client),
):
    return _fetch(
        "pages",
        lambda: client.load_pages_overview(category_ids=category_ids, status=status),
    )


@router.get("/pages/by-category/{category}", response_model=List[PostOverview])
def list_category_pages(
    category: str,
    status: Optional[WpStatus] = None,
    client: WordpressClient = Depends(deps.get_wordpress_client),
):
    return _fetch(
        "pages", lambda: client.load_category_pages(category, status=status)
    )


@router.get("/pages/{slug}", response_model=PageDetail)
def get_page(
    slug: str,
    category_ids: Optional[List[int]] = Query(None),
    status: Optional[WpStatus] = None,
    client: WordpressClient = Depends(deps.get_wordpress_client),
):
    """Get a single page by slug."""
    pages = _fetch(
        "page",
        lambda: client.load_page_detail(
            slug, category_ids=category_ids, status=status
        ),
    )
    return _first_or_404(pages, "Page")


@router.get("/posts", response_model=PostsOverviewResult)
def list_posts(
    page: int = Query(1, ge=1),
    per_page: int = Query(9, ge=1, le=100),
    status: Optional[WpStatus] = None,
    tag_ids: Optional[List[int]] = Query(None),
    category_ids: Optional[List[int]] = Query(None),
    client: WordpressClient = Depends(deps.get_wordpress_client),
):
    """Get one page of post overviews plus pagination info."""
    return _fetch(
        "posts",
        lambda: client.load_posts_overview(
            status=status,
            page=page,
            per_page=per_page,
            tag_ids=tag_ids,
            category_ids=category_ids,
        ),
    )


@router.get("/posts/{slug}", response_model=PostDetail)
def get_post(
    slug: str,
    status: Optional[WpStatus] = None,
    tag_ids: Optional[List[int]] = Query(None),
    category_ids: Optional[List[int]] = Query(None),
    client: WordpressClient = Depends(deps.get_wordpress_client),
):
    """Get a single post by slug."""
    posts = _fetch(
        "post",
        lambda: client.load_post_detail(
            slug, status=status, tag_ids=tag_ids, category_ids=category_ids
        ),
    )
    return _first_or_404(posts, "Post")


@router.get("/llms.txt", response_class=PlainTextResponse)
def get_llms_txt(client: WordpressClient = Depends(deps.get_wordpress_client)):
    result = _fetch("llms.txt", client.load_llms_txt)
    return PlainTextResponse(result.llms_txt)
