"""
Read-only client for the WordPress REST API.

Every operation issues exactly one authenticated GET through the injected
transport and validates the body before handing it back. Transport errors
propagate as-is and a body that is not JSON surfaces as ``httpx.DecodingError``;
anything else wrong with a received response becomes a
``WordpressError`` carrying a fixed message.
"""

import base64
import logging
import re
from functools import lru_cache
from typing import Any, List, Mapping, Optional, Sequence, Type, TypeVar, Union

import httpx
from pydantic import BaseModel, SecretStr, TypeAdapter, ValidationError

from wpapi.errors import ConfigurationError, WordpressError
from wpapi.schemas.wordpress import (
    Category,
    LlmsTxtResult,
    PageDetail,
    PaginationInfo,
    PostDetail,
    PostOverview,
    PostsOverviewResult,
    Tag,
)
from wpapi.services.query_builder import build_query, join_ids, resolve_status
from wpapi.services.transport import Transport, TransportResponse
from wpapi.settings import Settings

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)

API_PREFIX = "/wp-json/wp/v2"

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


class WordpressClient:
    def __init__(
        self,
        api_url: str,
        username: str,
        password: Union[SecretStr, str],
        default_status: str,
        transport: Transport,
    ):
        if not isinstance(password, SecretStr):
            password = SecretStr(password)
        if not username or not password.get_secret_value():
            raise ConfigurationError(
                "WORDPRESS_USERNAME or WORDPRESS_PASSWORD is not set"
            )

        self.api_url = str(api_url).rstrip("/")
        self.username = username
        self._password = password
        self.default_status = default_status
        self.transport = transport

    @classmethod
    def from_settings(
        cls, settings: Settings, transport: Transport
    ) -> "WordpressClient":
        return cls(
            api_url=settings.wordpress_api_url,
            username=settings.WORDPRESS_USERNAME,
            password=settings.WORDPRESS_PASSWORD,
            default_status=settings.WORDPRESS_STATUS,
            transport=transport,
        )

    def __repr__(self) -> str:
        return f"WordpressClient(api_url={self.api_url!r}, username={self.username!r})"

    # Public API -----------------------------------------------------------

    def load_categories(self, category: str) -> List[Category]:
        logger.debug(f"Fetching categories for {category}")
        response = self._get("categories", {"slug": category})
        return self._parse_list(
            _read_json(response), Category, "Failed to fetch categories"
        )

    def load_tags(self, tag: str) -> List[Tag]:
        logger.debug(f"Fetching tags for {tag}")
        response = self._get("tags", {"slug": tag})
        return self._parse_list(_read_json(response), Tag, "Failed to fetch tags")

    def load_pages_overview(
        self,
        category_ids: Optional[Sequence[int]] = None,
        status: Optional[str] = None,
    ) -> List[PostOverview]:
        params = {
            "per_page": 10,
            "status": resolve_status(status, self.default_status),
            "_embed": "true",
            "categories": _ids_param(category_ids),
        }
        response = self._get("pages", params)
        return self._parse_list(
            _read_json(response), PostOverview, "Failed to fetch pages"
        )

    def load_category_pages(
        self, category: str, status: Optional[str] = None
    ) -> List[PostOverview]:
        """
        Resolve a category slug and list the pages filed under it.

        Only the first matching category is used. When the slug matches no
        category the result is empty and no page request is made.
        """
        categories = self.load_categories(category)
        if not categories:
            logger.info(f"No category found for slug {category}")
            return []
        return self.load_pages_overview(
            category_ids=[categories[0].id], status=status
        )

    def load_page_detail(
        self,
        slug: str,
        category_ids: Optional[Sequence[int]] = None,
        status: Optional[str] = None,
    ) -> List[PageDetail]:
        logger.debug(f"Fetching page detail for {slug}")
        params = {
            "slug": slug,
            "status": resolve_status(status, self.default_status),
            "_embed": "true",
            "categories": _ids_param(category_ids),
        }
        response = self._get("pages", params)
        return self._parse_list(
            _read_json(response), PageDetail, "Failed to fetch page detail"
        )

    def load_posts_overview(
        self,
        status: Optional[str] = None,
        page: int = 1,
        per_page: int = 9,
        tag_ids: Optional[Sequence[int]] = None,
        category_ids: Optional[Sequence[int]] = None,
    ) -> PostsOverviewResult:
        params = {
            "page": page,
            "per_page": per_page,
            "status": resolve_status(status, self.default_status),
            "_embed": "true",
            "tags": _ids_param(tag_ids),
            "categories": _ids_param(category_ids),
        }
        response = self._get("posts", params)

        if response.status_code != 200:
            logger.error(f"Failed to fetch posts (status {response.status_code})")
            logger.error(response.text)
            raise WordpressError("Failed to fetch posts")

        total_pages = _header_int(response.headers, "X-WP-TotalPages", 1)
        total_posts = _header_int(response.headers, "X-WP-Total", 0)

        posts = self._parse_list(
            _read_json(response), PostOverview, "Failed to fetch posts"
        )
        return PostsOverviewResult(
            posts=posts,
            pagination=PaginationInfo(
                total_pages=total_pages,
                total_posts=total_posts,
                current_page=page,
            ),
        )

    def load_post_detail(
        self,
        slug: str,
        status: Optional[str] = None,
        tag_ids: Optional[Sequence[int]] = None,
        category_ids: Optional[Sequence[int]] = None,
    ) -> List[PostDetail]:
        logger.debug(f"Fetching post detail for {slug}")
        params = {
            "slug": slug,
            "status": resolve_status(status, self.default_status),
            "_embed": "true",
            "tags": _ids_param(tag_ids),
            "categories": _ids_param(category_ids),
        }
        response = self._get("posts", params)
        return self._parse_list(
            _read_json(response), PostDetail, "Failed to fetch post detail"
        )

    def load_llms_txt(self) -> LlmsTxtResult:
        url = f"{self.api_url}/llms.txt"
        logger.debug(f"Requesting {url}")
        response = self.transport.get(url, headers=self._auth_headers())
        return LlmsTxtResult(llms_txt=response.text)

    # Internals ------------------------------------------------------------

    def _auth_headers(self) -> dict:
        credentials = f"{self.username}:{self._password.get_secret_value()}"
        token = base64.b64encode(credentials.encode()).decode()
        return {"Authorization": f"Basic {token}"}

    def _get(self, resource: str, params: dict) -> TransportResponse:
        url = f"{self.api_url}{API_PREFIX}/{resource}"
        query = build_query(params)
        if query:
            url = f"{url}?{query}"
        logger.debug(f"Requesting {url}")
        return self.transport.get(url, headers=self._auth_headers())

    @staticmethod
    def _parse_list(payload: Any, model: Type[ModelT], message: str) -> List[ModelT]:
        logger.debug(payload)
        try:
            return _list_adapter(model).validate_python(payload)
        except ValidationError as e:
            logger.error(f"{message}: {e}")
            raise WordpressError(message) from None


def _ids_param(ids: Optional[Sequence[int]]) -> Optional[str]:
    return None if ids is None else join_ids(ids)


def _read_json(response: TransportResponse) -> Any:
    """Decode a JSON body; a body that is not JSON counts as a transport failure."""
    try:
        return response.json()
    except ValueError as e:
        try:
            request = response.request
        except (AttributeError, RuntimeError):
            request = None
        logger.error(f"WordPress returned a non-JSON body: {e}")
        raise httpx.DecodingError(str(e), request=request) from e


@lru_cache(maxsize=None)
def _list_adapter(model: Type[ModelT]) -> TypeAdapter:
    return TypeAdapter(List[model])


def _header_int(headers: Mapping[str, str], name: str, default: int) -> int:
    """Read a numeric header, keeping leading digits (`4abc` reads as 4)."""
    raw = headers.get(name)
    if raw is None:
        return default
    match = _LEADING_INT.match(str(raw))
    if match:
        return int(match.group(1))
    logger.warning(f"Ignoring unparseable {name} header: {raw!r}")
    return default
