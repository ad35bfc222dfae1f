from typing import Any, Dict, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

WpStatus = Literal["draft", "publish"]


class WordpressModel(BaseModel):
    # WordPress returns far more fields than we model; ignore the rest.
    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)


class Rendered(WordpressModel):
    rendered: str


class ProtectedRendered(WordpressModel):
    rendered: str
    protected: bool


class EmbeddedAuthor(WordpressModel):
    id: int
    name: str
    url: Optional[str] = None
    description: Optional[str] = None
    avatar_urls: Optional[Dict[str, str]] = None


class EmbeddedMedia(WordpressModel):
    id: int
    source_url: str
    alt_text: Optional[str] = None


class Embedded(WordpressModel):
    author: Optional[List[EmbeddedAuthor]] = None
    featured_media: Optional[List[EmbeddedMedia]] = Field(
        default=None, alias="wp:featuredmedia"
    )


class Category(WordpressModel):
    id: int
    count: int
    description: str
    link: str
    name: str
    slug: str
    taxonomy: Literal["category"]
    parent: int
    meta: List[Any]


class Tag(WordpressModel):
    id: int
    count: int
    description: str
    link: str
    name: str
    slug: str
    taxonomy: Literal["post_tag"]
    meta: List[Any]


class PostOverview(WordpressModel):
    id: int
    title: Rendered
    excerpt: Rendered
    date: str
    slug: str
    author: Optional[int] = None
    featured_media: Optional[int] = None
    embedded: Optional[Embedded] = Field(default=None, alias="_embedded")


class PostDetail(PostOverview):
    content: Rendered
    modified: Optional[str] = None


class PageOverview(WordpressModel):
    id: int
    date: str
    slug: str
    status: str
    type: Literal["page"]
    link: str
    title: Rendered
    excerpt: ProtectedRendered
    parent: int
    menu_order: int
    categories: List[int]
    tags: List[int]
    class_list: List[str]


class PageMeta(WordpressModel):
    footnotes: str


class PageDetail(PageOverview):
    date_gmt: str
    guid: Rendered
    modified: str
    modified_gmt: str
    content: ProtectedRendered
    author: int
    featured_media: int
    comment_status: str
    ping_status: str
    template: str
    meta: PageMeta


class PaginationInfo(WordpressModel):
    total_pages: int
    total_posts: int
    current_page: int


class PostsOverviewResult(WordpressModel):
    posts: List[PostOverview]
    pagination: PaginationInfo


class LlmsTxtResult(WordpressModel):
    llms_txt: str
