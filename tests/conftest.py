from wpapi.services.wordpress_service import WordpressClient
from wpapi.settings import Settings


class FakeResponse:
    """
    Minimal httpx.Response stand-in: status_code, headers, json(), text.
    """

    def __init__(self, data=None, status_code: int = 200, headers=None, text=None):
        self._data = data
        self.status_code = status_code
        self.headers = headers or {}
        self.text = text if text is not None else ""

    def json(self):
        if isinstance(self._data, Exception):
            raise self._data
        return self._data


class FakeTransport:
    """
    Records every GET and replays queued responses in order.
    """

    def __init__(self, *responses):
        self.responses = list(responses)
        self.calls = []

    def get(self, url, headers=None):
        self.calls.append((url, headers or {}))
        if not self.responses:
            raise AssertionError(f"unexpected request to {url}")
        response = self.responses.pop(0)
        if isinstance(response, Exception):
            raise response
        return response

    @property
    def urls(self):
        return [url for url, _ in self.calls]


class FakeWordpressClient:
    """
    Client stand-in for router tests; each attribute is the value (or
    exception) the matching load_* method produces.
    """

    def __init__(self, **results):
        self.results = results
        self.calls = []

    def __getattr__(self, name):
        if not name.startswith("load_"):
            raise AttributeError(name)

        def load(*args, **kwargs):
            self.calls.append((name, args, kwargs))
            result = self.results[name]
            if isinstance(result, Exception):
                raise result
            return result

        return load


def make_client(*responses, default_status: str = "publish"):
    transport = FakeTransport(*responses)
    client = WordpressClient(
        api_url="https://example.com",
        username="u",
        password="p",
        default_status=default_status,
        transport=transport,
    )
    return client, transport


def make_settings(**overrides) -> Settings:
    values = {
        "WORDPRESS_API_URL": "https://example.com",
        "WORDPRESS_USERNAME": "u",
        "WORDPRESS_PASSWORD": "p",
        "WORDPRESS_STATUS": "draft",
        "WPAPI_API_KEY": "secret",
    }
    values.update(overrides)
    return Settings(_env_file=None, **values)


# --- WordPress payloads ---


def category_payload(**overrides) -> dict:
    payload = {
        "id": 3,
        "count": 12,
        "description": "",
        "link": "https://example.com/category/news",
        "name": "News",
        "slug": "news",
        "taxonomy": "category",
        "parent": 0,
        "meta": [],
    }
    payload.update(overrides)
    return payload


def tag_payload(**overrides) -> dict:
    payload = {
        "id": 1,
        "count": 2,
        "description": "",
        "link": "l",
        "name": "News",
        "slug": "news",
        "taxonomy": "post_tag",
        "meta": [],
    }
    payload.update(overrides)
    return payload


def post_overview_payload(**overrides) -> dict:
    payload = {
        "id": 42,
        "title": {"rendered": "Hello <em>World</em>"},
        "excerpt": {"rendered": "<p>Short</p>"},
        "date": "2024-06-01T10:00:00",
        "slug": "hello-world",
        "author": 7,
        "featured_media": 99,
        "_embedded": {
            "author": [{"id": 7, "name": "Ted", "avatar_urls": {"96": "a.png"}}],
            "wp:featuredmedia": [
                {"id": 99, "source_url": "https://example.com/hero.png"}
            ],
        },
        "sticky": False,
    }
    payload.update(overrides)
    return payload


def post_detail_payload(**overrides) -> dict:
    payload = post_overview_payload()
    payload.update(
        {
            "content": {"rendered": "<p>Full body</p>"},
            "modified": "2024-06-02T10:00:00",
        }
    )
    payload.update(overrides)
    return payload


def page_detail_payload(**overrides) -> dict:
    payload = {
        "id": 5,
        "date": "2024-01-01T00:00:00",
        "date_gmt": "2024-01-01T00:00:00",
        "guid": {"rendered": "https://example.com/?page_id=5"},
        "modified": "2024-01-02T00:00:00",
        "modified_gmt": "2024-01-02T00:00:00",
        "slug": "about",
        "status": "publish",
        "type": "page",
        "link": "https://example.com/about",
        "title": {"rendered": "About"},
        "content": {"rendered": "<p>About us</p>", "protected": False},
        "excerpt": {"rendered": "<p>About</p>", "protected": False},
        "author": 1,
        "featured_media": 0,
        "parent": 0,
        "menu_order": 0,
        "comment_status": "closed",
        "ping_status": "closed",
        "template": "",
        "meta": {"footnotes": ""},
        "categories": [3],
        "tags": [],
        "class_list": ["post-5", "page"],
    }
    payload.update(overrides)
    return payload
