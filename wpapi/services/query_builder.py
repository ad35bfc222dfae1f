from typing import Iterable, Mapping, Optional
from urllib.parse import urlencode


def resolve_status(status: Optional[str], default_status: str) -> str:
    return status or default_status


def join_ids(ids: Iterable[int]) -> str:
    """Serialize an id filter the way WordPress expects it: ``3,7``."""
    return ",".join(str(int(i)) for i in ids)


def build_query(params: Mapping[str, Optional[object]]) -> str:
    """
    Encode query parameters in insertion order, skipping ``None`` values.
    Commas stay literal so id lists read as ``categories=3,7``.
    """
    present = {key: str(value) for key, value in params.items() if value is not None}
    return urlencode(present, safe=",")
