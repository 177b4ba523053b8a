"""Final request URL composition."""

import re

from openapi_fetch_core.serializers.path import default_path_serializer
from openapi_fetch_core.serializers.query import QuerySerializer
from openapi_fetch_core.types import RequestParams

LEADING_QUESTION_RE = re.compile(r"^\?+")


def create_final_url(
    pathname: str,
    *,
    base_url: str,
    params: RequestParams,
    query_serializer: QuerySerializer,
) -> str:
    """Join base URL and path, substitute path parameters and append the query.

    Path placeholders are substituted over the joined URL, so templated
    segments in ``base_url`` are filled in as well.
    """
    final_url = f"{base_url}{pathname}"
    if params.path:
        final_url = default_path_serializer(final_url, params.path) or final_url
    search = LEADING_QUESTION_RE.sub("", query_serializer(params.query or {}))
    if search:
        final_url += f"?{search}"
    return final_url
