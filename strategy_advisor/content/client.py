"""Read-only client for the Sanity content store."""

import json
import logging
from typing import Any, Optional, Protocol

import httpx

from strategy_advisor.config import AdvisorConfig
from strategy_advisor.errors import ContentStoreError

logger = logging.getLogger(__name__)

# Documents of one type, in the editors' chosen order.
TYPE_QUERY = "*[_type == $type] | order(order asc)"


class ContentStore(Protocol):
    """Anything that can list CMS documents by type."""

    def fetch_by_type(self, doc_type: str) -> list[dict]:
        ...


class SanityClient:
    """Queries the Sanity HTTP API with GROQ."""

    def __init__(
        self,
        project_id: str,
        dataset: str = "production",
        api_version: str = "2024-01-01",
        token: Optional[str] = None,
        use_cdn: bool = False,
        timeout: float = 30.0,
        http_client: Optional[httpx.Client] = None,
    ):
        self.project_id = project_id
        self.dataset = dataset
        self.api_version = api_version
        self.token = token
        self.use_cdn = use_cdn
        self.timeout = timeout
        self._http = http_client

    @classmethod
    def from_config(cls, config: AdvisorConfig) -> "SanityClient":
        if not config.sanity_project_id:
            raise ContentStoreError("SANITY_PROJECT_ID is not set")
        return cls(
            project_id=config.sanity_project_id,
            dataset=config.sanity_dataset,
            api_version=config.sanity_api_version,
            token=config.sanity_token,
            use_cdn=config.sanity_use_cdn,
            timeout=config.request_timeout,
        )

    @property
    def query_url(self) -> str:
        host = "apicdn" if self.use_cdn else "api"
        return (
            f"https://{self.project_id}.{host}.sanity.io"
            f"/v{self.api_version}/data/query/{self.dataset}"
        )

    @property
    def headers(self) -> dict[str, str]:
        headers = {"Accept": "application/json"}
        if self.token:
            headers["Authorization"] = f"Bearer {self.token}"
        return headers

    def _get_http(self) -> httpx.Client:
        if self._http is None:
            self._http = httpx.Client(timeout=self.timeout)
        return self._http

    def close(self):
        """Close the HTTP client."""
        if self._http is not None:
            self._http.close()
            self._http = None

    def fetch(self, query: str, params: Optional[dict] = None) -> Any:
        """
        Run a GROQ query and return its result.

        Raises:
            ContentStoreError: On transport failure, non-2xx status or a bad body
        """
        request_params = {"query": query}
        for key, value in (params or {}).items():
            # GROQ parameters are passed as JSON-encoded $-prefixed values
            request_params[f"${key}"] = json.dumps(value)

        logger.debug(f"Querying {self.query_url}: {query}")
        try:
            response = self._get_http().get(self.query_url, params=request_params, headers=self.headers)
        except httpx.HTTPError as e:
            raise ContentStoreError(f"Content store unreachable: {e}") from e

        if not response.is_success:
            raise ContentStoreError(
                f"Content store query failed: {response.status_code}",
                status_code=response.status_code,
            )

        try:
            return response.json()["result"]
        except (ValueError, KeyError, TypeError) as e:
            raise ContentStoreError("Content store returned an unexpected body") from e

    def fetch_by_type(self, doc_type: str) -> list[dict]:
        result = self.fetch(TYPE_QUERY, {"type": doc_type})
        return result if isinstance(result, list) else []
