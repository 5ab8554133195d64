"""GraphQL executor used to introspect a live endpoint.

Handles HTTP communication, error handling, and response parsing.
"""

from typing import Any

import httpx
from graphql import get_introspection_query

from .auth import Auth, NoAuth
from .schema import Schema


class GraphQLError(Exception):
    """Exception raised for GraphQL errors."""

    def __init__(self, message: str, errors: list[dict[str, Any]]):
        self.message = message
        self.errors = errors
        super().__init__(message)


class GraphQLExecutor:
    """Executes GraphQL requests against an endpoint.

    Examples:
        async with GraphQLExecutor(url, auth=BearerAuth(token)) as executor:
            schema = await executor.fetch_schema()
    """

    def __init__(
        self,
        url: str,
        auth: Auth | None = None,
        *,
        timeout: float = 30.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        """Initialize the executor.

        Args:
            url: GraphQL endpoint URL
            auth: Authentication handler (implements Auth protocol)
            timeout: Request timeout in seconds
            transport: Optional httpx transport, mainly for tests
        """
        self.url = url
        self.timeout = timeout
        self._auth = auth or NoAuth()
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    async def __aenter__(self) -> "GraphQLExecutor":
        return self

    async def __aexit__(self, *exc_info):
        await self.close()

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create the HTTP client."""
        if self._client is None:
            headers = {"Content-Type": "application/json"}
            headers.update(self._auth.get_headers())

            self._client = httpx.AsyncClient(
                timeout=self.timeout,
                headers=headers,
                transport=self._transport,
            )
        return self._client

    async def close(self):
        """Close the HTTP client."""
        if self._client:
            await self._client.aclose()
            self._client = None

    async def execute(
        self,
        query: str,
        variables: dict[str, Any] | None = None,
    ) -> dict[str, Any]:
        """Execute a raw GraphQL query.

        Args:
            query: GraphQL query string
            variables: Query variables

        Returns:
            The 'data' portion of the response

        Raises:
            GraphQLError: If the response contains errors
            httpx.HTTPStatusError: If the endpoint answers with a non-2xx status
        """
        client = await self._get_client()

        payload: dict[str, Any] = {"query": query}
        if variables:
            payload["variables"] = variables

        response = await client.post(self.url, json=payload)
        response.raise_for_status()

        result = response.json()

        if result.get("errors"):
            error_messages = "; ".join(e.get("message", str(e)) for e in result["errors"])
            raise GraphQLError(f"GraphQL errors: {error_messages}", result["errors"])

        return result.get("data") or {}

    async def introspect(self) -> dict[str, Any]:
        """Run the standard introspection query and return its data."""
        return await self.execute(get_introspection_query(descriptions=True))

    async def fetch_schema(self) -> Schema:
        """Introspect the endpoint and parse the result."""
        return Schema.from_introspection(await self.introspect())


async def fetch_schema(url: str, auth: Auth | None = None, timeout: float = 30.0) -> Schema:
    """Fetch and parse the schema of a GraphQL endpoint in one call."""
    async with GraphQLExecutor(url, auth, timeout=timeout) as executor:
        return await executor.fetch_schema()
