"""Authentication headers for schema introspection requests.

Any object with a ``get_headers()`` method can be passed to the executor.
"""

from typing import Dict, Protocol, runtime_checkable


@runtime_checkable
class Auth(Protocol):
    """Protocol for authentication handlers.

    Example:
        class TenantAuth:
            def __init__(self, token: str, tenant: str):
                self.token = token
                self.tenant = tenant

            def get_headers(self) -> dict[str, str]:
                return {"Authorization": f"Bearer {self.token}", "X-Tenant": self.tenant}
    """

    def get_headers(self) -> Dict[str, str]:
        """Return headers to include in requests."""
        ...


class NoAuth:
    """No authentication, for public endpoints."""

    def get_headers(self) -> Dict[str, str]:
        return {}


class BearerAuth:
    """Bearer token sent in the Authorization header."""

    def __init__(self, token: str):
        self.token = token

    def get_headers(self) -> Dict[str, str]:
        return {"Authorization": f"Bearer {self.token}"}


class HeaderAuth:
    """Arbitrary static headers, e.g. ``{"X-Client-Id": "cd", "X-Secret": "..."}``."""

    def __init__(self, headers: Dict[str, str]):
        self._headers = dict(headers)

    def get_headers(self) -> Dict[str, str]:
        return dict(self._headers)


def parse_header(value: str) -> tuple[str, str]:
    """Split a ``Name: value`` command line header into its parts."""
    name, sep, header_value = value.partition(":")
    if not sep or not name.strip():
        raise ValueError(f"Header must look like 'Name: value', got {value!r}")
    return name.strip(), header_value.strip()


def auth_from_options(
    bearer_token: str | None = None,
    headers: tuple[str, ...] = (),
) -> Auth:
    """Build an auth handler from command line options.

    Extra headers are sent as-is; a bearer token adds the Authorization
    header on top of them.
    """
    merged = dict(parse_header(h) for h in headers)
    if bearer_token:
        merged.update(BearerAuth(bearer_token).get_headers())
    if not merged:
        return NoAuth()
    return HeaderAuth(merged)
