"""Clients for the Cloud Controller and container services."""

from __future__ import annotations

import json
from collections.abc import Callable
from typing import Any

import requests

from .models import AppsAndServices, Container, ContainersQuotaAndUsage, OrgUsage, _value


class CCError(Exception):
    """Error reported by the Cloud Controller."""

    def __init__(self, code: int = 0, description: str = "") -> None:
        super().__init__(code, description)
        self.code = code
        self.description = description

    def __str__(self) -> str:
        return (
            f"Error response from server. Status code: {self.code}; "
            f"description: {self.description}."
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CCError):
            return NotImplemented
        return (self.code, self.description) == (other.code, other.description)

    def __hash__(self) -> int:
        return hash((self.code, self.description))


class ContainerError(Exception):
    """Error reported by the container service."""

    def __init__(
        self, code: str = "", status_code: str = "", description: str = "", incident_id: str = ""
    ) -> None:
        super().__init__(code, status_code, description, incident_id)
        self.code = code
        self.status_code = status_code
        self.description = description
        self.incident_id = incident_id

    def _fields(self) -> tuple[str, str, str, str]:
        return (self.code, self.status_code, self.description, self.incident_id)

    def __str__(self) -> str:
        return (
            f"Server error, status code: {self.status_code}, error code: {self.code}, "
            f"incident id: {self.incident_id}, message: {self.description}"
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ContainerError):
            return NotImplemented
        return self._fields() == other._fields()

    def __hash__(self) -> int:
        return hash(self._fields())


def _typed(payload: Any, key: str, kind: type, default: Any) -> Any:
    found = _value(payload, key, default)
    if not isinstance(found, kind) or isinstance(found, bool) != (kind is bool):
        raise TypeError(f"{key} has the wrong type")
    return found


def _cc_error(payload: Any) -> CCError:
    return CCError(
        code=_typed(payload, "code", int, 0),
        description=_typed(payload, "description", str, ""),
    )


def _container_error(payload: Any) -> ContainerError:
    return ContainerError(
        code=_typed(payload, "code", str, ""),
        status_code=_typed(payload, "rc", str, ""),
        description=_typed(payload, "description", str, ""),
        incident_id=_typed(payload, "incident_id", str, ""),
    )


_UNDECODABLE = object()


def _decode_error(response: requests.Response, build: Callable[[Any], Exception]) -> Exception:
    if response.content:
        try:
            payload = json.loads(response.content)
        except ValueError:
            payload = _UNDECODABLE
        if payload is None or isinstance(payload, dict):
            try:
                return build(payload or {})
            except TypeError:
                pass
    raise requests.HTTPError(
        f"Error response from server. Status code: {response.status_code}; "
        f"message: {response.text}",
        response=response,
    )


class _ServiceClient:
    def __init__(self, endpoint: str, session: requests.Session | None = None) -> None:
        self.endpoint = endpoint
        self.session = session if session is not None else requests.Session()

    def _get(
        self,
        path: str,
        build_error: Callable[[Any], Exception],
        *,
        headers: dict[str, str] | None = None,
        params: dict[str, str] | None = None,
    ) -> Any:
        """Fetch and decode a JSON document; None when there is nothing to decode.

        A recognised error body is raised unless all its fields are empty.
        """
        response = self.session.get(self.endpoint + path, headers=headers, params=params)
        if not 200 <= response.status_code <= 299:
            api_error = _decode_error(response, build_error)
            if api_error != type(api_error)():
                raise api_error
            return None
        if not response.content:
            return None
        return response.json()


class CCClient(_ServiceClient):
    """Reads space and organization summaries from the Cloud Controller."""

    def __init__(self, endpoint: str, session: requests.Session | None = None) -> None:
        super().__init__(endpoint, session)

    def apps_and_services(self, space_id: str) -> AppsAndServices:
        data = self._get(f"/v2/spaces/{space_id}/summary", _cc_error)
        return AppsAndServices.from_dict(data)

    def org_usage(self, org_id: str) -> OrgUsage:
        data = self._get(f"/v2/organizations/{org_id}/summary", _cc_error)
        return OrgUsage.from_dict(data)


class ContainerClient(_ServiceClient):
    """Reads containers and their quota from the container service."""

    def __init__(self, endpoint: str, session: requests.Session | None = None) -> None:
        super().__init__(endpoint, session)

    def containers(self, space_id: str) -> list[Container]:
        data = self._get(
            "/v3/containers/json",
            _container_error,
            headers={"X-Auth-Project-Id": space_id},
            params={"all": "true"},
        )
        if data is None:
            return []
        if not isinstance(data, list):
            raise ValueError("expected a list of containers")
        return [Container.from_dict(item) for item in data]

    def containers_quota_and_usage(self, space_id: str) -> ContainersQuotaAndUsage:
        data = self._get(
            "/v3/containers/usage",
            _container_error,
            headers={"X-Auth-Project-Id": space_id},
        )
        return ContainersQuotaAndUsage.from_dict(data)