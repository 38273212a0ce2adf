"""Plugin listing apps, services and containers of the target space."""

from __future__ import annotations

import re
from typing import Any

import requests

from . import i18n
from .api import CCClient, ContainerClient
from .listing import ListCommand, ListError
from .plugin import CFContext, Command, PluginContext, PluginMetadata, VersionType
from .ui import UI

_ENDPOINT = re.compile(r"(^https?://)?[^\.]+(\..+)+")


def container_endpoint(cf_api_endpoint: str) -> str:
    """Derive the container service endpoint from the Cloud Controller endpoint."""
    return _ENDPOINT.sub(r"\1containers-api\2", cf_api_endpoint)


def default_headers(cf: CFContext) -> dict[str, str]:
    """Headers for every request, after refreshing the UAA token."""
    try:
        cf.refresh_uaa_token()
    except Exception as err:
        print(err)
    return {"Authorization": cf.uaa_token}


class _TimeoutSession(requests.Session):
    def __init__(self, timeout: float | None) -> None:
        super().__init__()
        self.timeout = timeout

    def request(self, method: str, url: str, **kwargs: Any) -> requests.Response:
        kwargs.setdefault("timeout", self.timeout)
        return super().request(method, url, **kwargs)


def new_session(context: PluginContext) -> requests.Session:
    """An HTTP session honouring the context's timeout and SSL settings."""
    session = _TimeoutSession(context.http_timeout or None)
    session.verify = not context.ssl_disabled
    return session


class ListPlugin:
    def get_metadata(self) -> PluginMetadata:
        return PluginMetadata(
            name="ibmcloud-list",
            version=VersionType(0, 0, 1),
            commands=[
                Command(
                    name="list",
                    description="List your apps, containers and services in the target space.",
                    usage="ibmcloud list",
                )
            ],
        )

    def run(self, context: PluginContext, args: list[str]) -> None:
        i18n.init(context.locale)
        cf = context.cf
        ui = UI()
        session = new_session(context)
        session.headers.update(default_headers(cf))
        if args[0] != "list":
            return
        try:
            ListCommand(
                ui,
                context,
                CCClient(cf.api_endpoint, session),
                ContainerClient(container_endpoint(cf.api_endpoint), session),
            ).run(args[1:])
        except ListError as err:
            ui.failed(f"{err}\n")
            raise SystemExit(1) from err