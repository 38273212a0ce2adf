"""Plugin metadata and the context a plugin runs in."""

from __future__ import annotations

import enum
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any, Protocol


class Stage(str, enum.Enum):
    GA = ""
    BETA = "beta"
    DEPRECATED = "deprecated"
    EXPERIMENTAL = "experimental"


@dataclass(frozen=True)
class VersionType:
    major: int = 0
    minor: int = 0
    build: int = 0

    def __str__(self) -> str:
        return f"{self.major}.{self.minor}.{self.build}"


@dataclass
class Namespace:
    name: str
    description: str = ""
    stage: Stage = Stage.GA


@dataclass
class Command:
    name: str
    namespace: str = ""
    alias: str = ""
    description: str = ""
    usage: str = ""
    stage: Stage = Stage.GA


@dataclass
class PluginMetadata:
    name: str
    version: VersionType = field(default_factory=VersionType)
    min_cli_version: VersionType = field(default_factory=VersionType)
    namespaces: list[Namespace] = field(default_factory=list)
    commands: list[Command] = field(default_factory=list)
    delegate_bash_completion: bool = False


@dataclass
class QuotaDefinition:
    instance_memory_limit_in_mb: int = 0
    services_limit: int = 0


@dataclass
class Organization:
    guid: str = ""
    name: str = ""
    quota_definition: QuotaDefinition = field(default_factory=QuotaDefinition)


@dataclass
class Space:
    guid: str = ""
    name: str = ""


@dataclass
class CFContext:
    """Cloud Foundry target of the CLI session."""

    api_endpoint: str = ""
    uaa_endpoint: str = ""
    doppler_endpoint: str = ""
    uaa_token: str = ""
    logged_in: bool = False
    current_organization: Organization = field(default_factory=Organization)
    current_space: Space = field(default_factory=Space)
    token_refresher: Callable[[], str] | None = None

    def has_api_endpoint(self) -> bool:
        return bool(self.api_endpoint)

    def is_logged_in(self) -> bool:
        return self.logged_in

    def has_targeted_space(self) -> bool:
        return bool(self.current_space.guid)

    def refresh_uaa_token(self) -> str:
        """Obtain a fresh token from the refresher, if one is set."""
        if self.token_refresher is not None:
            self.uaa_token = self.token_refresher()
        return self.uaa_token


@dataclass
class PluginContext:
    """Settings of the CLI that a plugin can read."""

    api_endpoint: str = ""
    iam_endpoint: str = ""
    user_email: str = ""
    cf: CFContext = field(default_factory=CFContext)
    color_enabled: str = ""
    http_timeout: int = 0
    trace: str = ""
    locale: str = ""
    ssl_disabled: bool = False


class Plugin(Protocol):
    def run(self, context: PluginContext, args: list[str]) -> Any: ...

    def get_metadata(self) -> PluginMetadata: ...


def run_plugin(plugin: Plugin, args: list[str], context: PluginContext | None = None) -> Any:
    """Run ``plugin`` for a command line whose first item is the command name."""
    if not args:
        raise ValueError("no command given")
    return plugin.run(context if context is not None else PluginContext(), list(args))