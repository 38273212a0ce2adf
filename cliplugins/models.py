"""Records returned by the Cloud Controller and container services."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any


def _value(data: Any, key: str, default: Any) -> Any:
    """Look up ``key`` the way JSON decoding into a record does.

    An exact key wins; otherwise the first key equal to it ignoring case
    is used. Missing keys and JSON nulls leave the default in place.
    """
    if not isinstance(data, Mapping):
        return default
    if key in data:
        found = data[key]
    else:
        folded = key.casefold()
        found = next(
            (v for k, v in data.items() if isinstance(k, str) and k.casefold() == folded),
            None,
        )
    return default if found is None else found


@dataclass
class App:
    name: str = ""
    urls: list[str] = field(default_factory=list)
    memory: int = 0
    total_instances: int = 0
    running_instances: int = 0
    is_diego: bool = False
    state: str = ""


@dataclass
class ServiceOffering:
    label: str = ""


@dataclass
class ServicePlan:
    name: str = ""
    service_offering: ServiceOffering = field(default_factory=ServiceOffering)


@dataclass
class ServiceInstance:
    name: str = ""
    service_plan: ServicePlan = field(default_factory=ServicePlan)


def _app(data: Any) -> App:
    return App(
        name=_value(data, "Name", ""),
        urls=list(_value(data, "urls", [])),
        memory=_value(data, "memory", 0),
        total_instances=_value(data, "instances", 0),
        running_instances=_value(data, "running_instances", 0),
        is_diego=_value(data, "diego", False),
        state=_value(data, "State", ""),
    )


def _service_instance(data: Any) -> ServiceInstance:
    plan = _value(data, "service_plan", {})
    offering = _value(plan, "service", {})
    return ServiceInstance(
        name=_value(data, "Name", ""),
        service_plan=ServicePlan(
            name=_value(plan, "Name", ""),
            service_offering=ServiceOffering(label=_value(offering, "Label", "")),
        ),
    )


@dataclass
class AppsAndServices:
    apps: list[App] = field(default_factory=list)
    services: list[ServiceInstance] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Any) -> AppsAndServices:
        """Build a space summary from decoded JSON."""
        return cls(
            apps=[_app(item) for item in _value(data, "Apps", [])],
            services=[_service_instance(item) for item in _value(data, "Services", [])],
        )


@dataclass
class SpaceUsage:
    space: str = ""
    apps: int = 0
    services: int = 0
    memory_in_dev: int = 0
    memory_in_prod: int = 0


def _space_usage(data: Any) -> SpaceUsage:
    return SpaceUsage(
        space=_value(data, "name", ""),
        apps=_value(data, "app_count", 0),
        services=_value(data, "service_count", 0),
        memory_in_dev=_value(data, "mem_dev_total", 0),
        memory_in_prod=_value(data, "mem_prod_total", 0),
    )


@dataclass
class OrgUsage:
    org: str = ""
    spaces: list[SpaceUsage] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Any) -> OrgUsage:
        """Build an organization summary from decoded JSON."""
        return cls(
            org=_value(data, "name", ""),
            spaces=[_space_usage(item) for item in _value(data, "Spaces", [])],
        )

    def total_memory_used(self) -> int:
        """Memory in MB used by development and production apps of all spaces."""
        return sum(s.memory_in_dev + s.memory_in_prod for s in self.spaces)

    def apps_count(self) -> int:
        return sum(s.apps for s in self.spaces)

    def services_count(self) -> int:
        return sum(s.services for s in self.spaces)


@dataclass
class ContainerGroup:
    name: str = ""


@dataclass
class Container:
    name: str = ""
    group: ContainerGroup = field(default_factory=ContainerGroup)
    memory: int = 0
    created: int = 0
    image: str = ""
    state: str = ""

    @classmethod
    def from_dict(cls, data: Any) -> Container:
        """Build a container from decoded JSON."""
        return cls(
            name=_value(data, "Name", ""),
            group=ContainerGroup(name=_value(_value(data, "Group", {}), "Name", "")),
            memory=_value(data, "Memory", 0),
            created=_value(data, "Created", 0),
            image=_value(data, "Image", ""),
            state=_value(data, "ContainerState", ""),
        )


@dataclass
class ContainersQuota:
    instances_count_limit: int = 0
    cpu_count_limit: int = 0
    memory_limit_in_mb: int = 0
    floating_ip_count_limit: int = 0


@dataclass
class ContainersUsage:
    total_instances: int = 0
    running_instances: int = 0
    cpu_count: int = 0
    memory_in_mb: int = 0
    floating_ips_count: int = 0
    bound_floating_ips_count: int = 0


@dataclass
class ContainersQuotaAndUsage:
    limits: ContainersQuota = field(default_factory=ContainersQuota)
    usage: ContainersUsage = field(default_factory=ContainersUsage)

    @classmethod
    def from_dict(cls, data: Any) -> ContainersQuotaAndUsage:
        """Build the container quota and usage of a space from decoded JSON."""
        limits = _value(data, "Limits", {})
        usage = _value(data, "Usage", {})
        return cls(
            limits=ContainersQuota(
                instances_count_limit=_value(limits, "containers", 0),
                cpu_count_limit=_value(limits, "vcpu", 0),
                memory_limit_in_mb=_value(limits, "memory_MB", 0),
                floating_ip_count_limit=_value(limits, "floating_ips", 0),
            ),
            usage=ContainersUsage(
                total_instances=_value(usage, "containers", 0),
                running_instances=_value(usage, "running", 0),
                cpu_count=_value(usage, "vcpu", 0),
                memory_in_mb=_value(usage, "memory_MB", 0),
                floating_ips_count=_value(usage, "floating_ips", 0),
                bound_floating_ips_count=_value(usage, "floating_ips_bound", 0),
            ),
        )