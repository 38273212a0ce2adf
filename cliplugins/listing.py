"""The ``list`` command: apps, services and containers of the target space."""

from __future__ import annotations

from typing import Any

from .i18n import translate as T
from .models import App, Container, ContainersQuotaAndUsage, OrgUsage, ServiceInstance
from .plugin import CFContext, PluginContext
from .ui import BOLD, UI, YELLOW, colorize, command_color


class ListError(Exception):
    """The list command could not complete."""


def formatted_gb(size_in_mb: int) -> str:
    """Render a size in MB as gigabytes with at most two decimals."""
    text = f"{size_in_mb / 1024:.2f}".rstrip("0").rstrip(".")
    return f"{text} GB"


def check_target(cf: CFContext) -> None:
    """Raise ListError unless an endpoint, a login and a space are set."""
    if not cf.has_api_endpoint():
        raise ListError(T(
            "No CF API endpoint set. Use '{{.Command}}' to target a CloudFoundry environment.",
            {"Command": command_color("bx target --cf")},
        ))
    if not cf.is_logged_in():
        raise ListError(T(
            "Not logged in. Use '{{.Command}}' to log in.",
            {"Command": command_color("bx target --cf")},
        ))
    if not cf.has_targeted_space():
        raise ListError(T(
            "No space targeted. Use '{{.Command}}' to target an org and a space.",
            {"Command": command_color("bx target -o ORG -s SPACE")},
        ))


class ListCommand:
    def __init__(self, ui: UI, context: PluginContext, cc_client: Any, container_client: Any) -> None:
        self.ui = ui
        self.cf = context.cf
        self.cc_client = cc_client
        self.container_client = container_client

    def _fetch(self, message_id: str, call: Any, *args: Any) -> Any:
        try:
            return call(*args)
        except Exception as err:
            raise ListError(T(message_id) + str(err)) from err

    def run(self, args: list[str]) -> None:
        check_target(self.cf)
        org_id = self.cf.current_organization.guid
        space_id = self.cf.current_space.guid

        summary = self._fetch("Unable to query apps and services of the target space:\n",
                              self.cc_client.apps_and_services, space_id)
        org_usage = self._fetch("Unable to retrieve usage of the target org:\n",
                                self.cc_client.org_usage, org_id)
        self._print_apps(summary.apps, org_usage)
        self._print_services(summary.services, org_usage)

        containers = self._fetch("Unable to query containers of the target space:\n",
                                 self.container_client.containers, space_id)
        quota = self._fetch(
            "Unable to retrieve containers' usage and quota of the target space:\n",
            self.container_client.containers_quota_and_usage, space_id)
        self._print_containers(containers, quota)

    def _heading(self, text: str) -> None:
        self.ui.say(colorize(text, YELLOW, BOLD))

    def _print_apps(self, apps: list[App], org_usage: OrgUsage) -> None:
        quota = self.cf.current_organization.quota_definition
        self._heading(T("CloudFoundy Applications  {{.Used}}/{{.Limit}} used", {
            "Used": formatted_gb(org_usage.total_memory_used()),
            "Limit": formatted_gb(quota.instance_memory_limit_in_mb),
        }))
        table = self.ui.table([T("Name"), T("Routes"), T("Memory (MB)"), T("Instances"), T("State")])
        for app in apps:
            table.add(app.name, "\n".join(app.urls), str(app.memory),
                      f"{app.running_instances}/{app.total_instances}", app.state)
        table.print()
        self.ui.say("")

    def _print_services(self, services: list[ServiceInstance], org_usage: OrgUsage) -> None:
        quota = self.cf.current_organization.quota_definition
        self._heading(T("Services {{.Count}}/{{.Limit}} used", {
            "Count": org_usage.services_count(),
            "Limit": quota.services_limit,
        }))
        table = self.ui.table([T("Name"), T("Service Offering"), T("Plan")])
        for service in services:
            table.add(service.name, service.service_plan.service_offering.label,
                      service.service_plan.name)
        table.print()
        self.ui.say("")

    def _print_containers(self, containers: list[Container], quota: ContainersQuotaAndUsage) -> None:
        self._heading(T(
            "Containers  {{.MemoryUsed}}/{{.MemoryLimit}}  {{.IPCount}}/{{.IPLimit}} "
            "Public IPs Requested|{{.BoundIPCount}} Used", {
                "MemoryUsed": formatted_gb(quota.usage.memory_in_mb),
                "MemoryLimit": formatted_gb(quota.limits.memory_limit_in_mb),
                "IPCount": quota.usage.floating_ips_count,
                "IPLimit": quota.limits.floating_ip_count_limit,
                "BoundIPCount": quota.usage.bound_floating_ips_count,
            }))
        by_name: dict[str, list[Container]] = {}
        for container in containers:
            by_name.setdefault(container.group.name or container.name, []).append(container)

        table = self.ui.table([T("Name"), T("Instances"), T("Image"), T("Created"), T("Status")])
        for name, group in by_name.items():
            first = group[0]
            image = first.image.split("/")[-1]
            created = "--" if len(group) > 1 else str(first.created)
            states = {c.state for c in group}
            status = first.state if len(states) == 1 else "??"
            table.add(name, str(len(group)), image, created, status)
        table.print()
        self.ui.say("")