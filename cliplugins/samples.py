"""Small example plugins."""

from __future__ import annotations

import json

from .plugin import Command, Namespace, PluginContext, PluginMetadata, Stage, VersionType
from .ui import UI


class HelloWorldPlugin:
    def run(self, context: PluginContext, args: list[str]) -> None:
        print("Hi, this is my first plugin for IBM Cloud CLI.")

    def get_metadata(self) -> PluginMetadata:
        return PluginMetadata(
            name="hello-sample",
            version=VersionType(0, 0, 1),
            commands=[
                Command(
                    name="hello",
                    alias="hi",
                    description="Say hello to IBM Cloud.",
                    usage="ibmcloud hello",
                )
            ],
        )


class NamespaceDemo:
    _COMMANDS = ("list", "show", "delete")

    def run(self, context: PluginContext, args: list[str]) -> None:
        if args[0] in self._COMMANDS:
            print(f"Running command '{args[0]}'.")

    def get_metadata(self) -> PluginMetadata:
        return PluginMetadata(
            name="namespace-sample",
            version=VersionType(0, 0, 1),
            min_cli_version=VersionType(0, 0, 1),
            namespaces=[Namespace(name="ns", description="Demonstrate namespace.")],
            commands=[
                Command(namespace="ns", name="list", description="List resources.",
                        usage="ibmcloud ns list"),
                Command(namespace="ns", name="show", description="Show details of a resource.",
                        usage="ibmcloud ns show"),
                Command(namespace="ns", name="delete", description="Delete a resource.",
                        usage="ibmcloud ns delete"),
            ],
        )


class StageDemo:
    def run(self, context: PluginContext, args: list[str]) -> None:
        if args[0] in ("list", "show"):
            print(f"Running command '{args[0]}'.")

    def get_metadata(self) -> PluginMetadata:
        return PluginMetadata(
            name="stage-demo",
            version=VersionType(0, 0, 1),
            namespaces=[
                Namespace(name="stage", description="Show example of stage annotation",
                          stage=Stage.BETA)
            ],
            commands=[
                Command(namespace="stage", name="list", description="List resources",
                        usage="ibmcloud stage list", stage=Stage.DEPRECATED),
                Command(namespace="stage", name="show",
                        description="Show the details of a resource",
                        usage="ibmcloud stage show", stage=Stage.EXPERIMENTAL),
            ],
        )


class AutoCompleteDelegationSample:
    _SUB_COMMANDS = ("get-role", "set-role", "help")

    def run(self, context: PluginContext, args: list[str]) -> None:
        if args[0] != "SendCompletion":
            print(f"Running command {json.dumps(args[0], ensure_ascii=False)}")
            return
        cmd = args[2] if len(args) > 2 and args[2] in self._SUB_COMMANDS else ""
        if not cmd:
            print("\n".join(self._SUB_COMMANDS))
        elif cmd == "set-role":
            print("Viewer\nEditor\nOperator\nAdministrator")

    def get_metadata(self) -> PluginMetadata:
        ns = "autocomplete-sample"
        return PluginMetadata(
            name="auto-complete-delegation-sample",
            version=VersionType(0, 0, 1),
            delegate_bash_completion=True,
            namespaces=[
                Namespace(name=ns,
                          description="Demonstrate delegate command completion to plugin.")
            ],
            commands=[
                Command(namespace=ns, name="get-role", description="get user's role",
                        usage="ibmcloud autocomplete-sample get-role"),
                Command(namespace=ns, name="set-role",
                        description="set a user role (Viewer, Editor, Operator or Administrator)",
                        usage="ibmcloud autocomplete-sample set-role"),
                Command(namespace=ns, name="help", description="show help",
                        usage="ibmcloud autocomplete-sample help"),
            ],
        )


class PrintContext:
    def __init__(self, ui: UI | None = None) -> None:
        self.ui = ui if ui is not None else UI()

    def run(self, context: PluginContext, args: list[str]) -> None:
        table = self.ui.table(["Name", "Value"])
        table.add("API endpoint", context.api_endpoint)
        table.add("IAM endpoint", context.iam_endpoint)
        table.add("Username", context.user_email)
        cf = context.cf
        table.add("CC endpoint", cf.api_endpoint)
        table.add("UAA endpoint", cf.uaa_endpoint)
        table.add("Doppler logging endpoint", cf.doppler_endpoint)
        table.add("Org", cf.current_organization.name)
        table.add("Space", cf.current_space.name)
        table.add("Color enabled", context.color_enabled)
        table.add("HTTP timeout (second)", str(context.http_timeout))
        table.add("Trace", context.trace)
        table.add("Locale", context.locale)
        table.print()

    def get_metadata(self) -> PluginMetadata:
        return PluginMetadata(
            name="context-sample",
            version=VersionType(0, 1, 0),
            min_cli_version=VersionType(0, 0, 1),
            commands=[
                Command(name="context", description="Print IBM Cloud plugin context",
                        usage="ibmcloud context")
            ],
        )