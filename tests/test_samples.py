import io

import pytest

from cliplugins.plugin import CFContext, Organization, PluginContext, Stage
from cliplugins.samples import (
    AutoCompleteDelegationSample,
    HelloWorldPlugin,
    NamespaceDemo,
    PrintContext,
    StageDemo,
)
from cliplugins.ui import UI


def test_hello(capsys):
    HelloWorldPlugin().run(PluginContext(), ["hello"])
    assert capsys.readouterr().out == "Hi, this is my first plugin for IBM Cloud CLI.\n"
    meta = HelloWorldPlugin().get_metadata()
    assert meta.name == "hello-sample"
    assert meta.commands[0].alias == "hi"


@pytest.mark.parametrize("command", ["list", "show", "delete"])
def test_namespace_commands(capsys, command):
    NamespaceDemo().run(PluginContext(), [command])
    assert capsys.readouterr().out == f"Running command '{command}'.\n"


def test_namespace_unknown_command_silent(capsys):
    NamespaceDemo().run(PluginContext(), ["other"])
    assert capsys.readouterr().out == ""


def test_stage_metadata():
    meta = StageDemo().get_metadata()
    assert meta.namespaces[0].stage is Stage.BETA
    assert [c.stage for c in meta.commands] == [Stage.DEPRECATED, Stage.EXPERIMENTAL]


def test_stage_delete_not_handled(capsys):
    StageDemo().run(PluginContext(), ["delete"])
    assert capsys.readouterr().out == ""


def test_completion_lists_sub_commands(capsys):
    AutoCompleteDelegationSample().run(
        PluginContext(), ["SendCompletion", "autocomplete-sample"]
    )
    assert capsys.readouterr().out.splitlines() == ["get-role", "set-role", "help"]


def test_completion_for_set_role(capsys):
    AutoCompleteDelegationSample().run(
        PluginContext(), ["SendCompletion", "autocomplete-sample", "set-role"]
    )
    assert capsys.readouterr().out.splitlines() == [
        "Viewer", "Editor", "Operator", "Administrator"
    ]


def test_completion_for_get_role_prints_nothing(capsys):
    AutoCompleteDelegationSample().run(
        PluginContext(), ["SendCompletion", "autocomplete-sample", "get-role"]
    )
    assert capsys.readouterr().out == ""


def test_completion_other_command(capsys):
    AutoCompleteDelegationSample().run(PluginContext(), ["get-role"])
    assert capsys.readouterr().out == 'Running command "get-role"\n'


def test_print_context_table():
    out = io.StringIO()
    context = PluginContext(
        api_endpoint="https://api.example.com",
        cf=CFContext(current_organization=Organization(name="org1")),
        http_timeout=30,
    )
    PrintContext(UI(out=out)).run(context, ["context"])
    lines = out.getvalue().splitlines()
    assert lines[0].split() == ["Name", "Value"]
    assert any(l.startswith("API endpoint") and l.endswith("https://api.example.com") for l in lines)
    assert any(l.startswith("Org") and l.endswith("org1") for l in lines)
    assert any(l.startswith("HTTP timeout (second)") and l.endswith("30") for l in lines)
    assert PrintContext().get_metadata().name == "context-sample"