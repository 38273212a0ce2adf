# cliplugins

A small collection of command-line plugins together with the pieces they
are built from: plugin metadata, a terminal UI with tables and colours,
translated messages, and HTTP clients for a Cloud Foundry controller and a
containers service.

## What is inside

- `cliplugins.plugin` – plugin metadata (`PluginMetadata`, `Command`,
  `Namespace`, `VersionType`, `Stage`), the `PluginContext` and `CFContext`
  a plugin runs in (with `Organization`, `Space` and `QuotaDefinition`),
  and `run_plugin`, which passes a command line to a plugin's `run`
  method and raises `ValueError` when the command line is empty.
- `cliplugins.samples` – ready-made plugins: `HelloWorldPlugin`,
  `NamespaceDemo`, `StageDemo`, `AutoCompleteDelegationSample` and
  `PrintContext`, which prints the context it is given as a table.
- `cliplugins.list_plugin` – `ListPlugin`, which lists the apps, services
  and containers of the targeted space, plus `container_endpoint`,
  `default_headers` and `new_session`. When listing fails, it writes
  `FAILED` and the reason to standard error and raises `SystemExit(1)`.
- `cliplugins.listing` – the `ListCommand` behind it, `ListError`,
  `check_target` and `formatted_gb`.
- `cliplugins.api` – `CCClient` and `ContainerClient`, built on a
  `requests.Session`, raising `CCError` and `ContainerError` when the
  server reports a problem.
- `cliplugins.models` – dataclasses for the JSON those services return,
  with `from_dict` constructors.
- `cliplugins.i18n` and `cliplugins.resources` – embedded translations
  (English and Simplified Chinese), locale selection from a given locale,
  `LC_ALL` or `LANG`, and `{{.Key}}` template rendering.
- `cliplugins.ui` – `UI`, `Table`, `colorize`, `decolorize`,
  `command_color`.
- `cliplugins.matchers` – `SliceMatcher` and `contain_substrings` for
  checking that lines of output hold given substrings.

## Examples

Run a sample plugin:

```python
from cliplugins.plugin import PluginContext, run_plugin
from cliplugins.samples import HelloWorldPlugin

run_plugin(HelloWorldPlugin(), ["hello"], PluginContext())
```

Query a controller directly:

```python
import requests
from cliplugins.api import CCClient, CCError

client = CCClient("https://api.example.com", requests.Session())
try:
    summary = client.apps_and_services("space-id")
except CCError as err:
    print(err)
else:
    for app in summary.apps:
        print(app.name, app.state)
```

Format sizes and translate messages:

```python
from cliplugins.listing import formatted_gb
from cliplugins import i18n

formatted_gb(1792)                          # "1.75 GB"
t = i18n.init("zh_CN", {})
t("Name")                                   # "名称"
```

Check command output in tests:

```python
from cliplugins.matchers import contain_substrings

assert contain_substrings("Name  State\napp1  STARTED", ["app1", "STARTED"])
```

## What it does not do

The package installs no command. There is no host program that discovers
or loads plugins, and nothing here logs in or obtains tokens: a
`PluginContext` is built by the caller, and `CFContext.refresh_uaa_token`
only calls the `token_refresher` function it is given, if any.

## Testing

The test suite uses pytest and responses, available through the `test`
extra.