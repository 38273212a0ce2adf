"""Translation files bundled with the list plugin."""

from __future__ import annotations

import json
import os

_ASSET_MODE = 0
_ASSET_MTIME = 0

_MESSAGE_IDS: tuple[str, ...] = (
    "CloudFoundy Applications  {{.Used}}/{{.Limit}} used",
    "Containers  {{.MemoryUsed}}/{{.MemoryLimit}}  {{.IPCount}}/{{.IPLimit}}"
    " Public IPs Requested|{{.BoundIPCount}} Used",
    "Created",
    "Image",
    "Instances",
    "Memory (MB)",
    "Name",
    "No API endpoint set. Use '{{.Command}}' to set an endpoint.",
    "No space targeted. Use '{{.Command}}' to target an org and a space.",
    "Not logged in. Use '{{.Command}}' to log in.",
    "Plan",
    "Routes",
    "Service Offering",
    "Services {{.Count}}/{{.Limit}} used",
    "State",
    "Status",
    "Unable to query apps and services of the target space:\n",
    "Unable to query containers of the target space:\n",
    "Unable to retrieve containers' usage and quota of the target space:\n",
    "Unable to retrieve usage of the target org:\n",
)

_SIMPLIFIED_CHINESE: dict[str, str] = {
    _MESSAGE_IDS[0]: "CloudFoundy 应用程序  {{.Used}}/{{.Limit}} 已使用",
    _MESSAGE_IDS[1]: (
        "容器  {{.MemoryUsed}}/{{.MemoryLimit}}  {{.IPCount}}/{{.IPLimit}}"
        " 公共IP地址 已请求|{{.BoundIPCount}} 已使用"
    ),
    "Created": "创建",
    "Image": "镜像",
    "Instances": "实例",
    "Memory (MB)": "内存 （MB）",
    "Name": "名称",
    _MESSAGE_IDS[7]: "未设置任何 API 端点。请使用“{{.Command}}”来设置端点。",
    _MESSAGE_IDS[8]: "未选择目标空间。请使用“{{.Command}}”来选择目标空间。",
    _MESSAGE_IDS[9]: "未登录。请使用 '{{.Command}}' 登录。",
    "Plan": "套餐",
    "Routes": "路由",
    "Service Offering": "服务产品",
    "Services {{.Count}}/{{.Limit}} used": "服务 {{.Count}}/{{.Limit}} 已使用",
    "State": "状态",
    "Status": "状态",
    _MESSAGE_IDS[16]: "无法获取目标空间中的应用程序和服务:\n",
    _MESSAGE_IDS[17]: "无法获取目标空间中的容器\n",
    _MESSAGE_IDS[18]: "无法获取目标空间中容器的使用情况和配额\n",
    _MESSAGE_IDS[19]: "无法获取目标组织中的使用情况信息\n",
}


def _encode(translations: dict[str, str]) -> bytes:
    entries = [{"id": message_id, "translation": translations[message_id]} for message_id in _MESSAGE_IDS]
    return json.dumps(entries, ensure_ascii=False, indent=2).encode("utf-8")


_ASSETS: dict[str, bytes] = {
    "i18n/resources/en_US.all.json": _encode({message_id: message_id for message_id in _MESSAGE_IDS}),
    "i18n/resources/zh_Hans.all.json": _encode(_SIMPLIFIED_CHINESE),
}


def _build_tree() -> dict:
    tree: dict = {}
    for name in _ASSETS:
        *dirs, leaf = name.split("/")
        node = tree
        for part in dirs:
            node = node.setdefault(part, {})
        node[leaf] = None
    return tree


_TREE = _build_tree()


class AssetNotFoundError(LookupError):
    """Raised when no bundled asset or directory has the requested name."""


def _canonical(name: str) -> str:
    return name.replace("\\", "/")


def asset(name: str) -> bytes:
    """Return the content of the named asset."""
    try:
        return _ASSETS[_canonical(name)]
    except KeyError:
        raise AssetNotFoundError(f"Asset {name} not found") from None


def asset_names() -> list[str]:
    """Names of all bundled assets."""
    return sorted(_ASSETS)


def asset_dir(name: str) -> list[str]:
    """Names of the entries directly below a bundled directory.

    An empty name lists the top level. Naming a file or an unknown path
    raises AssetNotFoundError.
    """
    node = _TREE
    if name:
        for part in _canonical(name).split("/"):
            if not isinstance(node, dict) or part not in node:
                raise AssetNotFoundError(f"Asset {name} not found")
            node = node[part]
    if not isinstance(node, dict):
        raise AssetNotFoundError(f"Asset {name} not found")
    return sorted(node)


def _file_path(directory: str, name: str) -> str:
    return os.path.join(directory, *_canonical(name).split("/"))


def restore_asset(directory: str, name: str) -> None:
    """Write one asset below ``directory``, keeping its relative path."""
    data = asset(name)
    canonical = _canonical(name)
    os.makedirs(_file_path(directory, os.path.dirname(canonical)), mode=0o755, exist_ok=True)
    target = _file_path(directory, canonical)
    fd = os.open(target, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, _ASSET_MODE)
    with os.fdopen(fd, "wb") as handle:
        handle.write(data)
    os.utime(target, (_ASSET_MTIME, _ASSET_MTIME))


def restore_assets(directory: str, name: str) -> None:
    """Write an asset, or every asset below a bundled directory, recursively."""
    try:
        children = asset_dir(name)
    except AssetNotFoundError:
        restore_asset(directory, name)
        return
    for child in children:
        restore_assets(directory, os.path.join(name, child))