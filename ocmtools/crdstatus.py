"""Status lines for manifest works, CRDs and component deployments."""

from __future__ import annotations

import os
import sys
from typing import Any, Iterable, Mapping

from ocmtools.prefixwriter import LEVEL_2, PrefixWriter

_CRD_RESOURCE = "customresourcedefinitions"


def _colour_enabled() -> bool:
    if os.environ.get("NO_COLOR"):
        return False
    if os.environ.get("TERM") == "dumb":
        return False
    isatty = getattr(sys.stdout, "isatty", None)
    return bool(isatty and isatty())


def _red(text: str) -> str:
    return f"\x1b[31m{text}\x1b[0m" if _colour_enabled() else text


def _find_condition(conditions: Iterable[Mapping[str, Any]], kind: str):
    return next((c for c in conditions if c.get("type") == kind), None)


def _manifest_resource_status(manifest: Mapping[str, Any]) -> str:
    applied = _find_condition(manifest.get("conditions") or [], "Applied")
    if applied is None:
        return "unknown"
    if applied.get("status") == "True":
        return "applied"
    return _red("not-applied")


def work_details(key_prefix: str, work: Mapping[str, Any]) -> dict[str, str]:
    """Map "<prefix>.<resource>.<ns/name>" to the apply status of each manifest."""
    status = work.get("status") or {}
    manifests = (status.get("resourceStatus") or {}).get("manifests") or []
    details: dict[str, str] = {}
    for manifest in manifests:
        meta = manifest.get("resourceMeta") or {}
        identifier = meta.get("name", "")
        namespace = meta.get("namespace", "")
        if namespace:
            identifier = f"{namespace}/{identifier}"
        key = f"{key_prefix}.{meta.get('resource', '')}.{identifier}"
        details[key] = _manifest_resource_status(manifest)
    return details


def print_crd(
    printer: PrefixWriter,
    crds: Iterable[Mapping[str, Any]],
    resources: Iterable[Mapping[str, Any]],
) -> None:
    """Write whether each CRD named in resources is installed, with its versions."""
    wanted = sorted(
        {r.get("name", "") for r in resources if r.get("resource") == _CRD_RESOURCE}
    )
    existing: set[str] = set()
    versions: dict[str, list[str]] = {}
    storage: dict[str, str] = {}
    for crd in crds:
        name = (crd.get("metadata") or {}).get("name", "")
        existing.add(name)
        versions[name] = list((crd.get("status") or {}).get("storedVersions") or [])
        serving: set[str] = set()
        for version in (crd.get("spec") or {}).get("versions") or []:
            if version.get("served"):
                serving.add(version.get("name", ""))
            if version.get("storage"):
                storage[name] = version.get("name", "")
            versions[name] = sorted(serving)
    for name in wanted:
        state = "installed" if name in existing else "absent"
        printer.write(
            LEVEL_2, "(%s) %s [%s]\n", state, name, format_crd_version(versions, storage, name)
        )


def format_crd_version(
    serving_versions: Mapping[str, Iterable[str]],
    storage_version: Mapping[str, str],
    crd_name: str,
) -> str:
    """Sorted serving versions joined by "|", the storage one marked with "*"."""
    storage = storage_version.get(crd_name, "")
    output = {
        "*" + version if version == storage else version
        for version in serving_versions.get(crd_name, ())
    }
    return "|".join(sorted(output))


def get_image_name(deployment: Mapping[str, Any]) -> str:
    """The image of the deployment's last container, or "<none>"."""
    template = ((deployment.get("spec") or {}).get("template") or {}).get("spec") or {}
    containers = template.get("containers") or []
    return containers[-1].get("image", "") if containers else "<none>"


def print_components_deploy(
    printer: PrefixWriter, deployment: Mapping[str, Any] | None, name: str
) -> None:
    """Write replica counts and image for a component; nothing if it is absent."""
    if deployment is None:
        return
    if name.endswith("agent"):
        prefix = "Agent:"
    elif name.endswith("controller"):
        prefix = "Controller:"
    elif name.endswith("webhook"):
        prefix = "Webhook:"
    else:
        prefix = ""
    replicas = int((deployment.get("spec") or {}).get("replicas", 1))
    available = int((deployment.get("status") or {}).get("availableReplicas", 0))
    printer.write(
        LEVEL_2, "%s\t(%d/%d) %s\n", prefix, replicas, available, get_image_name(deployment)
    )