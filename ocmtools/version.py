"""Build version information and release version bundles."""

from __future__ import annotations

import dataclasses
import json
import logging
from dataclasses import dataclass

logger = logging.getLogger(__name__)

# Filled in at build time.
commit_from_git = ""
version_from_git = ""
major_from_git = ""
minor_from_git = ""
build_date = ""


@dataclass(frozen=True)
class VersionInfo:
    major: str = ""
    minor: str = ""
    git_commit: str = ""
    git_version: str = ""
    build_date: str = ""


def get() -> VersionInfo:
    """The version the running code was built from."""
    return VersionInfo(
        major=major_from_git,
        minor=minor_from_git,
        git_commit=commit_from_git,
        git_version=version_from_git,
        build_date=build_date,
    )


@dataclass(frozen=True)
class VersionBundle:
    ocm: str = ""
    app_addon: str = ""
    policy_addon: str = ""
    multicluster_controlplane: str = ""


_JSON_FIELDS = {
    "ocm": "ocm",
    "app_addon": "app_addon",
    "policy_addon": "policy_addon",
    "multicluster_controlplane": "multicluster_controlplane",
}

_DEFAULT_BUNDLE_VERSION = "1.0.0"

_BUNDLES = {
    "latest": VersionBundle("latest", "latest", "latest", "latest"),
    "0.15.0": VersionBundle("v0.15.0", "v0.15.0", "v0.15.0", "v0.6.0"),
    "0.15.2": VersionBundle("v0.15.2", "v0.15.0", "v0.15.0", "v0.6.0"),
    "0.16.0": VersionBundle("v0.16.0", "v0.16.0", "v0.16.0", "v0.7.0"),
    "1.0.0": VersionBundle("v1.0.0", "v0.16.0", "v0.16.0", "v0.7.0"),
}
_BUNDLES["default"] = _BUNDLES[_DEFAULT_BUNDLE_VERSION]


def get_default_bundle_version() -> str:
    return _DEFAULT_BUNDLE_VERSION


def _lookup_bundle(version: str) -> VersionBundle:
    version = version.removeprefix("v")
    try:
        return _BUNDLES[version]
    except KeyError:
        raise ValueError(f"couldn't find the requested version bundle: {version}") from None


def _override_bundle(bundle: VersionBundle, file_path: str) -> VersionBundle:
    try:
        with open(file_path, encoding="utf-8") as handle:
            data = handle.read()
    except OSError as exc:
        raise OSError(f"failed to read version bundle file: {exc}") from exc
    try:
        overrides = json.loads(data)
        if not isinstance(overrides, dict):
            raise ValueError("expected a JSON object")
        changes = {}
        for key, attr in _JSON_FIELDS.items():
            if key in overrides:
                value = overrides[key]
                if not isinstance(value, str):
                    raise ValueError(f"field {key} must be a string")
                changes[attr] = value
    except ValueError as exc:
        raise ValueError(f"failed to unmarshal version bundle: {exc}") from exc
    result = dataclasses.replace(bundle, **changes)
    logger.debug("applied overrides to version bundle: %s", result)
    return result


def get_version_bundle(version: str, version_bundle_file: str = "") -> VersionBundle:
    """The bundle for a version ("x.y.z" or "vx.y.z"), with optional file overrides."""
    bundle = _lookup_bundle(version)
    if version_bundle_file:
        bundle = _override_bundle(bundle, version_bundle_file)
    return bundle