"""Feature gates and their conversion to the operator API form."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Mapping

_TRUE = {"1", "t", "T", "TRUE", "true", "True"}
_FALSE = {"0", "f", "F", "FALSE", "false", "False"}


class FeatureGateMode(str, Enum):
    ENABLE = "Enable"
    DISABLE = "Disable"


@dataclass(frozen=True)
class FeatureSpec:
    """How a feature behaves when nobody sets it."""

    default: bool = False
    lock_to_default: bool = False


@dataclass(frozen=True)
class FeatureGate:
    """A feature gate setting as the operator API expects it."""

    feature: str
    mode: FeatureGateMode


def _parse_bool(text: str) -> bool:
    if text in _TRUE:
        return True
    if text in _FALSE:
        return False
    raise ValueError(f'parsing "{text}": invalid syntax')


class MutableFeatureGate:
    """A set of known features with values that may be overridden."""

    def __init__(self) -> None:
        self._known: dict[str, FeatureSpec] = {}
        self._enabled: dict[str, bool] = {}

    def add(self, specs: Mapping[str, FeatureSpec]) -> None:
        """Register features; re-adding one with a different spec is an error."""
        for name, spec in specs.items():
            existing = self._known.get(name)
            if existing is not None:
                if existing == spec:
                    continue
                raise ValueError(
                    f"feature gate {name} with different spec already exists: {existing}"
                )
            self._known[name] = spec

    def set(self, value: str) -> None:
        """Apply a "Name=bool,Other=bool" string."""
        mapping: dict[str, bool] = {}
        for item in value.split(","):
            if not item:
                continue
            key, sep, raw = item.partition("=")
            key = key.strip()
            if not sep:
                raise ValueError(f"missing bool value for {key}")
            raw = raw.strip()
            try:
                mapping[key] = _parse_bool(raw)
            except ValueError as exc:
                raise ValueError(f"invalid value of {key}={raw}, err: {exc}") from exc
        self.set_from_map(mapping)

    def set_from_map(self, mapping: Mapping[str, bool]) -> None:
        """Apply explicit values; nothing changes if any of them is rejected."""
        updated = dict(self._enabled)
        for name, value in mapping.items():
            spec = self._known.get(name)
            if spec is None:
                raise ValueError(f"unrecognized feature gate: {name}")
            if spec.lock_to_default and spec.default != value:
                raise ValueError(
                    f"cannot set feature gate {name} to {str(value).lower()}, "
                    f"feature is locked to {str(spec.default).lower()}"
                )
            updated[name] = value
        self._enabled = updated

    def enabled(self, feature: str) -> bool:
        """Whether the feature is on, explicitly or by default."""
        if feature in self._enabled:
            return self._enabled[feature]
        spec = self._known.get(feature)
        if spec is None:
            raise KeyError(f"feature {feature!r} is not registered in FeatureGate")
        return spec.default

    def get_all(self) -> dict[str, FeatureSpec]:
        """A copy of every registered feature and its spec."""
        return dict(self._known)


def convert_to_feature_gate_api(
    feature_gates: MutableFeatureGate,
    default_feature_gate: Mapping[str, FeatureSpec],
) -> list[FeatureGate]:
    """Turn gate values into API entries relative to a component's defaults."""
    features: list[FeatureGate] = []
    known = feature_gates.get_all()

    for feature in known:
        if feature not in default_feature_gate:
            continue
        if feature_gates.enabled(feature):
            features.append(FeatureGate(feature, FeatureGateMode.ENABLE))
        elif default_feature_gate[feature].default:
            features.append(FeatureGate(feature, FeatureGateMode.DISABLE))

    for feature, spec in default_feature_gate.items():
        if feature not in known and spec.default:
            features.append(FeatureGate(feature, FeatureGateMode.ENABLE))

    return features


def is_feature_enabled(feature_gates: Iterable[FeatureGate], feature: str) -> bool:
    """Whether the list explicitly enables the feature."""
    return any(
        fg.feature == feature and fg.mode == FeatureGateMode.ENABLE for fg in feature_gates
    )