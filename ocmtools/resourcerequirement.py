"""Resource requirements for the agent and operator pods."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Mapping

from ocmtools.quantity import Quantity, parse_quantity


class ResourceQosClass(str, Enum):
    DEFAULT = "Default"
    BEST_EFFORT = "BestEffort"
    RESOURCE_REQUIREMENT = "ResourceRequirement"


@dataclass
class ResourceRequirements:
    limits: dict[str, Quantity] = field(default_factory=dict)
    requests: dict[str, Quantity] = field(default_factory=dict)


@dataclass
class ResourceRequirement:
    type: ResourceQosClass | None
    resource_requirements: ResourceRequirements | None = None


def new_resource_requirement(
    resource_type: ResourceQosClass | str | None,
    limits: Mapping[str, str] | None = None,
    requests: Mapping[str, str] | None = None,
) -> ResourceRequirement:
    """Build a requirement from a QoS class and quantity strings."""
    qos = ResourceQosClass(resource_type) if resource_type else None
    limits = dict(limits or {})
    requests = dict(requests or {})
    rr_class = ResourceQosClass.RESOURCE_REQUIREMENT

    if not limits and not requests:
        if qos is rr_class:
            raise ValueError(
                f"resource type is {qos.value} but both limits and requests are not set"
            )
        return ResourceRequirement(type=qos)

    if qos is None:
        qos = rr_class
    elif qos is not rr_class:
        raise ValueError(
            f"resource type must be {rr_class.value} when resource limits or requests are set"
        )

    requirements = ResourceRequirements(
        limits={name: parse_quantity(text) for name, text in limits.items()},
        requests={name: parse_quantity(text) for name, text in requests.items()},
    )
    ensure_quantity(requirements)
    return ResourceRequirement(type=qos, resource_requirements=requirements)


def ensure_quantity(requirements: ResourceRequirements) -> None:
    """Raise ValueError if any request is larger than its limit."""
    for name, limit in requirements.limits.items():
        request = requirements.requests.get(name)
        if request is None or request <= limit:
            continue
        raise ValueError(
            f"requests {request} must be less than or equal to limits {limit}"
        )