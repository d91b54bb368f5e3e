"""Checks that a command runs against the right kind of cluster."""

from __future__ import annotations

from typing import Iterable, Protocol

MANAGED_CLUSTER_RESOURCE_NAME = "managedclusters"
KLUSTERLET_RESOURCE_NAME = "klusterlets"
CLUSTER_CLAIM_RESOURCE_NAME = "clusterclaims"

CLUSTER_V1_GROUP_VERSION = "cluster.open-cluster-management.io/v1"
CLUSTER_V1ALPHA1_GROUP_VERSION = "cluster.open-cluster-management.io/v1alpha1"
OPERATOR_V1_GROUP_VERSION = "operator.open-cluster-management.io/v1"


class ResourceNotFoundError(LookupError):
    """The API server does not serve the requested group version."""


class Discovery(Protocol):
    def server_resources_for_group_version(self, group_version: str) -> Iterable[str]:
        """Names of the resources served for a group version."""


def check_for_hub(discovery: Discovery) -> None:
    """Raise RuntimeError unless the cluster is a hub."""
    msg = "hub oriented command should not running against non-hub cluster"
    try:
        resources = discovery.server_resources_for_group_version(CLUSTER_V1_GROUP_VERSION)
    except ResourceNotFoundError:
        raise RuntimeError(msg) from None
    except Exception as exc:
        raise RuntimeError(
            f"failed to list GroupVersion {CLUSTER_V1_GROUP_VERSION}: {exc}"
        ) from exc
    if MANAGED_CLUSTER_RESOURCE_NAME not in set(resources):
        raise RuntimeError(msg)


def check_for_klusterlet_crd(discovery: Discovery) -> None:
    """Raise RuntimeError unless the klusterlet resource is served."""
    resources = discovery.server_resources_for_group_version(OPERATOR_V1_GROUP_VERSION)
    if KLUSTERLET_RESOURCE_NAME not in set(resources):
        raise RuntimeError("klusterlet crd not found")


def check_for_managed_cluster(discovery: Discovery) -> None:
    """Raise RuntimeError unless the cluster is a managed cluster."""
    msg = "managed cluster oriented command should not running against non-managed cluster"
    try:
        resources = discovery.server_resources_for_group_version(
            CLUSTER_V1ALPHA1_GROUP_VERSION
        )
    except ResourceNotFoundError:
        raise RuntimeError(msg) from None
    except Exception as exc:
        raise RuntimeError(
            f"failed to list GroupVersion: {CLUSTER_V1ALPHA1_GROUP_VERSION}"
        ) from exc
    if CLUSTER_CLAIM_RESOURCE_NAME not in set(resources):
        raise RuntimeError(msg)