import pytest

from ocmtools.check import (
    ResourceNotFoundError,
    check_for_hub,
    check_for_klusterlet_crd,
    check_for_managed_cluster,
)


class FakeDiscovery:
    def __init__(self, served=None, error=None):
        self.served = served or {}
        self.error = error
        self.requested = []

    def server_resources_for_group_version(self, group_version):
        self.requested.append(group_version)
        if self.error is not None:
            raise self.error
        if group_version not in self.served:
            raise ResourceNotFoundError(group_version)
        return self.served[group_version]


HUB = {"cluster.open-cluster-management.io/v1": ["managedclusters", "managedclusters/status"]}
SPOKE = {"cluster.open-cluster-management.io/v1alpha1": ["clusterclaims"]}


def test_hub_passes():
    discovery = FakeDiscovery(HUB)
    check_for_hub(discovery)
    assert discovery.requested == ["cluster.open-cluster-management.io/v1"]


def test_hub_missing_group_version():
    with pytest.raises(RuntimeError, match="should not running against non-hub cluster"):
        check_for_hub(FakeDiscovery(SPOKE))


def test_hub_missing_resource():
    discovery = FakeDiscovery({"cluster.open-cluster-management.io/v1": ["other"]})
    with pytest.raises(RuntimeError, match="non-hub cluster"):
        check_for_hub(discovery)


def test_hub_other_error():
    with pytest.raises(RuntimeError, match="failed to list GroupVersion"):
        check_for_hub(FakeDiscovery(error=ConnectionError("down")))


def test_managed_cluster_passes_and_fails():
    discovery = FakeDiscovery(SPOKE)
    check_for_managed_cluster(discovery)
    assert discovery.requested == ["cluster.open-cluster-management.io/v1alpha1"]
    with pytest.raises(RuntimeError, match="non-managed cluster"):
        check_for_managed_cluster(FakeDiscovery(HUB))


def test_managed_cluster_other_error():
    with pytest.raises(RuntimeError, match="failed to list GroupVersion"):
        check_for_managed_cluster(FakeDiscovery(error=ConnectionError("down")))


def test_klusterlet_crd():
    served = {"operator.open-cluster-management.io/v1": ["klusterlets"]}
    discovery = FakeDiscovery(served)
    check_for_klusterlet_crd(discovery)
    assert discovery.requested == ["operator.open-cluster-management.io/v1"]
    missing = {"operator.open-cluster-management.io/v1": ["clustermanagers"]}
    with pytest.raises(RuntimeError, match="klusterlet crd not found"):
        check_for_klusterlet_crd(FakeDiscovery(missing))


def test_klusterlet_crd_propagates_errors():
    with pytest.raises(ResourceNotFoundError):
        check_for_klusterlet_crd(FakeDiscovery())