# ocmtools

`ocmtools` is a library of building blocks for tools that administer a
multi-cluster control plane: a hub cluster and the managed clusters that join
it. It uses only the Python standard library.

## Installation

```
pip install ocmtools
```

## Modules

- `ocmtools.clusteroption.ClusterOption`: the `-c/--cluster` and `--clusters`
  options for an `argparse` parser. `--clusters` takes a comma-separated list
  and may be repeated. `validate()` raises `ValueError` for an empty name in the
  list, or when neither option is set unless `allow_unset()` was called.
  `all_clusters()` returns the set of every cluster named.
- `ocmtools.featuregate`: `MutableFeatureGate` registers features with a
  `FeatureSpec` (`add`), takes values from a `"Name=true,Other=false"` string
  (`set`) or a dict (`set_from_map`), and answers `enabled` and `get_all`.
  `convert_to_feature_gate_api` turns the gate into a list of `FeatureGate`
  entries with a `FeatureGateMode` of `ENABLE` or `DISABLE`, relative to a
  component's default specs. `is_feature_enabled` tells whether such a list
  explicitly enables a feature.
- `ocmtools.version`: `get()` returns a `VersionInfo` with build information.
  `get_version_bundle(version, version_bundle_file)` returns a predefined
  `VersionBundle` for `"latest"`, `"default"` or a known release such as
  `"1.0.0"` / `"v1.0.0"`, and applies overrides from a JSON file when one is
  given. An unknown version raises `ValueError`. `get_default_bundle_version()`
  returns `"1.0.0"`.
- `ocmtools.cmdutil`: `get_example_header` (the command prefix shown in
  examples: `oc cm`, `kubectl cm`, or the program name), `dry_run_message`, and
  `rand_string_az09` for random lower-case alphanumeric names.
- `ocmtools.parse.parse_labels`: turns `key=value` strings into a dict, raising
  `ValueError` for anything else.
- `ocmtools.jsonout.write_json_output`: writes two-space indented JSON followed
  by a newline. `HubInfo` serialises with the keys `hub-token` and
  `hub-apiserver`.
- `ocmtools.preflight`: a `Checker` abstract base class (`check()`, `name()`) and
  `run_checks`, which writes warnings and a result line per check to a stream and
  raises `PreflightError` if any check reported errors.
- `ocmtools.check`: `check_for_hub`, `check_for_managed_cluster` and
  `check_for_klusterlet_crd` take any object with a
  `server_resources_for_group_version(group_version)` method and raise
  `RuntimeError` when the expected resource is not served. A discovery object
  signals a missing group version by raising `ResourceNotFoundError`.
- `ocmtools.quantity`: `parse_quantity` reads quantities such as `"100m"`,
  `"128Mi"` or `"1e3"` into an exact, comparable `Quantity` that prints back in
  the same notation.
- `ocmtools.resourcerequirement`: `new_resource_requirement` builds a
  `ResourceRequirement` from a `ResourceQosClass` and limit / request strings;
  `ensure_quantity` raises `ValueError` when a request exceeds its limit.
- `ocmtools.trie.Trie`, `ocmtools.treeprinter.TreePrinter`,
  `ocmtools.prefixwriter.PrefixWriter` and `ocmtools.crdstatus`: output helpers
  for status displays. They store dotted keys, render them as a text tree,
  write text indented two spaces per level, and summarise manifest works, CRDs
  and deployments given as plain dicts. `prefixwriter` also derives short
  status strings from pod and klusterlet dicts.

## Example

```python
from ocmtools.featuregate import FeatureSpec, MutableFeatureGate, convert_to_feature_gate_api
from ocmtools.version import get_version_bundle

defaults = {"AddonManagement": FeatureSpec(default=True)}
gates = MutableFeatureGate()
gates.add(defaults)
gates.set("AddonManagement=false")
print(convert_to_feature_gate_api(gates, defaults))
# [FeatureGate(feature='AddonManagement', mode=<FeatureGateMode.DISABLE: 'Disable'>)]

print(get_version_bundle("v1.0.0", "").ocm)  # v1.0.0
```

## What it does not do

`ocmtools` is a library only; it installs no command. It does not connect to a
cluster's API server: the checks take a discovery object you supply, and the
status helpers work on resource data you have already fetched as dicts. It does
not apply manifests, install charts, create tokens or wait for components to
become ready.

## Running the tests

```
pip install ocmtools[test]
pytest
```