# nodescaler

Building blocks for a node autoscaler. The package works on plain Python
dataclasses that describe pods and nodes, and offers helpers for reasoning
about their scheduling state, resources and constraints.

## What it contains

- `nodescaler.model`: dataclasses for `Pod`, `Node`, `Affinity`,
  `NodeAffinity`, `NodeSelector`, `NodeSelectorTerm`,
  `NodeSelectorRequirement`, `PreferredSchedulingTerm`, `Toleration`,
  `TopologySpreadConstraint`, `Container`, `Volume`, `OwnerReference`,
  `PodCondition`, `NodeCondition` and `NamespacedName`, plus `object_key` and
  `pod_namespaced_names`. `Pod.deep_copy` and `Node.deep_copy` return
  independent copies.
- `nodescaler.selection.preferences`: `Preferences.relax(pod)` remembers a
  pod's affinity the first time it sees the pod's UID, and on each later call
  removes one constraint: the heaviest preferred node affinity term first,
  then required node selector terms while more than one is left. What was
  remembered for a pod is forgotten after five minutes without an update.
- `nodescaler.podutil`: `failed_to_schedule`, `is_scheduled`,
  `is_preempting`, `is_terminal`, `is_terminating`, `is_owned_by`,
  `is_owned_by_daemon_set`, `is_owned_by_node`, and `GroupVersionKind`.
- `nodescaler.nodeutil`: `is_ready` and `get_condition`.
- `nodescaler.resources`: exact `Quantity` values parsed from strings such as
  `"100m"`, `"1Gi"` or `"2e3"`, and `merge`, `requests_for_pods`,
  `limits_for_pods` and `gpu_limits_for`.
- `nodescaler.functional`: `union_string_maps`, `string_slice_without`,
  `intersect_string_slice`, `unique_strings`, `contains_string`,
  `has_any_prefix`.
- `nodescaler.options`: the `Options` dataclass, `parse_options(argv)`,
  `NodeNameConvention` and `OptionsError`.
- `nodescaler.env`: `with_default_int`, `with_default_string`,
  `with_default_bool`.
- `nodescaler.injection`: context managers that bind a namespaced name,
  options, a client configuration or a controller name to the current
  execution context, with matching getters.
- `nodescaler.parallel`: `WorkQueue`, a thread-safe task runner limited to a
  number of task starts per second with a burst.
- `nodescaler.result`: `Result` and `min_result`.
- `nodescaler.metrics`: `duration_buckets()` and `measure(observer)`.
- `nodescaler.pretty`: `concise(obj)` renders an object as compact JSON.
- `nodescaler.project`: `VERSION` and `relative_to_root(path)`.

## Examples

Intersecting label value sets, where `None` stands for "any value":

```python
from nodescaler.functional import intersect_string_slice, union_string_maps

intersect_string_slice(["a", "b", "c"], None, ["a", "b", "d"])
# ['a', 'b']

union_string_maps({"a": "b"}, {"a": "y", "c": "d"})
# {'a': 'y', 'c': 'd'}
```

Relaxing a pod's preferences across scheduling attempts:

```python
from nodescaler.model import (
    Affinity, NodeAffinity, NodeSelectorRequirement, NodeSelectorTerm, Pod,
    PreferredSchedulingTerm,
)
from nodescaler.selection.preferences import Preferences

def zone(name):
    return NodeSelectorTerm(match_expressions=[
        NodeSelectorRequirement("topology.kubernetes.io/zone", "In", [name]),
    ])

pod = Pod(name="web", namespace="default", uid="uid-1", affinity=Affinity(
    node_affinity=NodeAffinity(preferred=[
        PreferredSchedulingTerm(weight=100, preference=zone("zone-a")),
        PreferredSchedulingTerm(weight=1, preference=zone("zone-b")),
    ]),
))

preferences = Preferences()
preferences.relax(pod)  # first sight: remembered, unchanged
preferences.relax(pod)  # the weight-100 term is removed
[t.weight for t in pod.affinity.node_affinity.preferred]
# [1]
```

Adding up resources:

```python
from nodescaler.resources import merge

totals = merge({"cpu": "500m"}, {"cpu": "1500m", "memory": "1Gi"})
str(totals["cpu"]), str(totals["memory"])
# ('2', '1Gi')
```

Reading options from flags, with environment variables as defaults:

```python
from nodescaler.options import OptionsError, parse_options

try:
    opts = parse_options(["--cluster-name", "demo",
                          "--cluster-endpoint", "https://demo.example.com"])
except OptionsError as err:
    print(err.errors)
```

`Options.validate` reports every problem at once: an endpoint that is not a
URL with a scheme and a host, a missing cluster name, or a node name
convention other than `ip-name` or `resource-name`.

Picking the soonest requeue among several results:

```python
from datetime import timedelta
from nodescaler.result import Result, min_result

min_result(Result(), Result(requeue_after=timedelta(seconds=30)),
           Result(requeue_after=timedelta(seconds=5)))
# Result(requeue=True, requeue_after=datetime.timedelta(seconds=5))
```

Running rate-limited tasks:

```python
from nodescaler.parallel import WorkQueue

with WorkQueue(qps=10, burst=5) as queue:
    future = queue.add(lambda: 42)
    future.result()
# 42
```

## What it does not do

The package has no cluster client, no reconcile loops and no command to run.
It does not pick a provisioner for a pending pod, does not read node
requirements from persistent volumes or storage classes, and does not cordon,
drain or delete nodes. Those steps are left to the code that uses these
building blocks.

## Tests

The test suite uses pytest and is installed with the `test` extra.