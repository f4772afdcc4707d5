"""Plain data types describing the cluster objects the controllers work on."""

from __future__ import annotations

import copy
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

POD_SCHEDULED = "PodScheduled"
POD_REASON_UNSCHEDULABLE = "Unschedulable"
POD_FAILED = "Failed"
POD_SUCCEEDED = "Succeeded"
NODE_READY = "Ready"
CONDITION_TRUE = "True"
CONDITION_FALSE = "False"
LABEL_HOSTNAME = "kubernetes.io/hostname"
LABEL_TOPOLOGY_ZONE = "topology.kubernetes.io/zone"
NODE_SELECTOR_OP_IN = "In"
NODE_SELECTOR_OP_NOT_IN = "NotIn"
TAINT_NODE_UNSCHEDULABLE = "node.kubernetes.io/unschedulable"
TAINT_EFFECT_NO_SCHEDULE = "NoSchedule"
TOLERATION_OP_EXISTS = "Exists"
TOLERATION_OP_EQUAL = "Equal"


@dataclass(frozen=True)
class NamespacedName:
    """Key identifying an object by namespace and name."""

    namespace: str = ""
    name: str = ""

    def __str__(self) -> str:
        return f"{self.namespace}/{self.name}"


@dataclass
class OwnerReference:
    api_version: str
    kind: str
    name: str = ""
    uid: str = ""


@dataclass
class PodCondition:
    type: str
    status: str = ""
    reason: str = ""


@dataclass
class NodeSelectorRequirement:
    key: str
    operator: str
    values: list[str] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {"key": self.key, "operator": self.operator}
        if self.values:
            data["values"] = list(self.values)
        return data


@dataclass
class NodeSelectorTerm:
    match_expressions: list[NodeSelectorRequirement] | None = None
    match_fields: list[NodeSelectorRequirement] | None = None

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {}
        if self.match_expressions:
            data["matchExpressions"] = [r.to_dict() for r in self.match_expressions]
        if self.match_fields:
            data["matchFields"] = [r.to_dict() for r in self.match_fields]
        return data


@dataclass
class PreferredSchedulingTerm:
    weight: int
    preference: NodeSelectorTerm = field(default_factory=NodeSelectorTerm)

    def to_dict(self) -> dict[str, Any]:
        return {"weight": self.weight, "preference": self.preference.to_dict()}


@dataclass
class NodeSelector:
    node_selector_terms: list[NodeSelectorTerm] = field(default_factory=list)


@dataclass
class NodeAffinity:
    required: NodeSelector | None = None
    preferred: list[PreferredSchedulingTerm] = field(default_factory=list)


@dataclass
class Affinity:
    node_affinity: NodeAffinity | None = None
    pod_affinity: Any = None
    pod_anti_affinity: Any = None


@dataclass
class Toleration:
    key: str = ""
    operator: str = ""
    value: str = ""
    effect: str = ""
    toleration_seconds: int | None = None


@dataclass
class TopologySpreadConstraint:
    topology_key: str
    max_skew: int = 1
    when_unsatisfiable: str = "DoNotSchedule"
    label_selector: dict[str, str] = field(default_factory=dict)


@dataclass
class Container:
    name: str = ""
    requests: dict[str, Any] = field(default_factory=dict)
    limits: dict[str, Any] = field(default_factory=dict)


@dataclass
class Volume:
    name: str
    persistent_volume_claim: str | None = None


@dataclass
class Pod:
    name: str = ""
    namespace: str = ""
    uid: str = ""
    labels: dict[str, str] = field(default_factory=dict)
    annotations: dict[str, str] = field(default_factory=dict)
    owner_references: list[OwnerReference] = field(default_factory=list)
    deletion_timestamp: datetime | None = None
    node_name: str = ""
    node_selector: dict[str, str] = field(default_factory=dict)
    affinity: Affinity | None = None
    tolerations: list[Toleration] = field(default_factory=list)
    topology_spread_constraints: list[TopologySpreadConstraint] = field(default_factory=list)
    containers: list[Container] = field(default_factory=list)
    volumes: list[Volume] = field(default_factory=list)
    priority_class_name: str = ""
    nominated_node_name: str = ""
    phase: str = ""
    conditions: list[PodCondition] = field(default_factory=list)

    def deep_copy(self) -> Pod:
        """Return an independent copy of this pod."""
        return copy.deepcopy(self)


@dataclass
class NodeCondition:
    type: str = ""
    status: str = ""
    reason: str = ""


@dataclass
class Node:
    name: str = ""
    uid: str = ""
    labels: dict[str, str] = field(default_factory=dict)
    finalizers: list[str] = field(default_factory=list)
    deletion_timestamp: datetime | None = None
    unschedulable: bool = False
    conditions: list[NodeCondition] = field(default_factory=list)

    @property
    def namespace(self) -> str:
        """Nodes are cluster scoped and have no namespace."""
        return ""

    def deep_copy(self) -> Node:
        """Return an independent copy of this node."""
        return copy.deepcopy(self)


def object_key(obj: Any) -> NamespacedName:
    """Return the namespaced name identifying an object."""
    return NamespacedName(namespace=obj.namespace, name=obj.name)


def pod_namespaced_names(pods: list[Pod]) -> list[NamespacedName]:
    """Return the keys of the given pods, in order."""
    return [object_key(pod) for pod in pods]