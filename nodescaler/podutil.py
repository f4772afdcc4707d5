"""Predicates describing a pod's scheduling and ownership state."""

from __future__ import annotations

from dataclasses import dataclass

from nodescaler.model import (
    POD_FAILED,
    POD_REASON_UNSCHEDULABLE,
    POD_SCHEDULED,
    POD_SUCCEEDED,
    Pod,
)


@dataclass(frozen=True)
class GroupVersionKind:
    group: str = ""
    version: str = ""
    kind: str = ""

    def group_version(self) -> str:
        """Return the API version string, e.g. "apps/v1" or "v1"."""
        if self.group:
            return f"{self.group}/{self.version}"
        return self.version


_DAEMON_SET = GroupVersionKind(group="apps", version="v1", kind="DaemonSet")
_NODE = GroupVersionKind(version="v1", kind="Node")


def failed_to_schedule(pod: Pod) -> bool:
    return any(
        c.type == POD_SCHEDULED and c.reason == POD_REASON_UNSCHEDULABLE for c in pod.conditions
    )


def is_scheduled(pod: Pod) -> bool:
    return pod.node_name != ""


def is_preempting(pod: Pod) -> bool:
    return pod.nominated_node_name != ""


def is_terminal(pod: Pod) -> bool:
    return pod.phase in (POD_FAILED, POD_SUCCEEDED)


def is_terminating(pod: Pod) -> bool:
    return pod.deletion_timestamp is not None


def is_owned_by_daemon_set(pod: Pod) -> bool:
    return is_owned_by(pod, [_DAEMON_SET])


def is_owned_by_node(pod: Pod) -> bool:
    """Return True if the pod is a static pod owned by a node."""
    return is_owned_by(pod, [_NODE])


def is_owned_by(pod: Pod, gvks: list[GroupVersionKind]) -> bool:
    return any(
        owner.api_version == gvk.group_version() and owner.kind == gvk.kind
        for gvk in gvks
        for owner in pod.owner_references
    )