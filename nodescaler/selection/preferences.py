"""Relaxation of a pod's soft scheduling constraints after failed attempts."""

from __future__ import annotations

import copy
import logging
import threading
import time
from datetime import timedelta
from typing import Callable

from cachetools import TTLCache

from nodescaler.model import Pod
from nodescaler.pretty import concise

EXPIRATION_TTL = timedelta(minutes=5)

_MAX_TRACKED_PODS = 1 << 20
_MISSING = object()

logger = logging.getLogger(__name__)


class Preferences:
    """Remembers each pod's affinity and strips one preference per retry.

    Preferred node affinity terms go first, heaviest weight first; then
    required terms are removed while more than one remains. A pod's
    relaxation is forgotten once it has not been updated for the TTL.
    """

    def __init__(
        self,
        ttl: timedelta = EXPIRATION_TTL,
        timer: Callable[[], float] = time.monotonic,
    ) -> None:
        self._cache: TTLCache = TTLCache(
            maxsize=_MAX_TRACKED_PODS, ttl=ttl.total_seconds(), timer=timer
        )
        self._lock = threading.Lock()

    def relax(self, pod: Pod) -> None:
        """Apply the remembered, possibly further relaxed, affinity to the pod."""
        with self._lock:
            cached = self._cache.get(pod.uid, _MISSING)
            if cached is _MISSING:
                self._cache[pod.uid] = copy.deepcopy(pod.affinity)
                return
            pod.affinity = copy.deepcopy(cached)
            if _relax(pod):
                self._cache[pod.uid] = copy.deepcopy(pod.affinity)


def _relax(pod: Pod) -> bool:
    for remove in (_remove_preferred_node_affinity_term, _remove_required_node_affinity_term):
        reason = remove(pod)
        if reason is not None:
            logger.debug(
                "Relaxing soft constraints for %s/%s since it previously failed to "
                "schedule, removing: %s",
                pod.namespace,
                pod.name,
                reason,
            )
            return True
    return False


def _remove_preferred_node_affinity_term(pod: Pod) -> str | None:
    affinity = pod.affinity
    if affinity is None or affinity.node_affinity is None or not affinity.node_affinity.preferred:
        return None
    # Heaviest preferences are dropped first so lighter ones get a chance.
    terms = sorted(affinity.node_affinity.preferred, key=lambda term: -term.weight)
    affinity.node_affinity.preferred = terms[1:]
    return (
        "spec.affinity.nodeAffinity.preferredDuringSchedulingIgnoredDuringExecution[0]="
        f"{concise(terms[0])}"
    )


def _remove_required_node_affinity_term(pod: Pod) -> str | None:
    affinity = pod.affinity
    if (
        affinity is None
        or affinity.node_affinity is None
        or affinity.node_affinity.required is None
        or not affinity.node_affinity.required.node_selector_terms
    ):
        return None
    terms = affinity.node_affinity.required.node_selector_terms
    # Terms are ORed; the last one can never be removed.
    if len(terms) > 1:
        affinity.node_affinity.required.node_selector_terms = terms[1:]
        return (
            "spec.affinity.nodeAffinity.requiredDuringSchedulingIgnoredDuringExecution[0]="
            f"{concise(terms[0])}"
        )
    return None