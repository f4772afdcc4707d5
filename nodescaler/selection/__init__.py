"""Relaxing the node affinity preferences of pods that failed to schedule."""

__all__ = ["preferences"]