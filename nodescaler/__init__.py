"""Data types, affinity relaxation and utilities for a node autoscaler."""

__version__ = "0.1.0"