"""Command line and environment options for the controller process."""

from __future__ import annotations

import argparse
from dataclasses import dataclass
from enum import Enum
from urllib.parse import urlsplit

from nodescaler.env import with_default_bool, with_default_int, with_default_string

_TRUE = frozenset({"1", "t", "T", "TRUE", "true", "True"})
_FALSE = frozenset({"0", "f", "F", "FALSE", "false", "False"})


class NodeNameConvention(str, Enum):
    IP_NAME = "ip-name"
    RESOURCE_NAME = "resource-name"


class OptionsError(ValueError):
    """One or more options are invalid."""

    def __init__(self, errors: list[str]) -> None:
        self.errors = list(errors)
        super().__init__("; ".join(self.errors))


@dataclass
class Options:
    """Settings for running the controller."""

    cluster_name: str = ""
    cluster_endpoint: str = ""
    metrics_port: int = 0
    health_probe_port: int = 0
    webhook_port: int = 0
    kube_client_qps: int = 0
    kube_client_burst: int = 0
    aws_node_name_convention: str = ""
    aws_eni_limited_pod_density: bool = False
    aws_default_instance_profile: str = ""

    def validate(self) -> None:
        """Raise OptionsError listing every invalid option."""
        errors: list[str] = []
        endpoint_error = self._endpoint_error()
        if endpoint_error:
            errors.append(endpoint_error)
        if self.cluster_name == "":
            errors.append("CLUSTER_NAME is required")
        if self.aws_node_name_convention not in {c.value for c in NodeNameConvention}:
            errors.append(
                "aws-node-name-convention may only be either ip-name or resource-name"
            )
        if errors:
            raise OptionsError(errors)

    def _endpoint_error(self) -> str | None:
        try:
            parsed = urlsplit(self.cluster_endpoint)
            hostname = parsed.hostname
        except ValueError:
            parsed, hostname = None, None
        if parsed is None or not parsed.scheme or not hostname:
            return f'"{self.cluster_endpoint}" not a valid CLUSTER_ENDPOINT URL'
        return None

    def node_name_convention(self) -> NodeNameConvention:
        return NodeNameConvention(self.aws_node_name_convention)


def _parse_bool(text: str) -> bool:
    if text in _TRUE:
        return True
    if text in _FALSE:
        return False
    raise argparse.ArgumentTypeError(f"invalid boolean value {text!r}")


def parse_options(argv: list[str] | None = None) -> Options:
    """Parse flags over environment defaults and validate the result."""
    parser = argparse.ArgumentParser(prog="nodescaler", allow_abbrev=False)

    def add(name: str, dest: str, **kwargs) -> None:
        parser.add_argument(f"-{name}", f"--{name}", dest=dest, **kwargs)

    add("cluster-name", "cluster_name",
        default=with_default_string("CLUSTER_NAME", ""),
        help="The kubernetes cluster name for resource discovery")
    add("cluster-endpoint", "cluster_endpoint",
        default=with_default_string("CLUSTER_ENDPOINT", ""),
        help="The external kubernetes cluster endpoint for new nodes to connect with")
    add("metrics-port", "metrics_port", type=int,
        default=with_default_int("METRICS_PORT", 8080),
        help="The port the metric endpoint binds to")
    add("health-probe-port", "health_probe_port", type=int,
        default=with_default_int("HEALTH_PROBE_PORT", 8081),
        help="The port the health probe endpoint binds to")
    add("port", "webhook_port", type=int, default=8443,
        help="The port the webhook endpoint binds to")
    add("kube-client-qps", "kube_client_qps", type=int,
        default=with_default_int("KUBE_CLIENT_QPS", 200),
        help="The smoothed rate of qps to kube-apiserver")
    add("kube-client-burst", "kube_client_burst", type=int,
        default=with_default_int("KUBE_CLIENT_BURST", 300),
        help="The maximum allowed burst of queries to the kube-apiserver")
    add("aws-node-name-convention", "aws_node_name_convention",
        default=with_default_string(
            "AWS_NODE_NAME_CONVENTION", NodeNameConvention.IP_NAME.value
        ),
        help="The node naming convention used by the cloud provider")
    add("aws-eni-limited-pod-density", "aws_eni_limited_pod_density",
        type=_parse_bool, nargs="?", const=True,
        default=with_default_bool("AWS_ENI_LIMITED_POD_DENSITY", True),
        help="Whether new nodes should use ENI-based pod density")
    add("aws-default-instance-profile", "aws_default_instance_profile",
        default=with_default_string("AWS_DEFAULT_INSTANCE_PROFILE", ""),
        help="The default instance profile to use when provisioning nodes")

    namespace = parser.parse_args(argv)
    opts = Options(**vars(namespace))
    opts.validate()
    return opts