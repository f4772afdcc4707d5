import pytest

from nodescaler.model import Container, Pod
from nodescaler.resources import (
    AWS_NEURON,
    AWS_POD_ENI,
    NVIDIA_GPU,
    Quantity,
    gpu_limits_for,
    limits_for_pods,
    merge,
    quantity,
    requests_for_pods,
)


@pytest.mark.parametrize("text", ["1", "100m", "1Gi", "2k", "500Mi", "1e3", "0"])
def test_parse_round_trip(text):
    assert str(quantity(text)) == text


@pytest.mark.parametrize(
    "left, right",
    [("1000m", "1"), ("1k", "1000"), ("1Ki", "1024"), ("1e3", "1k"), ("0.5", "500m")],
)
def test_equivalent_spellings_are_equal(left, right):
    assert quantity(left) == quantity(right)
    assert hash(quantity(left)) == hash(quantity(right))


@pytest.mark.parametrize("text", ["", "abc", "1x", "1.2.3", "Gi", " 1"])
def test_invalid_quantity_raises(text):
    with pytest.raises(ValueError):
        Quantity.parse(text)


def test_ordering():
    assert quantity("100m") < quantity("1") < quantity("1Ki")
    assert quantity("1Gi") > quantity("1G")


def test_addition_is_commutative_with_zero_identity():
    a, b = quantity("250m"), quantity("3Gi")
    assert a + b == b + a
    assert a + Quantity() == a
    assert Quantity() + b == b
    assert sum([a, b]) == a + b


def test_addition_keeps_binary_format():
    assert str(quantity("1Gi") + quantity("1Gi")) == "2Gi"


def test_merge_sums_per_resource():
    merged = merge({"cpu": quantity("1")}, {"cpu": quantity("500m"), "memory": "1Gi"})
    assert merged == {"cpu": quantity("1500m"), "memory": quantity("1Gi")}


def test_merge_with_nothing_is_empty():
    assert merge() == {}


def test_merge_rejects_non_quantity():
    with pytest.raises(TypeError):
        merge({"cpu": 1.5})


def test_requests_and_limits_for_pods():
    pod_a = Pod(containers=[
        Container(requests={"cpu": quantity("1")}, limits={"memory": quantity("1Gi")}),
    ])
    pod_b = Pod(containers=[Container(requests={"cpu": quantity("1")})])
    assert requests_for_pods(pod_a, pod_b) == {"cpu": quantity("2")}
    assert limits_for_pods(pod_a, pod_b) == {"memory": quantity("1Gi")}
    assert requests_for_pods() == {}


def test_gpu_limits_keep_only_accelerators():
    pod = Pod(containers=[
        Container(limits={NVIDIA_GPU: quantity("1"), "cpu": quantity("2")}),
        Container(limits={AWS_NEURON: quantity("4"), AWS_POD_ENI: quantity("1")}),
    ])
    limits = gpu_limits_for(pod)
    assert set(limits) == {NVIDIA_GPU, AWS_NEURON}
    assert limits[AWS_NEURON] == quantity("4")