from nodescaler.injection import (
    get_config,
    get_controller_name,
    get_namespaced_name,
    get_options,
    with_config,
    with_controller_name,
    with_namespaced_name,
    with_options,
)
from nodescaler.model import NamespacedName
from nodescaler.options import Options


def test_namespaced_name_default_is_empty():
    assert get_namespaced_name() == NamespacedName()


def test_namespaced_name_bound_and_restored():
    key = NamespacedName("default", "pod-a")
    with with_namespaced_name(key) as bound:
        assert bound == key
        assert get_namespaced_name() == key
    assert get_namespaced_name() == NamespacedName()


def test_nested_bindings_restore_outer_value():
    outer = NamespacedName("a", "outer")
    inner = NamespacedName("b", "inner")
    with with_namespaced_name(outer):
        with with_namespaced_name(inner):
            assert get_namespaced_name() == inner
        assert get_namespaced_name() == outer


def test_options_default_and_bound():
    assert get_options() == Options()
    opts = Options(cluster_name="test-cluster")
    with with_options(opts):
        assert get_options() is opts
    assert get_options() == Options()


def test_config_default_and_bound():
    assert get_config() is None
    config = {"host": "https://test-cluster"}
    with with_config(config):
        assert get_config() is config
    assert get_config() is None


def test_controller_name_default_and_bound():
    assert get_controller_name() == ""
    with with_controller_name("termination"):
        assert get_controller_name() == "termination"
    assert get_controller_name() == ""


def test_binding_restored_after_exception():
    try:
        with with_controller_name("selection"):
            raise RuntimeError("fail")
    except RuntimeError:
        pass
    assert get_controller_name() == ""