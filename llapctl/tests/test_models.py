import dataclasses

import pytest

from llapctl.errors import LlapOptionsError, ValidationError
from llapctl.models import UNSPECIFIED, LlapConfiguration


def test_defaults():
    conf = LlapConfiguration(instances=1)
    assert conf.executors == UNSPECIFIED
    assert conf.cache_size == UNSPECIFIED
    assert conf.container_size == UNSPECIFIED
    assert conf.heap_size == UNSPECIFIED
    assert conf.include_hbase_jars is True
    assert dict(conf.properties) == {}


@pytest.mark.parametrize("instances", [0, -1, -100])
def test_instances_must_be_positive(instances):
    with pytest.raises(ValidationError):
        LlapConfiguration(instances=instances)


def test_validation_error_is_options_error():
    with pytest.raises(LlapOptionsError):
        LlapConfiguration(instances=0)


def test_is_frozen():
    conf = LlapConfiguration(instances=2)
    with pytest.raises(dataclasses.FrozenInstanceError):
        conf.instances = 0


def test_properties_are_detached_and_read_only():
    source = {"hive.llap.io.enabled": "true"}
    conf = LlapConfiguration(instances=1, properties=source)
    source["hive.llap.io.enabled"] = "false"
    assert conf.properties["hive.llap.io.enabled"] == "true"
    with pytest.raises(TypeError):
        conf.properties["x"] = "y"


def test_to_dict():
    conf = LlapConfiguration(instances=3, name="llap0", cache_size=1024, properties={"a": "b"})
    data = conf.to_dict()
    assert data["instances"] == 3
    assert data["name"] == "llap0"
    assert data["cache_size"] == 1024
    assert data["properties"] == {"a": "b"}
    assert data["slider_default_keytab"] is False


def test_equal_by_value_but_unhashable():
    assert LlapConfiguration(instances=2, properties={"a": "b"}) == \
        LlapConfiguration(instances=2, properties={"a": "b"})
    with pytest.raises(TypeError):
        hash(LlapConfiguration(instances=1))
