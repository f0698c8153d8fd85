import yaml

from pathtrace.utils.yaml_utils import normalize_yaml_dict_keys


def test_boolean_and_numeric_keys_become_strings():
    data = yaml.safe_load("on: 1.0\n7: 2.0\nDirt: 2.5\n")
    assert set(data) == {True, 7, "Dirt"}
    assert normalize_yaml_dict_keys(data) == {"True": 1.0, "7": 2.0, "Dirt": 2.5}


def test_string_keys_unchanged():
    data = {"Highway": 1.0, "City": 1.5}
    assert normalize_yaml_dict_keys(data) == data
