import copy

import pytest

from thickline import config
from thickline.errors import ConfigError, InsufficientPoints, InvalidThickness, OutlineError, UnionFailure


def test_error_context_suffix():
    err = InvalidThickness("Thickness must be positive and finite.", {"thickness": -1.0})
    assert str(err) == "Thickness must be positive and finite. | thickness=-1.0"
    assert err.context == {"thickness": -1.0}


def test_error_without_context():
    assert str(UnionFailure("No shapes to union.")) == "No shapes to union."


def test_error_context_truncated():
    err = OutlineError("boom", {"values": list(range(100))})
    suffix = str(err).split(" | ", 1)[1]
    assert suffix.endswith("...")
    assert len(suffix) == len("values=") + 120


@pytest.mark.parametrize("cls", [InsufficientPoints, InvalidThickness, ConfigError])
def test_validation_errors_are_value_errors(cls):
    assert issubclass(cls, ValueError)
    assert issubclass(cls, OutlineError)


def test_union_failure_is_not_value_error():
    assert not issubclass(UnionFailure, ValueError)


def test_resolve_defaults():
    cfg = config.resolve_config()
    assert cfg == config.DEFAULTS
    assert cfg is not config.DEFAULTS
    assert cfg["disk"]["n_vertices"] == 200


def test_resolve_merges_without_mutation():
    before = copy.deepcopy(config.DEFAULTS)
    override = {"disk": {"n_vertices": 64}, "union": {"parallel": True}}
    cfg = config.resolve_config(override)
    assert cfg["disk"]["n_vertices"] == 64
    assert cfg["union"]["parallel"] is True
    assert cfg["union"]["eps_rel"] == before["union"]["eps_rel"]
    assert config.DEFAULTS == before
    assert override == {"disk": {"n_vertices": 64}, "union": {"parallel": True}}


@pytest.mark.parametrize(
    "override",
    [
        {"disks": {"n_vertices": 64}},
        {"disk": {"n_vertices": 4}},
        {"disk": {"n_vertices": 64.0}},
        {"disk": {"n_vertices": True}},
        {"union": {"eps_rel": 0.0}},
        {"union": {"eps_rel": "small"}},
        {"union": {"eps_rel": float("nan")}},
        {"union": {"threads": -1}},
        {"disk": {"n_vertice": 64}},
        {"union": {"eps": 1e-6}},
        {"disk": 64},
        {"union": {"parallel": "yes"}},
        {"union": {"parallel": 1}},
        {"input": {"allow_single_point": 0}},
    ],
)
def test_resolve_rejects_bad_values(override):
    with pytest.raises(ConfigError):
        config.resolve_config(override)


def test_unknown_key_is_named():
    with pytest.raises(ConfigError) as exc:
        config.resolve_config({"disk": {"n_vertice": 64}})
    assert exc.value.context == {"section": "disk", "keys": ["n_vertice"]}
