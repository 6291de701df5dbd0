import importlib.util

import pytest

import affine2d

FUNCTIONS = [
    "deg2rad",
    "distance",
    "dot",
    "identity",
    "inverse",
    "multiply",
    "normalize",
    "projection",
    "rad2deg",
    "reflect",
    "rotation",
    "rotate",
    "scaling",
    "scale",
    "transform_point",
    "translation",
    "translate",
    "project",
]


@pytest.mark.parametrize("name", FUNCTIONS)
def test_function_is_exported(name):
    assert callable(getattr(affine2d, name))


@pytest.mark.parametrize("module", ["affine2d.io", "affine2d.canvas"])
def test_package_has_no_io_or_config_layer(module):
    assert importlib.util.find_spec(module) is None


def test_utils_only_exposes_coercion_and_units():
    import affine2d.utils as utils

    public = {name for name in vars(utils) if not name.startswith("_")}
    assert {"vec2", "mat3", "deg2rad", "rad2deg"} <= public
    assert "ensure_finite" not in public
