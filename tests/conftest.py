"""Shared fixtures for domxform tests."""

import pytest


@pytest.fixture
def init_2d():
    """A 2D init mixing alias and canonical names."""
    return {"a": 2, "b": 0.5, "m21": -1, "d": 3, "m41": 10, "f": 20}


@pytest.fixture
def init_3d():
    """A 3D init with a perspective component."""
    return {"m11": 1, "m22": 1, "m34": -0.01, "m43": 5}


@pytest.fixture
def mixed_transform_list():
    return "translate(10px, 1in) rotate(0.25turn) scale(2) skewX(100grad) perspective(1cm)"
