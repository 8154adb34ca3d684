"""
Shared test fixtures — test client, profiles, sample components.
"""

import pytest
from fastapi.testclient import TestClient

from rebarcalc.main import app
from rebarcalc.profiles import get_profile
from rebarcalc.schemas import ConcreteComponent, FourSides


@pytest.fixture
def client():
    """FastAPI test client."""
    return TestClient(app)


@pytest.fixture
def is456():
    return get_profile("IS456")


@pytest.fixture
def bs8110():
    return get_profile("BS8110")


@pytest.fixture
def slab_panel():
    """
    Two-way slab panel as it appears on a site BBS sheet:
    3160 x 1350 panel, 125 thick, 30 cover, 160 wide beams all round,
    425 top extensions.
    """
    return ConcreteComponent(
        id="S1",
        name="Slab Panel S1",
        component_type="SLAB",
        span_x=3160,
        span_y=1350,
        depth=125,
        cover=30,
        beam_widths=FourSides(left=160, right=160, top=160, bottom=160),
        top_extensions=FourSides(left=425, right=425, top=425, bottom=425),
    )


@pytest.fixture
def beam():
    """4 m beam, 230 wide, 450 deep, 25 cover."""
    return ConcreteComponent(
        id="B1",
        name="Beam B1",
        component_type="BEAM",
        span_x=4000,
        span_y=230,
        depth=450,
        cover=25,
    )


@pytest.fixture
def column():
    """300 x 450 column, 3 m high, 40 cover."""
    return ConcreteComponent(
        id="C1",
        name="Column C1",
        component_type="COLUMN",
        span_x=300,
        span_y=450,
        depth=3000,
        cover=40,
    )
