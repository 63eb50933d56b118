# tests/griddata/conftest.py
import copy

import pytest

from griddata.builder import GridBuilder
from griddata.context import GridContext

# A predictable grid: two sections, three rows, covering the default editors
# and one editor no converter knows about.
SAMPLE_GRID = {
    "name": "1 column layout",
    "sections": [
        {
            "grid": "12",
            "rows": [
                {
                    "id": "row-1",
                    "label": "Intro",
                    "name": "Headline",
                    "styles": {"background-color": "#fff"},
                    "areas": [
                        {
                            "grid": 12,
                            "allowAll": True,
                            "controls": [
                                {
                                    "value": "Welcome",
                                    "editor": {
                                        "alias": "headline",
                                        "name": "Headline",
                                        "view": "textstring",
                                        "icon": "icon-coin",
                                        "config": {"style": "font-size: 36px", "markup": "<h1>#value#</h1>"},
                                    },
                                },
                                {
                                    "value": "<p>Hello <b>world</b></p>",
                                    "editor": {"alias": "rte", "name": "Rich text editor", "view": "rte"},
                                },
                            ],
                        }
                    ],
                },
                {
                    "id": "row-2",
                    "name": "Media",
                    "areas": [
                        {
                            "grid": 6,
                            "allowed": ["media", "rte"],
                            "controls": [
                                {
                                    "value": {
                                        "id": 1051,
                                        "udi": "umb://media/5f3a",
                                        "image": "/media/1001/forest.jpg",
                                        "altText": "Forest",
                                        "caption": "A forest",
                                        "focalPoint": {"left": 0.3, "top": 0.6},
                                    },
                                    "editor": {"alias": "media", "name": "Image", "view": "media"},
                                }
                            ],
                        },
                        {
                            "grid": 6,
                            "controls": [
                                {"value": "<p></p>", "editor": {"alias": "rte", "name": "Rich text editor"}}
                            ],
                        },
                    ],
                },
            ],
        },
        {
            "grid": 4,
            "rows": [
                {
                    "id": "row-3",
                    "name": "Sidebar",
                    "areas": [
                        {
                            "grid": 4,
                            "controls": [
                                {"value": {"foo": "bar"}, "editor": {"alias": "custom-widget", "name": "Widget"}}
                            ],
                        }
                    ],
                }
            ],
        },
    ],
}


@pytest.fixture
def grid_json():
    """A fresh copy of the sample grid for each test."""
    return copy.deepcopy(SAMPLE_GRID)


@pytest.fixture
def context():
    return GridContext.create()


@pytest.fixture
def builder(context):
    return GridBuilder(context)


@pytest.fixture
def model(builder, grid_json):
    return builder.parse(grid_json)


def make_control(alias, value, **editor):
    """Returns the JSON of a single control."""
    return {"value": value, "editor": {"alias": alias, **editor}}


def make_grid(*controls):
    """Wraps control JSON objects in a one section, one row, one area grid."""
    return {
        "name": "test",
        "sections": [{"grid": 12, "rows": [{"id": "r", "areas": [{"grid": 12, "controls": list(controls)}]}]}],
    }
