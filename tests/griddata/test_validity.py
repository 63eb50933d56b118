# tests/griddata/test_validity.py
from griddata.builder import GridBuilder

from conftest import make_control


def _grid(rows):
    return {"sections": [{"grid": 12, "rows": rows}]}


def test_validity_is_or_of_children(model):
    """Every level is valid iff one of its children is."""
    for section in model.sections:
        for row in section.rows:
            for area in row.areas:
                assert area.is_valid == any(c.is_valid for c in area.controls)
            assert row.is_valid == any(a.is_valid for a in row.areas)
        assert section.is_valid == any(r.is_valid for r in section.rows)
    assert model.is_valid == any(s.is_valid for s in model.sections)


def test_sample_validity(model):
    row_2 = model.rows[1]
    assert model.is_valid
    assert row_2.areas[0].is_valid
    assert not row_2.areas[1].is_valid
    assert row_2.is_valid


def test_nodes_without_children_are_invalid(builder):
    model = builder.parse(_grid([{"id": "empty-row", "areas": [{"controls": []}]}, {"id": "no-areas"}]))
    empty_row, no_areas = model.rows
    assert not empty_row.areas[0].is_valid
    assert not empty_row.is_valid
    assert not no_areas.is_valid
    assert not model.is_valid


def test_only_invalid_controls(builder):
    model = builder.parse(_grid([{"id": "r", "areas": [{"controls": [
        make_control("rte", "<p></p>"),
        make_control("headline", "   "),
        make_control("macro", {"macroAlias": ""}),
    ]}]}]))
    assert not model.is_valid


def test_one_valid_control_makes_everything_valid(builder):
    model = builder.parse(_grid([
        {"id": "a", "areas": [{"controls": [make_control("rte", "<p></p>")]}]},
        {"id": "b", "areas": [
            {"controls": []},
            {"controls": [make_control("macro", {"macroAlias": "Form"})]},
        ]},
    ]))
    first, second = model.rows
    assert not first.is_valid
    assert second.is_valid
    assert model.sections[0].is_valid
    assert model.is_valid
