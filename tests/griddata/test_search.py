# tests/griddata/test_search.py
from griddata.builder import GridBuilder
from griddata.context import GridContext
from griddata.search import SearchTextVisitor, SearchTextWriter

from conftest import make_control, make_grid

MEDIA_TOKEN = {"id": 1, "image": "/media/1/a.jpg", "caption": "Not indexed"}


def test_html_and_media_produce_one_line(context):
    """Tags become spaces and media contributes nothing."""
    model = GridBuilder(context).parse(make_grid(
        make_control("rte", "<p>Hello <b>world</b></p>"),
        make_control("media", MEDIA_TOKEN),
    ))

    lines = SearchTextVisitor(context).visit(model)

    assert lines == ["Hello  world"]


def test_normalize_whitespace_feature():
    context = GridContext.create(features={"normalize_whitespace": True})
    model = GridBuilder(context).parse(make_grid(make_control("rte", "<p>Hello <b>world</b></p>")))
    assert SearchTextVisitor(context).visit(model) == ["Hello world"]


def test_sample_grid_lines_in_document_order(model, context):
    """Headline, rich text; the empty rich text, media and unknown editor add nothing."""
    assert SearchTextVisitor(context).visit(model) == ["Welcome", "Hello  world"]


def test_traversal_is_idempotent(model, context):
    visitor = SearchTextVisitor(context)
    first = visitor.visit(model)
    second = visitor.visit(model)
    assert first == second
    assert first is not second


def test_visit_subtree(model, context):
    visitor = SearchTextVisitor(context)
    assert visitor.visit(model.rows[1]) == []
    assert visitor.visit(model.rows[0].areas[0].controls[0]) == ["Welcome"]
    assert visitor.visit(model.rows[0].areas[0].controls[1].value) == ["Hello  world"]


def test_write_appends_to_existing_writer(model, context):
    writer = SearchTextWriter()
    writer.write_line("title")
    SearchTextVisitor(context).write(model, writer)
    assert writer.lines == ["title", "Welcome", "Hello  world"]
    assert writer.getvalue() == "title\nWelcome\nHello  world"


def test_get_searchable_text(model, context):
    assert model.get_searchable_text(context) == "Welcome\nHello  world"


def test_empty_model_has_no_text(builder):
    assert SearchTextVisitor().visit(builder.parse({})) == []
