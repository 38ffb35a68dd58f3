"""Tests for structure classification and typed building."""

import logging

import pytest
from markupsafe import Markup

from ramitas.errors import MalformedNodeError
from ramitas.nodes import EMPTY, Element, Empty, Fragment, SafeText, Text
from ramitas.tree import Shape, build, classify, h


class TestClassify:
    def test_mapping_is_attributes(self) -> None:
        assert classify({"class": "x"}) is Shape.ATTRIBUTES

    def test_empty_sequence(self) -> None:
        assert classify([]) is Shape.EMPTY
        assert classify(()) is Shape.EMPTY

    def test_fragment(self) -> None:
        assert classify([["p"], ["p"]]) is Shape.FRAGMENT
        assert classify([Text("x")]) is Shape.FRAGMENT

    def test_element(self) -> None:
        assert classify(["p"]) is Shape.ELEMENT
        assert classify(["p", {"id": "x"}, "y"]) is Shape.ELEMENT

    def test_none(self) -> None:
        assert classify(None) is Shape.EMPTY

    def test_false_is_empty(self) -> None:
        assert classify(False) is Shape.EMPTY

    def test_non_string_iterables_are_fragments(self) -> None:
        assert classify(x for x in [["li", "a"]]) is Shape.FRAGMENT
        assert classify(map(str, [1])) is Shape.FRAGMENT
        assert classify(b"bytes") is Shape.TEXT

    def test_late_mapping_still_element(self) -> None:
        assert classify(["p", "x", {"a": "b"}]) is Shape.ELEMENT

    def test_unknown_node_type(self) -> None:
        from ramitas.nodes import Node

        with pytest.raises(MalformedNodeError):
            classify(Node())

    def test_safe(self) -> None:
        assert classify(Markup("<b>")) is Shape.SAFE_TEXT
        assert classify(SafeText("<b>")) is Shape.SAFE_TEXT

    def test_scalars(self) -> None:
        assert classify("x") is Shape.TEXT
        assert classify(0) is Shape.TEXT
        assert classify(0.5) is Shape.TEXT
        assert classify(True) is Shape.TEXT

    def test_typed_nodes(self) -> None:
        assert classify(EMPTY) is Shape.EMPTY
        assert classify(Fragment(())) is Shape.FRAGMENT
        assert classify(Element("p")) is Shape.ELEMENT
        assert classify(Text("x")) is Shape.TEXT


class TestBuild:
    def test_element_with_attrs(self) -> None:
        node = build(["p", {"class": "x"}, "hi", ["em", "there"]])
        assert node == Element(
            tag="p",
            attrs={"class": "x"},
            children=(Text("hi"), Element("em", None, (Text("there"),))),
        )

    def test_element_without_attrs(self) -> None:
        assert build(["p", "hi"]) == Element("p", None, (Text("hi"),))

    def test_fragment(self) -> None:
        assert build([["a"], ["b"]]) == Fragment((Element("a"), Element("b")))

    def test_empty_values(self) -> None:
        assert build(None) is EMPTY
        assert build(False) is EMPTY
        assert build([]) is EMPTY

    def test_safe_values(self) -> None:
        assert build(Markup("<b>")) == SafeText("<b>")

    def test_typed_node_passes_through(self) -> None:
        node = Element("p")
        assert build(node) is node

    def test_numeric_tag_stringified(self) -> None:
        assert build([1]) == Element("1")

    def test_late_mapping_becomes_text(self) -> None:
        node = build(["p", "text", {"class": "late"}])
        assert node == Element("p", None, (Text("text"), Text('class="late"')))

    def test_bare_mapping_becomes_text(self, caplog) -> None:
        with caplog.at_level(logging.DEBUG, logger="ramitas.tree"):
            assert build({"class": "x", "data": {"id": 1}}) == Text('class="x" data-id="1"')
        assert any(r.name == "ramitas.tree" for r in caplog.records)

    def test_generator_builds_fragment(self) -> None:
        node = build(["li", n] for n in range(2))
        assert node == Fragment(
            (Element("li", None, (Text(0),)), Element("li", None, (Text(1),)))
        )


_SHAPE_VARIANTS = {
    Shape.EMPTY: Empty,
    Shape.FRAGMENT: Fragment,
    Shape.ELEMENT: Element,
    Shape.SAFE_TEXT: SafeText,
    Shape.TEXT: Text,
    Shape.ATTRIBUTES: Text,
}


class TestClassifyAgreesWithBuild:
    @pytest.mark.parametrize(
        "make",
        [
            lambda: None,
            lambda: False,
            lambda: [],
            lambda: (),
            lambda: EMPTY,
            lambda: [["p"], ["p"]],
            lambda: (["li", x] for x in "ab"),
            lambda: map(str, [1, 2]),
            lambda: Fragment(()),
            lambda: ["p"],
            lambda: ["p", "x", {"a": "b"}],
            lambda: ("p", {"id": 1}),
            lambda: Element("p"),
            lambda: Markup("<b>"),
            lambda: SafeText("<b>"),
            lambda: "x",
            lambda: 0,
            lambda: 0.5,
            lambda: True,
            lambda: b"x",
            lambda: Text("x"),
            lambda: object(),
            lambda: {"class": "x"},
        ],
    )
    def test_built_variant_matches_shape(self, make) -> None:
        shape = classify(make())
        assert isinstance(build(make()), _SHAPE_VARIANTS[shape])


class TestMalformedTags:
    @pytest.mark.parametrize("tag", [None, {"a": 1}, b"p", True, ""])
    def test_bad_tags(self, tag: object) -> None:
        with pytest.raises(MalformedNodeError):
            build(["div", [tag, "x"]])

    def test_path_reported(self) -> None:
        with pytest.raises(MalformedNodeError) as exc_info:
            build(["div", ["p", "ok"], [None, "bad"]])
        assert exc_info.value.path == (2, 0)
        assert "root[2][0]" in str(exc_info.value)


class TestH:
    def test_builds_element(self) -> None:
        assert h("a", {"href": "/"}, "Home") == Element(
            "a", {"href": "/"}, (Text("Home"),)
        )

    def test_nested(self) -> None:
        node = h("ul", [h("li", "one"), h("li", "two")])
        assert node.children == (
            Fragment((Element("li", None, (Text("one"),)), Element("li", None, (Text("two"),)))),
        )

    def test_rejects_bad_tag(self) -> None:
        with pytest.raises(MalformedNodeError):
            h(["p"])  # type: ignore[arg-type]
