"""Child building: per-type passes merged back into document order."""

from divi_blocks.processor.core import merge_by_offset
from divi_blocks.processor.models import ImageBlock, NodeType, RowGroup, TextBlock
from tests.markup import button, image, row, text


def _image(key: str) -> ImageBlock:
    return ImageBlock(key=key, asset_reference=f"image@{key}")


def test_merge_by_offset_orders_and_drops_empty_results():
    a, b, c = _image("a"), _image("b"), _image("c")

    merged = merge_by_offset([(5, b), (1, a)], [(3, None), (2, c)], [])

    assert [node.key for node in merged] == ["a", "c", "b"]


def test_order_follows_source_regardless_of_pass(converter):
    span = (
        text("<p>first</p>")
        + image("/uploads/a.png")
        + button("https://example.com", "Go")
        + text("<p>last</p>")
    )

    nodes = converter.build_children(span)

    assert [node.type for node in nodes] == [
        NodeType.TEXT,
        NodeType.IMAGE,
        NodeType.BUTTON,
        NodeType.TEXT,
    ]
    assert nodes[0].plain_text == "first"
    assert nodes[-1].plain_text == "last"


def test_empty_text_is_dropped(converter):
    nodes = converter.build_children(text("  ") + image("/uploads/a.png"))
    assert [node.type for node in nodes] == [NodeType.IMAGE]


def test_leaves_inside_a_row_are_also_siblings_of_the_row(converter):
    nodes = converter.build_children(row(image("/a.png"), button("https://example.com", "Go")))

    assert [node.type for node in nodes] == [NodeType.ROW, NodeType.IMAGE, NodeType.BUTTON]
    assert [item.type for item in nodes[0].items] == [NodeType.IMAGE, NodeType.BUTTON]


def test_row_and_its_leaves_follow_offset_order(converter):
    span = row(text("A"), text("B")) + text("C")

    nodes = converter.build_children(span)

    group, *leaves = nodes
    assert isinstance(group, RowGroup)
    assert [item.plain_text for item in group.items] == ["A", "B"]
    assert all(isinstance(leaf, TextBlock) for leaf in leaves)
    assert [leaf.plain_text for leaf in leaves] == ["A", "B", "C"]


def test_single_item_row_collapses_before_its_own_leaf(converter):
    span = text("before") + row(image("/uploads/a.png")) + text("after")

    nodes = converter.build_children(span)

    assert [node.type for node in nodes] == [NodeType.TEXT, NodeType.IMAGE, NodeType.IMAGE, NodeType.TEXT]


def test_unknown_modules_are_inert(converter):
    span = '[et_pb_divider show_divider="on"][/et_pb_divider][et_pb_blurb title="x"]Blurb[/et_pb_blurb]'
    assert converter.build_children(span) == []
