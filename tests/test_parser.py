import pytest

from variant_groups.core.errors import UnbalancedGroupingError
from variant_groups.core.expand.parser import parse
from variant_groups.core.expand.tokenizer import tokenize
from variant_groups.core.model import GroupNode, WordNode


def test_parse_flat_words():
    root = parse(tokenize("text-center font-bold"))
    assert root == GroupNode(prefix="", children=[WordNode("text-center"), WordNode("font-bold")])


def test_parse_nested_groups_keep_order():
    root = parse(tokenize("hover:(bg-red-500 md:(pl-3 pt-2)) mt-1"))
    assert root == GroupNode(
        prefix="",
        children=[
            GroupNode(
                prefix="hover:",
                children=[
                    WordNode("bg-red-500"),
                    GroupNode(prefix="md:", children=[WordNode("pl-3"), WordNode("pt-2")]),
                ],
            ),
            WordNode("mt-1"),
        ],
    )


def test_parse_prefix_status_is_positional():
    root = parse(tokenize("md: md:(p-1)"))
    assert root.children == [
        WordNode("md:"),
        GroupNode(prefix="md:", children=[WordNode("p-1")]),
    ]


def test_parse_empty_group():
    root = parse(tokenize("md:() p-1"))
    assert root.children == [GroupNode(prefix="md:", children=[]), WordNode("p-1")]


def test_parse_empty_token_list():
    assert parse([]) == GroupNode(prefix="")


def test_parse_unclosed_group():
    with pytest.raises(UnbalancedGroupingError) as exc:
        parse(tokenize("md:(pl-3"))
    assert exc.value.code == "E_UNBALANCED_GROUPING"
    assert exc.value.path == "end"
    assert "'md:'" in exc.value.message


def test_parse_stray_close():
    with pytest.raises(UnbalancedGroupingError) as exc:
        parse(tokenize(")md:(pl-3)"))
    assert exc.value.path == "tokens[0]"


def test_parse_extra_close_after_group():
    with pytest.raises(UnbalancedGroupingError):
        parse(tokenize("md:(pl-3))"))


def test_parse_open_without_prefix():
    with pytest.raises(UnbalancedGroupingError) as exc:
        parse(tokenize("(pl-3)"))
    assert exc.value.path == "tokens[0]"


def test_parse_open_separated_from_prefix():
    # "md: (" is a plain word followed by a bare group
    with pytest.raises(UnbalancedGroupingError):
        parse(tokenize("md: (pl-3)"))
