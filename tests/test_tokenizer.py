from variant_groups.core.expand.tokenizer import tokenize
from variant_groups.core.model import GroupClose, GroupOpen, Separator, Word


def test_tokenize_group():
    assert tokenize("md:(pl-3 pt-2)") == [
        Word("md:"),
        GroupOpen(),
        Word("pl-3"),
        Separator(),
        Word("pt-2"),
        GroupClose(),
    ]


def test_tokenize_each_whitespace_char_is_a_separator():
    assert tokenize("a  b") == [Word("a"), Separator(), Separator(), Word("b")]
    assert tokenize("a\n\tb") == [Word("a"), Separator(), Separator(), Word("b")]


def test_tokenize_empty_and_blank_input():
    assert tokenize("") == []
    assert tokenize("   ") == [Separator(), Separator(), Separator()]


def test_tokenize_bracket_literal_is_opaque():
    assert tokenize("w-[calc(100% - 1rem)] p-2") == [
        Word("w-[calc(100% - 1rem)]"),
        Separator(),
        Word("p-2"),
    ]


def test_tokenize_nested_brackets():
    assert tokenize("grid-cols-[[a]_(b)] x") == [
        Word("grid-cols-[[a]_(b)]"),
        Separator(),
        Word("x"),
    ]


def test_tokenize_text_after_bracket_stays_in_word():
    assert tokenize("[&>*]:p-2") == [Word("[&>*]:p-2")]


def test_tokenize_bracket_prefix_before_group():
    assert tokenize("[&_p]:(mt-0)") == [
        Word("[&_p]:"),
        GroupOpen(),
        Word("mt-0"),
        GroupClose(),
    ]


def test_tokenize_stray_closing_bracket_is_plain_text():
    assert tokenize("a] (") == [Word("a]"), Separator(), GroupOpen()]


def test_tokenize_unterminated_bracket_absorbs_rest():
    assert tokenize("md:(w-[10px) pt-2)") == [
        Word("md:"),
        GroupOpen(),
        Word("w-[10px) pt-2)"),
    ]
