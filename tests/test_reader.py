import pytest
from hypothesis import given, strategies as st

from mal.errors import MalEOFError, MalSyntaxError
from mal.printer import pr_str
from mal.reader.parser import TokenStream, read_all, read_str
from mal.reader.tokenizer import Tokenizer
from mal.types.boolean import FALSE, TRUE
from mal.types.hash_map import HashMap
from mal.types.kinds import INT_MAX, INT_MIN
from mal.types.nil import Nil
from mal.types.sequences import List, Vector
from mal.types.symbol import Keyword, Symbol


def same_shape(a, b):
    """Equal values with the same tag at every level; List and Vector differ here."""
    if type(a) is not type(b) or a != b:
        return False
    if isinstance(a, (List, Vector)):
        return all(same_shape(x, y) for x, y in zip(a, b))
    if isinstance(a, HashMap):
        b_keys = {k: k for k in b}
        return all(same_shape(k, b_keys[k]) and same_shape(a[k], b[k]) for k in a)
    return True


@pytest.mark.parametrize(
    "source, expected",
    [
        ("nil", Nil),
        ("true", TRUE),
        ("false", FALSE),
        ("123", 123),
        ("-45", -45),
        ("abc", Symbol("abc")),
        ("-", Symbol("-")),
        (":kw", Keyword("kw")),
        ('"hello"', "hello"),
        ('""', ""),
        ("(a b c)", List((Symbol("a"), Symbol("b"), Symbol("c")))),
        ("()", List(())),
        ("[1 2]", Vector((1, 2))),
        ("{:a 1 \"b\" 2}", HashMap({Keyword("a"): 1, "b": 2})),
        ("{}", HashMap()),
    ],
)
def test_parser(source, expected):
    result = read_str(source)
    assert result == expected
    assert type(result) is type(expected)


@pytest.mark.parametrize(
    "source, head",
    [
        ("'a", "quote"),
        ("`a", "quasiquote"),
        ("~a", "unquote"),
        ("~@a", "splice-unquote"),
        ("@a", "deref"),
    ],
)
def test_quote_reader_macros(source, head):
    assert read_str(source) == List((Symbol(head), Symbol("a")))


def test_quote_wraps_a_whole_form():
    assert read_str("'(1 2)") == List((Symbol("quote"), List((1, 2))))


def test_with_meta_swaps_operands():
    result = read_str('^{"a" 1} [1 2 3]')
    assert result == List((Symbol("with-meta"), Vector((1, 2, 3)), HashMap({"a": 1})))


def test_nested_collections():
    result = read_str("((a [b]) {:k (c)})")
    assert result == List((
        List((Symbol("a"), Vector((Symbol("b"),)))),
        HashMap({Keyword("k"): List((Symbol("c"),))}),
    ))
    assert isinstance(result[0][1], Vector)


@pytest.mark.parametrize(
    "source, expected",
    [
        (r'"a\"b"', 'a"b'),
        (r'"a\\b"', "a\\b"),
        (r'"line\nbreak"', "line\nbreak"),
        (r'"\q"', "q"),
    ],
)
def test_string_escapes_are_decoded(source, expected):
    assert read_str(source) == expected


def test_comments_are_skipped():
    assert read_str("; leading\n(a ; inner\n b)") == List((Symbol("a"), Symbol("b")))


@pytest.mark.parametrize("source", ["", "   ", "; comment only", ",,,"])
def test_no_form(source):
    assert read_str(source) is None


def test_read_str_returns_first_form_only():
    assert read_str("1 2 3") == 1


def test_read_all():
    assert read_all("1 (a) ; c\n :k") == [1, List((Symbol("a"),)), Keyword("k")]


def test_parse_all_generator():
    stream = TokenStream(Tokenizer("x y"))
    assert list(stream.parse_all()) == [Symbol("x"), Symbol("y")]


def test_symbols_and_keywords_are_distinct():
    assert read_str("abc") != read_str(":abc")
    assert read_str("abc") != read_str('"abc"')


def test_eof_in_list_keeps_partial():
    with pytest.raises(MalEOFError) as exc:
        read_str("(1 2")
    assert exc.value.partial == List((1, 2))


def test_eof_in_nested_collections_keeps_whole_partial():
    with pytest.raises(MalEOFError) as exc:
        read_str("(1 [2 (3")
    partial = exc.value.partial
    assert partial == List((1, Vector((2, List((3,))))))
    assert isinstance(partial[1], Vector)


def test_eof_in_vector():
    with pytest.raises(MalEOFError) as exc:
        read_str("[1")
    assert isinstance(exc.value.partial, Vector)


def test_eof_in_map():
    with pytest.raises(MalEOFError) as exc:
        read_str("{:a 1 :b")
    assert exc.value.partial == HashMap({Keyword("a"): 1})


def test_map_key_without_value():
    with pytest.raises(MalSyntaxError) as exc:
        read_str("{:a 1 :b}")
    assert not isinstance(exc.value, MalEOFError)
    assert exc.value.partial == HashMap({Keyword("a"): 1})


def test_unterminated_string_inside_list_keeps_partial():
    with pytest.raises(MalEOFError) as exc:
        read_str('(a "oops')
    assert exc.value.partial == List((Symbol("a"),))


def test_eof_after_quote():
    with pytest.raises(MalEOFError) as exc:
        read_str("'")
    assert exc.value.partial == List((Symbol("quote"),))


@pytest.mark.parametrize("source, partial", [
    ("^", List((Symbol("with-meta"),))),
    ('^{"a" 1}', List((Symbol("with-meta"), Nil, HashMap({"a": 1})))),
    ('^{"a" 1} [1 2', List((Symbol("with-meta"), Vector((1, 2)), HashMap({"a": 1})))),
    ('^{"a"', List((Symbol("with-meta"), Nil, HashMap({})))),
])
def test_eof_after_meta_keeps_partial(source, partial):
    with pytest.raises(MalEOFError) as exc:
        read_str(source)
    assert exc.value.partial == partial
    assert same_shape(exc.value.partial, partial)


@pytest.mark.parametrize("source", [
    "9223372036854775807",
    "-9223372036854775808",
])
def test_integer_literal_at_64_bit_bounds(source):
    assert read_str(source) == int(source)


@pytest.mark.parametrize("source", [
    "9223372036854775808",
    "-9223372036854775809",
    "12345678901234567890123",
])
def test_integer_literal_out_of_range(source):
    with pytest.raises(MalSyntaxError) as exc:
        read_str(source)
    assert not isinstance(exc.value, MalEOFError)
    assert "out of 64-bit range" in str(exc.value)


@pytest.mark.parametrize("source", [")", "]", "(a ]"])
def test_unexpected_closer(source):
    with pytest.raises(MalSyntaxError):
        read_str(source)


# -------------------------------
# Hypothesis tests
# -------------------------------
_RESERVED = {"nil", "true", "false"}

symbol_strat = st.from_regex(r"[a-z*+!?<>=_-][a-z0-9*+!?<>=_-]{0,8}", fullmatch=True).filter(
    lambda s: s not in _RESERVED and not (s[0] == "-" and s[1:2].isdigit())
).map(Symbol)
keyword_strat = st.from_regex(r"[a-z][a-z0-9-]{0,8}", fullmatch=True).map(Keyword)
int_strat = st.integers(min_value=INT_MIN, max_value=INT_MAX)
atom_strat = st.one_of(
    int_strat,
    st.text(max_size=20),
    symbol_strat,
    keyword_strat,
    st.sampled_from([Nil, TRUE, FALSE]),
)
key_strat = st.one_of(int_strat, st.text(max_size=10), keyword_strat)

value_strat = st.recursive(
    atom_strat,
    lambda children: st.one_of(
        st.lists(children, max_size=4).map(List),
        st.lists(children, max_size=4).map(Vector),
        st.dictionaries(key_strat, children, max_size=3).map(HashMap),
    ),
    max_leaves=15,
)


@given(value_strat)
def test_print_read_round_trip(value):
    assert same_shape(read_str(pr_str(value, True)), value)


@given(st.text(max_size=40))
def test_reader_no_crash(source):
    try:
        read_all(source)
    except MalSyntaxError:
        pass
