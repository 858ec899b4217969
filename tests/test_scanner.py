import io

import pytest

from tinylang.scanner import MAX_TOKEN_LEN, Scanner, scan
from tinylang.tokens import TokenType


def kinds(text):
    return [token.type for token in scan(text)]


def test_assignment_statement_tokens():
    tokens = scan("x := 12;\n")
    assert [t.type for t in tokens] == [
        TokenType.ID,
        TokenType.ASSIGN,
        TokenType.NUM,
        TokenType.SEMI,
        TokenType.ENDFILE,
    ]
    assert tokens[0].lexeme == "x"
    assert tokens[1].lexeme == ":="
    assert tokens[2].lexeme == "12"


def test_reserved_words_are_recognised():
    words = "if then else end repeat until read write"
    assert kinds(words) == [
        TokenType.IF,
        TokenType.THEN,
        TokenType.ELSE,
        TokenType.END,
        TokenType.REPEAT,
        TokenType.UNTIL,
        TokenType.READ,
        TokenType.WRITE,
        TokenType.ENDFILE,
    ]


@pytest.mark.parametrize(
    "symbol, expected",
    [
        (";", TokenType.SEMI),
        ("+", TokenType.PLUS),
        ("-", TokenType.MINUS),
        ("*", TokenType.TIMES),
        ("/", TokenType.OVER),
        ("(", TokenType.LPAREN),
        (")", TokenType.RPAREN),
        ("<", TokenType.LT),
        ("=", TokenType.EQ),
    ],
)
def test_single_character_symbols(symbol, expected):
    tokens = scan(symbol)
    assert [t.type for t in tokens] == [expected, TokenType.ENDFILE]
    assert tokens[0].lexeme == ""


def test_identifiers_are_letters_only():
    tokens = scan("x1")
    assert [(t.type, t.lexeme) for t in tokens[:2]] == [
        (TokenType.ID, "x"),
        (TokenType.NUM, "1"),
    ]


def test_number_followed_by_letters_splits():
    tokens = scan("12ab")
    assert [(t.type, t.lexeme) for t in tokens[:2]] == [
        (TokenType.NUM, "12"),
        (TokenType.ID, "ab"),
    ]


def test_reserved_word_prefix_is_identifier():
    tokens = scan("iffy")
    assert tokens[0].type is TokenType.ID
    assert tokens[0].lexeme == "iffy"


def test_comments_are_skipped():
    assert kinds("{ a comment } x") == [TokenType.ID, TokenType.ENDFILE]


def test_unterminated_comment_ends_file():
    assert kinds("x { never closed") == [TokenType.ID, TokenType.ENDFILE]


def test_lone_colon_is_error_and_next_char_survives():
    tokens = scan(":x")
    assert tokens[0].type is TokenType.ERROR
    assert tokens[0].lexeme == ":"
    assert tokens[1].type is TokenType.ID
    assert tokens[1].lexeme == "x"


def test_unknown_character_is_error_with_lexeme():
    tokens = scan("!")
    assert tokens[0].type is TokenType.ERROR
    assert tokens[0].lexeme == "!"


def test_long_identifier_is_truncated():
    name = "a" * 60
    tokens = scan(name)
    assert tokens[0].type is TokenType.ID
    assert tokens[0].lexeme == name[: MAX_TOKEN_LEN + 1]
    assert tokens[1].type is TokenType.ENDFILE


def test_line_numbers_follow_source_lines():
    tokens = scan("x\ny\n\nz\n")
    ids = [t for t in tokens if t.type is TokenType.ID]
    assert [t.lexeme for t in ids] == ["x", "y", "z"]
    linenos = [t.lineno for t in ids]
    assert linenos == sorted(linenos)
    assert linenos[0] == 1


def test_identifier_at_end_without_newline_keeps_its_line():
    tokens = scan("x")
    assert tokens[0].lineno == 1


def test_get_token_keeps_returning_endfile():
    scanner = Scanner("", listing=None)
    first = scanner.get_token()
    second = scanner.get_token()
    assert first.type is TokenType.ENDFILE
    assert second.type is TokenType.ENDFILE


def test_iteration_stops_after_endfile():
    tokens = list(Scanner("read x; write x"))
    assert tokens[-1].type is TokenType.ENDFILE
    assert sum(t.type is TokenType.ENDFILE for t in tokens) == 1
    assert len(tokens) == 6


def test_accepts_stream_source():
    tokens = list(Scanner(io.StringIO("write 5\n")))
    assert [t.type for t in tokens] == [
        TokenType.WRITE,
        TokenType.NUM,
        TokenType.ENDFILE,
    ]


def test_listing_echoes_source_and_traces_tokens():
    out = io.StringIO()
    list(Scanner("x := 1\n", listing=out))
    text = out.getvalue()
    assert text.startswith("   1: x := 1\n")
    assert "\t1: ID, name= x\n" in text
    assert "\t1: :=\n" in text
    assert "\t1: NUM, val= 1\n" in text
    assert text.endswith("EOF\n")


def test_echo_adds_newline_to_last_line():
    out = io.StringIO()
    list(Scanner("read y", listing=out, trace_lex=False))
    assert out.getvalue() == "   1: read y\n"


def test_trace_only_without_echo():
    out = io.StringIO()
    list(Scanner("write y", listing=out, echo_source=False))
    lines = out.getvalue().splitlines()
    assert lines[0] == "\t1: reserved word: write"
    assert lines[1] == "\t1: ID, name= y"
    assert all(line.startswith("\t") for line in lines)


def test_no_listing_output_when_tracing_disabled():
    out = io.StringIO()
    tokens = list(Scanner("x", listing=out, echo_source=False, trace_lex=False))
    assert out.getvalue() == ""
    assert tokens[0].lexeme == "x"


def test_scan_round_trip_of_lexemes():
    text = "repeat x := x - 1 until x < 0"
    values = [t.lexeme for t in scan(text) if t.type in (TokenType.ID, TokenType.NUM)]
    assert values == ["x", "x", "1", "x", "0"]