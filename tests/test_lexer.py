'''
Lexer tests
'''

import regex

from infix.lexer import tokenize
from infix.token import FunctionKind, OperatorKind, TokenKind
from infix.util import EmptyInput, LexError, MalformedNumber, \
    NonAsciiInput, UnexpectedCharacter

from pytest import mark, raises


def kinds(tokens):
    return [token.kind for token in tokens]


def texts(tokens):
    return [token.text for token in tokens]


def test_simple_sum():
    tokens = tokenize('3 + 4')
    assert kinds(tokens) == [TokenKind.NUMBER,
                             TokenKind.OPERATOR,
                             TokenKind.NUMBER]
    assert [t.value for t in tokens] == [3.0, OperatorKind.PLUS, 4.0]
    assert [(t.start, t.end) for t in tokens] == [(0, 1), (2, 3), (4, 5)]


def test_lexer_is_reusable(lexer):
    assert texts(lexer.tokenize('1+2')) == ['1', '+', '2']
    assert texts(lexer.tokenize('(x)')) == ['(', 'x', ')']


def test_all_operators():
    tokens = tokenize('1+2-3*4/5^6')
    assert [t.value for t in tokens if t.kind is TokenKind.OPERATOR] == [
        OperatorKind.PLUS,
        OperatorKind.MINUS,
        OperatorKind.MULTIPLY,
        OperatorKind.DIVIDE,
        OperatorKind.EXPONENT,
    ]


def test_multidigit_and_decimal_numbers():
    tokens = tokenize('12.5 * 300')
    assert texts(tokens) == ['12.5', '*', '300']
    assert tokens[0].value == 12.5
    assert (tokens[0].start, tokens[0].end) == (0, 4)
    assert (tokens[2].start, tokens[2].end) == (7, 10)


@mark.parametrize('text,value', [
    ('1.', 1.0),
    ('.5', 0.5),
    ('007', 7.0),
])
def test_numeral_spellings(text, value):
    token, = tokenize(text)
    assert token.kind is TokenKind.NUMBER
    assert token.value == value


def test_leading_minus_is_negative_number():
    tokens = tokenize('-5 + 3')
    assert kinds(tokens) == [TokenKind.NUMBER,
                             TokenKind.OPERATOR,
                             TokenKind.NUMBER]
    assert tokens[0].text == '-5'
    assert tokens[0].value == -5.0
    assert (tokens[0].start, tokens[0].end) == (0, 2)


def test_minus_after_number_is_subtraction():
    tokens = tokenize('3 - 5')
    assert kinds(tokens) == [TokenKind.NUMBER,
                             TokenKind.OPERATOR,
                             TokenKind.NUMBER]
    assert tokens[1].value is OperatorKind.MINUS


def test_minus_after_parenthesis_is_subtraction():
    tokens = tokenize('(1)-2')
    assert texts(tokens) == ['(', '1', ')', '-', '2']
    assert tokens[3].kind is TokenKind.OPERATOR


@mark.parametrize('line,negative', [
    ('3 - -5', '-5'),
    ('(-2)', '-2'),
    ('2 * -.5', '-.5'),
    ('sin -1', '-1'),
])
def test_minus_after_operator_starts_number(line, negative):
    tokens = tokenize(line)
    numbers = [t.text for t in tokens if t.kind is TokenKind.NUMBER]
    assert negative in numbers


def test_identifier_then_minus_is_sign():
    # Only numbers and ) are subtracted from
    assert texts(tokenize('x -1')) == ['x', '-1']
    assert kinds(tokenize('x -1')) == [TokenKind.IDENTIFIER, TokenKind.NUMBER]


@mark.parametrize('name,kind', [(kind.value, kind) for kind in FunctionKind])
def test_function_names(name, kind):
    token, = tokenize(name)
    assert token.kind is TokenKind.FUNCTION
    assert token.value is kind
    assert token.text == name


def test_function_names_any_case():
    token, = tokenize('SiN')
    assert token.value is FunctionKind.SIN
    assert token.text == 'SiN'


def test_identifier():
    token, = tokenize('Foo')
    assert token.kind is TokenKind.IDENTIFIER
    assert token.value == 'foo'
    assert token.text == 'Foo'


def test_identifier_stops_at_digit():
    assert texts(tokenize('sin2')) == ['sin', '2']


def test_dangling_underscore():
    with raises(UnexpectedCharacter) as excinfo:
        tokenize('log_')
    assert excinfo.value.offset == 3


@mark.parametrize('line,offset', [
    ('a_1', 1),
    ('x_2 + 1', 1),
    ('sin_3', 3),
    ('log_3', 3),
])
def test_underscore_only_in_function_names(line, offset):
    with raises(UnexpectedCharacter,
                match=regex.escape('Unexpected character `_` in input')) \
            as excinfo:
        tokenize(line)
    assert excinfo.value.offset == offset


def test_function_call():
    assert kinds(tokenize('sin(0)')) == [TokenKind.FUNCTION,
                                         TokenKind.LEFT_PARENTHESIS,
                                         TokenKind.NUMBER,
                                         TokenKind.RIGHT_PARENTHESIS]


def test_spaces_and_tabs_skipped():
    tokens = tokenize('1 \t+  2')
    assert texts(tokens) == ['1', '+', '2']
    assert [t.start for t in tokens] == [0, 3, 6]


def test_empty():
    with raises(EmptyInput, match=regex.escape('Input is empty!')):
        tokenize('')


def test_non_ascii():
    with raises(NonAsciiInput) as excinfo:
        tokenize('1 + π')
    assert excinfo.value.offset == 4


def test_non_ascii_checked_before_scanning():
    # Would otherwise be an unexpected & at 0
    with raises(NonAsciiInput):
        tokenize('& é')


def test_unexpected_character():
    with raises(UnexpectedCharacter,
                match=regex.escape('Unexpected character `&` in input')) \
            as excinfo:
        tokenize('3 & 4')
    assert excinfo.value.offset == 2
    assert (excinfo.value.start, excinfo.value.end) == (2, 3)


@mark.parametrize('line,offset,text', [
    ('1.2.3', 0, '1.2.3'),
    ('2 + 1..', 4, '1..'),
    ('.', 0, '.'),
    ('3 * -', 4, '-'),
    ('-(1)', 0, '-'),
])
def test_malformed_number(line, offset, text):
    with raises(MalformedNumber) as excinfo:
        tokenize(line)
    assert excinfo.value.offset == offset
    assert excinfo.value.text == text
    assert excinfo.value.end == offset + len(text)


def test_malformed_number_is_unexpected_character():
    with raises(UnexpectedCharacter):
        tokenize('1.2.3')
    with raises(LexError):
        tokenize('1.2.3')


@mark.parametrize('line', [
    '3 + 4',
    '  -1.5*(2 ^ x)  ',
    'log_10(100) / ln (2)\t- 7',
    '((1))',
])
def test_offsets_cover_input(line):
    covered = []
    for token in tokenize(line):
        assert token.start < token.end
        assert line[token.start:token.end] == token.text
        covered.extend(range(token.start, token.end))
    assert covered == sorted(set(covered))
    skipped = set(range(len(line))) - set(covered)
    assert all(line[offset].isspace() for offset in skipped)
