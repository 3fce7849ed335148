from pytest import Item, fixture

from infix.lexer import Lexer
from infix.shunting import Converter


@fixture
def lexer() -> Lexer:
    return Lexer()


@fixture
def converter() -> Converter:
    return Converter()


def pytest_assertion_pass(item: Item,
                          lineno: int,
                          orig: str,
                          expl: str) -> None:
    '''
    Print every passing assertion, to audit which conversions were checked.

    Use with pytest -rP to see it.
    '''
    item.add_report_section(
        'call', 'assertions',
        ' '.join(['given', item.name + ':' + str(lineno), str(orig)]) + '\n'
        + ' '.join(['actual', item.name + ':' + str(lineno),
                    '\n'.join(str(expl).splitlines()[:-2])]) + '\n')
