'''
Infix to RPN converter.

Turns plain arithmetic and trigonometric expressions, such as
``sin(0) + 2 ^ 3 ^ 2``, into Reverse Polish Notation, ready to be fed to an RPN
calculator. Two stages: a lexer producing positioned tokens, and Dijkstra's
shunting-yard reordering them.

Does not evaluate anything, nor check that the result makes sense: ``1 2 +``
comes out as ``1 2 +``.
'''

from .cli import CLI
from .lexer import Lexer, tokenize
from .shunting import Converter, convert, render, to_rpn, to_rpn_text
from .token import Associativity, FunctionKind, OperatorKind, Token, \
    TokenKind
from .util import EmptyInput, ExpressionError, InvariantError, LexError, \
    MalformedNumber, NonAsciiInput, ParseError, UnbalancedParentheses, \
    UnexpectedCharacter


__all__ = ('CLI', 'Lexer', 'Converter',
           'tokenize', 'to_rpn', 'to_rpn_text', 'render', 'convert',
           'Token', 'TokenKind', 'OperatorKind', 'FunctionKind',
           'Associativity',
           'ExpressionError', 'LexError', 'ParseError', 'EmptyInput',
           'NonAsciiInput', 'UnexpectedCharacter', 'MalformedNumber',
           'UnbalancedParentheses', 'InvariantError')
