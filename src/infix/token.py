'''
Token model: what the lexer emits and the converter reorders.
'''

from enum import Enum
from string import whitespace
from typing import NamedTuple, Any

from .util import InvariantError


class Associativity(Enum):
    LEFT = 'left'
    RIGHT = 'right'


class OperatorKind(Enum):
    '''
    Binary operators, with their symbol, precedence and associativity.
    '''
    PLUS = '+', 0, Associativity.LEFT
    MINUS = '-', 0, Associativity.LEFT
    MULTIPLY = '*', 1, Associativity.LEFT
    DIVIDE = '/', 1, Associativity.LEFT
    EXPONENT = '^', 2, Associativity.RIGHT

    def __init__(self, symbol, precedence, associativity):
        self.symbol = symbol
        self.precedence = precedence
        self.associativity = associativity

    @classmethod
    def from_char(cls, char):
        '''
        Return operator spelled by this character, or None.
        '''
        return _OPERATORS.get(char)


_OPERATORS = {kind.symbol: kind for kind in OperatorKind}


class FunctionKind(Enum):
    SIN = 'sin'
    COS = 'cos'
    TAN = 'tan'
    SINH = 'sinh'
    COSH = 'cosh'
    TANH = 'tanh'
    LN = 'ln'
    LOG2 = 'log_2'
    LOG10 = 'log_10'

    @classmethod
    def from_name(cls, name):
        '''
        Return function called this (case-insensitively), or None.
        '''
        try:
            return cls(name.lower())
        except ValueError:
            return None


class CharClass(Enum):
    '''
    What a single input character can start.
    '''
    LETTER = 'letter'
    # Digits and . both start a numeral
    DIGIT = 'digit'
    OPERATOR = 'operator'
    LEFT_PARENTHESIS = 'left parenthesis'
    RIGHT_PARENTHESIS = 'right parenthesis'
    SPACE = 'space'
    OTHER = 'other'

    @classmethod
    def of(cls, char):
        if not char.isascii():
            return cls.OTHER
        elif char.isalpha():
            return cls.LETTER
        elif char.isdigit() or char == '.':
            return cls.DIGIT
        elif char in _OPERATORS:
            return cls.OPERATOR
        elif char == '(':
            return cls.LEFT_PARENTHESIS
        elif char == ')':
            return cls.RIGHT_PARENTHESIS
        elif char in whitespace:
            return cls.SPACE
        else:
            return cls.OTHER


class TokenKind(Enum):
    NUMBER = 'number'
    IDENTIFIER = 'identifier'
    FUNCTION = 'function'
    OPERATOR = 'operator'
    LEFT_PARENTHESIS = 'left parenthesis'
    RIGHT_PARENTHESIS = 'right parenthesis'


_PARENTHESES = {TokenKind.LEFT_PARENTHESIS, TokenKind.RIGHT_PARENTHESIS}


class Token(NamedTuple):
    '''
    One lexeme, positioned in the input it came from.

    ``value`` depends on ``kind``: a float for numbers, the lowercased name
    for identifiers, a FunctionKind or OperatorKind, None for parentheses.
    ``[start, end)`` are offsets into the input, for error reporting only.
    '''
    kind: TokenKind
    value: Any
    text: str
    start: int
    end: int

    def __str__(self):
        return self.text

    def isa(self, *kinds):
        return self.kind in kinds

    @property
    def precedence(self):
        '''
        Operator precedence. Parentheses are 0, a mere stack sentinel.
        '''
        if self.kind is TokenKind.OPERATOR:
            return self.value.precedence
        elif self.kind in _PARENTHESES:
            return 0
        raise InvariantError('{0} token {1!r} has no precedence'
                             .format(self.kind.value, self.text))

    @property
    def associativity(self):
        if self.kind is TokenKind.OPERATOR:
            return self.value.associativity
        raise InvariantError('{0} token {1!r} has no associativity'
                             .format(self.kind.value, self.text))
