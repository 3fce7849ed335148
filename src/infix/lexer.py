from collections import deque
from functools import reduce
import operator

import regex

from .token import CharClass, FunctionKind, OperatorKind, Token, TokenKind
from .util import EmptyInput, MalformedNumber, NonAsciiInput, \
    UnexpectedCharacter


class Lexer:
    '''
    Lexer for infix arithmetic/trigonometric expressions.

    For consistency, for now, needs to be instantiated, despite holding no
    internal state.
    '''
    # Identifier, or function name. The digit suffix only counts when it
    # spells a function, log_2 or log_10.
    NAME = r'''
            (?<letters>
                [a-z]+
            )
            (?:
                _\d+
            )?
            '''
    # Whatever run a numeral greedily swallows; validated by NUMBER after.
    NUMERAL_RUN = r'[\d.]*'
    # What a numeral run must actually look like: at most one dot.
    NUMBER = r'''
              -?
              (?:
                  # 1, 12, 1. (notice trailing dot), 1.3
                  \d+
                  (?:
                      \.
                      \d*
                  )?
              )|(?:
                  -?
                  # .2
                  \.
                  \d+
              )
              '''
    SPACE = r'\s+'
    # Default regex flags for matching lexemes
    FLAGS = reduce(operator.__or__,
                   {regex.ASCII,
                    regex.IGNORECASE,
                    regex.VERSION1,
                    regex.VERBOSE},
                   0)

    def __init__(self):
        flags = type(self).FLAGS
        self._name = regex.compile(type(self).NAME, flags=flags)
        self._numeral_run = regex.compile(type(self).NUMERAL_RUN, flags=flags)
        self._number = regex.compile(type(self).NUMBER, flags=flags)
        self._space = regex.compile(type(self).SPACE, flags=flags)
        self._dispatch = {
            CharClass.LETTER: self._lex_name,
            CharClass.DIGIT: self._lex_number,
            CharClass.OPERATOR: self._lex_operator,
            CharClass.LEFT_PARENTHESIS: self._lex_left_parenthesis,
            CharClass.RIGHT_PARENTHESIS: self._lex_right_parenthesis,
            CharClass.SPACE: self._lex_space,
            CharClass.OTHER: self._lex_other,
        }

    def tokenize(self, line):
        '''
        Take a line and return a deque of all its tokens, in order.

        Raises a LexError on the first thing it can't lex.
        '''
        if not line:
            raise EmptyInput()
        if not line.isascii():
            raise NonAsciiInput(next(offset
                                     for offset, char in enumerate(line)
                                     if not char.isascii()))
        tokens = deque()
        offset = 0
        while offset < len(line):
            lex = self._dispatch[CharClass.of(line[offset])]
            token, offset = lex(line, offset, tokens)
            if token is not None:
                tokens.append(token)
        return tokens

    def _lex_name(self, line, start, tokens):
        match = self._name.match(line, start)
        end = match.end()
        if FunctionKind.from_name(match.group(0)) is None:
            # Not a function: the _ is left for the next token to choke on
            end = match.end('letters')
        text = line[start:end]
        function = FunctionKind.from_name(text)
        if function is not None:
            return Token(TokenKind.FUNCTION, function,
                         text, start, end), end
        return Token(TokenKind.IDENTIFIER, text.lower(),
                     text, start, end), end

    def _lex_number(self, line, start, tokens, sign=''):
        '''
        Lex numeral starting at start, after the optional sign.
        '''
        end = self._numeral_run.match(line, start + len(sign)).end()
        text = line[start:end]
        if self._number.fullmatch(text) is None:
            raise MalformedNumber(start, text)
        return Token(TokenKind.NUMBER, float(text), text, start, end), end

    def _lex_operator(self, line, start, tokens):
        kind = OperatorKind.from_char(line[start])
        if kind is OperatorKind.MINUS and self._starts_negative(tokens):
            return self._lex_number(line, start, tokens, sign='-')
        return Token(TokenKind.OPERATOR, kind,
                     line[start], start, start + 1), start + 1

    @staticmethod
    def _starts_negative(tokens):
        '''
        Whether a - here is a sign rather than a subtraction.

        Only a number or a closing parenthesis can be subtracted from.
        '''
        return not tokens or not tokens[-1].isa(TokenKind.NUMBER,
                                                TokenKind.RIGHT_PARENTHESIS)

    def _lex_left_parenthesis(self, line, start, tokens):
        return Token(TokenKind.LEFT_PARENTHESIS, None,
                     '(', start, start + 1), start + 1

    def _lex_right_parenthesis(self, line, start, tokens):
        return Token(TokenKind.RIGHT_PARENTHESIS, None,
                     ')', start, start + 1), start + 1

    def _lex_space(self, line, start, tokens):
        return None, self._space.match(line, start).end()

    def _lex_other(self, line, start, tokens):
        raise UnexpectedCharacter(start, line[start])


def tokenize(line):
    '''
    Tokenize line with a throwaway Lexer.
    '''
    return Lexer().tokenize(line)
