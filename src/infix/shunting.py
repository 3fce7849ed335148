'''
Shunting-yard: reorder infix tokens into Reverse Polish Notation.
'''

from collections import deque

from .lexer import tokenize
from .token import Associativity, TokenKind
from .util import UnbalancedParentheses


class OperatorStack:
    '''
    LIFO of operators, functions and opening parentheses in waiting.
    '''
    def __init__(self):
        self._items = []

    def __bool__(self):
        return bool(self._items)

    def __len__(self):
        return len(self._items)

    def push(self, token):
        self._items.append(token)

    def pop(self):
        return self._items.pop()

    def peek(self):
        '''
        Top of stack, or None if empty.
        '''
        return self._items[-1] if self._items else None


class OutputQueue:
    '''
    FIFO of tokens, already in RPN order.
    '''
    def __init__(self):
        self._items = deque()

    def __len__(self):
        return len(self._items)

    def __iter__(self):
        return iter(self._items)

    def enqueue(self, token):
        self._items.append(token)


class Converter:
    '''
    Infix to RPN converter.

    Like the Lexer, holds no state between conversions. The stack and queue
    only live for the duration of one convert() call.
    '''

    def convert(self, tokens):
        '''
        Drain tokens (in infix order) and return a list of them in RPN order.

        Parentheses are dropped. Anything else appears exactly once.

        Takes a deque, as from the Lexer. Any other iterable is copied first,
        and left alone. Raises UnbalancedParentheses at the offending
        parenthesis.
        '''
        if not isinstance(tokens, deque):
            tokens = deque(tokens)
        output = OutputQueue()
        stack = OperatorStack()
        while tokens:
            token = tokens.popleft()
            if token.isa(TokenKind.NUMBER, TokenKind.IDENTIFIER):
                output.enqueue(token)
            elif token.isa(TokenKind.FUNCTION, TokenKind.LEFT_PARENTHESIS):
                stack.push(token)
            elif token.isa(TokenKind.OPERATOR):
                self._shunt_operator(token, stack, output)
            elif token.isa(TokenKind.RIGHT_PARENTHESIS):
                self._close_group(token, stack, output)
        while stack:
            token = stack.pop()
            if token.isa(TokenKind.LEFT_PARENTHESIS):
                raise UnbalancedParentheses(token)
            output.enqueue(token)
        return list(output)

    @staticmethod
    def _outranks(top, incoming):
        return (top.precedence > incoming.precedence or
                top.precedence == incoming.precedence and
                incoming.associativity is Associativity.LEFT)

    def _shunt_operator(self, token, stack, output):
        # Functions and ( stop the popping, they wait for a ).
        # A ) never sits on the stack.
        while stack and stack.peek().isa(TokenKind.OPERATOR) and \
                self._outranks(stack.peek(), token):
            output.enqueue(stack.pop())
        stack.push(token)

    def _close_group(self, token, stack, output):
        if not stack:
            raise UnbalancedParentheses(token)
        while stack and not stack.peek().isa(TokenKind.LEFT_PARENTHESIS):
            output.enqueue(stack.pop())
        if not stack:
            raise UnbalancedParentheses(token)
        stack.pop()
        # A function applies to the group just closed
        if stack and stack.peek().isa(TokenKind.FUNCTION):
            output.enqueue(stack.pop())


def to_rpn(tokens):
    '''
    Return tokens in RPN order. See Converter.convert.
    '''
    return Converter().convert(tokens)


def render(rpn):
    '''
    Join tokens' source text with single spaces.
    '''
    return ' '.join(token.text for token in rpn)


def to_rpn_text(tokens):
    return render(to_rpn(tokens))


def convert(line):
    '''
    Tokenize and convert a whole line, returning RPN text.
    '''
    return to_rpn_text(tokenize(line))
