class ExpressionError(Exception):
    '''
    Anything wrong with the user's expression.

    Carries the offending ``[start, end)`` span of the input when there is
    one, so that the caller can point at it.
    '''
    start = None
    end = None


class LexError(ExpressionError):
    pass


class EmptyInput(LexError):
    def __str__(self):
        return 'Input is empty!'


class NonAsciiInput(LexError):
    def __init__(self, offset):
        super().__init__(offset)
        self.offset = offset
        self.start = offset
        self.end = offset + 1

    def __str__(self):
        return 'Unexpected non-ascii text in input'


class UnexpectedCharacter(LexError):
    def __init__(self, offset, character):
        super().__init__(offset, character)
        self.offset = offset
        self.character = character
        self.start = offset
        self.end = offset + 1

    def __str__(self):
        return 'Unexpected character `{0}` in input'.format(self.character)


class MalformedNumber(UnexpectedCharacter):
    '''
    Numeral made only of admissible characters, that still isn't a number.

    1.2.3, or a lone - with no digits after it.
    '''
    def __init__(self, offset, text):
        super().__init__(offset, text[0])
        self.args = offset, text
        self.text = text
        self.end = offset + len(text)

    def __str__(self):
        return 'Malformed number `{0}` in input'.format(self.text)


class ParseError(ExpressionError):
    pass


class UnbalancedParentheses(ParseError):
    def __init__(self, token):
        super().__init__(token)
        self.token = token
        self.offset = token.start
        self.start = token.start
        self.end = token.end

    def __str__(self):
        if self.token.text == ')':
            return 'Unexpected closing parenthesis `)` in input'
        return 'Unclosed parenthesis `(` in input'


class InvariantError(RuntimeError):
    '''
    Internal contract broken. A bug, never the user's fault.
    '''


def underline(start, end):
    '''
    Return a caret line pointing at ``[start, end)`` of the line above it.
    '''
    return ' ' * start + '^' * max(end - start, 1)
