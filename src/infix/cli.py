from os import path
import sys
from argparse import ArgumentParser, REMAINDER, OPTIONAL
import traceback

from prompt_toolkit import PromptSession
from prompt_toolkit.history import FileHistory

from .util import ExpressionError, underline
from .lexer import Lexer
from .shunting import Converter, render


class InteractiveInput:
    def __init__(self, prompt, history_file=None):
        self.prompt = prompt
        self.history_file = history_file

    def __iter__(self):
        history = None
        if self.history_file is not None:
            history = FileHistory(path.expanduser(self.history_file))
        try:
            session = PromptSession(message=self.prompt,
                                    history=history,
                                    enable_suspend=True,
                                    # Certainly not! But be explicit.
                                    erase_when_done=False)
            while True:
                yield session.prompt()
        except EOFError:
            return


class CLI:
    '''
    Command line interface to the infix to RPN converter.
    '''

    DEFAULT_PROMPT = 'Please enter your equation: '
    HISTORY_FILE = '~/.infix_history'

    def report(self, line, error):
        '''
        Print error, with the offending part of line underlined.
        '''
        print('Error:', error, file=sys.stderr)
        if error.start is not None:
            print(line, file=sys.stderr)
            print(underline(error.start, error.end), file=sys.stderr)
        if self.args.verbose:
            traceback.print_exception(type(error), error,
                                      error.__traceback__, file=sys.stderr)

    def convert(self, line):
        '''
        Convert one line, printing RPN or the error. Return success.
        '''
        line = line.strip()
        try:
            tokens = self.lexer.tokenize(line)
            if self.args.dump:
                for token in tokens:
                    print(repr(token))
            rpn = self.converter.convert(tokens)
        except ExpressionError as e:
            self.report(line, e)
            return False
        print(render(rpn), flush=True)
        return True

    def executor(self):
        '''
        Convert every expression, carrying on past bad ones.

        Blank lines from piped stdin are skipped; anywhere else they are empty
        expressions, and reported as such.

        Return exit status: 1 if any expression was bad.
        '''
        status = 0
        for line in self.args.expressions:
            if self.skip_blank and not line.strip():
                continue
            if not self.convert(line):
                status = 1
        return status

    def _prompting_input(self):
        '''
        Return prompting stdin.__iter__ decorator...

        If either:
        - prompt explicitly specified.
        - both stdin/out are a tty
        '''
        if self.args.prompt or \
           sys.stdin.isatty() and sys.stdout.isatty():
            return InteractiveInput(prompt=self.args.prompt or
                                    self.DEFAULT_PROMPT,
                                    history_file=self.HISTORY_FILE)
        else:
            return sys.stdin

    def __init__(self):
        '''
        Create ready to run CLI.

        Does not run or parse command line arguments.
        '''
        self.lexer = Lexer()
        self.converter = Converter()
        self.argument_parser = ArgumentParser(
            description='Convert infix expressions to RPN')
        self.argument_parser.add_argument('-v', '--verbose',
                                          action='store_true',
                                          help='show tracebacks on errors')
        self.argument_parser.add_argument('-D', '--dump',
                                          action='store_true',
                                          help='print tokens before RPN')
        int_nonint_groups = self.argument_parser.add_mutually_exclusive_group()
        int_nonint_groups.add_argument('-e', '--expression',
                                       nargs=REMAINDER,
                                       dest='expressions')
        int_nonint_groups.add_argument('-p', '--prompt',
                                       nargs=OPTIONAL,
                                       const=self.DEFAULT_PROMPT)
        self.argument_parser.set_defaults(expressions=sys.stdin)

    def run(self, *, args=None):
        '''
        Run CLI, given these args, or sys.argv. Return exit status.
        '''
        self.args = self.argument_parser.parse_args(args)
        if self.args.expressions is sys.stdin:
            self.args.expressions = self._prompting_input()
        self.skip_blank = self.args.expressions is sys.stdin
        try:
            return self.executor()
        except KeyboardInterrupt:
            return 1


def main():
    sys.exit(CLI().run())
