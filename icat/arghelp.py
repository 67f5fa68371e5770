# -----------------------------------------------------------------------------
# es7s/icat [Concatenate files and print them to the standard output]
# (C) 2022 A. Shavykin <0.delameter@gmail.com>
# -----------------------------------------------------------------------------
from __future__ import annotations

import re
import sys
from argparse import HelpFormatter, Action, ArgumentParser, SUPPRESS
from typing import Optional, Iterable, List, NoReturn

from pytermor import fmt

from .common import ArgumentError, get_terminal_width
from .console import Console


class CustomHelpFormatter(HelpFormatter):
    INDENT_INCREMENT = 2
    INDENT = ' ' * INDENT_INCREMENT

    @staticmethod
    def format_header(title: str) -> str:
        return Console.colorize(fmt.bold, title.upper(), sys.stdout)

    def __init__(self, prog):
        super().__init__(prog, max_help_position=30, indent_increment=self.INDENT_INCREMENT,
                         width=get_terminal_width())

    def start_section(self, heading: Optional[str]):
        super().start_section(self.format_header(heading))

    def add_usage(self, usage: Optional[str], actions: Iterable[Action], groups: Iterable,
                  prefix: Optional[str] = None):
        super().add_text(self.format_header('usage'))

        usage = usage.replace("\n", f"\n{self.INDENT}")
        super().add_usage(usage, actions, groups, prefix=self.INDENT)

    def add_examples(self, examples: List[str]):
        self.start_section('example' + ('s' if len(examples) > 1 else ''))
        self._add_item(self._format_text, ['\n'.join(examples)])
        self.end_section()

    def _format_text(self, text: str) -> str:
        return super()._format_text(text).rstrip('\n') + '\n'

    def _fill_text(self, text, width, indent):
        return ''.join(indent + line for line in text.splitlines(keepends=True))


class EnableFlagsAction(Action):
    """
    Flag without an argument which turns on several boolean settings at once,
    e.g. ``-A`` meaning ``-vET``.
    """
    def __init__(self, option_strings, dest, flags: Iterable[str] = (), default=False, **kwargs):
        self.flags = tuple(flags)
        super().__init__(option_strings, dest, nargs=0, default=default, **kwargs)

    def __call__(self, parser, namespace, values, option_string=None):
        setattr(namespace, self.dest, True)
        for flag in self.flags:
            setattr(namespace, flag, True)


class CustomArgumentParser(ArgumentParser):
    def __init__(self, examples: List[str] = None, epilog: List[str] = None, usage: List[str] = None, **kwargs):
        self.examples = examples
        self.epilog_lines = epilog
        kwargs.update({
            'usage': '\n'.join(usage),
        })
        super(CustomArgumentParser, self).__init__(**kwargs)

    def format_help(self) -> str:
        formatter = self._get_formatter()
        if self.epilog_lines:
            formatter.add_text(' ')
            formatter.add_text('\n'.join(self.epilog_lines))
        if self.examples and isinstance(formatter, CustomHelpFormatter):
            formatter.add_examples(self.examples)

        ending_formatted = formatter.format_help()

        result = super().format_help() + ending_formatted
        # remove ':' from headers ('<_b>header:<_f>'):
        result = re.sub(r'(\033\[[0-9;]*m)?\s*:\s*(\n|\033|$)', r'\1\2', result)
        return result

    def error(self, message: str) -> NoReturn:
        raise ArgumentError(message, self.format_help())


class AppArgumentParser(CustomArgumentParser):
    def __init__(self):
        super().__init__(
            description='Concatenate files and print them to the standard output',
            usage=[
                '%(prog)s [<options>] [<file>...]',
                '%(prog)s --version',
                '%(prog)s --help',
            ],
            epilog=[
                'With no <file>, or when <file> is "-", read standard input. Line numbers and '
                'blank line squeezing are continuous across all the files.',
                '',
                'Exit status is 0 if all files were read successfully, 1 if any of them could not be read '
                'or the output could not be written.',
                '',
                '(c) 2022 A. Shavykin <0.delameter@gmail.com>',
            ],
            examples=[
                'Output f\'s contents, then standard input, then g\'s contents',
                ''.ljust(4) + '%(prog)s f - g',
                '',
                'Number nonempty lines, show tabs, line ends and nonprinting characters',
                ''.ljust(4) + '%(prog)s -bA file.txt',
                '\n'
            ],
            add_help=False,
            formatter_class=lambda prog: CustomHelpFormatter(prog),
            prog=Console.PROG,
        )

        self.add_argument('filenames', metavar='<file>', nargs='*', help='files to read from; if empty or "-", read stdin instead')

        display_group = self.add_argument_group('display options')
        display_group.add_argument('-A', '--show-all', dest='show_all', action=EnableFlagsAction, flags=('show_nonprinting', 'show_ends', 'show_tabs'), help='equivalent to -vET')
        display_group.add_argument('-b', '--number-nonblank', dest='number_nonblank', action='store_true', help='number nonempty output lines, overrides -n')
        display_group.add_argument('-e', dest='show_ends', action=EnableFlagsAction, flags=('show_nonprinting',), help='equivalent to -vE')
        display_group.add_argument('-E', '--show-ends', dest='show_ends', action='store_true', help='display $ at end of each line')
        display_group.add_argument('-n', '--number', dest='number', action='store_true', help='number all output lines')
        display_group.add_argument('-s', '--squeeze-blank', dest='squeeze_blank', action='store_true', help='suppress repeated empty output lines')
        display_group.add_argument('-t', dest='show_tabs', action=EnableFlagsAction, flags=('show_nonprinting',), help='equivalent to -vT')
        display_group.add_argument('-T', '--show-tabs', dest='show_tabs', action='store_true', help='display TAB characters as ^I')
        display_group.add_argument('-u', dest='unbuffered', action='store_true', help='(ignored)')
        display_group.add_argument('-v', '--show-nonprinting', dest='show_nonprinting', action='store_true', help='use ^ and M- notation, except for LFD and TAB')

        generic_group = self.add_argument_group('generic options')
        generic_group.add_argument('-d', '--debug', action='count', default=0, help='enable debug output to stderr; can be used from 1 to 4 times, each level increases verbosity (-d|dd|ddd|dddd)')
        generic_group.add_argument('--version', action='store_true', default=False, help='show app version and exit')
        generic_group.add_argument('-h', '--help', action='help', default=SUPPRESS, help='show this help message and exit')
