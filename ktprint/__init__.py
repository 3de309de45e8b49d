# -*- coding: utf-8 -*-

"""Top-level package for ktprint."""

__author__ = """Tommi Kaikkonen"""
__email__ = 'kaikkonentommi@gmail.com'
__version__ = '0.1.0'

import sys

from .api import (
    always_break,
    annotate,
    concat,
    fill,
    fillsep,
    flat_choice,
    group,
    hsep,
    nest,
    stack,
    text,
    vsep,
    NIL,
    LINE,
    SOFTLINE,
    HARDLINE,
)
from .layout import layout_smart
from .printer import (
    UnknownNodeError,
    print_expression,
    print_kotlin_class,
    print_kotlin_method,
    print_statement,
    print_statements,
)
from .render import default_render_to_str, default_render_to_stream
from .utils import intersperse


__all__ = [
    'pformat_doc',
    'pformat_class',
    'pformat_expression',
    'pformat_statements',
    'pprint_class',
    'cpprint_class',
    'layout_smart',
    'default_render_to_stream',
    'default_render_to_str',
    'print_expression',
    'print_statement',
    'print_statements',
    'print_kotlin_class',
    'print_kotlin_method',
    'UnknownNodeError',
    'always_break',
    'annotate',
    'concat',
    'fill',
    'fillsep',
    'flat_choice',
    'group',
    'hsep',
    'nest',
    'stack',
    'text',
    'vsep',
    'NIL',
    'LINE',
    'SOFTLINE',
    'HARDLINE',
    'intersperse',
]


DEFAULT_WIDTH = 79


def pformat_doc(doc, width=DEFAULT_WIDTH):
    return default_render_to_str(layout_smart(doc, width=width))


def pformat_expression(expression, nest_size=4, width=DEFAULT_WIDTH):
    return pformat_doc(print_expression(expression, nest_size), width=width)


def pformat_statements(statements, nest_size=4, width=DEFAULT_WIDTH):
    return pformat_doc(print_statements(statements, nest_size), width=width)


def pformat_class(kotlin_class, width=DEFAULT_WIDTH):
    return pformat_doc(print_kotlin_class(kotlin_class), width=width)


def pprint_class(
    kotlin_class,
    stream=None,
    width=DEFAULT_WIDTH,
    *,
    end='\n'
):
    sdocs = layout_smart(print_kotlin_class(kotlin_class), width=width)
    if stream is None:
        stream = sys.stdout
    default_render_to_stream(stream, sdocs)
    if end:
        stream.write(end)


try:
    from .extras.color import colored_render_to_stream
except ImportError:
    def cpprint_class(*args, **kwargs):
        raise ImportError(
            "You need to install the 'pygments' and 'colorful' "
            "packages for colored output."
        )
else:
    def cpprint_class(
        kotlin_class,
        stream=None,
        width=DEFAULT_WIDTH,
        *,
        style=None,
        end='\n'
    ):
        """Like ``pprint_class``, with syntax highlighting. Requires
        the 'pygments' and 'colorful' packages."""
        sdocs = layout_smart(print_kotlin_class(kotlin_class), width=width)
        if stream is None:
            stream = sys.stdout
        colored_render_to_stream(stream, sdocs, style=style)
        if end:
            stream.write(end)
