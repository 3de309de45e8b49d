"""Maps decompiled AST nodes to Docs.

Every printer takes the node and the nesting unit size
(``nest_size``, in columns) and returns a Doc; nothing
here renders text directly.
"""

from functools import singledispatch

from .api import (
    always_break,
    annotate,
    concat,
    fill,
    group,
    nest,
    vsep,
    NIL,
    LINE,
    HARDLINE,
)
from .nodes import (
    Assignment,
    BinaryExpression,
    Constant,
    Field,
    InstanceInvocation,
    Invocation,
    New,
    NewArray,
    Priority,
    Return,
    Throw,
    UnaryExpression,
    Variable,
)
from .syntax import Token
from .utils import intersperse


COMMA = annotate(Token.PUNCTUATION, ',')
DOT = annotate(Token.PUNCTUATION, '.')
COLON = annotate(Token.PUNCTUATION, ':')

LPAREN = annotate(Token.PUNCTUATION, '(')
RPAREN = annotate(Token.PUNCTUATION, ')')

LBRACKET = annotate(Token.PUNCTUATION, '[')
RBRACKET = annotate(Token.PUNCTUATION, ']')

LBRACE = annotate(Token.PUNCTUATION, '{')
RBRACE = annotate(Token.PUNCTUATION, '}')

LANGLE = annotate(Token.PUNCTUATION, '<')
RANGLE = annotate(Token.PUNCTUATION, '>')

ASSIGN_OP = annotate(Token.OPERATOR, '=')
DOUBLE_QUOTE = '"'

KW_NEW = annotate(Token.KEYWORD, 'new')
KW_RETURN = annotate(Token.KEYWORD, 'return')
KW_THROW = annotate(Token.KEYWORD, 'throw')
KW_FUN = annotate(Token.KEYWORD_DECLARATION, 'fun')
KW_PACKAGE = annotate(Token.KEYWORD_NAMESPACE, 'package')
KW_IMPORT = annotate(Token.KEYWORD_NAMESPACE, 'import')
KW_TRUE = annotate(Token.KEYWORD_CONSTANT, 'true')
KW_FALSE = annotate(Token.KEYWORD_CONSTANT, 'false')
KW_NULL = annotate(Token.KEYWORD_CONSTANT, 'null')

# A binary operand on the right of an operator with this
# priority is always parenthesized.
NON_ASSOCIATIVE_PRIORITY = Priority.CAST

# Binary operands of a unary operator are parenthesized
# below this priority.
UNARY_OPERAND_PRIORITY = Priority.MULTIPLICATIVE


class UnknownNodeError(TypeError):
    """Raised when a printer is handed a node class it has
    no layout rule for."""


def _unknown_node(kind):
    def print_unknown(node, nest_size):
        raise UnknownNodeError(
            f"Unknown {kind} implementer: {type(node).__name__}"
        )
    return print_unknown


print_expression = singledispatch(_unknown_node('Expression'))
print_statement = singledispatch(_unknown_node('Statement'))


def register_expression(_type):
    def decorator(fn):
        print_expression.register(_type, fn)
        return fn
    return decorator


def register_statement(_type):
    def decorator(fn):
        print_statement.register(_type, fn)
        return fn
    return decorator


def parenthesize(doc):
    return concat([LPAREN, doc, RPAREN])


def keyword_and_value(keyword, value, nest_size):
    """``keyword value``, with the value moved onto an
    indented line when it does not fit."""
    return group(
        concat([
            keyword,
            nest(nest_size, concat([LINE, value]))
        ])
    )


def left_operand_needs_parens(expression, operand):
    return (
        isinstance(operand, BinaryExpression) and
        expression.priority - operand.priority >= 1
    )


def right_operand_needs_parens(expression, operand):
    return (
        isinstance(operand, BinaryExpression) and (
            expression.priority - operand.priority >= 0 or
            expression.priority == NON_ASSOCIATIVE_PRIORITY
        )
    )


def print_operand(operand, nest_size, with_parens):
    doc = print_expression(operand, nest_size)
    if with_parens:
        return parenthesize(doc)
    return doc


@register_expression(Constant)
def print_constant(constant, nest_size):
    value = constant.value

    if constant.is_string:
        return annotate(
            Token.LITERAL_STRING,
            concat([DOUBLE_QUOTE, str(value), DOUBLE_QUOTE])
        )

    if value is True:
        return KW_TRUE
    elif value is False:
        return KW_FALSE
    elif value is None:
        return KW_NULL

    return annotate(Token.NUMBER, str(value))


@register_expression(BinaryExpression)
def print_binary_expression(expression, nest_size):
    left = print_operand(
        expression.left,
        nest_size,
        left_operand_needs_parens(expression, expression.left),
    )
    right = print_operand(
        expression.right,
        nest_size,
        right_operand_needs_parens(expression, expression.right),
    )

    return group(
        concat([
            left,
            nest(
                nest_size,
                concat([
                    LINE,
                    annotate(Token.OPERATOR, expression.operation),
                    ' ',
                    right,
                ])
            ),
        ])
    )


@register_expression(UnaryExpression)
def print_unary_expression(expression, nest_size):
    operand = expression.operand
    with_parens = (
        isinstance(operand, BinaryExpression) and
        operand.priority < UNARY_OPERAND_PRIORITY
    )
    return concat([
        annotate(Token.OPERATOR, expression.operation),
        print_operand(operand, nest_size, with_parens),
    ])


@register_expression(Field)
def print_field(field, nest_size):
    return annotate(Token.NAME_VARIABLE, field.name)


@register_expression(Variable)
def print_variable(variable, nest_size):
    if not variable.is_array_element:
        return annotate(Token.NAME_VARIABLE, variable.name)

    return group(
        concat([
            print_expression(variable.array_variable, nest_size),
            LBRACKET,
            print_expression(variable.array_index, nest_size),
            RBRACKET,
        ])
    )


@register_statement(Invocation)
@register_expression(Invocation)
def print_invocation(invocation, nest_size):
    """Prints ``receiver.function(arguments)``. Arguments that
    don't fit on the line wrap onto continuation lines indented
    by two nesting units, as many per line as fit."""
    fndoc = annotate(Token.NAME_FUNCTION, invocation.function)

    if isinstance(invocation, InstanceInvocation):
        receiver = invocation.variable
        fndoc = concat([
            print_operand(
                receiver,
                nest_size,
                isinstance(receiver, (BinaryExpression, UnaryExpression)),
            ),
            DOT,
            fndoc,
        ])

    args = invocation.arguments
    if not args:
        return concat([fndoc, LPAREN, RPAREN])

    argdocs = [
        concat([print_expression(arg, nest_size), COMMA])
        for arg in args[:-1]
    ]
    argdocs.append(print_expression(args[-1], nest_size))

    return group(
        concat([
            fndoc,
            LPAREN,
            nest(2 * nest_size, fill(intersperse(LINE, argdocs))),
            RPAREN,
        ])
    )


@register_expression(New)
def print_new(expression, nest_size):
    return keyword_and_value(
        KW_NEW,
        print_expression(expression.constructor, nest_size),
        nest_size,
    )


@register_expression(NewArray)
def print_new_array(expression, nest_size):
    doc = keyword_and_value(
        KW_NEW,
        annotate(Token.NAME_CLASS, expression.type),
        nest_size,
    )
    for dimension in expression.dimensions:
        doc = group(
            concat([
                doc,
                LBRACKET,
                print_expression(dimension, nest_size),
                RBRACKET,
            ])
        )
    return doc


@register_statement(Assignment)
def print_assignment(statement, nest_size):
    return group(
        concat([
            print_expression(statement.left, nest_size),
            ' ',
            ASSIGN_OP,
            nest(
                nest_size,
                concat([
                    LINE,
                    print_expression(statement.right, nest_size),
                ])
            ),
        ])
    )


@register_statement(Return)
def print_return(statement, nest_size):
    if statement.value is None:
        return KW_RETURN
    return keyword_and_value(
        KW_RETURN,
        print_expression(statement.value, nest_size),
        nest_size,
    )


@register_statement(Throw)
def print_throw(statement, nest_size):
    return keyword_and_value(
        KW_THROW,
        print_expression(statement.value, nest_size),
        nest_size,
    )


def print_statements(statements, nest_size):
    """Stacks the statements one per line, in order. Each
    statement still decides on its own whether it fits on
    its line."""
    if not statements:
        return NIL
    return always_break(
        vsep(
            print_statement(statement, nest_size)
            for statement in statements
        )
    )


def print_generics(generic_declaration):
    return concat([
        LANGLE,
        concat(intersperse(concat([COMMA, ' ']), generic_declaration)),
        RANGLE,
    ])


def print_kotlin_method(method):
    nest_size = method.nest_size

    declaration = [method.modifier, KW_FUN, ' ']

    if method.generic_declaration:
        declaration.extend([print_generics(method.generic_declaration), ' '])

    declaration.extend([
        annotate(Token.NAME_FUNCTION, method.name),
        LPAREN,
        nest(
            2 * nest_size,
            concat(intersperse(concat([COMMA, LINE]), method.parameters))
        ),
        RPAREN,
    ])

    if method.return_type:
        declaration.extend([
            COLON,
            ' ',
            annotate(Token.NAME_CLASS, method.return_type),
        ])

    declaration.extend([' ', LBRACE])

    body = print_statements(method.body, nest_size)
    if body is NIL:
        return concat([group(concat(declaration)), HARDLINE, RBRACE])

    return concat([
        group(concat(declaration)),
        nest(nest_size, concat([HARDLINE, body])),
        HARDLINE,
        RBRACE,
    ])


def print_kotlin_class(kotlin_class):
    nest_size = kotlin_class.nest_size

    lines = []

    if kotlin_class.package:
        lines.append(
            concat([
                KW_PACKAGE,
                ' ',
                annotate(Token.NAME_NAMESPACE, kotlin_class.package),
            ])
        )

    lines.extend(
        concat([
            KW_IMPORT,
            ' ',
            annotate(Token.NAME_NAMESPACE, import_name),
        ])
        for import_name in kotlin_class.imports
    )

    declaration = [
        kotlin_class.modifier,
        annotate(Token.KEYWORD_DECLARATION, kotlin_class.type),
        annotate(Token.NAME_CLASS, kotlin_class.name),
    ]

    if kotlin_class.generic_declaration:
        declaration.append(print_generics(kotlin_class.generic_declaration))

    supertypes = list(kotlin_class.implemented_interfaces)
    if kotlin_class.super_class:
        supertypes.insert(0, kotlin_class.super_class)

    if supertypes:
        first_supertype, *interfaces = supertypes
        declaration.append(
            nest(
                nest_size,
                concat([
                    LINE,
                    COLON,
                    ' ',
                    annotate(Token.NAME_CLASS, first_supertype),
                ])
            )
        )
    else:
        interfaces = []

    for interface in interfaces:
        declaration.extend([
            COMMA,
            nest(
                2 * nest_size,
                concat([LINE, annotate(Token.NAME_CLASS, interface)])
            ),
        ])

    declaration.extend([' ', LBRACE])

    # Fields are laid out by the caller; each one keeps
    # an empty line of its own.
    members = [HARDLINE for _ in kotlin_class.fields]
    for method in kotlin_class.methods:
        if members:
            members.append(HARDLINE)
        members.extend([HARDLINE, print_kotlin_method(method)])

    lines.append(
        concat([
            group(concat(declaration)),
            nest(nest_size, concat(members)),
            HARDLINE,
            RBRACE,
        ])
    )

    return concat(intersperse(HARDLINE, lines))
