"""Read-only AST nodes produced by the decompiler.

The printers only read these; nothing in ``ktprint``
mutates a node after construction.
"""

from enum import IntEnum


class Priority(IntEnum):
    """Operator priorities used for parenthesization.
    A higher priority binds tighter."""
    CAST = 3
    MULTIPLICATIVE = 2
    ADDITIVE = 1
    RANGE = 0
    NAMED_INFIX = -1
    ELVIS = -2
    NAMED_CHECK = -3
    COMPARISON = -4
    EQUALITY = -5
    CONJUNCTION = -6
    DISJUNCTION = -7


OPERATOR_PRIORITIES = {
    'as': Priority.CAST,
    'as?': Priority.CAST,
    '*': Priority.MULTIPLICATIVE,
    '/': Priority.MULTIPLICATIVE,
    '%': Priority.MULTIPLICATIVE,
    '+': Priority.ADDITIVE,
    '-': Priority.ADDITIVE,
    '..': Priority.RANGE,
    'shl': Priority.NAMED_INFIX,
    'shr': Priority.NAMED_INFIX,
    'ushr': Priority.NAMED_INFIX,
    'and': Priority.NAMED_INFIX,
    'or': Priority.NAMED_INFIX,
    'xor': Priority.NAMED_INFIX,
    '?:': Priority.ELVIS,
    'in': Priority.NAMED_CHECK,
    '!in': Priority.NAMED_CHECK,
    'is': Priority.NAMED_CHECK,
    '!is': Priority.NAMED_CHECK,
    '<': Priority.COMPARISON,
    '>': Priority.COMPARISON,
    '<=': Priority.COMPARISON,
    '>=': Priority.COMPARISON,
    '==': Priority.EQUALITY,
    '!=': Priority.EQUALITY,
    '===': Priority.EQUALITY,
    '!==': Priority.EQUALITY,
    '&&': Priority.CONJUNCTION,
    '||': Priority.DISJUNCTION,
}


class Expression:
    __slots__ = ()


class Statement:
    __slots__ = ()


class Constant(Expression):
    __slots__ = ('value', 'is_string')

    def __init__(self, value, is_string=False):
        self.value = value
        self.is_string = is_string

    def __repr__(self):
        return f'Constant({repr(self.value)}, is_string={self.is_string})'


class BinaryExpression(Expression):
    __slots__ = ('operation', 'left', 'right', 'priority')

    def __init__(self, operation, left, right, priority=None):
        if priority is None:
            try:
                priority = OPERATOR_PRIORITIES[operation]
            except KeyError:
                raise ValueError(
                    f"No default priority for operator {repr(operation)}, "
                    "pass one explicitly"
                ) from None

        self.operation = operation
        self.left = left
        self.right = right
        self.priority = int(priority)

    def __repr__(self):
        return (
            f'BinaryExpression({repr(self.operation)}, {repr(self.left)}, '
            f'{repr(self.right)}, priority={self.priority})'
        )


class UnaryExpression(Expression):
    __slots__ = ('operation', 'operand')

    def __init__(self, operation, operand):
        self.operation = operation
        self.operand = operand

    def __repr__(self):
        return f'UnaryExpression({repr(self.operation)}, {repr(self.operand)})'


class Field(Expression):
    """A field access. Any qualification is already
    part of ``name``."""
    __slots__ = ('name', )

    def __init__(self, name):
        self.name = name

    def __repr__(self):
        return f'Field({repr(self.name)})'


class Variable(Expression):
    """A local variable, or an element of an array when
    ``array_index`` is set."""
    __slots__ = ('name', 'array_variable', 'array_index')

    def __init__(self, name, array_variable=None, array_index=None):
        self.name = name
        self.array_variable = array_variable
        self.array_index = array_index

    @property
    def is_array_element(self):
        return self.array_index is not None

    def __repr__(self):
        if self.is_array_element:
            return (
                f'Variable({repr(self.name)}, {repr(self.array_variable)}, '
                f'{repr(self.array_index)})'
            )
        return f'Variable({repr(self.name)})'


class Invocation(Expression, Statement):
    """A call of a free function. Usable both as an
    expression and as a statement."""
    __slots__ = ('function', 'arguments')

    def __init__(self, function, arguments=()):
        self.function = function
        self.arguments = list(arguments)

    def __repr__(self):
        return f'Invocation({repr(self.function)}, {repr(self.arguments)})'


class InstanceInvocation(Invocation):
    """A call qualified by a receiver variable."""
    __slots__ = ('variable', )

    def __init__(self, function, arguments, variable):
        super().__init__(function, arguments)
        self.variable = variable

    def __repr__(self):
        return (
            f'InstanceInvocation({repr(self.function)}, '
            f'{repr(self.arguments)}, {repr(self.variable)})'
        )


class New(Expression):
    __slots__ = ('constructor', )

    def __init__(self, constructor):
        self.constructor = constructor

    def __repr__(self):
        return f'New({repr(self.constructor)})'


class NewArray(Expression):
    __slots__ = ('type', 'dimensions')

    def __init__(self, type, dimensions=()):
        self.type = type
        self.dimensions = list(dimensions)

    def __repr__(self):
        return f'NewArray({repr(self.type)}, {repr(self.dimensions)})'


class Assignment(Statement):
    __slots__ = ('left', 'right')

    def __init__(self, left, right):
        self.left = left
        self.right = right

    def __repr__(self):
        return f'Assignment({repr(self.left)}, {repr(self.right)})'


class Return(Statement):
    __slots__ = ('value', )

    def __init__(self, value=None):
        self.value = value

    def __repr__(self):
        return f'Return({repr(self.value)})'


class Throw(Statement):
    __slots__ = ('value', )

    def __init__(self, value):
        self.value = value

    def __repr__(self):
        return f'Throw({repr(self.value)})'


DEFAULT_NEST_SIZE = 4


class KotlinMethod:
    __slots__ = (
        'modifier',
        'name',
        'generic_declaration',
        'parameters',
        'return_type',
        'body',
        'nest_size',
    )

    def __init__(
        self,
        name,
        *,
        modifier='',
        generic_declaration=(),
        parameters=(),
        return_type='Unit',
        body=(),
        nest_size=DEFAULT_NEST_SIZE
    ):
        self.modifier = modifier
        self.name = name
        self.generic_declaration = list(generic_declaration)
        self.parameters = list(parameters)
        self.return_type = return_type
        self.body = list(body)
        self.nest_size = nest_size

    def __repr__(self):
        return f'KotlinMethod({repr(self.name)})'


class KotlinClass:
    __slots__ = (
        'package',
        'imports',
        'modifier',
        'type',
        'name',
        'generic_declaration',
        'super_class',
        'implemented_interfaces',
        'fields',
        'methods',
        'nest_size',
    )

    def __init__(
        self,
        name,
        *,
        package='',
        imports=(),
        modifier='',
        type='class ',
        generic_declaration=(),
        super_class='',
        implemented_interfaces=(),
        fields=(),
        methods=(),
        nest_size=DEFAULT_NEST_SIZE
    ):
        self.package = package
        self.imports = list(imports)
        self.modifier = modifier
        self.type = type
        self.name = name
        self.generic_declaration = list(generic_declaration)
        self.super_class = super_class
        self.implemented_interfaces = list(implemented_interfaces)
        self.fields = list(fields)
        self.methods = list(methods)
        self.nest_size = nest_size

    def __repr__(self):
        return f'KotlinClass({repr(self.name)})'
