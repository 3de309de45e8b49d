import time

import pytest

from ktprint import (
    UnknownNodeError,
    pformat_doc,
    pformat_expression,
    pformat_statements,
    print_expression,
    print_kotlin_method,
    print_statement,
    print_statements,
    NIL,
)
from ktprint.nodes import (
    Assignment,
    BinaryExpression,
    Constant,
    Field,
    InstanceInvocation,
    Invocation,
    KotlinMethod,
    New,
    NewArray,
    Priority,
    Return,
    Throw,
    UnaryExpression,
    Variable,
)


def add(left, right):
    return BinaryExpression('+', left, right, priority=1)


def mul(left, right):
    return BinaryExpression('*', left, right, priority=2)


def sub(left, right):
    return BinaryExpression('-', left, right, priority=1)


a, b, c = Variable('a'), Variable('b'), Variable('c')


def test_constants():
    assert pformat_expression(Constant(42)) == '42'
    assert pformat_expression(Constant(1.5)) == '1.5'
    assert pformat_expression(Constant('hello', is_string=True)) == '"hello"'
    assert pformat_expression(Constant('a\\tb', is_string=True)) == '"a\\tb"'
    assert pformat_expression(Constant(True)) == 'true'
    assert pformat_expression(Constant(None)) == 'null'


def test_tighter_right_operand_is_bare():
    assert pformat_expression(add(a, mul(b, c))) == 'a + b * c'


def test_looser_left_operand_is_parenthesized():
    assert pformat_expression(mul(add(a, b), c)) == '(a + b) * c'


def test_equal_priority_left_operand_is_bare():
    assert pformat_expression(sub(sub(a, b), c)) == 'a - b - c'


def test_equal_priority_right_operand_is_parenthesized():
    assert pformat_expression(sub(a, sub(b, c))) == 'a - (b - c)'


def test_looser_right_operand_is_parenthesized():
    assert pformat_expression(mul(a, add(b, c))) == 'a * (b + c)'


def test_non_associative_priority_always_parenthesizes_right_operand():
    cast = BinaryExpression('as', a, mul(b, c), priority=3)
    assert pformat_expression(cast) == 'a as (b * c)'

    # A plain operand needs no parentheses.
    cast = BinaryExpression('as', a, Variable('Int'), priority=3)
    assert pformat_expression(cast) == 'a as Int'


def test_non_associative_priority_left_operand_follows_usual_rule():
    tighter = BinaryExpression('as', mul(a, b), c, priority=3)
    assert pformat_expression(tighter) == '(a * b) as c'

    same = BinaryExpression(
        'as',
        BinaryExpression('as', a, b, priority=3),
        c,
        priority=3,
    )
    assert pformat_expression(same) == 'a as b as c'


def test_default_priorities():
    expression = BinaryExpression(
        '&&',
        BinaryExpression('==', a, b),
        BinaryExpression('||', b, c),
    )
    assert expression.priority == Priority.CONJUNCTION
    assert pformat_expression(expression) == 'a == b && (b || c)'


def test_unknown_operator_needs_explicit_priority():
    with pytest.raises(ValueError):
        BinaryExpression('<=>', a, b)


def test_binary_expression_wraps_operator_and_right_side():
    expression = add(Variable('aaaaaaaaaa'), Variable('bbbbbbbbbb'))
    assert pformat_expression(expression, width=15) == (
        'aaaaaaaaaa\n'
        '    + bbbbbbbbbb'
    )


def test_unary_expression():
    assert pformat_expression(UnaryExpression('!', Variable('done'))) == '!done'
    assert pformat_expression(UnaryExpression('-', add(a, b))) == '-(a + b)'
    assert pformat_expression(UnaryExpression('-', mul(a, b))) == '-a * b'


def test_field():
    assert pformat_expression(Field('this.count')) == 'this.count'


def test_variables():
    assert pformat_expression(Variable('x')) == 'x'

    element = Variable('arr', Variable('arr'), Constant(0))
    assert pformat_expression(element) == 'arr[0]'

    matrix = Variable(
        'm',
        Variable('m', Variable('m'), Variable('i')),
        add(Variable('j'), Constant(1)),
    )
    assert pformat_expression(matrix) == 'm[i][j + 1]'


def test_zero_argument_invocation():
    assert pformat_expression(Invocation('foo', [])) == 'foo()'


def test_instance_invocation():
    call = InstanceInvocation('bar', [Constant(1), Constant(2)], Variable('obj'))
    assert pformat_expression(call) == 'obj.bar(1, 2)'


def test_invocation_arguments_fill_lines():
    args = [Variable(f'x{i:02}') for i in range(1, 9)]
    rendered = pformat_expression(Invocation('f', args), width=20)
    assert rendered == (
        'f(x01, x02, x03,\n'
        '        x04, x05,\n'
        '        x06, x07,\n'
        '        x08)'
    )
    lines = rendered.splitlines()
    assert all(len(line) <= 20 for line in lines)
    assert len(lines) < len(args)


def test_new():
    assert pformat_expression(New(Invocation('Foo', []))) == 'new Foo()'
    assert pformat_expression(NewArray('Int', [Constant(10)])) == 'new Int[10]'
    assert pformat_expression(
        NewArray('Int', [Constant(2), Variable('n')])
    ) == 'new Int[2][n]'


def test_unknown_expression_raises():
    with pytest.raises(UnknownNodeError):
        print_expression(object(), 4)

    with pytest.raises(UnknownNodeError):
        print_expression(Assignment(a, b), 4)

    with pytest.raises(TypeError):
        print_expression(None, 4)


def test_unknown_node_inside_tree_raises():
    with pytest.raises(UnknownNodeError):
        print_expression(add(a, Return(b)), 4)


def test_assignment():
    doc = print_statement(Assignment(Variable('x'), Constant(1)), 4)
    assert pformat_doc(doc) == 'x = 1'


def test_assignment_breaks_after_operator():
    statement = Assignment(
        Variable('result'),
        add(Variable('aaaaaaaa'), Variable('bbbbbbbb')),
    )
    assert pformat_doc(print_statement(statement, 4), width=20) == (
        'result =\n'
        '    aaaaaaaa\n'
        '        + bbbbbbbb'
    )


def test_return_and_throw():
    assert pformat_doc(print_statement(Return(), 4)) == 'return'
    assert pformat_doc(print_statement(Return(Variable('x')), 4)) == 'return x'

    statement = Throw(New(Invocation('IllegalStateException', [])))
    assert pformat_doc(print_statement(statement, 4)) == (
        'throw new IllegalStateException()'
    )


def test_return_wraps_long_value():
    statement = Return(Variable('aVeryLongVariableName'))
    assert pformat_doc(print_statement(statement, 2), width=12) == (
        'return\n'
        '  aVeryLongVariableName'
    )


def test_invocation_statement():
    statement = InstanceInvocation(
        'println',
        [Constant('hi', is_string=True)],
        Variable('System.out'),
    )
    assert pformat_doc(print_statement(statement, 4)) == (
        'System.out.println("hi")'
    )


def test_unknown_statement_raises():
    with pytest.raises(UnknownNodeError):
        print_statement(Constant(1), 4)


def test_empty_statement_list():
    assert print_statements([], 4) is NIL
    assert pformat_statements([]) == ''


def test_statements_keep_order_one_per_line():
    statements = [
        Assignment(Variable('a'), Constant(1)),
        Assignment(Variable('b'), Constant(2)),
        Return(add(a, b)),
    ]
    assert pformat_statements(statements) == 'a = 1\nb = 2\nreturn a + b'


def test_statements_break_independently():
    statements = [
        Assignment(Variable('x'), Constant(1)),
        Assignment(Variable('y'), add(Variable('aaaaaaaa'), Variable('bbbbbbbb'))),
        Return(),
    ]
    assert pformat_statements(statements, width=16) == (
        'x = 1\n'
        'y =\n'
        '    aaaaaaaa\n'
        '        + bbbbbbbb\n'
        'return'
    )


def test_method_body_indented_inside_method():
    method = KotlinMethod(
        'run',
        body=[
            Assignment(Variable('a'), Constant(1)),
            Assignment(Variable('b'), Constant(2)),
            Assignment(Variable('c'), Constant(3)),
        ],
    )
    assert pformat_doc(print_kotlin_method(method)) == (
        'fun run(): Unit {\n'
        '    a = 1\n'
        '    b = 2\n'
        '    c = 3\n'
        '}'
    )


def test_compound_receivers_are_parenthesized():
    call = InstanceInvocation('toString', [], add(a, b))
    assert pformat_expression(call) == '(a + b).toString()'

    call = InstanceInvocation('inv', [], UnaryExpression('-', Variable('x')))
    assert pformat_expression(call) == '(-x).inv()'


def test_simple_receivers_are_bare():
    call = InstanceInvocation('size', [], Field('this.items'))
    assert pformat_expression(call) == 'this.items.size()'

    chained = InstanceInvocation(
        'trim',
        [],
        InstanceInvocation('name', [], Variable('user')),
    )
    assert pformat_expression(chained) == 'user.name().trim()'


def _best_render_time(count, repeat=3):
    call = Invocation('f', [Variable(f'x{i}') for i in range(count)])
    best = None
    for _ in range(repeat):
        started = time.perf_counter()
        pformat_expression(call, width=40)
        elapsed = time.perf_counter() - started
        if best is None or elapsed < best:
            best = elapsed
    return best


def test_long_argument_lists_render_in_linear_time():
    small = _best_render_time(2000)
    large = _best_render_time(8000)
    # Four times the arguments; quadratic layout would be ~16x.
    assert large / small < 8
