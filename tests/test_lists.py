import pytest

from minischeme.errors import SchemeArityError, SchemeRuntimeError, SchemeTypeError


@pytest.mark.parametrize(
    "source,expected",
    [
        ("(cons 1 2)", "(1 . 2)"),
        ("(cons 1 '())", "(1)"),
        ("(cons 1 '(2 3))", "(1 2 3)"),
        ("(car (cons 1 2))", "1"),
        ("(cdr (cons 1 2))", "2"),
        ("(car '(1 2 3))", "1"),
        ("(cdr '(1 2 3))", "(2 3)"),
        ("(cdr '(1))", "()"),
        ("(list)", "()"),
        ("(list 1 2 3)", "(1 2 3)"),
        ("(list (+ 1 1) #t '(a))", "(2 #t (a))"),
        ("(list-ref '(10 20 30) 0)", "10"),
        ("(list-ref '(10 20 30) 2)", "30"),
        ("(list-tail '(10 20 30) 0)", "(10 20 30)"),
        ("(list-tail '(10 20 30) 1)", "(20 30)"),
        ("(list-tail '(10 20 30) 3)", "()"),
        ("(list-tail '(1 2 . 3) 2)", "3"),
    ],
)
def test_list_operations(run, source, expected):
    assert run(source) == expected


@pytest.mark.parametrize(
    "source,expected",
    [
        ("(pair? '(1))", "#t"),
        ("(pair? (cons 1 2))", "#t"),
        ("(pair? '())", "#f"),
        ("(pair? 1)", "#f"),
        ("(null? '())", "#t"),
        ("(null? '(1))", "#f"),
        ("(null? 0)", "#f"),
        ("(list? '())", "#t"),
        ("(list? '(1 2))", "#t"),
        ("(list? '(1 . 2))", "#f"),
        ("(list? 1)", "#f"),
        ("(number? 5)", "#t"),
        ("(number? #t)", "#f"),
        ("(number? 'a)", "#f"),
        ("(boolean? #f)", "#t"),
        ("(boolean? 0)", "#f"),
        ("(boolean? '())", "#f"),
        ("(symbol? 'a)", "#t"),
        ("(symbol? 'car)", "#t"),
        ("(symbol? car)", "#t"),
        ("(symbol? 1)", "#f"),
        ("(symbol? '(a))", "#f"),
        ("(not #f)", "#t"),
        ("(not #t)", "#f"),
        ("(not 0)", "#f"),
        ("(not '())", "#f"),
    ],
)
def test_predicates(run, source, expected):
    assert run(source) == expected


@pytest.mark.parametrize(
    "source,error",
    [
        ("(car '())", SchemeTypeError),
        ("(cdr 5)", SchemeTypeError),
        ("(car)", SchemeArityError),
        ("(car '(1) '(2))", SchemeArityError),
        ("(cons 1)", SchemeArityError),
        ("(cons 1 2 3)", SchemeArityError),
        ("(list-ref '(1 2) 2)", SchemeRuntimeError),
        ("(list-ref '(1 2) -1)", SchemeRuntimeError),
        ("(list-ref '(1 2) #t)", SchemeTypeError),
        ("(list-ref '(1 2))", SchemeArityError),
        ("(list-tail '(1 2) 3)", SchemeRuntimeError),
        ("(list-tail '(1 2) -1)", SchemeRuntimeError),
        ("(pair?)", SchemeArityError),
        ("(null? 1 2)", SchemeArityError),
        ("(not)", SchemeArityError),
        ("(number? 1 2)", SchemeArityError),
    ],
)
def test_list_errors(run, source, error):
    with pytest.raises(error):
        run(source)


def test_car_of_empty_list_message(run):
    with pytest.raises(SchemeRuntimeError, match="car expects a pair"):
        run("(car '())")


def test_list_ref_out_of_bounds_message(run):
    with pytest.raises(SchemeRuntimeError, match="index out of bounds"):
        run("(list-ref '(1) 1)")
