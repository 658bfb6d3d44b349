from mclisp.debug_utils.pprint import (
    COLOR_SPECIAL_FORM,
    DEFAULT_OPTIONS,
    RESET,
    format_expr,
    load_options_from_json,
    pprint_expr,
)
from mclisp.reader.parser import parse_one


def test_format_expr():
    assert format_expr(parse_one("(a (b) ())")) == "(a (b) ())"
    assert format_expr(parse_one("()")) == "()"


def test_short_expression_stays_on_one_line():
    expr = parse_one("(cons (quote a) (quote (b)))")
    assert pprint_expr(expr) == "(cons (quote a) (quote (b)))"


def test_long_expression_is_broken():
    expr = parse_one("(defun f (x) (cond ((eq x (quote a)) (quote b)) ((quote t) x)))")
    options = {**DEFAULT_OPTIONS, "max_line_length": 20}
    lines = pprint_expr(expr, options=options).split("\n")
    assert lines[0] == "(defun"
    assert lines[1] == "  f"
    assert lines[2] == "  (x)"
    assert parse_one(pprint_expr(expr, options=options)) == expr


def test_max_depth_elides():
    options = {**DEFAULT_OPTIONS, "max_depth": 1}
    assert pprint_expr(parse_one("(a (b c))"), options=options) == "(a ...)"


def test_special_forms_are_coloured_but_not_quoted_data():
    options = {**DEFAULT_OPTIONS, "color_special_forms": True}
    rendered = pprint_expr(parse_one("(quote (car))"), options=options)
    assert rendered == f"({COLOR_SPECIAL_FORM}quote{RESET} (car))"


def test_load_options_from_json():
    options = load_options_from_json('{"max_line_length": 40}')
    assert options["max_line_length"] == 40
    assert options["max_depth"] == DEFAULT_OPTIONS["max_depth"]
    assert load_options_from_json("not json") == DEFAULT_OPTIONS
