import json

from mclisp.types.expression import Atom, Expression, List
from mclisp.evaluation.special_forms import SPECIAL_FORMS

# ----------------- ANSI colors -----------------
RESET = "\033[0m"
COLOR_SYMBOL = "\033[94m"
COLOR_SPECIAL_FORM = "\033[90m"
COLOR_CLOSURE = "\033[92m"
COLOR_QUOTED = "\033[96m"

# ----------------- Defaults -----------------
DEFAULT_OPTIONS = {
    "max_line_length": 80,
    "max_depth": 32,
    "color_symbols": False,
    "color_special_forms": False,
    "color_closures": False,
    "color_quoted": False,
}

CLOSURE_HEADS = {"lambda", "label"}


def format_expr(expr: Expression) -> str:
    """Canonical single-line rendering: `v` for an atom, `(a b c)` for a list."""
    return str(expr)


# ----------------- Colorize utility -----------------
def colorize(atom: Atom, in_quote: bool = False, options: dict = DEFAULT_OPTIONS) -> str:
    name = str(atom)
    if in_quote:
        if options.get("color_quoted", False):
            return f"{COLOR_QUOTED}{name}{RESET}"
        return name
    if name in SPECIAL_FORMS and options.get("color_special_forms", False):
        return f"{COLOR_SPECIAL_FORM}{name}{RESET}"
    if name in CLOSURE_HEADS and options.get("color_closures", False):
        return f"{COLOR_CLOSURE}{name}{RESET}"
    if options.get("color_symbols", False):
        return f"{COLOR_SYMBOL}{name}{RESET}"
    return name


# ----------------- Pretty printer -----------------
def pprint_expr(
    expr: Expression,
    indent: int = 0,
    options: dict = DEFAULT_OPTIONS,
    _current_depth: int = 0,
    in_quote: bool = False,
) -> str:
    """Render `expr`, breaking lists that do not fit on one line.

    A list that fits within max_line_length is printed as `format_expr` would;
    otherwise its head stays on the first line and every other element goes
    on its own line, indented one level. Lists nested deeper than max_depth
    are elided as `...`.
    """
    if isinstance(expr, Atom):
        return colorize(expr, in_quote, options)

    if _current_depth >= options.get("max_depth", 32):
        return "..."

    if not isinstance(expr, List) or expr.is_empty_list():
        return "()"

    head = expr[0]
    quote_flag = in_quote or (isinstance(head, Atom) and head.value == "quote")
    parts = [
        pprint_expr(e, indent + 1, options, _current_depth + 1, quote_flag)
        for e in expr
    ]
    # The quote head itself is not quoted data
    if not in_quote and quote_flag:
        parts[0] = colorize(head, False, options)

    single_line = "(" + " ".join(parts) + ")"
    if len(format_expr(expr)) + indent * 2 <= options.get("max_line_length", 80):
        return single_line

    aligned_lines = ["(" + parts[0]]
    for part in parts[1:]:
        aligned_lines.append("  " * (indent + 1) + part)
    aligned_lines[-1] += ")"
    return "\n".join(aligned_lines)


# ----------------- Load JSON config -----------------
def load_options_from_json(json_str: str) -> dict:
    try:
        user_opts = json.loads(json_str)
    except json.JSONDecodeError:
        return dict(DEFAULT_OPTIONS)
    return {**DEFAULT_OPTIONS, **user_opts}
