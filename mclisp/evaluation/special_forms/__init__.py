"""Registry of special forms for the mclisp evaluator.

Maps symbol names to handler functions that implement non-standard evaluation
rules. The evaluator consults this table before ordinary function application.
Every handler has the signature handler(tail, env, evaluate_fn).
"""

from mclisp.evaluation.special_forms.quote_form import quote_form
from mclisp.evaluation.special_forms.predicate_forms import atom_form, eq_form
from mclisp.evaluation.special_forms.list_forms import car_form, cdr_form, cons_form
from mclisp.evaluation.special_forms.cond_form import cond_form
from mclisp.evaluation.special_forms.defun_form import defun_form

SPECIAL_FORMS = {
    "quote": quote_form,
    "atom": atom_form,
    "eq": eq_form,
    "car": car_form,
    "cdr": cdr_form,
    "cons": cons_form,
    "cond": cond_form,
    "defun": defun_form,
}
