"""Registry of special forms for the seval evaluator.

Each special form has one canonical SpecialForm member. Surface names,
synonyms included, map to that member through SPECIAL_FORM_NAMES, and each
member has exactly one handler in SPECIAL_FORM_HANDLERS. The evaluator
consults these tables before closure or primitive dispatch.

Handlers take (tail, env, evaluate_fn, depth) where tail is the unevaluated
operand list and evaluate_fn(expr, env, depth) re-enters the evaluator.
"""

from enum import Enum

from seval.types.symbol import Symbol
from seval.evaluation.special_forms.if_form import if_form
from seval.evaluation.special_forms.let_form import let_form
from seval.evaluation.special_forms.cond_form import cond_form
from seval.evaluation.special_forms.progn_form import progn_form
from seval.evaluation.special_forms.quote_form import quote_form
from seval.evaluation.special_forms.lambda_form import lambda_form
from seval.evaluation.special_forms.define_form import define_form
from seval.evaluation.special_forms.apply_form import apply_form
from seval.evaluation.special_forms.sequence_forms import (
    filter_form,
    map_form,
    find_form,
    find_index_form,
    sort_by_form,
    count_form,
)
from seval.evaluation.special_forms.reduce_form import reduce_form


class SpecialForm(Enum):
    IF = "if"
    LET = "let"
    COND = "cond"
    BEGIN = "begin"
    QUOTE = "quote"
    LAMBDA = "lambda"
    DEFINE = "define"
    APPLY = "apply"
    FILTER = "filter"
    MAP = "map"
    FIND = "find"
    FIND_INDEX = "find-index"
    SORT_BY = "sort-by"
    COUNT = "count"
    REDUCE = "reduce"


SYNONYMS = {
    "progn": SpecialForm.BEGIN,
    "do": SpecialForm.BEGIN,
    "fn": SpecialForm.LAMBDA,
    "defun": SpecialForm.DEFINE,
    "fold": SpecialForm.REDUCE,
}

SPECIAL_FORM_NAMES = {Symbol(form.value): form for form in SpecialForm}
SPECIAL_FORM_NAMES.update({Symbol(name): form for name, form in SYNONYMS.items()})

SPECIAL_FORM_HANDLERS = {
    SpecialForm.IF: if_form,
    SpecialForm.LET: let_form,
    SpecialForm.COND: cond_form,
    SpecialForm.BEGIN: progn_form,
    SpecialForm.QUOTE: quote_form,
    SpecialForm.LAMBDA: lambda_form,
    SpecialForm.DEFINE: define_form,
    SpecialForm.APPLY: apply_form,
    SpecialForm.FILTER: filter_form,
    SpecialForm.MAP: map_form,
    SpecialForm.FIND: find_form,
    SpecialForm.FIND_INDEX: find_index_form,
    SpecialForm.SORT_BY: sort_by_form,
    SpecialForm.COUNT: count_form,
    SpecialForm.REDUCE: reduce_form,
}


def special_form_for(head) -> "SpecialForm | None":
    """Canonical special form named by ``head``, or None."""
    if not isinstance(head, Symbol):
        return None
    return SPECIAL_FORM_NAMES.get(head)
