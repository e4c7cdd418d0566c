"""Registry of special forms for the minischeme evaluator.

Maps Builtin members to handler functions that receive their argument
terms unevaluated. The application engine consults this table before
falling back to ordinary procedure application.
"""

from minischeme.types.builtin import Builtin
from minischeme.evaluation.special_forms.quote_form import quote_form
from minischeme.evaluation.special_forms.if_form import if_form
from minischeme.evaluation.special_forms.define_form import define_form
from minischeme.evaluation.special_forms.set_form import set_form, set_car_form, set_cdr_form
from minischeme.evaluation.special_forms.lambda_form import lambda_form
from minischeme.evaluation.special_forms.logic_forms import and_form, or_form

SPECIAL_FORMS = {
    Builtin.QUOTE: quote_form,
    Builtin.IF: if_form,
    Builtin.DEFINE: define_form,
    Builtin.SET: set_form,
    Builtin.SET_CAR: set_car_form,
    Builtin.SET_CDR: set_cdr_form,
    Builtin.LAMBDA: lambda_form,
    Builtin.AND: and_form,
    Builtin.OR: or_form,
}
