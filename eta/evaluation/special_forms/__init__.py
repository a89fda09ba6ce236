"""Registry of special forms for the Eta evaluator.

Maps head names to handler functions that implement non-standard evaluation
rules. The evaluator consults this table before ordinary function
application, so these names cannot be rebound as callables.
"""

from eta.evaluation.special_forms.define_form import define_form
from eta.evaluation.special_forms.if_form import if_form
from eta.evaluation.special_forms.lambda_form import lambda_form

SPECIAL_FORMS = {
    "define": define_form,
    "if": if_form,
    "lambda": lambda_form,
}
