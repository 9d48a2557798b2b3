"""Registry of special forms for the Owl evaluator.

Maps operator names to handler functions that implement non-standard evaluation
rules. The evaluator consults this table before the intrinsic registry. The
table is fixed; user code cannot add to it.
"""

from types import MappingProxyType

from owl.evaluation.special_forms.do_form import do_form
from owl.evaluation.special_forms.if_form import if_form
from owl.evaluation.special_forms.def_form import def_form
from owl.evaluation.special_forms.set_form import set_form
from owl.evaluation.special_forms.fun_form import fun_form

SPECIAL_FORMS = MappingProxyType({
    "do": do_form,
    "if": if_form,
    "def": def_form,
    "set": set_form,
    "fun": fun_form,
})
