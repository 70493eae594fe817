"""sqldbalint validation rules.

Rules:
- use_statement: Script must begin with USE {DATABASE}
- three_part_naming: Table references must be {DATABASE}.{SCHEMA}.{TABLE}
- or_operator: OR operator is disallowed
- order_by: ORDER BY clause is disallowed
- count_star: COUNT(*) is disallowed

Import order is rule order: diagnostics are reported rule by rule in the
order the modules below register their rules.
"""

from . import use_statement
from . import three_part_naming
from . import or_operator
from . import order_by
from . import count_star

__all__ = [
    "use_statement",
    "three_part_naming",
    "or_operator",
    "order_by",
    "count_star",
]
