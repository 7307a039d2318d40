import logging
from dataclasses import dataclass
from typing import Dict, List, Sequence

from prop_dnf.config import DEFAULT_SETTINGS, Settings
from prop_dnf.errors import TooManyVariablesError
from prop_dnf.tree import Executor, execute

logger = logging.getLogger(__name__)


# 3. Truth table

@dataclass(frozen=True)
class Row:
    assignment: Dict[str, bool]
    result: bool


def generate(variables: Sequence[str], executor: Executor,
             settings: Settings = DEFAULT_SETTINGS) -> List[Row]:
    """
    Evaluate the tree for every assignment of the variables.

    Variables are indexed in sorted order and bit i of the row mask sets
    variable i, so rows come out in ascending mask order, 2^n of them.
    """
    ordered = sorted(set(variables))
    if len(ordered) > settings.max_variables:
        raise TooManyVariablesError(len(ordered), settings.max_variables)

    count = 1 << len(ordered)
    logger.debug("generating %d rows over %s", count, "".join(ordered))
    rows = []
    for mask in range(count):
        values = {name: bool(mask >> i & 1) for i, name in enumerate(ordered)}
        rows.append(Row(values, execute(executor, values)))
    return rows


# 4. Normal forms

def _literal(name, negated, settings):
    return settings.negation + name if negated else name


def _join_term(literals, separator):
    # Parentheses only around terms with more than one literal
    if len(literals) <= 1:
        return ''.join(literals)
    return '(' + separator.join(literals) + ')'


def build_dnf(rows: Sequence[Row], settings: Settings = DEFAULT_SETTINGS) -> str:
    """OR of one conjunction per satisfying row; empty when nothing satisfies."""
    terms = []
    for row in rows:
        if not row.result:
            continue
        literals = [_literal(name, not value, settings) for name, value in sorted(row.assignment.items())]
        terms.append(_join_term(literals, settings.and_separator))
    return settings.or_separator.join(terms)


def build_cnf(rows: Sequence[Row], settings: Settings = DEFAULT_SETTINGS) -> str:
    """AND of one disjunction per falsifying row; empty for a tautology."""
    clauses = []
    for row in rows:
        if row.result:
            continue
        literals = [_literal(name, value, settings) for name, value in sorted(row.assignment.items())]
        clauses.append(_join_term(literals, settings.or_separator))
    return settings.and_separator.join(clauses)
