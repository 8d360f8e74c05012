"""
Completeness evaluation of a loan application.

An application is complete when every active, required input of every
active, required form in the loan type's current version has at least
one non-blank answer across all indices of a repeatable group.
"""

from typing import Dict, Iterable, List

from loan_api.domain.entities import LoanData, LoanTypeVersion


def index_answers(data: Iterable[LoanData]) -> Dict[str, Dict[int, str]]:
    """Group submitted answers as ``key -> {index -> value}``."""
    answers: Dict[str, Dict[int, str]] = {}
    for item in data:
        answers.setdefault(item.key, {})[item.index] = item.value
    return answers


def missing_required_inputs(
    data: Iterable[LoanData],
    version: LoanTypeVersion,
) -> List[str]:
    """
    List the required input codes that lack a non-blank answer.

    Args:
        data: Every answer stored for the loan
        version: The loan type's active default version

    Returns:
        Input codes in catalog order; empty when the application is complete
    """
    answers = index_answers(data)
    missing = []

    for code in version.required_input_codes():
        values = answers.get(code, {})
        if not any(value.strip() for value in values.values()):
            missing.append(code)

    return missing


def is_complete(data: Iterable[LoanData], version: LoanTypeVersion) -> bool:
    """Return True if no required input is missing."""
    return not missing_required_inputs(data, version)
