"""Identity matching of submitted applicant data against the registered user."""

from loan_api.domain.entities import User


def normalize_name(name: str) -> str:
    return name.strip().lower()


def match_identity(
    user: User,
    document_type: str,
    document_number: str,
    full_name: str,
) -> bool:
    """
    Compare submitted identity fields with the registered user.

    The checks run in order and stop at the first mismatch:
    1. Document type equals the registered type
    2. Document number equals the registered number exactly
    3. The registered name is contained in the submitted full name,
       ignoring case and surrounding whitespace (submissions often carry
       middle names or second surnames)

    Returns:
        True only if every check passes
    """
    registered_type = getattr(user.document_type, "value", user.document_type)
    if registered_type != document_type:
        return False

    if user.document_number != document_number:
        return False

    return normalize_name(user.name) in normalize_name(full_name)
