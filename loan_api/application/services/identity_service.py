"""Identity verification of applicants against their registered user record."""

import structlog

from loan_api.domain.exceptions import IdentityVerificationException
from loan_api.domain.interfaces import UserRepository
from loan_api.service.lending import match_identity

logger = structlog.get_logger(__name__)


class IdentityVerifier:
    """
    Verifies that submitted identity data belongs to the applicant.

    A mismatch is a verification result (False). Missing input or an
    unreadable user record is a technical failure and raises.
    """

    def __init__(self, user_repository: UserRepository):
        self._user_repo = user_repository

    async def verify_identity(
        self,
        user_id: int,
        document_type: str,
        document_number: str,
        full_name: str,
    ) -> bool:
        """
        Compare submitted identity fields with the registered user.

        Raises:
            IdentityVerificationException: If any field is empty or the user
                cannot be loaded
        """
        if not document_type or not document_number or not full_name:
            raise IdentityVerificationException("insufficient data for identity verification")

        user = await self._user_repo.get_by_id(user_id)
        if user is None:
            raise IdentityVerificationException("registered user data could not be loaded")

        verified = match_identity(user, document_type, document_number, full_name)
        logger.info("identity_verified", user_id=user_id, verified=verified)
        return verified
