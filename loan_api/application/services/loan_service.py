"""Loan service - orchestrates the loan application lifecycle."""

from decimal import Decimal
from typing import List, Optional

import structlog

from loan_api.application.dto import CreateLoanRequest, LoanResponse, SaveLoanDataRequest
from loan_api.application.services.catalog_service import CatalogService
from loan_api.application.services.identity_service import IdentityVerifier
from loan_api.core.metrics import (
    record_application_created,
    record_data_saved,
    record_decision,
    track_decision_latency,
)
from loan_api.domain.entities import Loan, LoanData, LoanStatus, LoanType, User
from loan_api.domain.exceptions import (
    IncompleteEvaluationException,
    InvalidLoanRequestException,
    InvalidLoanStateException,
    LoanNotFoundException,
    LoanTypeNotFoundException,
)
from loan_api.domain.interfaces import (
    CreditBureauClient,
    DisbursementClient,
    LoanRepository,
)
from loan_api.service.lending import (
    DISBURSEMENT_FAILED_OBSERVATION,
    DISBURSEMENT_SUCCEEDED_SUFFIX,
    LendingSettings,
    calculate_approved_amount,
    can_accept_data,
    can_transition,
    describe_status,
    determine_status,
    evaluate_application,
    is_complete,
    lending_settings,
)

logger = structlog.get_logger(__name__)

DOCUMENT_TYPE_KEY = "document_type"
DOCUMENT_NUMBER_KEY = "document_number"
FULL_NAME_KEY = "full_name"
REQUESTED_AMOUNT_KEY = "requested_amount"
MONTHLY_INCOME_KEY = "monthly_income"


class LoanService:
    """
    Application service for loan application use cases.

    Every public method runs inside the caller's transaction; the
    repository and clients share the request's session.
    """

    def __init__(
        self,
        loan_repository: LoanRepository,
        catalog_service: CatalogService,
        identity_verifier: IdentityVerifier,
        credit_bureau: CreditBureauClient,
        disbursement_client: DisbursementClient,
        settings: LendingSettings = lending_settings,
    ):
        self._loan_repo = loan_repository
        self._catalog = catalog_service
        self._identity = identity_verifier
        self._credit_bureau = credit_bureau
        self._disbursement = disbursement_client
        self._settings = settings

    async def create_loan(self, user: User, request: CreateLoanRequest) -> LoanResponse:
        """
        Open a loan application in ``pending`` for one of the tenant's loan types.

        Raises:
            InvalidLoanRequestException: If request validation fails
            LoanTypeNotFoundException: If the loan type is not offered by the user's tenant
        """
        errors = request.validate()
        if errors:
            raise InvalidLoanRequestException("; ".join(errors))

        loan_type = await self._catalog.get_loan_type(
            request.loan_type_id,
            tenant_id=user.tenant_id,
        )

        loan = Loan(
            loan_type_id=loan_type.id,
            user_id=user.id,
            status=LoanStatus.PENDING,
            observation=describe_status(LoanStatus.PENDING),
        )
        await self._loan_repo.create(loan)

        record_application_created()
        logger.info(
            "loan_created",
            loan_id=loan.id,
            user_id=user.id,
            loan_type_id=loan_type.id,
        )

        return LoanResponse.from_entities(loan, user, loan_type)

    async def save_loan_data(self, user: User, request: SaveLoanDataRequest) -> LoanResponse:
        """
        Replace the answers of an application and recompute its status.

        When the submission carries a document type and number the credit
        score is recomputed; with a full name as well, identity is verified.
        Evaluation results already stored are kept when the inputs are absent.

        Raises:
            InvalidLoanRequestException: If request validation fails
            LoanNotFoundException: If the loan does not exist or belongs to someone else
            InvalidLoanStateException: If the loan no longer accepts data
            IdentityVerificationException: If identity verification fails technically
        """
        errors = request.validate()
        if errors:
            raise InvalidLoanRequestException("; ".join(errors))

        log = logger.bind(loan_id=request.loan_id, user_id=user.id)

        loan = await self._get_owned_loan(request.loan_id, user, for_update=True)

        if not can_accept_data(loan.status):
            raise InvalidLoanStateException(
                loan.id,
                loan.status.value,
                "data can only be saved while the application is pending or on progress",
            )

        version = await self._catalog.get_active_version_with_forms(loan.loan_type_id)

        submitted = [
            LoanData(
                loan_id=loan.id,
                form_id=item.form_id,
                key=item.key,
                value=item.value,
                index=item.index,
            )
            for item in request.data
        ]
        loan.data = await self._loan_repo.replace_data(loan.id, submitted)

        credit_score, identity_verified = await self._evaluate(loan)
        loan.record_evaluation(credit_score=credit_score, identity_verified=identity_verified)

        status = determine_status(
            has_data=bool(loan.data),
            is_complete=is_complete(loan.data, version),
            credit_score=loan.credit_score,
            identity_verified=loan.identity_verified,
        )
        self._transition(loan, status)
        loan.observation = describe_status(status, loan.credit_score, loan.identity_verified)

        await self._loan_repo.update(loan)

        record_data_saved(status.value)
        log.info(
            "loan_data_saved",
            items=len(loan.data),
            status=status.value,
            credit_score=loan.credit_score,
            identity_verified=loan.identity_verified,
        )

        return await self._build_response(loan, user)

    async def get_loan(self, user: User, loan_id: int) -> LoanResponse:
        """
        Get a loan with its borrower, loan type and data.

        Raises:
            LoanNotFoundException: If the loan does not exist or belongs to someone else
        """
        loan = await self._get_owned_loan(loan_id, user)
        return await self._build_response(loan, user)

    async def get_user_loans(self, user: User) -> List[LoanResponse]:
        """Get every loan of the user, newest first."""
        loans = await self._loan_repo.get_by_user_id(user.id)

        loan_types = {}
        responses = []
        for loan in loans:
            if loan.loan_type_id not in loan_types:
                loan_types[loan.loan_type_id] = await self._find_loan_type(loan.loan_type_id)
            responses.append(
                LoanResponse.from_entities(loan, user, loan_types[loan.loan_type_id])
            )

        return responses

    async def process_decision(self, user: User, loan_id: int) -> LoanResponse:
        """
        Apply the approval rules to a completed application and disburse on approval.

        Status, observation and approved amount are written once, together.

        Raises:
            LoanNotFoundException: If the loan does not exist or belongs to someone else
            InvalidLoanStateException: If the loan is not completed
            IncompleteEvaluationException: If the credit score or identity result is missing
        """
        log = logger.bind(loan_id=loan_id, user_id=user.id)

        with track_decision_latency():
            loan = await self._get_owned_loan(loan_id, user, for_update=True)

            if loan.status != LoanStatus.COMPLETED:
                raise InvalidLoanStateException(
                    loan.id,
                    loan.status.value,
                    "only completed applications can be evaluated",
                )

            if not loan.is_evaluated:
                missing = []
                if loan.credit_score is None:
                    missing.append("credit_score")
                if loan.identity_verified is None:
                    missing.append("identity_verified")
                raise IncompleteEvaluationException(loan.id, missing)

            requested_amount = loan.decimal_value_of(REQUESTED_AMOUNT_KEY)
            monthly_income = loan.decimal_value_of(MONTHLY_INCOME_KEY)

            outcome = evaluate_application(
                credit_score=loan.credit_score,
                identity_verified=loan.identity_verified,
                requested_amount=requested_amount,
                monthly_income=monthly_income,
                settings=self._settings,
            )

            status = outcome.status
            observation = outcome.reason
            amount_approved = Decimal("0")

            if outcome.approved:
                amount_approved = calculate_approved_amount(
                    requested_amount,
                    monthly_income,
                    settings=self._settings,
                )
                disbursed = await self._disbursement.disburse(loan.user_id, amount_approved)

                if disbursed:
                    observation += DISBURSEMENT_SUCCEEDED_SUFFIX
                else:
                    status = LoanStatus.REJECTED
                    observation = DISBURSEMENT_FAILED_OBSERVATION

            self._transition(loan, status)
            loan.observation = observation
            loan.amount_approved = amount_approved
            await self._loan_repo.update(loan)

        record_decision(status.value)
        log.info(
            "loan_decided",
            status=status.value,
            credit_score=loan.credit_score,
            requested_amount=str(requested_amount),
            amount_approved=str(amount_approved),
        )

        return await self._build_response(loan, user)

    async def _evaluate(self, loan: Loan):
        """Run the credit score and identity checks the submitted data allows."""
        document_type = loan.value_of(DOCUMENT_TYPE_KEY)
        document_number = loan.value_of(DOCUMENT_NUMBER_KEY)
        full_name = loan.value_of(FULL_NAME_KEY)

        credit_score = None
        identity_verified = None

        if document_type.strip() and document_number.strip():
            credit_score = await self._credit_bureau.get_credit_score(document_type, document_number)

            if full_name.strip():
                identity_verified = await self._identity.verify_identity(
                    loan.user_id,
                    document_type,
                    document_number,
                    full_name,
                )

        return credit_score, identity_verified

    def _transition(self, loan: Loan, target: LoanStatus) -> None:
        if not can_transition(loan.status, target):
            raise InvalidLoanStateException(
                loan.id,
                loan.status.value,
                f"cannot move from {loan.status.value} to {target.value}",
            )
        loan.status = target

    async def _get_owned_loan(self, loan_id: int, user: User, for_update: bool = False) -> Loan:
        loan = await self._loan_repo.get_by_id(loan_id, for_update=for_update)
        if loan is None or loan.user_id != user.id:
            raise LoanNotFoundException(loan_id)
        return loan

    async def _find_loan_type(self, loan_type_id: int) -> Optional[LoanType]:
        try:
            return await self._catalog.get_loan_type(loan_type_id)
        except LoanTypeNotFoundException as e:
            logger.warning("loan_type_unavailable", loan_type_id=loan_type_id, error=e.code)
            return None

    async def _build_response(self, loan: Loan, user: User) -> LoanResponse:
        loan_type = await self._find_loan_type(loan.loan_type_id)
        return LoanResponse.from_entities(loan, user, loan_type)
