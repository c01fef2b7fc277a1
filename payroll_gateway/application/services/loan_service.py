"""Loan service - orchestrates loan simulation and underwriting use cases."""

import structlog

from payroll_gateway.application.dto import (
    CreateLoanRequest,
    LoanHistoryResponse,
    LoanResponse,
    SimulateLoanRequest,
    SimulationResponse,
)
from payroll_gateway.core.config import settings as app_settings
from payroll_gateway.core.metrics import (
    record_loan_decision,
    record_payment_confirmation,
    record_schedule_failure,
    record_score_source,
    record_simulation,
)
from payroll_gateway.domain.entities import (
    Applicant,
    LoanApplication,
    LoanSimulation,
    ScoreSource,
)
from payroll_gateway.domain.exceptions import (
    ApplicantNotFoundException,
    InstallmentScheduleException,
    InvalidLoanRequestException,
    LoanMarginConflictException,
    PaymentGatewayUnavailableException,
    PaymentNotApprovedException,
    SimulationMarginExceededException,
)
from payroll_gateway.domain.interfaces import (
    ApplicantRepository,
    CreditScoreClient,
    InstallmentRepository,
    LoanRepository,
    PaymentSimulatorClient,
)
from payroll_gateway.service.underwriting import (
    UnderwritingSettings,
    build_installment_schedule,
    calculate_installment_options,
    credit_margin,
    exceeds_margin,
    decide,
    required_score,
    underwriting_settings,
)

logger = structlog.get_logger(__name__)


class LoanService:
    """
    Application service for payroll loan use cases.

    A create request moves through margin check, scoring, decision,
    persistence and, for approved loans, schedule generation and payment
    confirmation. Nothing is locked between concurrent requests for the
    same applicant.
    """

    def __init__(
        self,
        applicant_repository: ApplicantRepository,
        loan_repository: LoanRepository,
        installment_repository: InstallmentRepository,
        score_client: CreditScoreClient,
        payment_client: PaymentSimulatorClient,
        settings: UnderwritingSettings = underwriting_settings,
        payment_approved_status: str | None = None,
    ):
        self._applicant_repo = applicant_repository
        self._loan_repo = loan_repository
        self._installment_repo = installment_repository
        self._score_client = score_client
        self._payment_client = payment_client
        self._settings = settings
        self._payment_approved_status = (
            payment_approved_status or app_settings.payment_approved_status
        )

    async def simulate(self, request: SimulateLoanRequest) -> SimulationResponse:
        """
        Simulate installment options for a requested amount.

        Has no side effects.

        Args:
            request: The simulation request with applicant_id and amount

        Returns:
            SimulationResponse with the margin and the 1..4 installment options

        Raises:
            InvalidLoanRequestException: If request validation fails
            ApplicantNotFoundException: If the applicant doesn't exist
            SimulationMarginExceededException: If the amount is above the margin
        """
        errors = request.validate(self._settings)
        if errors:
            raise InvalidLoanRequestException("; ".join(errors))

        applicant = await self._get_applicant(request.applicant_id)
        margin = credit_margin(applicant.salary, self._settings)

        if exceeds_margin(request.requested_amount, applicant.salary, self._settings):
            record_simulation(accepted=False)
            logger.info(
                "simulation_margin_exceeded",
                applicant_id=applicant.id,
                requested_amount=str(request.requested_amount),
                margin=str(margin),
            )
            raise SimulationMarginExceededException(request.requested_amount, margin)

        simulation = LoanSimulation(
            requested_amount=request.requested_amount,
            margin=margin,
            options=calculate_installment_options(request.requested_amount, self._settings),
        )
        record_simulation(accepted=True)

        return SimulationResponse.from_entity(simulation)

    async def create_loan(self, request: CreateLoanRequest) -> LoanResponse:
        """
        Underwrite and record a loan request.

        Args:
            request: The loan request with applicant_id, amount and installment count

        Returns:
            LoanResponse for the persisted loan (installments not included)

        Raises:
            InvalidLoanRequestException: If request validation fails
            ApplicantNotFoundException: If the applicant doesn't exist
            LoanMarginConflictException: If the amount is above the margin
            InstallmentScheduleException: If the schedule could not be fully written
            PaymentNotApprovedException: If the payment simulator declines the
                loan; the loan stays recorded
        """
        errors = request.validate(self._settings)
        if errors:
            raise InvalidLoanRequestException("; ".join(errors))

        log = logger.bind(
            applicant_id=request.applicant_id,
            requested_amount=str(request.requested_amount),
            installment_count=request.installment_count,
        )
        log.info("loan_requested")

        applicant = await self._get_applicant(request.applicant_id)
        margin = credit_margin(applicant.salary, self._settings)

        if exceeds_margin(request.requested_amount, applicant.salary, self._settings):
            log.info("loan_margin_exceeded", margin=str(margin))
            raise LoanMarginConflictException(request.requested_amount, margin)

        score = await self._resolve_score(applicant.id)
        status = decide(score, applicant.salary, self._settings)

        loan = LoanApplication(
            applicant_id=applicant.id,
            requested_amount=request.requested_amount,
            installment_count=request.installment_count,
            score=score,
            status=status,
        )
        await self._loan_repo.save(loan)
        record_loan_decision(loan.approved, loan.requested_amount)

        log = log.bind(loan_id=str(loan.id))
        log.info(
            "loan_created",
            status=loan.status.value,
            score=score,
            required_score=required_score(applicant.salary, self._settings),
        )

        if loan.approved:
            await self._generate_schedule(loan)
            await self._confirm_payment(loan)

        return LoanResponse.from_entity(loan)

    async def list_loans(self, applicant_id: str) -> LoanHistoryResponse:
        """
        Get every loan of an applicant with installments and employer.

        Args:
            applicant_id: The applicant's identifier

        Returns:
            LoanHistoryResponse, newest loan first
        """
        loans = await self._loan_repo.get_by_applicant_id(applicant_id)

        logger.info(
            "applicant_loans_retrieved",
            applicant_id=applicant_id,
            count=len(loans),
        )

        return LoanHistoryResponse.from_entities(applicant_id, loans)

    async def _get_applicant(self, applicant_id: str) -> Applicant:
        applicant = await self._applicant_repo.get_by_id(applicant_id)
        if applicant is None:
            logger.warning("applicant_not_found", applicant_id=applicant_id)
            raise ApplicantNotFoundException(applicant_id)
        return applicant

    async def _resolve_score(self, applicant_id: str) -> float:
        """
        Score used for the decision: the provider's, or the salary-band fallback.

        Never raises.
        """
        result = await self._score_client.fetch_score(applicant_id)

        if result.available:
            record_score_source(ScoreSource.EXTERNAL.value)
            logger.info("score_fetched", applicant_id=applicant_id, score=result.score)
            return result.score

        score = await self._fallback_score(applicant_id)
        record_score_source(ScoreSource.FALLBACK.value)
        logger.warning(
            "score_fallback_used",
            applicant_id=applicant_id,
            score=score,
            error=result.error,
        )
        return score

    async def _fallback_score(self, applicant_id: str) -> int:
        """Minimum score for the applicant's current salary, re-read from the store."""
        try:
            applicant = await self._applicant_repo.get_by_id(applicant_id)
        except Exception as e:
            logger.error(
                "score_fallback_lookup_failed",
                applicant_id=applicant_id,
                error=str(e),
            )
            return self._settings.default_score

        if applicant is None:
            return self._settings.default_score

        return required_score(applicant.salary, self._settings)

    async def _generate_schedule(self, loan: LoanApplication) -> None:
        """
        Persist the installments one by one, in order.

        Installments written before a failure are left in place.
        """
        installments = build_installment_schedule(
            loan_id=loan.id,
            principal=loan.requested_amount,
            count=loan.installment_count,
        )

        written = 0
        try:
            for installment in installments:
                await self._installment_repo.save(installment)
                written += 1
        except Exception as e:
            record_schedule_failure()
            logger.error(
                "installment_schedule_failed",
                loan_id=str(loan.id),
                written=written,
                expected=len(installments),
                error=str(e),
            )
            raise InstallmentScheduleException(
                str(loan.id), written, len(installments)
            ) from e

        loan.installments = installments
        logger.info(
            "installments_generated",
            loan_id=str(loan.id),
            num_installments=len(installments),
            first_due_date=installments[0].due_date.isoformat(),
        )

    async def _confirm_payment(self, loan: LoanApplication) -> None:
        """
        Confirm payment of an approved loan.

        An explicit non-approval is raised as a conflict; an unreachable
        simulator is only logged.
        """
        try:
            status = await self._payment_client.check(str(loan.id), loan.applicant_id)
        except PaymentGatewayUnavailableException as e:
            record_payment_confirmation("unavailable")
            logger.warning(
                "payment_confirmation_unavailable",
                loan_id=str(loan.id),
                error=e.message,
            )
            return

        if status != self._payment_approved_status:
            record_payment_confirmation("rejected")
            logger.warning(
                "payment_not_approved",
                loan_id=str(loan.id),
                status=status,
            )
            raise PaymentNotApprovedException(str(loan.id), status)

        record_payment_confirmation("approved")
        logger.info("payment_confirmed", loan_id=str(loan.id))
