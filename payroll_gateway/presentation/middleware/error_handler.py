"""Error handling middleware and exception handlers."""

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
import structlog

from payroll_gateway.domain.exceptions import (
    ApplicantNotFoundException,
    ConflictException,
    DomainException,
    InstallmentScheduleException,
    InvalidLoanRequestException,
    SimulationMarginExceededException,
)
from .request_context import get_request_id

logger = structlog.get_logger(__name__)


def error_handler_middleware(app: FastAPI) -> None:
    """
    Register exception handlers with the FastAPI app.

    Maps domain exceptions to appropriate HTTP responses. The credit margin
    rule answers 400 on simulation and 409 on loan creation.
    """

    @app.exception_handler(ApplicantNotFoundException)
    async def applicant_not_found_handler(
        request: Request,
        exc: ApplicantNotFoundException,
    ) -> JSONResponse:
        """Handle unknown applicants as bad requests."""
        return JSONResponse(
            status_code=400,
            content=exc.to_dict(get_request_id()),
        )

    @app.exception_handler(InvalidLoanRequestException)
    async def invalid_request_handler(
        request: Request,
        exc: InvalidLoanRequestException,
    ) -> JSONResponse:
        """Handle invalid request errors."""
        return JSONResponse(
            status_code=400,
            content=exc.to_dict(get_request_id()),
        )

    @app.exception_handler(SimulationMarginExceededException)
    async def simulation_margin_handler(
        request: Request,
        exc: SimulationMarginExceededException,
    ) -> JSONResponse:
        """Handle simulations above the credit margin."""
        return JSONResponse(
            status_code=400,
            content=exc.to_dict(get_request_id()),
        )

    @app.exception_handler(ConflictException)
    async def conflict_handler(
        request: Request,
        exc: ConflictException,
    ) -> JSONResponse:
        """Handle margin conflicts on creation and declined payments."""
        logger.warning(
            "business_conflict",
            request_id=get_request_id(),
            code=exc.code,
            message=exc.message,
        )
        return JSONResponse(
            status_code=409,
            content=exc.to_dict(get_request_id()),
        )

    @app.exception_handler(InstallmentScheduleException)
    async def schedule_failure_handler(
        request: Request,
        exc: InstallmentScheduleException,
    ) -> JSONResponse:
        """Handle schedules that could not be fully written."""
        logger.error(
            "installment_schedule_incomplete",
            request_id=get_request_id(),
            loan_id=exc.loan_id,
            written=exc.written,
            expected=exc.expected,
        )
        return JSONResponse(
            status_code=500,
            content=exc.to_dict(get_request_id()),
        )

    @app.exception_handler(DomainException)
    async def domain_exception_handler(
        request: Request,
        exc: DomainException,
    ) -> JSONResponse:
        """Handle generic domain exceptions."""
        logger.warning(
            "domain_exception",
            request_id=get_request_id(),
            code=exc.code,
            message=exc.message,
        )
        return JSONResponse(
            status_code=400,
            content=exc.to_dict(get_request_id()),
        )

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(
        request: Request,
        exc: Exception,
    ) -> JSONResponse:
        """Handle unexpected exceptions."""
        logger.exception(
            "unhandled_exception",
            request_id=get_request_id(),
            error=str(exc),
            error_type=type(exc).__name__,
        )
        return JSONResponse(
            status_code=500,
            content={
                "error": "INTERNAL_ERROR",
                "message": "An unexpected error occurred.",
                "request_id": get_request_id(),
            },
        )
