"""
Fixtures for integration tests.

Provides:
- Test client for FastAPI app
- In-memory database seeded with a company and its employees
- Mock score provider and payment simulator clients
"""

from decimal import Decimal
from typing import AsyncGenerator, Dict, List, Optional, Set

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport
from sqlalchemy.ext.asyncio import (
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool

from payroll_gateway.main import app, rate_limit_store
from payroll_gateway.core.dependencies import (
    get_applicant_repository,
    get_installment_repository,
    get_loan_repository,
    get_payment_client,
    get_score_client,
)
from payroll_gateway.domain.entities import ScoreResult
from payroll_gateway.domain.exceptions import PaymentGatewayUnavailableException
from payroll_gateway.domain.interfaces import CreditScoreClient, PaymentSimulatorClient
from payroll_gateway.infrastructure.database import Base
from payroll_gateway.infrastructure.database.models import CompanyModel, EmployeeModel
from payroll_gateway.infrastructure.repositories import (
    PostgresApplicantRepository,
    PostgresInstallmentRepository,
    PostgresLoanRepository,
)


# =============================================================================
# Test Data
# =============================================================================

COMPANY_ID = "5d3f1c52-8a0e-4f55-9a64-0c3b7e2f9a10"
WELL_PAID_ID = "0b6e7d7a-3c1f-4b0e-9a7e-6f1f0f1d2a01"  # salary 5000.00, band score 600
LOW_INCOME_ID = "9a4c2e11-7d5b-4f3a-8e21-3b9d6c0e4f02"  # salary 1500.00, band score 400
UNKNOWN_ID = "ffffffff-0000-4000-8000-000000000000"


# =============================================================================
# Mock Clients
# =============================================================================

class MockCreditScoreClient(CreditScoreClient):
    """Mock score provider returning fixed scores per applicant."""

    def __init__(
        self,
        scores: Optional[Dict[str, float]] = None,
        default: float = 800,
        fail_mode: bool = False,
    ):
        self.scores = scores or {}
        self.default = default
        self.fail_mode = fail_mode
        self.calls: List[str] = []

    async def fetch_score(self, applicant_id: str) -> ScoreResult:
        self.calls.append(applicant_id)

        if self.fail_mode:
            return ScoreResult.unavailable("score provider returned 503")

        return ScoreResult.ok(self.scores.get(applicant_id, self.default))


class MockPaymentSimulatorClient(PaymentSimulatorClient):
    """Mock payment simulator that tracks confirmations."""

    def __init__(
        self,
        status: str = "approved",
        fail_mode: bool = False,
        declined_loans: Optional[Set[str]] = None,
    ):
        self.status = status
        self.fail_mode = fail_mode
        self.declined_loans = declined_loans or set()
        self.calls: List[Dict[str, str]] = []

    async def check(self, loan_id: str, applicant_id: str) -> str:
        self.calls.append({"loan_id": loan_id, "applicant_id": applicant_id})

        if self.fail_mode:
            raise PaymentGatewayUnavailableException(
                message="Payment simulator unavailable",
                status_code=503,
            )

        if loan_id in self.declined_loans:
            return "rejected"

        return self.status


# =============================================================================
# Database Fixtures
# =============================================================================

@pytest_asyncio.fixture
async def test_engine():
    """Create an in-memory SQLite async engine for testing."""
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        echo=False,
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    await engine.dispose()


@pytest_asyncio.fixture
async def test_session(test_engine) -> AsyncGenerator[AsyncSession, None]:
    """Create a test database session over a seeded database."""
    async_session = async_sessionmaker(
        bind=test_engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autocommit=False,
        autoflush=False,
    )

    async with async_session() as session:
        session.add(
            CompanyModel(
                id=COMPANY_ID,
                cnpj="12.345.678/0001-90",
                legal_name="Acme Industria e Comercio Ltda",
                representative_name="Maria Souza",
            )
        )
        session.add_all([
            EmployeeModel(
                id=WELL_PAID_ID,
                company_id=COMPANY_ID,
                name="Joao Silva",
                cpf="123.456.789-00",
                email="joao.silva@acme.example",
                salary=Decimal("5000.00"),
            ),
            EmployeeModel(
                id=LOW_INCOME_ID,
                company_id=COMPANY_ID,
                name="Ana Lima",
                cpf="987.654.321-00",
                email="ana.lima@acme.example",
                salary=Decimal("1500.00"),
            ),
        ])
        await session.commit()

        yield session


# =============================================================================
# Mock Client Fixtures
# =============================================================================

@pytest.fixture
def mock_score_client() -> MockCreditScoreClient:
    """Score provider that scores every applicant at 800."""
    return MockCreditScoreClient()


@pytest.fixture
def mock_payment_client() -> MockPaymentSimulatorClient:
    """Payment simulator that approves every loan."""
    return MockPaymentSimulatorClient()


# =============================================================================
# App Client Fixtures
# =============================================================================

def _override_dependencies(
    session: AsyncSession,
    score_client: CreditScoreClient,
    payment_client: PaymentSimulatorClient,
) -> None:
    async def override_get_applicant_repository():
        return PostgresApplicantRepository(session)

    async def override_get_loan_repository():
        return PostgresLoanRepository(session)

    async def override_get_installment_repository():
        return PostgresInstallmentRepository(session)

    app.dependency_overrides[get_applicant_repository] = override_get_applicant_repository
    app.dependency_overrides[get_loan_repository] = override_get_loan_repository
    app.dependency_overrides[get_installment_repository] = override_get_installment_repository
    app.dependency_overrides[get_score_client] = lambda: score_client
    app.dependency_overrides[get_payment_client] = lambda: payment_client


@pytest_asyncio.fixture
async def make_client(test_session: AsyncSession):
    """
    Factory for test clients with custom score and payment clients.

    Usage:
        client = await make_client(score_client=MockCreditScoreClient(fail_mode=True))
    """
    clients: List[AsyncClient] = []

    async def _make(
        score_client: Optional[CreditScoreClient] = None,
        payment_client: Optional[PaymentSimulatorClient] = None,
    ) -> AsyncClient:
        _override_dependencies(
            test_session,
            score_client or MockCreditScoreClient(),
            payment_client or MockPaymentSimulatorClient(),
        )
        ac = AsyncClient(transport=ASGITransport(app=app), base_url="http://test")
        clients.append(ac)
        return ac

    rate_limit_store.clear()

    yield _make

    for ac in clients:
        await ac.aclose()
    app.dependency_overrides.clear()


@pytest_asyncio.fixture
async def client(
    make_client,
    mock_score_client: MockCreditScoreClient,
    mock_payment_client: MockPaymentSimulatorClient,
) -> AsyncGenerator[AsyncClient, None]:
    """
    Create a test client with mocked dependencies.

    This client:
    - Uses an in-memory SQLite database with two seeded employees
    - Mocks the score provider (every applicant scores 800)
    - Mocks the payment simulator (every loan approved)
    """
    yield await make_client(
        score_client=mock_score_client,
        payment_client=mock_payment_client,
    )


# =============================================================================
# Helper Fixtures
# =============================================================================

@pytest.fixture
def well_paid_loan_request() -> dict:
    """Request body for the 5000.00 salary employee, within the 1750.00 margin."""
    return {
        "applicant_id": WELL_PAID_ID,
        "requested_amount": 1000.00,
        "installment_count": 4,
    }


@pytest.fixture
def low_income_loan_request() -> dict:
    """Request body for the 1500.00 salary employee, within the 525.00 margin."""
    return {
        "applicant_id": LOW_INCOME_ID,
        "requested_amount": 500.00,
        "installment_count": 2,
    }
