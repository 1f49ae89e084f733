"""Pytest fixtures for testing"""

import pytest
from datetime import date
from fastapi.testclient import TestClient
from legalflow_finance.api.main import create_app
from legalflow_finance.api.dependencies import get_today
from legalflow_finance.domain.models import (
    ClientContract,
    ClientType,
    EntryKind,
    EntryStatus,
    LedgerEntry,
)


@pytest.fixture
def today() -> date:
    """Fixed evaluation date shared by unit and API tests"""
    return date(2026, 3, 15)


@pytest.fixture
def client(today: date) -> TestClient:
    """Create FastAPI test client with a pinned evaluation date"""
    app = create_app()
    app.dependency_overrides[get_today] = lambda: today
    return TestClient(app)


@pytest.fixture
def sample_contracts() -> list[ClientContract]:
    """Two paying retainers plus contracts that must not count"""
    return [
        ClientContract(client_type=ClientType.PRIVATE, is_active=True, retainer_fee=3000.0),
        ClientContract(client_type=ClientType.PRIVATE, is_active=True, retainer_fee=1500.0),
        ClientContract(client_type=ClientType.PRIVATE, is_active=False, retainer_fee=2000.0),
        ClientContract(client_type=ClientType.PUBLIC_DEFENDER, is_active=True, retainer_fee=800.0),
    ]


@pytest.fixture
def sample_ledger() -> list[LedgerEntry]:
    """Six months of paid history around 2026-03-15 plus open receivables"""
    return [
        # Variable revenue inside the trailing window
        LedgerEntry(EntryKind.REVENUE, "Success Fee", 1200.0, date(2026, 1, 5), EntryStatus.PAID, date(2026, 1, 10)),
        LedgerEntry(EntryKind.REVENUE, "Consulting", 600.0, date(2025, 10, 1), EntryStatus.PAID, date(2025, 10, 1)),
        # Retainer revenue is already counted through contracts
        LedgerEntry(EntryKind.REVENUE, "Retainer Fee", 3000.0, date(2026, 2, 5), EntryStatus.PAID, date(2026, 2, 5)),
        # Outside the trailing window
        LedgerEntry(EntryKind.REVENUE, "Success Fee", 9999.0, date(2025, 9, 1), EntryStatus.PAID, date(2025, 9, 1)),
        # Fixed expenses paid last month
        LedgerEntry(EntryKind.EXPENSE, "Operating Expenses", 1000.0, date(2026, 2, 1), EntryStatus.PAID, date(2026, 2, 3)),
        LedgerEntry(EntryKind.EXPENSE, "Marketing", 500.0, date(2026, 2, 28), EntryStatus.PAID, date(2026, 2, 28)),
        LedgerEntry(EntryKind.EXPENSE, "Marketing", 400.0, date(2026, 1, 31), EntryStatus.PAID, date(2026, 1, 31)),
        # Variable expenses
        LedgerEntry(EntryKind.EXPENSE, "Court Fees", 300.0, date(2026, 2, 10), EntryStatus.PAID, date(2026, 2, 10)),
        LedgerEntry(EntryKind.EXPENSE, "Travel", 300.0, date(2025, 12, 1), EntryStatus.PAID, date(2025, 12, 1)),
        # Open receivables
        LedgerEntry(EntryKind.REVENUE, "Success Fee", 500.0, date(2026, 3, 20), EntryStatus.PENDING),
        LedgerEntry(EntryKind.REVENUE, "Consulting", 700.0, date(2026, 2, 20), EntryStatus.OVERDUE),
    ]
