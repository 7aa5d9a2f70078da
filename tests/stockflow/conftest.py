import pytest
from protean import current_domain
from protean.integrations.pytest import DomainFixture


@pytest.fixture(scope="session")
def stockflow_bed():
    from stockflow.domain import stockflow

    bed = DomainFixture(stockflow)
    bed.setup()
    yield bed
    bed.teardown()


@pytest.fixture(scope="session", autouse=True)
def _schema(stockflow_bed):
    """Create SQL tables when running with ``--env production``; no-op on the memory provider."""
    from stockflow.domain import stockflow
    from stockflow.utils.db import drop_db, setup_db

    setup_db(stockflow)
    yield
    drop_db(stockflow)


@pytest.fixture(autouse=True)
def _ctx(stockflow_bed):
    with stockflow_bed.domain_context():
        yield

        # Clear all databases and the event store between tests
        for _, provider in current_domain.providers.items():
            provider._data_reset()
        current_domain.event_store.store._data_reset()


@pytest.fixture
def company_id():
    from stockflow.company.registration import RegisterCompany

    return current_domain.process(RegisterCompany(name="Acme Corp"), asynchronous=False)


@pytest.fixture
def warehouse_id(company_id):
    from stockflow.warehouse.management import CreateWarehouse

    return current_domain.process(
        CreateWarehouse(company_id=company_id, name="Main Warehouse", location="Chicago, IL"),
        asynchronous=False,
    )
