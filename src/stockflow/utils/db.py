"""SQL schema management for the StockFlow domain.

The memory provider needs no schema; for SQL providers the tables are
materialised from Protean's metadata through SQLAlchemy.
"""

from protean.domain import Domain
from sqlalchemy import create_engine

SQL_PROVIDERS = ("sqlite", "postgresql")


def _sql_providers(domain: Domain):
    for _, provider in domain.providers.items():
        if provider.conn_info["provider"] in SQL_PROVIDERS:
            yield provider


def _register_tables(domain: Domain, provider) -> None:
    """Build the DAO of every aggregate and entity stored in ``provider``.

    DAO construction is what registers a table on the provider's metadata.
    """
    records = list(domain.registry.aggregates.values()) + list(domain.registry.entities.values())
    for record in records:
        if record.cls.meta_.provider == provider.name:
            domain.repository_for(record.cls)._dao  # noqa: B018


def setup_db(domain: Domain) -> None:
    """Create tables for all SQL-backed aggregates and entities."""
    with domain.domain_context():
        for provider in _sql_providers(domain):
            _register_tables(domain, provider)
            provider._metadata.create_all(create_engine(provider.conn_info["database_uri"]))


def drop_db(domain: Domain) -> None:
    """Drop every table known to the SQL providers."""
    with domain.domain_context():
        for provider in _sql_providers(domain):
            _register_tables(domain, provider)
            provider._metadata.drop_all(create_engine(provider.conn_info["database_uri"]))
