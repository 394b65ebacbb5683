from protean.domain import Domain
from sqlalchemy import create_engine

_SQL_PROVIDERS = ("sqlite", "postgresql")


def configure_database(domain: Domain, database_url: str | None) -> None:
    """Point the domain's default database at ``database_url``.

    Must run before ``domain.init()``. No URL (or ``memory://``) keeps the
    in-memory provider.
    """
    if not database_url or database_url.startswith("memory://"):
        domain.config["databases"]["default"] = {"provider": "memory"}
        return

    scheme, _, rest = database_url.partition("://")
    if scheme in ("postgres", "postgresql"):
        domain.config["databases"]["default"] = {
            "provider": "postgresql",
            "database_uri": f"postgresql://{rest}",
        }
    elif scheme == "sqlite":
        domain.config["databases"]["default"] = {"provider": "sqlite", "database_uri": database_url}
    else:
        raise ValueError(f"Unsupported database URL scheme: {scheme!r}")


def setup_db(domain: Domain):
    """Setup database schema"""
    with domain.domain_context():
        for _, provider in domain.providers.items():
            if provider.conn_info["provider"] in _SQL_PROVIDERS:
                engine = create_engine(provider.conn_info["database_uri"])

                # Ensure live aggregates are loaded and registered with SQLAlchemy
                #   We do this by accessing the _dao attribute of the repository, forcing
                #   the aggregate to be loaded and registered with SQLAlchemy.
                # noqa: B018 is used to suppress the warning about the _dao attribute
                for _, aggregate_record in domain.registry.aggregates.items():
                    if aggregate_record.cls.meta_.provider == provider.name:
                        domain.repository_for(aggregate_record.cls)._dao  # noqa: B018

                # Create RDBMS Tables
                provider._metadata.create_all(engine)


def drop_db(domain: Domain):
    """Drop database schema"""
    with domain.domain_context():
        for _, provider in domain.providers.items():
            if provider.conn_info["provider"] in _SQL_PROVIDERS:
                engine = create_engine(provider.conn_info["database_uri"])
                provider._metadata.drop_all(engine)
