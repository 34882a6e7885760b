"""
Dependency Injection Container

Wires record stores, session store, repositories and the authentication
service together. The storage backing ('memory' or 'dynamodb') is chosen by
``config.storage_backend``; every store is a singleton owned by the
container, created empty on first use.
"""

from dependency_injector import containers, providers

from tuiter.config import settings
from tuiter.implementations.memory_record_store import InMemoryRecordStore
from tuiter.implementations.memory_session_store import InMemorySessionStore
from tuiter.implementations.dynamodb_record_store import DynamoDBRecordStore
from tuiter.implementations.dynamodb_session_store import DynamoDBSessionStore
from tuiter.repositories.user_repository import UserRepository
from tuiter.repositories.tuit_repository import TuitRepository
from tuiter.services.authentication_service import AuthenticationService


class Container(containers.DeclarativeContainer):
    """
    Application dependency injection container.

    Usage:
        container = init_container()
        users = container.user_repository()

        # Fresh, empty stores (tests)
        container.reset_singletons()
    """

    config = providers.Configuration()

    dynamodb_resource_config = providers.Dict(
        endpoint_url=config.dynamodb_endpoint,
        region_name=config.dynamodb_region,
        aws_access_key_id=config.dynamodb_access_key,
        aws_secret_access_key=config.dynamodb_secret_key
    )

    # ========== Stores ==========

    user_store = providers.Selector(
        config.storage_backend,
        memory=providers.Singleton(
            InMemoryRecordStore,
            id_field="user_id",
            id_prefix="user"
        ),
        dynamodb=providers.Singleton(
            DynamoDBRecordStore,
            table_name=config.users_table_name,
            id_field="user_id",
            id_prefix="user",
            resource_config=dynamodb_resource_config,
            indexes=providers.Dict(username="username-index")
        )
    )

    tuit_store = providers.Selector(
        config.storage_backend,
        memory=providers.Singleton(
            InMemoryRecordStore,
            id_field="tuit_id",
            id_prefix="tuit"
        ),
        dynamodb=providers.Singleton(
            DynamoDBRecordStore,
            table_name=config.tuits_table_name,
            id_field="tuit_id",
            id_prefix="tuit",
            resource_config=dynamodb_resource_config
        )
    )

    session_store = providers.Selector(
        config.storage_backend,
        memory=providers.Singleton(
            InMemorySessionStore,
            ttl_seconds=config.session_ttl_seconds
        ),
        dynamodb=providers.Singleton(
            DynamoDBSessionStore,
            table_name=config.sessions_table_name,
            ttl_seconds=config.session_ttl_seconds,
            resource_config=dynamodb_resource_config
        )
    )

    # ========== Repositories ==========

    user_repository = providers.Singleton(
        UserRepository,
        store=user_store
    )

    tuit_repository = providers.Singleton(
        TuitRepository,
        store=tuit_store
    )

    # ========== Services ==========

    authentication_service = providers.Singleton(
        AuthenticationService,
        user_repository=user_repository,
        session_store=session_store
    )


# Global container instance
container = Container()


def get_container() -> Container:
    """
    Get the global container instance.

    Returns:
        Container: Global DI container
    """
    return container


def init_container() -> Container:
    """
    Load settings into the container configuration.

    Returns:
        Container: Initialized container
    """
    container.config.from_dict({
        "storage_backend": settings.STORAGE_BACKEND,
        "dynamodb_endpoint": settings.DYNAMODB_ENDPOINT,
        "dynamodb_region": settings.DYNAMODB_REGION,
        "dynamodb_access_key": settings.DYNAMODB_ACCESS_KEY,
        "dynamodb_secret_key": settings.DYNAMODB_SECRET_KEY,
        "users_table_name": settings.USERS_TABLE_NAME,
        "tuits_table_name": settings.TUITS_TABLE_NAME,
        "sessions_table_name": settings.SESSIONS_TABLE_NAME,
        "session_ttl_seconds": settings.SESSION_TTL_SECONDS
    })
    return container
