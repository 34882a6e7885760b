"""Tests for dependency injection wiring."""
from tuiter.implementations.memory_record_store import InMemoryRecordStore
from tuiter.implementations.memory_session_store import InMemorySessionStore
from tuiter.implementations.dynamodb_record_store import DynamoDBRecordStore
from tuiter.implementations.dynamodb_session_store import DynamoDBSessionStore


def test_memory_backing_is_wired(reset_container):
    container = reset_container

    assert isinstance(container.user_store(), InMemoryRecordStore)
    assert isinstance(container.tuit_store(), InMemoryRecordStore)
    assert isinstance(container.session_store(), InMemorySessionStore)

    assert container.user_repository().store is container.user_store()
    assert container.tuit_repository().store is container.tuit_store()
    assert container.authentication_service().session_store is container.session_store()


def test_user_and_tuit_stores_are_separate(reset_container):
    assert reset_container.user_store() is not reset_container.tuit_store()
    assert reset_container.user_store().id_field == "user_id"
    assert reset_container.tuit_store().id_field == "tuit_id"


def test_reset_singletons_gives_empty_stores(reset_container):
    first = reset_container.user_store()
    reset_container.reset_singletons()

    assert reset_container.user_store() is not first


def test_dynamodb_backing_is_selectable(reset_container):
    with reset_container.config.storage_backend.override("dynamodb"):
        users = reset_container.user_store()
        sessions = reset_container.session_store()

    assert isinstance(users, DynamoDBRecordStore)
    assert users.indexes == {'username': 'username-index'}
    assert users._resource_config['region_name']
    assert isinstance(sessions, DynamoDBSessionStore)
