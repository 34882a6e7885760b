"""Unit tests for the DynamoDB record store."""
import pytest
from unittest.mock import AsyncMock, patch
from boto3.dynamodb.conditions import Attr, Key
from botocore.exceptions import ClientError

from tuiter.errors import ConflictError
from tuiter.implementations.dynamodb_record_store import DynamoDBRecordStore


@pytest.fixture
def store():
    """Create DynamoDBRecordStore instance with mocked session."""
    with patch('tuiter.implementations.dynamodb_record_store.aioboto3.Session'):
        return DynamoDBRecordStore(
            table_name="users",
            id_field="user_id",
            id_prefix="user",
            resource_config={'endpoint_url': 'http://localhost:8000'},
            indexes={'username': 'username-index'}
        )


@pytest.fixture
def mock_table(store):
    """Table mock returned from ``session.resource(...).__aenter__().Table()``."""
    table = AsyncMock()
    store.session.resource.return_value.__aenter__.return_value.Table = AsyncMock(return_value=table)
    return table


@pytest.mark.asyncio
async def test_create_put_item_with_generated_id(store, mock_table):
    created = await store.create({'username': 'ana'})

    mock_table.put_item.assert_called_once()
    kwargs = mock_table.put_item.call_args.kwargs
    item = kwargs['Item']
    assert item['username'] == 'ana'
    assert item['user_id'] == created['user_id']
    assert created['user_id'].startswith('user_')
    assert kwargs['ConditionExpression'] == 'attribute_not_exists(#pk)'
    assert kwargs['ExpressionAttributeNames'] == {'#pk': 'user_id'}


@pytest.mark.asyncio
async def test_create_duplicate_id_raises_conflict(store, mock_table):
    mock_table.put_item.side_effect = ClientError(
        {'Error': {'Code': 'ConditionalCheckFailedException', 'Message': 'failed'}},
        'PutItem'
    )

    with pytest.raises(ConflictError):
        await store.create({'user_id': 'user_x', 'username': 'bob'})


@pytest.mark.asyncio
async def test_create_other_errors_propagate(store, mock_table):
    mock_table.put_item.side_effect = ClientError(
        {'Error': {'Code': 'ResourceNotFoundException', 'Message': 'no table'}},
        'PutItem'
    )

    with pytest.raises(ClientError):
        await store.create({'username': 'bob'})


@pytest.mark.asyncio
async def test_find_by_id(store, mock_table):
    mock_table.get_item.return_value = {'Item': {'user_id': 'user_1', 'username': 'ana'}}

    item = await store.find_by_id('user_1')

    assert item['username'] == 'ana'
    mock_table.get_item.assert_called_once_with(Key={'user_id': 'user_1'})


@pytest.mark.asyncio
async def test_find_by_id_missing(store, mock_table):
    mock_table.get_item.return_value = {}

    assert await store.find_by_id('user_nope') is None


@pytest.mark.asyncio
async def test_find_all_follows_pagination(store, mock_table):
    mock_table.scan.side_effect = [
        {'Items': [{'user_id': 'user_1'}], 'LastEvaluatedKey': {'user_id': 'user_1'}},
        {'Items': [{'user_id': 'user_2'}]}
    ]

    items = await store.find_all()

    assert [i['user_id'] for i in items] == ['user_1', 'user_2']
    assert mock_table.scan.call_count == 2
    assert mock_table.scan.call_args_list[1].kwargs['ExclusiveStartKey'] == {'user_id': 'user_1'}


@pytest.mark.asyncio
async def test_find_uses_index_for_indexed_attribute(store, mock_table):
    mock_table.query.return_value = {'Items': [{'user_id': 'user_1', 'username': 'ana'}]}

    item = await store.find_one({'username': 'ana'})

    assert item['user_id'] == 'user_1'
    kwargs = mock_table.query.call_args.kwargs
    assert kwargs['IndexName'] == 'username-index'
    assert kwargs['KeyConditionExpression'] == Key('username').eq('ana')
    assert 'FilterExpression' not in kwargs
    mock_table.scan.assert_not_called()


@pytest.mark.asyncio
async def test_find_scans_with_filter_for_other_attributes(store, mock_table):
    mock_table.scan.return_value = {'Items': []}

    items = await store.find({'user_type': 'admin'})

    assert items == []
    kwargs = mock_table.scan.call_args.kwargs
    assert kwargs['FilterExpression'] == Attr('user_type').eq('admin')
    mock_table.query.assert_not_called()


@pytest.mark.asyncio
async def test_update_by_id_builds_set_expression(store, mock_table):
    result = await store.update_by_id('user_1', {'first_name': 'Ana', 'user_id': 'ignored'})

    assert result is True
    kwargs = mock_table.update_item.call_args.kwargs
    assert kwargs['Key'] == {'user_id': 'user_1'}
    assert kwargs['UpdateExpression'] == 'SET #f0 = :val0'
    assert kwargs['ConditionExpression'] == 'attribute_exists(#pk)'
    assert kwargs['ExpressionAttributeNames'] == {'#pk': 'user_id', '#f0': 'first_name'}
    assert kwargs['ExpressionAttributeValues'] == {':val0': 'Ana'}


@pytest.mark.asyncio
async def test_update_by_id_missing_returns_false(store, mock_table):
    mock_table.update_item.side_effect = ClientError(
        {'Error': {'Code': 'ConditionalCheckFailedException', 'Message': 'failed'}},
        'UpdateItem'
    )

    assert await store.update_by_id('user_nope', {'first_name': 'X'}) is False


@pytest.mark.asyncio
async def test_update_by_id_other_errors_propagate(store, mock_table):
    mock_table.update_item.side_effect = ClientError(
        {'Error': {'Code': 'ProvisionedThroughputExceededException', 'Message': 'slow down'}},
        'UpdateItem'
    )

    with pytest.raises(ClientError):
        await store.update_by_id('user_1', {'first_name': 'X'})


@pytest.mark.asyncio
async def test_update_by_id_empty_patch_checks_existence(store, mock_table):
    mock_table.get_item.return_value = {'Item': {'user_id': 'user_1'}}

    assert await store.update_by_id('user_1', {}) is True
    mock_table.update_item.assert_not_called()


@pytest.mark.asyncio
async def test_delete_by_id(store, mock_table):
    mock_table.delete_item.return_value = {'Attributes': {'user_id': 'user_1'}}

    assert await store.delete_by_id('user_1') is True
    mock_table.delete_item.assert_called_once_with(
        Key={'user_id': 'user_1'},
        ReturnValues='ALL_OLD'
    )


@pytest.mark.asyncio
async def test_delete_by_id_missing(store, mock_table):
    mock_table.delete_item.return_value = {}

    assert await store.delete_by_id('user_nope') is False
