"""DynamoDB record store implementation"""
import logging
import aioboto3
from typing import Optional, List, Dict
from contextlib import asynccontextmanager
from boto3.dynamodb.conditions import Attr, Key
from botocore.exceptions import ClientError

from tuiter.errors import ConflictError
from tuiter.interfaces.record_store import IRecordStore

logger = logging.getLogger(__name__)


class DynamoDBRecordStore(IRecordStore):
    """
    One DynamoDB table per entity type.

    Each store operation maps to a single table call (scans and queries
    follow pagination). The entity id field is the table's hash key.
    Equality lookups on an attribute listed in ``indexes`` use the named
    global secondary index instead of a scan.
    """

    def __init__(
        self,
        table_name: str,
        id_field: str,
        id_prefix: str,
        resource_config: Dict,
        indexes: Optional[Dict[str, str]] = None
    ):
        self.table_name = table_name
        self.id_field = id_field
        self.id_prefix = id_prefix
        self.indexes = indexes or {}
        self.session = aioboto3.Session()
        self._resource_config = resource_config

    @asynccontextmanager
    async def _get_table(self):
        """Get table within a context manager to properly manage the session lifecycle."""
        async with self.session.resource('dynamodb', **self._resource_config) as dynamodb:
            table = await dynamodb.Table(self.table_name)
            yield table

    @staticmethod
    async def _collect(operation, **kwargs) -> List[Dict]:
        """Run a scan/query, following LastEvaluatedKey until exhausted."""
        items = []
        while True:
            response = await operation(**kwargs)
            items.extend(response.get('Items', []))
            last_key = response.get('LastEvaluatedKey')
            if not last_key:
                return items
            kwargs['ExclusiveStartKey'] = last_key

    async def create(self, item: Dict) -> Dict:
        item = self.ensure_id(item)
        async with self._get_table() as table:
            try:
                await table.put_item(
                    Item=item,
                    ConditionExpression='attribute_not_exists(#pk)',
                    ExpressionAttributeNames={'#pk': self.id_field}
                )
            except ClientError as e:
                if e.response['Error']['Code'] == 'ConditionalCheckFailedException':
                    raise ConflictError(f"Duplicate {self.id_field}: {item[self.id_field]}")
                raise
        logger.debug(f"Created {self.table_name}.{self.id_field}={item[self.id_field]}")
        return item

    async def find_all(self) -> List[Dict]:
        async with self._get_table() as table:
            return await self._collect(table.scan)

    async def find_by_id(self, record_id: str) -> Optional[Dict]:
        async with self._get_table() as table:
            response = await table.get_item(Key={self.id_field: record_id})
            return response.get('Item')

    async def find(self, filters: Dict) -> List[Dict]:
        if not filters:
            return await self.find_all()

        indexed = next((k for k in filters if k in self.indexes), None)
        rest = {k: v for k, v in filters.items() if k != indexed}

        filter_expr = None
        for k, v in rest.items():
            cond = Attr(k).eq(v)
            filter_expr = cond if filter_expr is None else filter_expr & cond

        kwargs = {}
        if filter_expr is not None:
            kwargs['FilterExpression'] = filter_expr

        async with self._get_table() as table:
            if indexed:
                return await self._collect(
                    table.query,
                    IndexName=self.indexes[indexed],
                    KeyConditionExpression=Key(indexed).eq(filters[indexed]),
                    **kwargs
                )
            return await self._collect(table.scan, **kwargs)

    async def update_by_id(self, record_id: str, patch: Dict) -> bool:
        patch = {k: v for k, v in patch.items() if k != self.id_field}
        if not patch:
            return await self.find_by_id(record_id) is not None

        names = {'#pk': self.id_field}
        values = {}
        assignments = []
        for i, (k, v) in enumerate(patch.items()):
            names[f'#f{i}'] = k
            values[f':val{i}'] = v
            assignments.append(f'#f{i} = :val{i}')

        async with self._get_table() as table:
            try:
                await table.update_item(
                    Key={self.id_field: record_id},
                    UpdateExpression='SET ' + ', '.join(assignments),
                    ConditionExpression='attribute_exists(#pk)',
                    ExpressionAttributeNames=names,
                    ExpressionAttributeValues=values
                )
            except ClientError as e:
                if e.response['Error']['Code'] == 'ConditionalCheckFailedException':
                    return False
                raise
        return True

    async def delete_by_id(self, record_id: str) -> bool:
        async with self._get_table() as table:
            response = await table.delete_item(
                Key={self.id_field: record_id},
                ReturnValues='ALL_OLD'
            )
            return 'Attributes' in response
