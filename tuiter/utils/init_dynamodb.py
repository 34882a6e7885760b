"""DynamoDB table initialization for tuiter.

Creates all tables the DynamoDB backing needs:
- users: user documents, GSI on username
- tuits: tuit documents
- sessions: server-side sessions with TTL expiry
"""
import asyncio
import logging
import aioboto3
from botocore.exceptions import ClientError

from tuiter.config import settings

logger = logging.getLogger(__name__)


def _resource_config() -> dict:
    return {
        'endpoint_url': settings.DYNAMODB_ENDPOINT,
        'region_name': settings.DYNAMODB_REGION,
        'aws_access_key_id': settings.DYNAMODB_ACCESS_KEY,
        'aws_secret_access_key': settings.DYNAMODB_SECRET_KEY
    }


async def initialize_all_tables():
    """Create all DynamoDB tables if they don't exist."""

    session = aioboto3.Session()

    async with session.resource('dynamodb', **_resource_config()) as dynamodb:
        tables_created = []

        if await create_users_table(dynamodb):
            tables_created.append(settings.USERS_TABLE_NAME)

        if await create_tuits_table(dynamodb):
            tables_created.append(settings.TUITS_TABLE_NAME)

        if await create_sessions_table(dynamodb):
            tables_created.append(settings.SESSIONS_TABLE_NAME)

    # TTL is configured through the low-level client
    if settings.SESSIONS_TABLE_NAME in tables_created:
        await enable_session_ttl(session)

    return tables_created


async def _create_table(dynamodb, **table_spec) -> bool:
    """Create a table, returning False if it already exists."""
    name = table_spec['TableName']
    try:
        logger.info(f"Creating '{name}' table...")
        table = await dynamodb.create_table(**table_spec)
        await table.wait_until_exists()
        logger.info(f"'{name}' table created")
        return True
    except ClientError as e:
        if e.response['Error']['Code'] == 'ResourceInUseException':
            logger.info(f"'{name}' table already exists")
            return False
        raise


async def create_users_table(dynamodb):
    """Create users table with a username lookup index."""
    return await _create_table(
        dynamodb,
        TableName=settings.USERS_TABLE_NAME,
        KeySchema=[
            {'AttributeName': 'user_id', 'KeyType': 'HASH'}
        ],
        AttributeDefinitions=[
            {'AttributeName': 'user_id', 'AttributeType': 'S'},
            {'AttributeName': 'username', 'AttributeType': 'S'}
        ],
        GlobalSecondaryIndexes=[
            {
                'IndexName': 'username-index',
                'KeySchema': [
                    {'AttributeName': 'username', 'KeyType': 'HASH'}
                ],
                'Projection': {'ProjectionType': 'ALL'}
            }
        ],
        BillingMode='PAY_PER_REQUEST'
    )


async def create_tuits_table(dynamodb):
    """Create tuits table."""
    return await _create_table(
        dynamodb,
        TableName=settings.TUITS_TABLE_NAME,
        KeySchema=[
            {'AttributeName': 'tuit_id', 'KeyType': 'HASH'}
        ],
        AttributeDefinitions=[
            {'AttributeName': 'tuit_id', 'AttributeType': 'S'}
        ],
        BillingMode='PAY_PER_REQUEST'
    )


async def create_sessions_table(dynamodb):
    """Create sessions table."""
    return await _create_table(
        dynamodb,
        TableName=settings.SESSIONS_TABLE_NAME,
        KeySchema=[
            {'AttributeName': 'session_id', 'KeyType': 'HASH'}
        ],
        AttributeDefinitions=[
            {'AttributeName': 'session_id', 'AttributeType': 'S'}
        ],
        BillingMode='PAY_PER_REQUEST'
    )


async def enable_session_ttl(session):
    """Let DynamoDB expire sessions by their 'ttl' attribute."""
    async with session.client('dynamodb', **_resource_config()) as client:
        await client.update_time_to_live(
            TableName=settings.SESSIONS_TABLE_NAME,
            TimeToLiveSpecification={
                'Enabled': True,
                'AttributeName': 'ttl'
            }
        )


async def main():
    """Main entry point."""
    logging.basicConfig(level=logging.INFO)

    tables_created = await initialize_all_tables()
    if tables_created:
        logger.info(f"Created {len(tables_created)} new table(s): {', '.join(tables_created)}")
    else:
        logger.info("All tables already exist")


if __name__ == "__main__":
    asyncio.run(main())
