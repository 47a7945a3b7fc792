"""DynamoDB service for newsletter signups."""
import asyncio
import logging
import uuid
from datetime import datetime, timezone

from boto3.dynamodb.conditions import Attr
from botocore.exceptions import BotoCoreError, ClientError

from services.aws_clients import AWSClients

logger = logging.getLogger(__name__)


class SignupStorageError(Exception):
    """Raised when a signup record could not be stored."""


class SignupsService:
    """Service for storing newsletter signups in DynamoDB."""

    def __init__(self, table_name: str):
        """Initialize with table name."""
        self.table_name = table_name
        self._table = None

    @property
    def table(self):
        """Lazy load DynamoDB table."""
        if self._table is None:
            dynamodb = AWSClients.get_dynamodb()
            self._table = dynamodb.Table(self.table_name)
        return self._table

    def create_signup(self, name: str, email: str, phone: str, message: str = '') -> dict:
        """Store one signup and return the written item."""
        now = datetime.now(timezone.utc).isoformat()
        item = {
            'id': str(uuid.uuid4()),
            'name': name,
            'email': email,
            'phone': phone,
            'message': message,
            'created_at': now,
            'updated_at': now
        }
        try:
            self.table.put_item(
                Item=item,
                ConditionExpression=Attr('id').not_exists()
            )
        except (ClientError, BotoCoreError) as e:
            logger.error(f"Error storing signup in {self.table_name}: {e}")
            raise SignupStorageError('Failed to submit form') from e

        logger.info(f"Stored signup {item['id']}")
        return item

    def list_signups(self, limit: int = 20) -> list:
        """Return up to ``limit`` signups, newest first."""
        items = []
        kwargs = {}
        while True:
            response = self.table.scan(**kwargs)
            items.extend(response.get('Items', []))
            if 'LastEvaluatedKey' not in response:
                break
            kwargs['ExclusiveStartKey'] = response['LastEvaluatedKey']

        items.sort(key=lambda item: item.get('created_at', ''), reverse=True)
        return items[:limit]


class DynamoSignupGateway:
    """Async persistence gateway backed by :class:`SignupsService`.

    boto3 calls block, so each submission runs in a worker thread and the
    event loop stays free to see further submit triggers.
    """

    def __init__(self, service: SignupsService):
        self.service = service

    async def submit_signup(self, name: str, email: str, phone: str, message: str = '') -> dict:
        return await asyncio.to_thread(self.service.create_signup, name, email, phone, message)
