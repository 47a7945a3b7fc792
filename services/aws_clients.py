"""AWS client initialization and configuration."""
import boto3


class AWSClients:
    """Singleton for AWS service clients."""

    _dynamodb = None
    _dynamodb_client = None

    @classmethod
    def get_dynamodb(cls):
        """Get DynamoDB resource."""
        if cls._dynamodb is None:
            cls._dynamodb = boto3.resource('dynamodb')
        return cls._dynamodb

    @classmethod
    def get_dynamodb_client(cls):
        """Get low-level DynamoDB client, used for table management."""
        if cls._dynamodb_client is None:
            cls._dynamodb_client = boto3.client('dynamodb')
        return cls._dynamodb_client
