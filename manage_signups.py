#!/usr/bin/env python3
"""
CLI script to manage the newsletter signups table in DynamoDB
"""
import argparse
import logging
import os
import sys

from botocore.exceptions import ClientError

from services.aws_clients import AWSClients
from services.signups import SignupsService

# Configure logging
logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(levelname)s - %(message)s')
logger = logging.getLogger(__name__)


class SignupTableManager:
    def __init__(self, table_name):
        self.table_name = table_name
        self.dynamodb = AWSClients.get_dynamodb_client()

    def check_table_exists(self):
        """Check if the signups table exists"""
        try:
            self.dynamodb.describe_table(TableName=self.table_name)
            return True
        except ClientError as e:
            if e.response['Error']['Code'] == 'ResourceNotFoundException':
                return False
            raise

    def create_table(self):
        """Create the signups table if it does not exist yet"""
        try:
            if self.check_table_exists():
                logger.info(f"Table '{self.table_name}' already exists")
                return True

            self.dynamodb.create_table(
                TableName=self.table_name,
                KeySchema=[{'AttributeName': 'id', 'KeyType': 'HASH'}],
                AttributeDefinitions=[{'AttributeName': 'id', 'AttributeType': 'S'}],
                BillingMode='PAY_PER_REQUEST'
            )
            self.dynamodb.get_waiter('table_exists').wait(TableName=self.table_name)
            logger.info(f"Created table '{self.table_name}'")
            return True
        except ClientError as e:
            logger.error(f"Failed to create table '{self.table_name}': {e}")
            return False

    def describe_table(self):
        """Print table status and item count"""
        try:
            table = self.dynamodb.describe_table(TableName=self.table_name)['Table']
        except ClientError as e:
            logger.error(f"Error describing table '{self.table_name}': {e}")
            return False

        print(f"Table: {table['TableName']}")
        print(f"Status: {table['TableStatus']}")
        print(f"Items: {table.get('ItemCount', 0)}")
        return True

    def list_signups(self, limit):
        """Print the most recent signups"""
        try:
            signups = SignupsService(self.table_name).list_signups(limit)
        except ClientError as e:
            logger.error(f"Error listing signups in '{self.table_name}': {e}")
            return False

        print("\nRecent Signups:")
        print("-" * 50)
        for signup in signups:
            print(f"Name: {signup['name']}")
            print(f"Email: {signup['email']}")
            print(f"Phone: {signup['phone']}")
            print(f"Created: {signup['created_at']}")
            print("-" * 50)
        return True


def main(argv=None):
    parser = argparse.ArgumentParser(description='Manage the newsletter signups table')
    parser.add_argument('action', choices=['create-table', 'describe', 'list'],
                        help='Action to perform')
    parser.add_argument('--table', default=os.environ.get('SIGNUPS_TABLE', 'NewsletterSignups'),
                        help='DynamoDB table name')
    parser.add_argument('--limit', type=int, default=20,
                        help='Number of signups to list')

    args = parser.parse_args(argv)

    manager = SignupTableManager(args.table)

    if args.action == 'create-table':
        success = manager.create_table()
    elif args.action == 'describe':
        success = manager.describe_table()
    else:
        success = manager.list_signups(args.limit)

    sys.exit(0 if success else 1)


if __name__ == "__main__":
    main()
