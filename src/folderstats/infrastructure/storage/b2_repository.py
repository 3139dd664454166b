"""
Stats repository on Backblaze B2.

Uses boto3 against the S3-compatible B2 API. Each record is stored as its own
JSON object under `{prefix}/{folder}/`.
"""

import json
import os
from dataclasses import dataclass
from typing import Any, List, Optional

import boto3
from botocore.exceptions import BotoCoreError, ClientError

from folderstats.domain.exceptions import StorageError
from folderstats.domain.models import StatsCommand
from folderstats.shared.logging import get_logger

DEFAULT_ENDPOINT = "https://s3.us-west-004.backblazeb2.com"


@dataclass
class B2Credentials:
    """B2 credentials."""
    key_id: str
    application_key: str
    bucket: str
    endpoint: str = DEFAULT_ENDPOINT

    @classmethod
    def from_env(cls) -> 'B2Credentials':
        """Load from environment variables."""
        return cls(
            key_id=os.getenv('B2_KEY', ''),
            application_key=os.getenv('B2_SECRET', ''),
            bucket=os.getenv('B2_BUCKET', ''),
            endpoint=os.getenv('B2_ENDPOINT', DEFAULT_ENDPOINT)
        )

    def validate(self) -> bool:
        """Check if credentials are set."""
        return bool(self.key_id and self.application_key and self.bucket)


class B2StatsRepository:
    """Stores stats records as JSON objects in a B2 bucket."""

    def __init__(
        self,
        credentials: Optional[B2Credentials] = None,
        prefix: str = "stats",
        client: Optional[Any] = None
    ):
        """
        Initialize repository.

        Args:
            credentials: B2 credentials (loads from env if None)
            prefix: Key prefix for all records
            client: Pre-built S3 client (built from credentials if None)
        """
        self.credentials = credentials or B2Credentials.from_env()
        if not self.credentials.validate():
            raise StorageError("B2 credentials not set (B2_KEY, B2_SECRET, B2_BUCKET)")

        self.bucket = self.credentials.bucket
        self.prefix = prefix.strip("/")
        self._logger = get_logger(__name__)

        self.s3 = client or boto3.client(
            's3',
            endpoint_url=self.credentials.endpoint,
            aws_access_key_id=self.credentials.key_id,
            aws_secret_access_key=self.credentials.application_key,
        )

    def record_key(self, record: StatsCommand) -> str:
        """Object key for a record."""
        stamp = record.processed_date.strftime('%Y%m%dT%H%M%S%f')
        return f"{self._folder_prefix(record.folder_name)}{record.command}-{stamp}.json"

    def add(self, record: StatsCommand) -> None:
        """Upload a record as a JSON object."""
        key = self.record_key(record)
        body = json.dumps(record.to_dict(), ensure_ascii=False).encode('utf-8')

        try:
            self.s3.put_object(
                Bucket=self.bucket,
                Key=key,
                Body=body,
                ContentType='application/json'
            )
        except (ClientError, BotoCoreError) as e:
            raise StorageError(f"Failed to upload s3://{self.bucket}/{key}: {e}") from e

        self._logger.info(f"Stored s3://{self.bucket}/{key}")

    def list_for_folder(self, folder_id: str) -> List[StatsCommand]:
        """Download every record under the folder's prefix, oldest first."""
        prefix = self._folder_prefix(folder_id)
        records = []

        try:
            paginator = self.s3.get_paginator('list_objects_v2')
            for page in paginator.paginate(Bucket=self.bucket, Prefix=prefix):
                for item in page.get('Contents', []):
                    records.append(self._download(item['Key']))
        except (ClientError, BotoCoreError) as e:
            raise StorageError(f"Failed to list s3://{self.bucket}/{prefix}: {e}") from e

        return sorted(records, key=lambda r: r.processed_date)

    def _download(self, key: str) -> StatsCommand:
        response = self.s3.get_object(Bucket=self.bucket, Key=key)
        data = response['Body'].read()
        try:
            return StatsCommand.from_dict(json.loads(data))
        except (ValueError, KeyError, TypeError) as e:
            raise StorageError(f"Malformed record s3://{self.bucket}/{key}: {e}") from e

    def _folder_prefix(self, folder_id: str) -> str:
        if self.prefix:
            return f"{self.prefix}/{folder_id}/"
        return f"{folder_id}/"
