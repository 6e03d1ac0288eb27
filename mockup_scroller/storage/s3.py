"""
AWS S3 storage backend, optionally fronted by a CDN
"""

import logging
import mimetypes
from pathlib import Path
from typing import Optional

import boto3
from boto3.exceptions import S3UploadFailedError
from botocore.exceptions import BotoCoreError, ClientError, NoCredentialsError

from .base import StorageBackend
from .exceptions import StorageError, StorageNotFoundError, StoragePermissionError

logger = logging.getLogger(__name__)

DEFAULT_CACHE_CONTROL = 'public, max-age=31536000'


class S3Storage(StorageBackend):
    """
    AWS S3 storage backend
    """

    def __init__(
        self,
        bucket: str,
        region: str = 'us-east-1',
        profile: Optional[str] = None,
        cdn_base_url: Optional[str] = None,
        cache_control: str = DEFAULT_CACHE_CONTROL,
    ):
        """
        Initialize S3 storage backend

        Args:
            bucket: S3 bucket name
            region: AWS region
            profile: Named AWS profile (SSO profiles included); default credential chain if None
            cdn_base_url: Public base URL serving the bucket; S3 URLs are returned if None
            cache_control: Cache-Control header stored with each object
        """
        self.bucket = bucket
        self.region = region
        self.cdn_base_url = cdn_base_url.rstrip('/') if cdn_base_url else None
        self.cache_control = cache_control

        try:
            session = boto3.Session(profile_name=profile, region_name=region)
            self.s3_client = session.client('s3')
            logger.info(f"Initialized S3 storage backend for bucket: {bucket} in region: {region}")
        except BotoCoreError as e:
            logger.error(f"Failed to initialize S3 client: {e}")
            raise StoragePermissionError(f"Failed to initialize S3 client: {e}") from e

    @staticmethod
    def content_type_for(path: Path) -> str:
        guessed, _ = mimetypes.guess_type(path.name)
        return guessed or 'application/octet-stream'

    def save_file(self, local_path: Path, remote_path: str) -> str:
        """
        Upload a local file to ``s3://<bucket>/<remote_path>``

        Returns:
            Public URL of the uploaded object

        Raises:
            StorageNotFoundError: If the local file or bucket does not exist
            StoragePermissionError: If credentials are missing or rejected
            StorageError: For any other upload failure
        """
        local_path = Path(local_path)
        if not local_path.is_file():
            raise StorageNotFoundError(f"Local file does not exist: {local_path}")

        extra_args = {
            'ContentType': self.content_type_for(local_path),
            'CacheControl': self.cache_control,
        }

        try:
            logger.debug(f"Uploading {local_path} to s3://{self.bucket}/{remote_path}")
            self.s3_client.upload_file(str(local_path), self.bucket, remote_path, ExtraArgs=extra_args)
        except NoCredentialsError as e:
            raise StoragePermissionError("AWS credentials not configured") from e
        except ClientError as e:
            error_code = e.response.get('Error', {}).get('Code', '')
            if error_code == 'NoSuchBucket':
                raise StorageNotFoundError(f"S3 bucket does not exist: {self.bucket}") from e
            if error_code in ('AccessDenied', '403'):
                raise StoragePermissionError(f"Access denied to s3://{self.bucket}/{remote_path}") from e
            raise StorageError(f"S3 upload failed: {e}") from e
        except (S3UploadFailedError, BotoCoreError) as e:
            raise StorageError(f"S3 upload failed: {e}") from e

        return self.get_file_url(remote_path)

    def file_exists(self, remote_path: str) -> bool:
        """Check if an object exists in the bucket"""
        try:
            self.s3_client.head_object(Bucket=self.bucket, Key=remote_path)
            return True
        except ClientError as e:
            error_code = e.response.get('Error', {}).get('Code', '')
            if error_code in ('404', 'NoSuchKey', 'NotFound'):
                return False
            raise StorageError(f"Error checking S3 object existence: {e}") from e

    def get_file_url(self, remote_path: str) -> str:
        if self.cdn_base_url:
            return f"{self.cdn_base_url}/{remote_path}"
        return f"https://{self.bucket}.s3.{self.region}.amazonaws.com/{remote_path}"
