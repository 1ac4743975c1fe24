"""Amazon S3 client, models and exceptions."""

from cumulus.services.s3.client import S3Client
from cumulus.services.s3.errors import S3Error

__all__ = ["S3Client", "S3Error"]
