"""
Stage TLS material (keystore / truststore) from S3 into a local directory.

Kafka clients read certificates from disk, so everything under the configured
prefix is copied into one deterministic directory. Files are written to a
temporary name first and moved into place, so concurrent stagers of the same
prefix converge on complete files.
"""
import os
import tempfile
from pathlib import Path, PurePosixPath
from typing import Any, Iterator, NamedTuple, Optional

import boto3

from kobling.messages import get_logger
from kobling.utility.exceptions import StagingError
from kobling.utility.settings import STAGING_DEFAULTS

SCHEME_DELIMITER = "://"


class ObjectStoreReference(NamedTuple):
    """Parsed ``scheme://bucket/prefix`` reference."""

    scheme: str
    bucket: str
    prefix: str


def parse_object_store_reference(reference: str) -> ObjectStoreReference:
    """
    Split ``s3://bucket/prefix`` into its parts.

    Raises:
        StagingError: If the delimiter, bucket or prefix is missing
    """
    reference = (reference or "").strip()
    scheme, delimiter, remainder = reference.partition(SCHEME_DELIMITER)
    if not delimiter or not scheme:
        raise StagingError(
            f"Object store reference '{reference}' must look like scheme://bucket/prefix"
        )
    bucket, slash, prefix = remainder.partition("/")
    if not bucket or not slash or not prefix:
        raise StagingError(
            f"Object store reference '{reference}' must include a bucket and a prefix"
        )
    return ObjectStoreReference(scheme=scheme, bucket=bucket, prefix=prefix)


class CertificateStager:
    """
    Copy certificate objects from S3 into a local staging directory.

    Staging is idempotent: the directory is reused when present and every
    object overwrites the local copy of the same name.

    Example:
        ```python
        stager = CertificateStager()
        cert_dir = stager.stage("s3://my-bucket/kafka/certs")
        cert_dir / "kafka.client.truststore.jks"
        ```
    """

    def __init__(
        self,
        s3_client: Optional[Any] = None,
        temp_dir: Optional[str] = None,
        directory_name: Optional[str] = None,
    ):
        """
        Initialize certificate stager.

        Args:
            s3_client: Pre-built boto3 S3 client (created lazily if omitted)
            temp_dir: Base directory for ephemeral files (default: /tmp)
            directory_name: Subdirectory holding the staged files
        """
        self._s3_client = s3_client
        self.temp_dir = temp_dir or STAGING_DEFAULTS.temp_dir
        self.directory_name = directory_name or STAGING_DEFAULTS.directory_name
        self.logger = get_logger("kobling.broker.staging")

    @property
    def s3_client(self) -> Any:
        if self._s3_client is None:
            self._s3_client = boto3.client("s3")
        return self._s3_client

    def staging_directory(self) -> Path:
        """
        Get the staging directory, creating it (and parents) if needed.

        Raises:
            StagingError: If the directory cannot be created
        """
        path = (Path(self.temp_dir) / self.directory_name).absolute()
        if path.is_dir():
            return path
        try:
            path.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise StagingError(f"Unable to create staging directory {path}: {e}") from e
        self.logger.info(f"Created staging directory {self.logger.path(str(path))}")
        return path

    def stage(self, reference: str) -> Path:
        """
        Copy every object under the reference prefix into the staging directory.

        An empty listing is not an error; strategies needing specific files
        fail when they open them.

        Args:
            reference: ``s3://bucket/prefix``

        Returns:
            Path of the staging directory

        Raises:
            StagingError: If the reference is malformed or a copy fails
        """
        location = parse_object_store_reference(reference)
        target_dir = self.staging_directory()

        self.logger.debug(
            f"Staging certificates from {location.scheme}://{location.bucket}/"
            f"{location.prefix}"
        )
        copied = 0
        try:
            for key in self._list_keys(location):
                name = PurePosixPath(key).name
                if not name or key.endswith("/"):
                    continue
                self._download(location.bucket, key, target_dir / name)
                copied += 1
        except StagingError:
            raise
        except Exception as e:
            raise StagingError(
                f"Failed to stage certificates from '{reference}': {e}"
            ) from e

        if copied == 0:
            self.logger.warning(f"No certificate objects found under '{reference}'")
        else:
            self.logger.debug(f"Staged {copied} certificate file(s)")
        return target_dir

    def _list_keys(self, location: ObjectStoreReference) -> Iterator[str]:
        paginator = self.s3_client.get_paginator("list_objects_v2")
        for page in paginator.paginate(Bucket=location.bucket, Prefix=location.prefix):
            for item in page.get("Contents", []):
                yield item["Key"]

    def _download(self, bucket: str, key: str, destination: Path) -> None:
        fd, temp_name = tempfile.mkstemp(
            dir=destination.parent, prefix=f".{destination.name}.", suffix=".part"
        )
        try:
            with os.fdopen(fd, "wb") as handle:
                self.s3_client.download_fileobj(bucket, key, handle)
            os.replace(temp_name, destination)
        except BaseException:
            if os.path.exists(temp_name):
                os.unlink(temp_name)
            raise
        self.logger.debug(f"Staged {key} -> {destination.name}")
