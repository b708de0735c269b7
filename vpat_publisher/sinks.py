"""Destinations for the rendered VPAT document."""
from __future__ import annotations

from pathlib import Path
from typing import Any, Optional

import boto3

from .inputs import S3Credentials

LOCAL_FILENAME = "vpat.html"


def local_output_path() -> Path:
    """Return ``vpat.html`` in the parent of the working directory.

    Workflows check the docs site out next to this repository, so the parent
    directory is where the next step picks the file up.
    """

    return Path.cwd().parent / LOCAL_FILENAME


def write_local(html_text: str) -> Path:
    """Write *html_text* to :func:`local_output_path`, replacing any existing file."""

    destination = local_output_path()
    destination.write_text(html_text, encoding="utf-8")
    return destination


def object_key(product_id: str) -> str:
    """Return the S3 object key for *product_id*."""

    return f"{product_id}.html"


def s3_client(credentials: S3Credentials) -> Any:
    """Return an S3 client scoped to the region and keys in *credentials*."""

    session = boto3.session.Session(
        aws_access_key_id=credentials.access_key_id,
        aws_secret_access_key=credentials.secret_access_key,
        region_name=credentials.region,
    )
    return session.client("s3")


def upload_remote(
    html_text: str,
    bucket: str,
    key: str,
    credentials: S3Credentials,
    *,
    client: Optional[Any] = None,
) -> None:
    """Put *html_text* into *bucket* under *key*.

    Existing objects are overwritten.  Errors raised by botocore propagate
    unchanged.
    """

    s3 = client if client is not None else s3_client(credentials)
    s3.put_object(Bucket=bucket, Key=key, Body=html_text)


__all__ = [
    "LOCAL_FILENAME",
    "local_output_path",
    "object_key",
    "s3_client",
    "upload_remote",
    "write_local",
]
