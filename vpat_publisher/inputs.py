"""Resolve action inputs into immutable run settings.

GitHub Actions exposes each ``with:`` input of a step as an environment
variable named ``INPUT_<NAME>``, where spaces in the name become underscores
and the name is upper-cased (hyphens are preserved).  Every setting a run
needs is resolved here, once, before any file is read or written.
"""
from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional, Tuple

from .errors import MissingConfiguration, MissingCredentialField

VPAT_LOCATION = "vpat-location"
PRODUCT_NAME = "product-name"
PRODUCT_ID = "product-id"

# (input name, label used in the failure message), in validation order.
CREDENTIAL_INPUTS: Tuple[Tuple[str, str], ...] = (
    ("aws-access-key-id", "AWS Access Key ID"),
    ("aws-secret-access-key", "AWS Secret Access Key"),
    ("aws-region", "AWS Region"),
    ("aws-bucket", "AWS Bucket"),
)


@dataclass(frozen=True)
class S3Credentials:
    """Destination and authentication for the S3 upload."""

    access_key_id: str
    secret_access_key: str
    region: str
    bucket: str

    def __repr__(self) -> str:
        return (
            f"S3Credentials(access_key_id='***', secret_access_key='***', "
            f"region={self.region!r}, bucket={self.bucket!r})"
        )


@dataclass(frozen=True)
class ConvertSettings:
    """Settings for rendering the report to a local file."""

    vpat_location: str
    product_name: str


@dataclass(frozen=True)
class UploadSettings:
    """Settings for rendering the report and uploading it to S3."""

    vpat_location: str
    product_name: str
    product_id: str
    credentials: S3Credentials


def input_variable(name: str) -> str:
    """Return the environment variable that carries the input *name*."""

    return "INPUT_" + name.replace(" ", "_").upper()


def get_input(
    name: str,
    environ: Optional[Mapping[str, str]] = None,
    overrides: Optional[Mapping[str, Optional[str]]] = None,
) -> str:
    """Return the value of input *name*, or ``""`` when it is not set.

    A non-empty value in *overrides* (command line flags) wins over the
    environment.  Surrounding whitespace is stripped.
    """

    if overrides:
        override = overrides.get(name)
        if override is not None and override.strip():
            return override.strip()

    env = os.environ if environ is None else environ
    return env.get(input_variable(name), "").strip()


def get_required_value(
    name: str,
    environ: Optional[Mapping[str, str]] = None,
    overrides: Optional[Mapping[str, Optional[str]]] = None,
) -> str:
    """Return the value of input *name*, raising when it is absent or empty."""

    value = get_input(name, environ, overrides)
    if value == "":
        raise MissingConfiguration(name)
    return value


def load_credentials(
    environ: Optional[Mapping[str, str]] = None,
    overrides: Optional[Mapping[str, Optional[str]]] = None,
) -> S3Credentials:
    """Read and validate the four S3 inputs, failing on the first empty one."""

    values = []
    for name, label in CREDENTIAL_INPUTS:
        value = get_input(name, environ, overrides)
        if not value:
            raise MissingCredentialField(name, label)
        values.append(value)
    access_key_id, secret_access_key, region, bucket = values
    return S3Credentials(
        access_key_id=access_key_id,
        secret_access_key=secret_access_key,
        region=region,
        bucket=bucket,
    )


def load_convert_settings(
    environ: Optional[Mapping[str, str]] = None,
    overrides: Optional[Mapping[str, Optional[str]]] = None,
) -> ConvertSettings:
    """Resolve the settings of a local conversion run."""

    return ConvertSettings(
        vpat_location=get_required_value(VPAT_LOCATION, environ, overrides),
        product_name=get_required_value(PRODUCT_NAME, environ, overrides),
    )


def load_upload_settings(
    environ: Optional[Mapping[str, str]] = None,
    overrides: Optional[Mapping[str, Optional[str]]] = None,
) -> UploadSettings:
    """Resolve the settings of an upload run, credentials included."""

    return UploadSettings(
        vpat_location=get_required_value(VPAT_LOCATION, environ, overrides),
        product_name=get_required_value(PRODUCT_NAME, environ, overrides),
        product_id=get_required_value(PRODUCT_ID, environ, overrides),
        credentials=load_credentials(environ, overrides),
    )


__all__ = [
    "CREDENTIAL_INPUTS",
    "ConvertSettings",
    "S3Credentials",
    "UploadSettings",
    "get_input",
    "get_required_value",
    "input_variable",
    "load_convert_settings",
    "load_credentials",
    "load_upload_settings",
]
