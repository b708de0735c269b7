"""Command line entry points for publishing the most recent VPAT."""
from __future__ import annotations

import argparse
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional

from . import actions
from .inputs import (
    ConvertSettings,
    UploadSettings,
    load_convert_settings,
    load_upload_settings,
)
from .reports import read_report, select_most_recent
from .render import load_stylesheet, render
from .sinks import object_key, upload_remote, write_local


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Return parsed command line arguments."""

    parser = argparse.ArgumentParser(
        description=(
            "Render the most recent Markdown VPAT to HTML. Values not given as "
            "flags are read from the step's action inputs (INPUT_* variables)."
        )
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    convert = subparsers.add_parser(
        "convert", help="Write the rendered VPAT to ../vpat.html"
    )
    upload = subparsers.add_parser(
        "upload", help="Upload the rendered VPAT to S3 as <product-id>.html"
    )
    for sub in (convert, upload):
        sub.add_argument("--vpat-location", help="Directory containing VPATs in Markdown")
        sub.add_argument("--product-name", help="Product name used in the page title")

    upload.add_argument("--product-id", help="Product identifier used for the object key")
    upload.add_argument("--aws-region", help="Region of the destination bucket")
    upload.add_argument("--aws-bucket", help="Destination bucket")
    return parser.parse_args(argv)


def _overrides(args: argparse.Namespace) -> Dict[str, Optional[str]]:
    """Map parsed flags back to the input names they override."""

    return {
        key.replace("_", "-"): value
        for key, value in vars(args).items()
        if key != "command"
    }


def run_convert(settings: ConvertSettings) -> Path:
    """Render the most recent VPAT and write it next to the working directory."""

    source = select_most_recent(settings.vpat_location)
    html_text = render(read_report(source), load_stylesheet(), settings.product_name)
    destination = write_local(html_text)
    actions.info(f"Converted {source} to {destination}")
    return destination


def run_upload(settings: UploadSettings, *, client: Optional[Any] = None) -> str:
    """Render the most recent VPAT and upload it to S3, returning the object key."""

    source = select_most_recent(settings.vpat_location)
    html_text = render(read_report(source), load_stylesheet(), settings.product_name)

    credentials = settings.credentials
    key = object_key(settings.product_id)
    actions.info(f"Uploading '{source}' to S3 bucket '{credentials.bucket}' as '{key}'")
    upload_remote(html_text, credentials.bucket, key, credentials, client=client)
    actions.info("File uploaded successfully")
    return key


def main(
    argv: Optional[List[str]] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> int:
    """CLI entry point used by ``python -m vpat_publisher``."""

    try:
        args = parse_args(argv)
    except SystemExit as exc:
        # argparse exits 0 for --help and 2 after printing usage to stderr.
        if not exc.code:
            raise
        return actions.set_failed("Invalid command line arguments; see usage above")
    overrides = _overrides(args)
    try:
        if args.command == "upload":
            run_upload(load_upload_settings(environ, overrides))
        else:
            run_convert(load_convert_settings(environ, overrides))
    except Exception as exc:
        return actions.set_failed(str(exc))
    return 0


def convert_main() -> int:
    """Console script equivalent of ``vpat-publisher convert``."""

    return main(["convert"])


def upload_main() -> int:
    """Console script equivalent of ``vpat-publisher upload``."""

    return main(["upload"])


__all__ = [
    "convert_main",
    "main",
    "parse_args",
    "run_convert",
    "run_upload",
    "upload_main",
]
