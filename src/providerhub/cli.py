"""
Command-line interface for providerhub.

Checks and normalizes ResourceTypeExtension documents, either from local
files or fetched from the service.

Usage:
    providerhub validate /path/to/extension.json
    providerhub normalize /path/to/extension.yaml
    providerhub get /providers/Microsoft.Contoso/extensions/default
"""

import argparse
import json
import sys
from pathlib import Path
from typing import Any, List, Optional

from providerhub.client.serialization import Serializer
from providerhub.client.transport import HttpxTransport
from providerhub.client.types import HttpRequest
from providerhub.core.exceptions import MalformedDocumentError, ProviderHubError
from providerhub.core.logger import configure_root_logger, get_logger
from providerhub.models.client_config import ClientSettings
from providerhub.models.resource_type_extension import ResourceTypeExtension

logger = get_logger(__name__)


def load_document(path: str) -> Any:
    """
    Load a JSON or YAML document from disk.

    Raises:
        FileNotFoundError: If the file doesn't exist
        ValueError: If the suffix is not .json, .yaml or .yml
        MalformedDocumentError: If a YAML document does not parse
    """
    doc_file = Path(path)
    if not doc_file.exists():
        raise FileNotFoundError(f"Document not found: {path}")

    with open(doc_file, "r") as f:
        if doc_file.suffix == ".json":
            return json.load(f)
        if doc_file.suffix in (".yaml", ".yml"):
            try:
                import yaml
            except ImportError:
                raise ImportError(
                    "PyYAML required for YAML documents. "
                    "Install with: pip install providerhub[yaml]"
                )
            try:
                return yaml.safe_load(f)
            except yaml.YAMLError as e:
                raise MalformedDocumentError(f"invalid YAML: {e}") from e

    raise ValueError(f"Unsupported document format: {doc_file.suffix}. Use .json or .yaml")


def validate_document(path: str) -> ResourceTypeExtension:
    """
    Deserialize a document as a ResourceTypeExtension.

    Raises:
        MalformedDocumentError: If a field holds the wrong type
    """
    logger.debug(f"Validating document: {path}")
    record = ResourceTypeExtension.deserialize(load_document(path))
    logger.debug("Document is valid")
    return record


def fetch_record(path: str, settings: Optional[ClientSettings] = None) -> ResourceTypeExtension:
    settings = settings or ClientSettings.from_env()
    serializer = Serializer()
    with HttpxTransport(settings) as transport:
        response = transport.send(HttpRequest(method="GET", url=path))
    return serializer.deserialize(ResourceTypeExtension, response)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="providerhub",
        description="Validate and normalize ResourceTypeExtension documents",
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")

    subparsers = parser.add_subparsers(dest="command", help="Command to execute")

    validate_parser = subparsers.add_parser("validate", help="Check a document without printing it")
    validate_parser.add_argument("document", help="Path to document (JSON or YAML)")

    normalize_parser = subparsers.add_parser("normalize", help="Print the canonical JSON of a document")
    normalize_parser.add_argument("document", help="Path to document (JSON or YAML)")

    get_parser = subparsers.add_parser("get", help="Fetch a record from the service and print it")
    get_parser.add_argument("path", help="Resource path relative to PROVIDERHUB_BASE_URL")

    return parser


def cli(argv: Optional[List[str]] = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        configure_root_logger("DEBUG")

    if args.command is None:
        parser.print_help()
        return 0

    try:
        if args.command == "validate":
            validate_document(args.document)
        elif args.command == "normalize":
            print(validate_document(args.document).to_json(indent=2))
        elif args.command == "get":
            print(fetch_record(args.path).to_json(indent=2))
    except (ProviderHubError, OSError, ValueError, ImportError) as e:
        logger.error(f"{args.command} failed: {e}")
        return 1

    return 0


def main() -> None:
    sys.exit(cli())


if __name__ == "__main__":
    main()
