"""
CLI entry point for MotoMinder.

Runs the motorcycle use cases against a fresh in-memory repository
and prints view models as JSON. Nothing persists between runs.

Usage:
    # Insert one motorcycle as an admin
    python -m motominder insert --make Honda --model Shadow --year 2006 \\
        --vin 1HFSC44006A000001

    # Insert a batch from a JSON file, then list the repository
    python -m motominder load motorcycles.json

    # Try the same as an ordinary user (inserts are rejected)
    python -m motominder --role user load motorcycles.json
"""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any, Optional

from pydantic import ValidationError

from motominder.application.motorcycles.dtos import (
    InsertMotorcycleRequest,
    ListMotorcyclesRequest,
)
from motominder.core.config import settings
from motominder.domain.motorcycles.entities import INVALID_ENTITY_ID, AuthorizationRole
from motominder.domain.motorcycles.ports import AuthService, MotorcycleRepository
from motominder.infrastructure.motorcycles.auth_service import StaticAuthServiceAdapter
from motominder.interfaces.motorcycles.dependencies import (
    get_insert_motorcycle_interactor,
    get_list_motorcycles_interactor,
    get_motorcycle_repository,
)
from motominder.interfaces.motorcycles.view_models import (
    InsertMotorcycleViewModel,
    ListMotorcyclesViewModel,
)
from motominder.shared.logging import configure_logging

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_FAILED = 1


def _emit(payload: dict) -> None:
    print(json.dumps(payload, indent=2, sort_keys=True))


def _auth_service(args: argparse.Namespace) -> AuthService:
    if args.anonymous:
        return StaticAuthServiceAdapter.anonymous()
    return StaticAuthServiceAdapter.with_roles(AuthorizationRole(args.role))


def _insert(
    record: dict[str, Any],
    repository: MotorcycleRepository,
    auth_service: AuthService,
) -> InsertMotorcycleViewModel:
    """Validate one record, insert it, and return the resulting view model."""
    try:
        request = InsertMotorcycleRequest(**record)
    except ValidationError as exc:
        message = "; ".join(
            f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}"
            for err in exc.errors()
        )
        logger.warning("Rejected invalid record: %s", message)
        return InsertMotorcycleViewModel(
            id=INVALID_ENTITY_ID, message=message, error=message
        )

    interactor = get_insert_motorcycle_interactor(repository, auth_service)
    return InsertMotorcycleViewModel.from_response(interactor.handle(request))


def _list(
    repository: MotorcycleRepository, auth_service: AuthService
) -> ListMotorcyclesViewModel:
    interactor = get_list_motorcycles_interactor(repository, auth_service)
    return ListMotorcyclesViewModel.from_response(
        interactor.handle(ListMotorcyclesRequest())
    )


def cmd_insert(args: argparse.Namespace) -> int:
    """Insert a single motorcycle given on the command line."""
    repository = get_motorcycle_repository()
    view = _insert(
        {"make": args.make, "model": args.model, "year": args.year, "vin": args.vin},
        repository,
        _auth_service(args),
    )
    _emit(view.to_dict())
    return EXIT_OK if view.error is None else EXIT_FAILED


def cmd_load(args: argparse.Namespace) -> int:
    """Insert every motorcycle in a JSON file, then list the repository."""
    path = Path(args.path)
    try:
        records = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as exc:
        logger.error("Cannot read %s: %s", path, exc)
        return EXIT_FAILED

    if not isinstance(records, list):
        logger.error("%s must contain a JSON list of motorcycles", path)
        return EXIT_FAILED

    repository = get_motorcycle_repository()
    auth_service = _auth_service(args)

    results = []
    for index, record in enumerate(records):
        if not isinstance(record, dict):
            message = f"{index}: entry must be a JSON object, got {type(record).__name__}"
            logger.warning("Rejected invalid record: %s", message)
            results.append(
                InsertMotorcycleViewModel(
                    id=INVALID_ENTITY_ID, message=message, error=message
                )
            )
            continue
        results.append(_insert(record, repository, auth_service))

    listing = _list(repository, auth_service)
    _emit(
        {
            "inserted": [view.to_dict() for view in results],
            "repository": listing.to_dict(),
        }
    )
    failed = sum(1 for view in results if view.error is not None)
    logger.info("Loaded %d of %d motorcycles.", len(results) - failed, len(results))
    return EXIT_OK if failed == 0 else EXIT_FAILED


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="motominder",
        description=f"{settings.project_name}: track motorcycles in memory.",
    )
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {settings.version}"
    )
    parser.add_argument(
        "--role",
        choices=[role.value for role in AuthorizationRole],
        default=AuthorizationRole.ADMIN.value,
        help="Role held by the caller (default: admin).",
    )
    parser.add_argument(
        "--anonymous",
        action="store_true",
        help="Run as an unauthenticated caller.",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help="Override the configured log level.",
    )

    sub = parser.add_subparsers(dest="command", required=True)

    p_insert = sub.add_parser("insert", help="Insert one motorcycle")
    p_insert.add_argument("--make", required=True)
    p_insert.add_argument("--model", required=True)
    p_insert.add_argument("--year", type=int, required=True)
    p_insert.add_argument("--vin", required=True)
    p_insert.set_defaults(func=cmd_insert)

    p_load = sub.add_parser("load", help="Insert motorcycles from a JSON file")
    p_load.add_argument("path", help="JSON file holding a list of motorcycles")
    p_load.set_defaults(func=cmd_load)

    return parser


def main(argv: Optional[list[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(level=args.log_level or settings.effective_log_level)
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
