"""Shared error handling for spreadsheet mutations."""

from collections.abc import Callable

from asset_manager.application.ports.sheets_repository import (
    SheetNotFoundError,
    SheetsConfigurationError,
)
from asset_manager.domain.models import MutationResult


SETUP_REQUIRED = "Setup required: Google Sheets credentials are not configured"


def run_mutation(
    action: Callable[[], MutationResult | None],
    *,
    description: str,
    failure_message: str,
    logger,
) -> MutationResult:
    """Run a write and convert any failure into a MutationResult.

    Nothing is retried; a resubmission after an ambiguous failure may
    duplicate an appended row.

    Args:
        action: Callable performing the write. It may return its own
            result (e.g. "not found") or None for plain success.
        description: Human-readable name of the write, used in logs.
        failure_message: Error returned for unexpected failures.
        logger: Logger used for failures and successes.

    Returns:
        MutationResult: Outcome of the write.
    """
    try:
        result = action()
    except SheetsConfigurationError as exc:
        logger.warning(f"{description} skipped: {exc}")
        return MutationResult.failed(SETUP_REQUIRED)
    except SheetNotFoundError as exc:
        logger.warning(f"{description} failed: {exc}")
        return MutationResult.failed(str(exc))
    except Exception as exc:
        logger.exception(f"{description} failed: {exc}")
        return MutationResult.failed(failure_message)
    if result is None:
        result = MutationResult.ok()
    if result.success:
        logger.info(f"{description} succeeded")
    else:
        logger.warning(f"{description} rejected: {result.error}")
    return result


__all__ = ["SETUP_REQUIRED", "run_mutation"]
