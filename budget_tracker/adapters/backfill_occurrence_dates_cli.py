"""CLI adapter to backfill occurrence dates on linked transactions."""

import asyncio

from budget_tracker.application.use_cases.backfill_occurrence_dates import (
    BackfillOccurrenceDatesUseCase,
)
from budget_tracker.infrastructure.container import build_ledger_store
from budget_tracker.infrastructure.logging.logger import get_app_logger


def main() -> int:
    """Run the occurrence date backfill once."""
    logger = get_app_logger()
    store = build_ledger_store()
    use_case = BackfillOccurrenceDatesUseCase(store, logger=logger)

    result = asyncio.run(use_case.execute())
    if not result.ok:
        print(f"Backfill failed: {result.error.message}")
        return 1

    report = result.value
    print(
        f"Backfilled {report.updated} of {report.scanned} linked "
        f"transactions ({report.skipped} skipped, "
        f"{len(report.failed_ids)} failed)."
    )
    return 1 if report.failed_ids else 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
