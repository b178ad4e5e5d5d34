"""Composition root for Tally.

This module is the ONLY location that imports both core domain logic
and concrete adapter implementations. All wiring of dependencies
happens here.

Module Structure:
- Configuration loading via config module
- Adapter instantiation
- Demonstration harness composing the core components
- Entry point
"""

import asyncio
import json
import logging
import sys
from typing import Any

from pydantic import ValidationError

from tally.adapters.remote.http import HTTPRemoteDataAdapter
from tally.config import load_settings
from tally.core.counter import Counter
from tally.core.ports import FetchError, RemoteDataPort
from tally.core.validators import is_valid_email, is_valid_phone_number

logger = logging.getLogger(__name__)


class JsonLogFormatter(logging.Formatter):
    """Render each record as one JSON object per line."""

    def format(self, record: logging.LogRecord) -> str:
        entry = {
            "time": self.formatTime(record),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(entry, default=str)


def configure_logging(log_level: str, log_format: str) -> None:
    """Route log records to stdout at log_level.

    Unknown level names fall back to INFO. log_format "json" emits one
    JSON object per record; anything else uses a plain text layout.
    """
    handler = logging.StreamHandler(sys.stdout)
    if log_format == "json":
        handler.setFormatter(JsonLogFormatter())
    else:
        handler.setFormatter(
            logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
        )

    logging.basicConfig(
        level=getattr(logging, log_level, logging.INFO),
        handlers=[handler],
    )


async def run_harness(remote: RemoteDataPort) -> dict[str, Any]:
    """Fetch a contact list and count the entries that pass validation.

    Each non-blank line of the payload is one entry. A failed fetch is
    logged and the harness continues with an empty payload.

    Args:
        remote: Any RemoteDataPort implementation.

    Returns:
        Summary with keys fetched, entries, valid_emails, valid_phones.
    """
    fetched = True
    try:
        payload = await remote.fetch_data()
    except FetchError as e:
        logger.warning(f"Could not fetch remote data, continuing without it: {e}")
        fetched = False
        payload = ""

    entries = [line.strip() for line in payload.splitlines() if line.strip()]

    emails = Counter()
    phones = Counter()
    for entry in entries:
        if is_valid_email(entry):
            emails.increment()
        if is_valid_phone_number(entry):
            phones.increment()

    summary = {
        "fetched": fetched,
        "entries": len(entries),
        "valid_emails": emails.current_value(),
        "valid_phones": phones.current_value(),
    }
    logger.info(
        f"Checked {summary['entries']} entries: "
        f"{summary['valid_emails']} emails, {summary['valid_phones']} phone numbers"
    )
    return summary


async def bootstrap() -> dict[str, Any]:
    """Load configuration, wire the adapter, and run the harness once.

    Returns:
        The harness summary.
    """
    settings = load_settings()

    configure_logging(
        "DEBUG" if settings.debug else settings.log_level,
        settings.log_format,
    )
    logger.info("Loading Tally...")

    remote = HTTPRemoteDataAdapter(
        url=settings.remote_data_url,
        api_key=settings.remote_data_api_key,
        timeout_seconds=settings.remote_data_timeout_seconds,
    )
    logger.info(f"Remote data adapter: HTTP ({settings.remote_data_url})")

    try:
        return await run_harness(remote)
    finally:
        await remote.close()


def main() -> None:
    """Run bootstrap() to completion and translate failures into exit codes.

    Exit codes: 0 on success, 1 on invalid configuration or any other
    fatal error, 130 when interrupted with SIGINT.
    """
    try:
        asyncio.run(bootstrap())
    except KeyboardInterrupt:
        logger.warning("Interrupted, shutting down")
        sys.exit(130)
    except ValidationError as e:
        logger.error(f"Invalid configuration: {e}")
        sys.exit(1)
    except Exception as e:
        logger.error(f"Fatal error: {e}", exc_info=True)
        sys.exit(1)


if __name__ == "__main__":
    main()
