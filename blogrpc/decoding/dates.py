import logging
import re
from datetime import datetime, timezone
from typing import Optional

logger = logging.getLogger(__name__)

# yyyyMMddTHH:mm:ss, the XML-RPC dateTime.iso8601 layout
TIMESTAMP_FORMAT = "%Y%m%dT%H:%M:%S"
_TIMESTAMP_RE = re.compile(r"[0-9]{8}T[0-9]{2}:[0-9]{2}:[0-9]{2}")


def parse_timestamp(text: Optional[str]) -> Optional[datetime]:
    """
    Parse an XML-RPC timestamp as a UTC ``datetime``.

    Returns ``None`` for missing or unparsable input. Optional dates must
    never block a decode, so this function has no error channel.
    """
    if text is None:
        return None
    # strptime alone accepts single-digit fields
    if not _TIMESTAMP_RE.fullmatch(text):
        logger.debug("Ignoring timestamp %r: does not match %s", text, TIMESTAMP_FORMAT)
        return None
    try:
        parsed = datetime.strptime(text, TIMESTAMP_FORMAT)
    except ValueError as e:
        logger.debug("Ignoring timestamp %r: %s", text, e)
        return None
    return parsed.replace(tzinfo=timezone.utc)
