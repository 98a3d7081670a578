"""Transform engine report format to the frontend's camelCase layout."""

import logging
from datetime import date, datetime
from typing import Any, Dict

logger = logging.getLogger(__name__)

# Keys whose children are data (event type names), not field names.
_DATA_KEYED_FIELDS = {"events_by_type", "event_types"}


def _to_camel_case(snake_str: str) -> str:
    """Convert snake_case to camelCase."""
    components = snake_str.split("_")
    return components[0] + "".join(x.title() for x in components[1:])


def _convert(value: Any, keep_keys: bool = False) -> Any:
    if isinstance(value, dict):
        out: Dict[str, Any] = {}
        for key, item in value.items():
            new_key = key if keep_keys else _to_camel_case(str(key))
            out[new_key] = _convert(item, keep_keys=key in _DATA_KEYED_FIELDS and not keep_keys)
        return out
    if isinstance(value, (list, tuple)):
        return [_convert(item) for item in value]
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    return value


def transform_report_to_frontend(
    raw_report: Dict[str, Any],
    meta: Dict[str, Any] | None = None,
) -> Dict[str, Any]:
    """Transform an engine report to the frontend expected format.

    Args:
        raw_report: Report produced by ``match_reporting.report``
        meta: Optional request metadata, returned under ``reportInfo``

    Returns:
        JSON-ready report with camelCase keys and ISO-8601 dates
    """
    report = _convert(raw_report)
    if meta:
        report["reportInfo"] = _convert(meta)
    logger.debug("Transformed report sections: %s", list(report.keys()))
    return report
