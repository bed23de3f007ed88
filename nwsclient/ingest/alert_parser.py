"""Normalize the active-alerts feature collection into Alert records."""

import logging
from collections.abc import Mapping
from datetime import datetime
from typing import Any

from nwsclient.ingest.envelope import (
    as_text,
    decode_envelope,
    features_of,
    parse_timestamp,
)
from nwsclient.models.alert import (
    ALERT_CATEGORIES,
    ALERT_CERTAINTIES,
    ALERT_MESSAGE_TYPES,
    ALERT_RESPONSES,
    ALERT_SEVERITIES,
    ALERT_STATUSES,
    ALERT_URGENCIES,
    Alert,
)
from nwsclient.models.common import utc_now

logger = logging.getLogger(__name__)


def parse_alerts(body: bytes | str, now: datetime | None = None) -> list[Alert]:
    """Parse alerts in upstream order.

    Bad data is generally ignored so that each alert is as complete as
    possible: only an alert without an id is dropped. Vocabulary fields
    outside their CAP set are cleared rather than rejected.
    """
    if now is None:
        now = utc_now()

    alerts: list[Alert] = []
    for feature in features_of(decode_envelope(body)):
        props = feature.get("properties")
        if not isinstance(props, dict):
            props = {}
        alert = _parse_alert(props, now)
        if alert is None:
            logger.debug("Dropping alert feature without an id")
            continue
        alerts.append(alert)
    return alerts


def _parse_alert(props: dict[str, Any], now: datetime) -> Alert | None:
    alert_id = as_text(props.get("id"))
    if not alert_id:
        return None

    return Alert(
        id=alert_id,
        retrieval_time=now,
        sent=parse_timestamp(props.get("sent")),
        effective=parse_timestamp(props.get("effective")),
        onset=parse_timestamp(props.get("onset")),
        expires=parse_timestamp(props.get("expires")),
        ends=parse_timestamp(props.get("ends")),
        sender_id=as_text(props.get("sender")),
        sender_name=as_text(props.get("senderName")),
        status=_gated(props, "status", ALERT_STATUSES, alert_id),
        message_type=_gated(props, "messageType", ALERT_MESSAGE_TYPES, alert_id),
        references=_references(props.get("references")),
        category=_gated(props, "category", ALERT_CATEGORIES, alert_id),
        severity=_gated(props, "severity", ALERT_SEVERITIES, alert_id),
        certainty=_gated(props, "certainty", ALERT_CERTAINTIES, alert_id),
        urgency=_gated(props, "urgency", ALERT_URGENCIES, alert_id),
        event=as_text(props.get("event")),
        area_description=as_text(props.get("areaDesc")),
        headline=as_text(props.get("headline")),
        description=as_text(props.get("description")),
        instruction=as_text(props.get("instruction")),
        response=_gated(props, "response", ALERT_RESPONSES, alert_id),
    )


def _gated(
    props: dict[str, Any], key: str, vocabulary: Mapping[str, str], alert_id: str
) -> str:
    value = as_text(props.get(key))
    if value in vocabulary:
        return value
    if value:
        logger.debug("Alert %s: clearing unrecognized %s %r", alert_id, key, value)
    return ""


def _references(raw: Any) -> tuple[str, ...]:
    if not isinstance(raw, list):
        return ()
    refs = []
    for ref in raw:
        identifier = as_text(ref.get("identifier")) if isinstance(ref, dict) else ""
        if identifier:
            refs.append(identifier)
    return tuple(refs)
