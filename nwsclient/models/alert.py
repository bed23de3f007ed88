"""Hazard alert model and the CAP v1.2 vocabularies it is validated against.

Codes and descriptions follow
http://docs.oasis-open.org/emergency/cap/v1.2/CAP-v1.2.html
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import datetime
from types import MappingProxyType

from nwsclient.models.common import utc_now

ALERT_STATUSES: Mapping[str, str] = MappingProxyType({
    "Actual": "Actionable by all targeted recipients",
    "Exercise": "Actionable only by designated exercise participants; "
    "exercise identifier SHOULD appear in <note>",
    "System": "For messages that support alert network internal functions",
    "Test": "Technical testing only, all recipients disregard",
    "Draft": "A preliminary template or draft, not actionable in its current form",
})

ALERT_MESSAGE_TYPES: Mapping[str, str] = MappingProxyType({
    "Alert": "Initial information requiring attention by targeted recipients",
    "Update": "Updates and supercedes the earlier message(s) identified in <references>",
    "Cancel": "Cancels the earlier message(s) identified in <references>",
    "Ack": "Acknowledges receipt and acceptance of the message(s) identified in <references>",
    "Error": "Indicates rejection of the message(s) identified in <references>; "
    "explanation SHOULD appear in <note>",
})

ALERT_CATEGORIES: Mapping[str, str] = MappingProxyType({
    "Geo": "Geophysical (inc. landslide)",
    "Met": "Meteorological (inc. flood)",
    "Safety": "General emergency and public safety",
    "Security": "Law enforcement, military, homeland and local/private security",
    "Rescue": "Rescue and recovery",
    "Fire": "Fire suppression and rescue",
    "Health": "Medical and public health",
    "Env": "Pollution and other environmental",
    "Transport": "Public and private transportation",
    "Infra": "Utility, telecommunication, other non-transport infrastructure",
    "CBRNE": "Chemical, Biological, Radiological, Nuclear or High-Yield Explosive "
    "threat or attack",
    "Other": "Other events",
})

ALERT_SEVERITIES: Mapping[str, str] = MappingProxyType({
    "Extreme": "Extraordinary threat to life or property",
    "Severe": "Significant threat to life or property",
    "Moderate": "Possible threat to life or property",
    "Minor": "Minimal to no known threat to life or property",
    "Unknown": "Severity unknown",
})

ALERT_CERTAINTIES: Mapping[str, str] = MappingProxyType({
    "Observed": "Determined to have occurred or to be ongoing",
    "Likely": "Likely (p > ~50%)",
    "Possible": "Possible but not likely (p <= ~50%)",
    "Unlikely": "Not expected to occur (p ~ 0)",
    "Unknown": "Certainty unknown",
})

ALERT_URGENCIES: Mapping[str, str] = MappingProxyType({
    "Immediate": "Responsive action SHOULD be taken immediately",
    "Expected": "Responsive action SHOULD be taken soon (within next hour)",
    "Future": "Responsive action SHOULD be taken in the near future",
    "Past": "Responsive action is no longer required",
    "Unknown": "Urgency not known",
})

ALERT_RESPONSES: Mapping[str, str] = MappingProxyType({
    "Shelter": "Take shelter in place or per <instruction>",
    "Evacuate": "Relocate as instructed in the <instruction>",
    "Prepare": "Make preparations per the <instruction>",
    "Execute": "Execute a pre-planned activity identified in <instruction>",
    "Avoid": "Avoid the subject event as per the <instruction>",
    "Monitor": "Attend to information sources as described in <instruction>",
    "Assess": "Evaluate the information in this message",
    "AllClear": "The subject event no longer poses a threat or concern and any "
    "follow on action is described in <instruction>",
    "None": "No action recommended",
})


def describe(vocabulary: Mapping[str, str], code: str) -> str:
    """Return the description for a code, or "" if it is not in the vocabulary."""
    return vocabulary.get(code, "")


@dataclass(frozen=True)
class Alert:
    id: str
    retrieval_time: datetime = field(default_factory=utc_now)

    sent: datetime | None = None
    effective: datetime | None = None
    onset: datetime | None = None  # expected beginning of the hazard
    expires: datetime | None = None  # when this message's information expires
    ends: datetime | None = None  # not in CAP; expected end of the hazard

    sender_id: str = ""  # usually an email address
    sender_name: str = ""

    # Vocabulary fields hold "" when upstream sent something outside the CAP set.
    status: str = ""
    message_type: str = ""
    references: tuple[str, ...] = ()  # ids of alerts this one updates/cancels/acks

    category: str = ""
    severity: str = ""
    certainty: str = ""
    urgency: str = ""
    event: str = ""
    area_description: str = ""
    headline: str = ""
    description: str = ""
    instruction: str = ""
    response: str = ""

    @property
    def is_test(self) -> bool:
        return self.status == "Test"
