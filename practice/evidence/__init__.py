"""Evidence aggregation.

Turns a bet's linked beliefs and actions into a weighted confidence and a
commitment timeline.
"""

from .confidence import EvidenceItem, evidence_items, weighted_confidence
from .timeline import belief_duration, bet_timeline_years, parse_timeline_years

__all__ = [
    # Confidence
    "EvidenceItem",
    "evidence_items",
    "weighted_confidence",
    # Timeline
    "belief_duration",
    "bet_timeline_years",
    "parse_timeline_years",
]
