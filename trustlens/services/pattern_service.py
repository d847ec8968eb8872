"""
Fraud pattern mining.
Looks across a batch of fingerprints for signs of a coordinated
fake-review campaign: copy-pasted text, near-identical writing style and
bursts of submissions inside the same time window.
"""

from collections import defaultdict
from dataclasses import asdict, dataclass, field
from datetime import datetime
from typing import Any, Dict, List, Optional, Sequence

from trustlens.config import settings
from trustlens.models.fingerprint import Fingerprint
from trustlens.services.similarity_service import compare_fingerprints
from trustlens.utils.logging_config import StructuredLogger

logger = StructuredLogger("trustlens.patterns")


@dataclass
class DuplicatePair:
    fingerprint1: str
    fingerprint2: str


@dataclass
class SimilarStylePair:
    fingerprint1: str
    fingerprint2: str
    similarity: float


@dataclass
class TemporalCluster:
    time_slot: int  # Index of the fixed window since the epoch
    window_start: datetime
    count: int
    fingerprints: List[str]


@dataclass
class FraudPatternReport:
    """Cross-review fraud signals found in one batch."""
    duplicate_content: List[DuplicatePair] = field(default_factory=list)
    similar_writing_styles: List[SimilarStylePair] = field(default_factory=list)
    temporal_clustering: List[TemporalCluster] = field(default_factory=list)
    # Reserved: no behavioral anomaly rule is defined yet
    behavioral_anomalies: List[Dict[str, Any]] = field(default_factory=list)

    @property
    def has_patterns(self) -> bool:
        return bool(
            self.duplicate_content
            or self.similar_writing_styles
            or self.temporal_clustering
            or self.behavioral_anomalies
        )

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        for cluster in data["temporal_clustering"]:
            cluster["window_start"] = cluster["window_start"].isoformat()
        return data


def time_slot(timestamp: datetime, window_seconds: int) -> int:
    """Index of the fixed wall-clock window containing `timestamp`."""
    return int(timestamp.timestamp() // window_seconds)


def find_temporal_clusters(
    fingerprints: Sequence[Fingerprint],
    window_minutes: Optional[int] = None,
    min_size: Optional[int] = None,
) -> List[TemporalCluster]:
    """Group fingerprints into fixed windows; keep windows with more than `min_size` members."""
    if window_minutes:
        window_seconds = window_minutes * 60
    else:
        window_seconds = settings.temporal_window_seconds
    threshold = min_size if min_size is not None else settings.temporal_cluster_min_size

    # Insertion order keeps clusters in first-seen order
    groups: Dict[int, List[Fingerprint]] = defaultdict(list)
    for fp in fingerprints:
        groups[time_slot(fp.timestamp, window_seconds)].append(fp)

    clusters = []
    for slot, members in groups.items():
        if len(members) > threshold:
            clusters.append(TemporalCluster(
                time_slot=slot,
                window_start=datetime.fromtimestamp(
                    slot * window_seconds, tz=members[0].timestamp.tzinfo
                ),
                count=len(members),
                fingerprints=[fp.fingerprint_id for fp in members],
            ))
    return clusters


def detect_fraud_patterns(
    fingerprints: Sequence[Fingerprint],
    similarity_threshold: Optional[float] = None,
) -> FraudPatternReport:
    """
    Mine a batch of fingerprints for coordinated-review patterns.

    Pairwise checks are O(n^2); callers bound the batch size.
    """
    threshold = similarity_threshold if similarity_threshold is not None else settings.similarity_threshold
    report = FraudPatternReport()

    for i in range(len(fingerprints)):
        for j in range(i + 1, len(fingerprints)):
            first, second = fingerprints[i], fingerprints[j]

            similarity = compare_fingerprints(first, second)
            if similarity > threshold:
                report.similar_writing_styles.append(SimilarStylePair(
                    fingerprint1=first.fingerprint_id,
                    fingerprint2=second.fingerprint_id,
                    similarity=similarity,
                ))

            if first.text_hash == second.text_hash:
                report.duplicate_content.append(DuplicatePair(
                    fingerprint1=first.fingerprint_id,
                    fingerprint2=second.fingerprint_id,
                ))

    report.temporal_clustering = find_temporal_clusters(fingerprints)

    logger.debug(
        "Fraud patterns mined",
        batch_size=len(fingerprints),
        duplicates=len(report.duplicate_content),
        similar_styles=len(report.similar_writing_styles),
        temporal_clusters=len(report.temporal_clustering),
    )
    return report
