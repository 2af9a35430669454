# posture_scanner/scoring.py
from typing import List, Sequence

from .evaluator import HEADER_KEYS
from .models import Finding, Priority

POINTS_PER_CHECK = 10
DEFAULT_MAX_PRIORITIES = 3


def compute_score(findings: Sequence[Finding], https_enabled: bool, http_redirects_to_https: bool) -> int:
    score = sum(POINTS_PER_CHECK for f in findings if f.ok and f.key in HEADER_KEYS)
    if https_enabled:
        score += POINTS_PER_CHECK
    if http_redirects_to_https:
        score += POINTS_PER_CHECK
    return max(0, min(100, score))


def select_priorities(findings: Sequence[Finding], limit: int = DEFAULT_MAX_PRIORITIES) -> List[Priority]:
    """
    First `limit` failing findings that carry advice, in finding order.
    This is a prefix take, not a severity ranking.
    """
    failing = [f for f in findings if not f.ok and f.advice]
    return [Priority(key=f.key, advice=f.advice) for f in failing[:limit]]
