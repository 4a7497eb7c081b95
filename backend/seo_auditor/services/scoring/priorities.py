"""
Priority ranking for the fix queue.
"""

PRIORITY_RANK = {
    "critical": 0,
    "high": 1,
    "medium": 2,
    "low": 3,
}

# Anything outside the four known levels sorts with "low"
UNKNOWN_PRIORITY_RANK = PRIORITY_RANK["low"]


def priority_rank(priority: str) -> int:
    return PRIORITY_RANK.get(priority, UNKNOWN_PRIORITY_RANK)
