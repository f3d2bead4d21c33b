"""
Check registry - exports all category checkers in evaluation order.
"""

from .naming import check_naming
from .formatting import check_formatting
from .comments import check_comments
from .modularity import check_modularity
from .reusability import check_reusability
from .best_practices import check_best_practices

# (category, checker) in recommendation order
CHECKS = (
    ('naming', check_naming),
    ('formatting', check_formatting),
    ('comments', check_comments),
    ('modularity', check_modularity),
    ('reusability', check_reusability),
    ('best_practices', check_best_practices),
)

__all__ = [
    'CHECKS',
    'check_naming',
    'check_formatting',
    'check_comments',
    'check_modularity',
    'check_reusability',
    'check_best_practices',
]
