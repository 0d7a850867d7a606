#Expose the high-level search pipeline pieces:
#Scoring (composite + availability boost)
#Filter / sort / completeness overlay
#Engine orchestrator (the "one call" entry point) and the search session

from .models import StoreResult
from .policy import RankingPolicy, default_ranking_policy
from .scoring import base_score, boosted_score, estimated_delivery, score_coverage, score_coverages
from .pipeline import ResultFilters, SortMode, apply_view, complete_first, initial_order
from .engine import SearchOutcome, SearchStatus, search_stores #the main function to call to run a search
from .session import SearchSession

__all__ = [
    "StoreResult",
    "RankingPolicy",
    "default_ranking_policy",
    "base_score",
    "boosted_score",
    "estimated_delivery",
    "score_coverage",
    "score_coverages",
    "ResultFilters",
    "SortMode",
    "apply_view",
    "complete_first",
    "initial_order",
    "SearchOutcome",
    "SearchStatus",
    "search_stores",
    "SearchSession",
]
