from plagcheck.collaborators.base import (
    BaseAuthorshipClassifier,
    BaseSimilarityScorer,
    BaseSourceFinder,
)
from plagcheck.collaborators.models import AIDetectionResult, AIVerdict, SourceMatch

__all__ = [
    "AIDetectionResult",
    "AIVerdict",
    "BaseAuthorshipClassifier",
    "BaseSimilarityScorer",
    "BaseSourceFinder",
    "SourceMatch",
]
