from .recommendations import generate_recommendations
from .score_calculator import calculate_ats_score

__all__ = ["calculate_ats_score", "generate_recommendations"]
