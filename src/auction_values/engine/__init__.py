from auction_values.engine.inflation import calculate_inflation
from auction_values.engine.pipeline import calculate_player_values, calculate_recommended_split

__all__ = [
    "calculate_inflation",
    "calculate_player_values",
    "calculate_recommended_split",
]
