from backend.engine.gamescore.scorer import Scorer

__all__ = ["Scorer"]
