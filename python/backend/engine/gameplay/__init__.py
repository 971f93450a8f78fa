from backend.engine.gameplay.game import GamePlay, GameView

__all__ = ["GamePlay", "GameView"]
