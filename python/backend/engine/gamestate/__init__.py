from backend.engine.gamestate.state import GameState, Snapshot, empty_counts

__all__ = ["GameState", "Snapshot", "empty_counts"]
