from backend.engine.gamestate.state import GameState, PuzzleStatus

__all__ = ["GameState", "PuzzleStatus"]
