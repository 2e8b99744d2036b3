from backend.engine.gameplay.game import GameEngine, slide_line

__all__ = ["GameEngine", "slide_line"]
