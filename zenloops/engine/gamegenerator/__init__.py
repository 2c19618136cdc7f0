from zenloops.engine.gamegenerator.generator import GameGenerator, generate_grid
from zenloops.engine.gamegenerator.maze import MAX_ATTEMPTS, Maze, MazeBuilder

__all__ = ["GameGenerator", "MAX_ATTEMPTS", "Maze", "MazeBuilder", "generate_grid"]
