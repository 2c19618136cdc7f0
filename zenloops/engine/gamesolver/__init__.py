from zenloops.engine.gamesolver.solver import Solver, reachable_from_start, solved_path

__all__ = ["Solver", "reachable_from_start", "solved_path"]
