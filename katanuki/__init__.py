"""Board model, A* solver, terminal display and command line for the die-cutting puzzle."""

__version__ = "0.1.0"

__all__ = ["cli", "display", "game", "solver"]