"""Dragons, ghouls and mindflayers, a fixed-capacity bag, and a cavern that keeps them, loadable from CSV."""

__version__ = "0.1.0"
__all__ = ["bag", "cavern", "creature", "dragon", "ghoul", "loader", "mindflayer"]