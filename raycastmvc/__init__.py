"""Grid-based raycasting renderer split into model, controller and view."""

__version__ = "0.1.0"
__all__ = ["model", "controller", "view"]