"""Cubo Rubik 3x3 interactivo con cámara orbital y partículas decorativas."""

from .config import DEFAULT_CONFIG, CubeConfig
from .interaction.session import PuzzleSession

__all__ = ["CubeConfig", "DEFAULT_CONFIG", "PuzzleSession"]
