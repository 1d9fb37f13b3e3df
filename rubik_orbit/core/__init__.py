from .cube_model import CubeModel, Turn, TurnState
from .cubie import Cubie
from .geometry import Axis, Face, Vec3

__all__ = ["Axis", "CubeModel", "Cubie", "Face", "Turn", "TurnState", "Vec3"]
