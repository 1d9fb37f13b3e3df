# rubik_orbit/interaction/session.py
from __future__ import annotations

import logging
from typing import Callable, List, Literal, Optional

from rubik_orbit.config import DEFAULT_CONFIG, CubeConfig
from rubik_orbit.core.cube_model import CubeDrawList, CubeModel, Turn
from rubik_orbit.core.geometry import Axis, ScreenPoint
from rubik_orbit.decor.particles import Particle, ParticleField
from rubik_orbit.interaction.camera import OrbitCamera
from rubik_orbit.interaction.gestures import resolve_turn_direction
from rubik_orbit.interaction.picking import (
    BoundingBox,
    FacePick,
    pick_face,
    project_bounding_box,
)

logger = logging.getLogger(__name__)

DragMode = Literal["none", "orbit", "face"]


class PuzzleSession:
    """Sesión interactiva: cubo + cámara + partículas + estado del drag.

    Es el único objeto que el host (widget Qt o tests) necesita: recibe los
    eventos de puntero y el tick de cada frame, y entrega el estado de dibujo.

    Flujo de un gesto:
        - down: si el punto cae en la caja proyectada del cubo y cerca de un
          ancla de cara, se recuerda (eje, capa) y el drag es de cara; si no, es
          de órbita.
        - drag: en órbita se acumulan pitch/yaw con el delta por evento.
        - up: en modo cara se resuelve el sentido y se inicia el giro.
    """

    def __init__(
        self,
        width: float = 800.0,
        height: float = 600.0,
        config: CubeConfig = DEFAULT_CONFIG,
        on_turn_committed: Optional[Callable[[Turn], None]] = None,
        particle_seed: Optional[int] = None,
    ) -> None:
        self.config = config
        self.cube = CubeModel(config, on_commit=on_turn_committed)
        self.camera = OrbitCamera(width, height, config)
        self.particles = ParticleField(self.cube, config, seed=particle_seed)

        # Drag
        self.drag_mode: DragMode = "none"
        self.drag_start: Optional[ScreenPoint] = None
        self.drag_current: Optional[ScreenPoint] = None
        self._last_pointer: Optional[ScreenPoint] = None
        self.picked_face: Optional[FacePick] = None

        self._bbox: BoundingBox = self.refresh_bounding_box()

    # --------------------------
    # Frame
    # --------------------------
    def advance_frame(self, dt: Optional[float] = None) -> None:
        """Avanza un frame: animación del giro, partículas y caja proyectada.

        Args:
            dt: Segundos transcurridos. Si es None se avanza exactamente un tick.
        """
        ticks = 1.0 if dt is None else dt * self.config.frame_rate
        self.cube.advance(ticks)
        self.particles.update(ticks)
        self.refresh_bounding_box()

    def get_draw_state(self) -> CubeDrawList:
        return self.cube.draw_state()

    def refresh_bounding_box(self) -> BoundingBox:
        self._bbox = project_bounding_box(self.camera, self.config.half_extent)
        return self._bbox

    def get_projected_bounding_box(self) -> BoundingBox:
        return self._bbox

    def resize(self, width: float, height: float) -> None:
        self.camera.resize(width, height)
        self.refresh_bounding_box()

    # --------------------------
    # Cubo
    # --------------------------
    def start_turn(self, axis: Axis, layer: int, direction: int) -> bool:
        return self.cube.start_turn(axis, layer, direction)

    def is_turning(self) -> bool:
        return self.cube.is_turning()

    def reset(self) -> None:
        """Cubo resuelto, vista inicial y partículas reasociadas."""
        self.cube.reset()
        self.camera.pitch = self.config.initial_pitch
        self.camera.yaw = self.config.initial_yaw
        self.particles.rebuild()
        self._end_drag()
        self.refresh_bounding_box()

    # --------------------------
    # Puntero
    # --------------------------
    def on_pointer_down(self, x: float, y: float) -> None:
        """Inicio de un gesto: partícula, cara o órbita."""
        hit = self.particles.hit(self.camera, x, y)
        if hit is not None:
            hit.toggle_scale()
            self._end_drag()
            return

        self.drag_start = ScreenPoint(x, y)
        self.drag_current = self.drag_start
        self._last_pointer = self.drag_start
        self.picked_face = None

        if self._bbox.contains(x, y):
            self.picked_face = pick_face(self.camera, x, y, self.config)

        self.drag_mode = "face" if self.picked_face is not None else "orbit"

    def on_pointer_drag(self, x: float, y: float) -> None:
        if self.drag_mode == "none":
            return

        last = self._last_pointer or ScreenPoint(x, y)
        self.drag_current = ScreenPoint(x, y)
        self._last_pointer = self.drag_current

        if self.drag_mode == "orbit" and not self.cube.is_turning():
            self.camera.orbit(x - last.x, y - last.y)

    def on_pointer_up(self, x: float, y: float) -> Optional[Turn]:
        """Fin del gesto. Retorna el giro iniciado, si hubo uno."""
        started: Optional[Turn] = None
        pick = self.picked_face

        if self.drag_mode == "face" and pick is not None and not self.cube.is_turning():
            start = self.drag_start or ScreenPoint(x, y)
            current = self.drag_current or ScreenPoint(x, y)
            direction = resolve_turn_direction(
                pick.axis, pick.layer, current.x - start.x, current.y - start.y
            )
            if direction != 0 and self.cube.start_turn(pick.axis, pick.layer, direction):
                started = Turn(pick.axis, pick.layer, direction)
                logger.debug("Giro iniciado por gesto: %s", started)

        self._end_drag()
        return started

    def _end_drag(self) -> None:
        self.drag_mode = "none"
        self.drag_start = None
        self.drag_current = None
        self._last_pointer = None
        self.picked_face = None

    # --------------------------
    # Partículas
    # --------------------------
    def toggle_particles(self) -> bool:
        return self.particles.toggle_visible()

    def visible_particles(self) -> List[Particle]:
        return self.particles.particles if self.particles.visible else []
