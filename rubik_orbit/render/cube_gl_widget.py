# rubik_orbit/render/cube_gl_widget.py
from __future__ import annotations

import logging
from typing import Dict, List, Optional, Tuple

from PySide6.QtCore import QTimer, Qt, Signal
from PySide6.QtGui import QColor, QMouseEvent
from PySide6.QtOpenGLWidgets import QOpenGLWidget

from OpenGL.GL import (
    glBegin,
    glClear,
    glClearColor,
    glColor3f,
    glEnable,
    glEnd,
    glLoadMatrixf,
    glMatrixMode,
    glPopMatrix,
    glPushMatrix,
    glRotatef,
    glTranslatef,
    glVertex3f,
    glViewport,
    GL_COLOR_BUFFER_BIT,
    GL_DEPTH_BUFFER_BIT,
    GL_DEPTH_TEST,
    GL_MODELVIEW,
    GL_PROJECTION,
    GL_QUADS,
)

from rubik_orbit.core.cube_model import CubieDrawState, Turn
from rubik_orbit.core.geometry import Face, Vec3
from rubik_orbit.interaction.session import PuzzleSession
from rubik_orbit.logic.moves import turn_notation

logger = logging.getLogger(__name__)

Vec3f = Tuple[float, float, float]


class CubeGLWidget(QOpenGLWidget):
    """Widget OpenGL que dibuja una `PuzzleSession` y le pasa los eventos de mouse.

    Características:
    - Render OpenGL clásico (sin shaders), con las matrices de la cámara de la
      sesión cargadas tal cual (picking y render comparten la vista).
    - 27 cubies con stickers en las seis caras.
    - La capa en giro se dibuja con una rotación extra antes de su traslación.
    - Partículas decorativas como quads de color (ocultas por defecto).
    - Un tick de animación por frame usando QTimer.
    """

    turn_committed = Signal(str)

    def __init__(self, session: Optional[PuzzleSession] = None, parent=None) -> None:
        """Crea el widget y arranca el timer de frames.

        Args:
            session: Sesión a dibujar; si es None se crea una nueva.
            parent: Widget padre (Qt), opcional.
        """
        super().__init__(parent)
        self.session: PuzzleSession = session or PuzzleSession()
        self.session.cube.on_commit = self._on_commit

        # Stickers
        self.sticker_margin: float = 4.0
        self.sticker_offset: float = 1.0

        self._dragging: bool = False
        self._colors: Dict[str, Vec3f] = {}

        self._frame_timer: QTimer = QTimer(self)
        self._frame_timer.setInterval(16)  # ~60fps
        self._frame_timer.timeout.connect(self._on_frame)
        self._frame_timer.start()

        self.setFocusPolicy(Qt.ClickFocus)

    # --------------------------
    # OpenGL lifecycle
    # --------------------------
    def initializeGL(self) -> None:
        """Inicializa parámetros OpenGL (clear color y depth test)."""
        glClearColor(0.0, 0.0, 0.0, 1.0)
        glEnable(GL_DEPTH_TEST)

    def resizeGL(self, w: int, h: int) -> None:
        """Ajusta viewport (píxeles físicos) y cámara (píxeles lógicos).

        Args:
            w: Ancho lógico del widget (Qt).
            h: Alto lógico del widget (Qt).
        """
        if h == 0:
            h = 1

        dpr = self.devicePixelRatioF()
        glViewport(0, 0, int(w * dpr), int(h * dpr))
        self.session.resize(w, h)

    def paintGL(self) -> None:
        """Dibuja el frame actual (cubies + partículas visibles)."""
        glClear(GL_COLOR_BUFFER_BIT | GL_DEPTH_BUFFER_BIT)

        camera = self.session.camera
        glMatrixMode(GL_PROJECTION)
        glLoadMatrixf(camera.projection())
        glMatrixMode(GL_MODELVIEW)
        glLoadMatrixf(camera.model_view())

        for state in self.session.get_draw_state():
            self._draw_cubie(state)

        self._draw_particles()

    def _on_frame(self) -> None:
        """Tick del timer: avanza la sesión un frame y repinta."""
        self.session.advance_frame()
        self.update()

    def _on_commit(self, turn: Turn) -> None:
        self.turn_committed.emit(turn_notation(turn))

    # --------------------------
    # Interacción
    # --------------------------
    def mousePressEvent(self, event: QMouseEvent) -> None:
        """Click izquierdo: partícula, cara del cubo u órbita según dónde caiga.

        Args:
            event: Evento de mouse de Qt.
        """
        if event.button() == Qt.LeftButton:
            pos = event.position()
            self.session.on_pointer_down(pos.x(), pos.y())
            self._dragging = True

            pick = self.session.picked_face
            if pick is not None:
                self._show_message(f"Cara: eje {pick.axis.name}, capa {pick.layer:+d}", 1200)
            event.accept()
            return

        super().mousePressEvent(event)

    def mouseMoveEvent(self, event: QMouseEvent) -> None:
        """Arrastre: órbita de cámara o acumulación del gesto de cara.

        Args:
            event: Evento de mouse de Qt.
        """
        if self._dragging and (event.buttons() & Qt.LeftButton):
            pos = event.position()
            self.session.on_pointer_drag(pos.x(), pos.y())
            event.accept()
            return

        super().mouseMoveEvent(event)

    def mouseReleaseEvent(self, event: QMouseEvent) -> None:
        """Fin del gesto: si se había elegido una cara, inicia el giro.

        Args:
            event: Evento de mouse de Qt.
        """
        if event.button() == Qt.LeftButton and self._dragging:
            self._dragging = False
            pos = event.position()
            turn = self.session.on_pointer_up(pos.x(), pos.y())
            if turn is not None:
                self._show_message(f"Move: {turn_notation(turn)}", 1200)
            event.accept()
            return

        super().mouseReleaseEvent(event)

    def _show_message(self, msg: str, timeout: int) -> None:
        w = self.window()
        if hasattr(w, "statusBar") and w.statusBar():
            w.statusBar().showMessage(msg, timeout)
        else:
            logger.info(msg)

    # --------------------------
    # Render helpers
    # --------------------------
    def _draw_cubie(self, state: CubieDrawState) -> None:
        """Dibuja un cubie: cuerpo oscuro y un sticker por cara."""
        spacing = self.session.config.spacing
        half = self.session.config.edge / 2.0

        glPushMatrix()
        if state.rotation is not None:
            axis, angle = state.rotation
            glRotatef(angle, *axis.unit)
        x, y, z = state.position
        glTranslatef(x * spacing, y * spacing, z * spacing)

        glBegin(GL_QUADS)
        for face in Face:
            # Base "plástico" detrás del sticker
            glColor3f(0.05, 0.05, 0.06)
            for v in self._face_quad(face, half, 0.0, 0.0):
                glVertex3f(*v)

            glColor3f(*self._color_rgb(state.colors[face]))
            for v in self._face_quad(face, half, self.sticker_offset, self.sticker_margin):
                glVertex3f(*v)
        glEnd()

        glPopMatrix()

    def _face_quad(self, face: Face, half: float, offset: float, margin: float) -> List[Vec3f]:
        """Vértices de un quad sobre una cara del cubie (coordenadas locales).

        Args:
            face: Cara.
            half: Mitad de la arista del cubie.
            offset: Separación hacia afuera de la cara.
            margin: Margen interno (reduce el quad).
        """
        n = Vec3(*face.normal)
        u = Vec3(*(1.0 if i == (face.axis + 1) % 3 else 0.0 for i in range(3)))
        v = Vec3(*(1.0 if i == (face.axis + 2) % 3 else 0.0 for i in range(3)))
        c = n.scale(half + offset)
        s = half - margin
        return [
            tuple(c.add(u.scale(-s)).add(v.scale(-s))),
            tuple(c.add(u.scale(s)).add(v.scale(-s))),
            tuple(c.add(u.scale(s)).add(v.scale(s))),
            tuple(c.add(u.scale(-s)).add(v.scale(s))),
        ]

    def _draw_particles(self) -> None:
        """Dibuja las partículas visibles como quads planos de su color."""
        particles = self.session.visible_particles()
        if not particles:
            return

        glBegin(GL_QUADS)
        for p in particles:
            glColor3f(*self._color_rgb(p.color))
            for v in p.corners():
                glVertex3f(*v)
        glEnd()

    # --------------------------
    # Color map
    # --------------------------
    def _color_rgb(self, c: str) -> Vec3f:
        """Convierte un color "#rrggbb" a RGB en rango [0, 1] (con caché)."""
        rgb = self._colors.get(c)
        if rgb is None:
            q = QColor(c)
            rgb = (q.redF(), q.greenF(), q.blueF()) if q.isValid() else (0.8, 0.8, 0.8)
            self._colors[c] = rgb
        return rgb
