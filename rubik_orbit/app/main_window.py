# rubik_orbit/app/main_window.py
from __future__ import annotations

import logging
from typing import List

from PySide6.QtWidgets import (
    QHBoxLayout,
    QLabel,
    QListWidget,
    QMainWindow,
    QPushButton,
    QSpinBox,
    QVBoxLayout,
    QWidget,
)

from rubik_orbit.interaction.session import PuzzleSession
from rubik_orbit.logic.moves import format_sequence
from rubik_orbit.logic.scramble import apply_scramble, generate_scramble
from rubik_orbit.render.cube_gl_widget import CubeGLWidget

logger = logging.getLogger(__name__)


class MainWindow(QMainWindow):
    """Ventana principal: vista 3D del cubo y un panel de controles.

    Esta clase coordina:
    - La sesión interactiva (`PuzzleSession`) y su vista OpenGL (`CubeGLWidget`)
    - Reset y mezcla instantánea del cubo
    - La visibilidad de las partículas decorativas
    - El historial de giros confirmados
    """

    def __init__(self) -> None:
        """Inicializa la ventana principal, crea la UI y conecta señales."""
        super().__init__()
        self.setWindowTitle("Rubik 3D - Orbit")

        # --- Sesión + render ---
        self.session: PuzzleSession = PuzzleSession()
        self.gl_widget: CubeGLWidget = CubeGLWidget(self.session, self)

        self.history: List[str] = []

        # --- UI ---
        root = QWidget()
        root_layout = QHBoxLayout(root)
        root_layout.addWidget(self.gl_widget, 1)

        panel = QWidget()
        panel_layout = QVBoxLayout(panel)
        panel.setFixedWidth(260)

        self.lbl_state = QLabel("")
        panel_layout.addWidget(self.lbl_state)

        self.btn_reset = QPushButton("Reset")
        panel_layout.addWidget(self.btn_reset)

        # Scramble
        panel_layout.addWidget(QLabel("Scramble (mezclar)"))
        row_scr = QHBoxLayout()
        self.spin_scramble = QSpinBox()
        self.spin_scramble.setRange(1, 200)
        self.spin_scramble.setValue(25)
        self.btn_scramble = QPushButton("Scramble")
        row_scr.addWidget(self.spin_scramble, 1)
        row_scr.addWidget(self.btn_scramble, 1)
        panel_layout.addLayout(row_scr)

        # Partículas
        self.btn_particles = QPushButton("Mostrar partículas")
        panel_layout.addWidget(self.btn_particles)

        # Historial (giros)
        panel_layout.addWidget(QLabel("Historial de movimientos"))
        self.list_history = QListWidget()
        panel_layout.addWidget(self.list_history, 1)

        root_layout.addWidget(panel)
        self.setCentralWidget(root)

        # --- Conexiones ---
        self.btn_reset.clicked.connect(self.on_reset)
        self.btn_scramble.clicked.connect(self.on_scramble)
        self.btn_particles.clicked.connect(self.on_toggle_particles)

        # Señal desde OpenGL: giro confirmado al final de la animación
        self.gl_widget.turn_committed.connect(self.on_turn_committed)

        # Atajos
        self.btn_reset.setShortcut("Ctrl+R")

        self._refresh_state_label()

    # -------------------
    # Helpers UI
    # -------------------
    def _refresh_state_label(self) -> None:
        """Actualiza el label de estado del cubo."""
        self.lbl_state.setText(
            "Estado: resuelto ✅" if self.session.cube.is_solved() else "Estado: mezclado 🔄"
        )

    def _push_history(self, move: str) -> None:
        """Agrega un giro al historial y actualiza la lista visual.

        Args:
            move: Giro en notación de cara (ej: "R", "U'").
        """
        self.history.append(move)
        self.list_history.addItem(move)
        self.list_history.scrollToBottom()

    # -------------------
    # Giro confirmado (desde GL)
    # -------------------
    def on_turn_committed(self, move: str) -> None:
        """Callback cuando el GL widget confirma que un giro terminó.

        Args:
            move: Giro aplicado (notación de cara).
        """
        self._push_history(move)
        self._refresh_state_label()

    # -------------------
    # Botones
    # -------------------
    def on_reset(self) -> None:
        """Resetea el cubo, la vista y el historial."""
        self.session.reset()
        self.history.clear()
        self.list_history.clear()
        self._refresh_state_label()
        self.gl_widget.update()

    def on_scramble(self) -> None:
        """Mezcla el cubo aplicando N giros aleatorios sin animación."""
        if self.session.is_turning():
            return

        turns = generate_scramble(int(self.spin_scramble.value()))
        apply_scramble(self.session.cube, turns)
        logger.info("Scramble: %s", format_sequence(turns))

        self._refresh_state_label()
        self.statusBar().showMessage(f"Scramble de {len(turns)} giros", 2000)
        self.gl_widget.update()

    def on_toggle_particles(self) -> None:
        """Muestra u oculta las partículas decorativas."""
        visible = self.session.toggle_particles()
        self.btn_particles.setText("Ocultar partículas" if visible else "Mostrar partículas")
        self.gl_widget.update()
