# rubik_orbit/logic/moves.py
from __future__ import annotations

from typing import List

from rubik_orbit.core.cube_model import Turn
from rubik_orbit.core.geometry import Face

VALID_FACES = {f.name for f in Face}


def _face_of(turn: Turn) -> Face:
    for f in Face:
        if f.axis == turn.axis and f.sign == turn.layer:
            return f
    raise ValueError(f"Giro inválido: {turn}")


def turn_notation(turn: Turn) -> str:
    """Convierte un giro a notación de cara ("R", "U'", ...).

    Sentido horario visto desde afuera de la cara equivale a girar -90° sobre
    su normal exterior, es decir `direction == -layer`.

    Args:
        turn: Giro (eje, capa, sentido).

    Returns:
        Letra de la cara, con "'" si el giro es antihorario.
    """
    face = _face_of(turn)
    return face.name if turn.direction == -turn.layer else face.name + "'"


def parse_notation(tok: str) -> List[Turn]:
    """Convierte un token de notación a cuartos de vuelta.

    Acepta "R", "R'" y "R2" (dos cuartos de vuelta), y comillas tipográficas.

    Args:
        tok: Token de movimiento.

    Returns:
        Lista de giros (vacía si el token está vacío).

    Raises:
        ValueError: Si la cara o el sufijo no son válidos.
    """
    tok = tok.strip().replace("’", "'").replace("‘", "'")
    if not tok:
        return []

    base = tok[0].upper()
    suf = tok[1:]
    if base not in VALID_FACES:
        raise ValueError(f"Movimiento inválido: {tok}")

    face = Face[base]
    cw = Turn(face.axis, face.sign, -face.sign)

    if suf == "":
        return [cw]
    if suf == "'":
        return [Turn(cw.axis, cw.layer, -cw.direction)]
    if suf in ("2", "2'"):
        return [cw, cw]
    raise ValueError(f"Sufijo inválido en: {tok}")


def parse_sequence(text: str) -> List[Turn]:
    """Convierte una secuencia separada por espacios ("R U R' U'") en giros."""
    out: List[Turn] = []
    for t in text.split():
        out.extend(parse_notation(t))
    return out


def format_sequence(turns: List[Turn]) -> str:
    return " ".join(turn_notation(t) for t in turns)
