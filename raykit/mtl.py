"""Reader for Wavefront MTL material libraries."""

from __future__ import annotations

import os
from typing import Iterable, Optional, Sequence, Union

from raykit.meshdata import Material

_SHININESS_SCALE = 1000.0


def _floats(args: Iterable[str], limit: int) -> list[float]:
    """Parse up to ``limit`` leading numbers, stopping at the first that fails."""
    values: list[float] = []
    for token in args:
        if len(values) == limit:
            break
        try:
            values.append(float(token))
        except ValueError:
            break
    return values


def _first_int(args: Sequence[str]) -> Optional[int]:
    if not args:
        return None
    try:
        return int(args[0])
    except ValueError:
        return None


def _name_argument(args: Sequence[str]) -> str:
    """Return the second word of a statement, or the first if there is only one."""
    if len(args) >= 2:
        return args[1]
    return args[0] if args else ""


def _set_color(target: list[float], args: Sequence[str]) -> None:
    for axis, value in enumerate(_floats(args, 3)):
        target[axis] = value
    target[3] = 1.0


def parse_materials(text: str) -> list[Material]:
    """Parse the text of an MTL file into materials, in file order.

    Shininess (``Ns``) is scaled from the file's 0..1000 range to 0..1, and a
    ``Tr`` transparency is stored as an opacity. A statement that sets a
    property before any ``newmtl`` raises ``ValueError``.
    """
    materials: list[Material] = []
    illum = 0

    def current(keyword: str) -> Material:
        if not materials:
            raise ValueError(f"'{keyword}' appears before any newmtl statement")
        return materials[-1]

    for line in text.splitlines():
        tokens = line.split()
        if not tokens:
            continue
        keyword, args = tokens[0], tokens[1:]
        lead = keyword[0]
        second = keyword[1] if len(keyword) > 1 else ""

        if lead == "N":
            material = current(keyword)
            values = _floats(args, 1)
            if values:
                material.shininess = values[0]
            material.shininess /= _SHININESS_SCALE
        elif lead == "K":
            if second == "a":
                _set_color(current(keyword).ambient, args)
            elif second == "d":
                _set_color(current(keyword).diffuse, args)
            elif second == "s":
                _set_color(current(keyword).specular, args)
        elif lead == "T":
            if second == "r":
                material = current(keyword)
                values = _floats(args, 1)
                if values:
                    material.alpha = values[0]
                material.alpha = 1.0 - material.alpha
        elif lead == "d":
            material = current(keyword)
            values = _floats(args, 1)
            if values:
                material.alpha = values[0]
        elif lead == "i":
            material = current(keyword)
            parsed = _first_int(args)
            if parsed is not None:
                illum = parsed
            if illum == 1:
                material.specular[:] = [0.0, 0.0, 0.0, 1.0]
        elif lead == "m":
            if "map_Kd" in keyword:
                current(keyword).color_map_filename = _name_argument(args)
            elif "map_bump" in keyword:
                current(keyword).bump_map_filename = _name_argument(args)
        elif lead == "n":
            materials.append(Material(name=_name_argument(args)))

    return materials


def load_materials(path: Union[str, os.PathLike]) -> list[Material]:
    """Read and parse an MTL file; raises ``OSError`` if it cannot be read."""
    with open(path, encoding="utf-8", errors="surrogateescape") as handle:
        return parse_materials(handle.read())