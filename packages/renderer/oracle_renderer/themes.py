"""Built-in two-tone palettes for the oracle pattern."""

from __future__ import annotations

from .models import Palette

DEFAULT_PALETTE_NAME = "Ember"

TRANSPARENT = (0, 0, 0, 0)

PALETTES: dict[str, Palette] = {
    "Ember": Palette(
        name="Ember",
        front=(255, 1, 1, 255),
        back=TRANSPARENT,
        background="#000000",
        text="#FF0101",
    ),
    "Phosphor": Palette(
        name="Phosphor",
        front=(51, 255, 102, 255),
        back=TRANSPARENT,
        background="#020A04",
        text="#8CFFB5",
    ),
    "Arctic Pulse": Palette(
        name="Arctic Pulse",
        front=(89, 243, 255, 255),
        back=TRANSPARENT,
        background="#07171F",
        text="#EFFFFF",
    ),
}


def list_palettes() -> list[str]:
    return sorted(PALETTES.keys())


def get_palette(name: str | None) -> Palette:
    if not name:
        return PALETTES[DEFAULT_PALETTE_NAME]
    return PALETTES.get(name, PALETTES[DEFAULT_PALETTE_NAME])
