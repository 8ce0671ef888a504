"""Compiled-in weapon definitions in Doom order.

Flag letters: f = free, r = refire inaccurate, d = dangerous, t = no thrust,
b = feedback.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from deh_ddf.models.constants import AmmoType
from deh_ddf.models.records import WeaponInfo

if TYPE_CHECKING:
    from deh_ddf.engine.frames import FrameTable


WEAPON_FLAG_DDF = {
    "f": "FREE",
    "r": "REFIRE_INACCURATE",
    "d": "DANGEROUS",
    "t": "NOTHRUST",
    "b": "FEEDBACK",
}

# (ddf name, ammo, per shot, bind key, priority, flags,
#  up, down, ready, attack, flash)
WEAPON_ROWS = (
    ("FIST", AmmoType.NOAMMO, 0, 1, 0, "f",
     "S_PUNCHUP", "S_PUNCHDOWN", "S_PUNCH", "S_PUNCH1", "S_NULL"),
    ("PISTOL", AmmoType.BULLET, 1, 2, 2, "fr",
     "S_PISTOLUP", "S_PISTOLDOWN", "S_PISTOL", "S_PISTOL1", "S_PISTOLFLASH"),
    ("SHOTGUN", AmmoType.SHELL, 1, 3, 3, "",
     "S_SGUNUP", "S_SGUNDOWN", "S_SGUN", "S_SGUN1", "S_SGUNFLASH1"),
    ("CHAINGUN", AmmoType.BULLET, 1, 4, 5, "r",
     "S_CHAINUP", "S_CHAINDOWN", "S_CHAIN", "S_CHAIN1", "S_CHAINFLASH1"),
    ("ROCKET_LAUNCHER", AmmoType.ROCKET, 1, 5, 6, "d",
     "S_MISSILEUP", "S_MISSILEDOWN", "S_MISSILE", "S_MISSILE1",
     "S_MISSILEFLASH1"),
    ("PLASMA_RIFLE", AmmoType.CELL, 1, 6, 7, "",
     "S_PLASMAUP", "S_PLASMADOWN", "S_PLASMA", "S_PLASMA1", "S_PLASMAFLASH1"),
    ("BFG_9000", AmmoType.CELL, 40, 7, 8, "d",
     "S_BFGUP", "S_BFGDOWN", "S_BFG", "S_BFG1", "S_BFGFLASH1"),
    ("CHAINSAW", AmmoType.NOAMMO, 0, 1, 1, "bt",
     "S_SAWUP", "S_SAWDOWN", "S_SAW", "S_SAW1", "S_NULL"),
    ("SUPER_SHOTGUN", AmmoType.SHELL, 2, 3, 4, "",
     "S_DSGUNUP", "S_DSGUNDOWN", "S_DSGUN", "S_DSGUN1", "S_DSGUNFLASH1"),
)


def build_weapons(frames: FrameTable) -> list[WeaponInfo]:
    weapons = []
    for name, ammo, per_shot, key, prio, flags, *states in WEAPON_ROWS:
        up, down, ready, atk, flash = (frames.index_of(s) for s in states)
        weapons.append(WeaponInfo(
            ddf_name=name, ammo=int(ammo), ammo_per_shot=per_shot,
            bind_key=key, priority=prio, flags=flags,
            upstate=up, downstate=down, readystate=ready,
            atkstate=atk, flashstate=flash,
        ))
    return weapons
