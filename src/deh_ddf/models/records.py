"""Entity record data classes: map objects, frames, weapons, misc globals."""

from dataclasses import dataclass, field

from deh_ddf.models.constants import NO_GROUP


@dataclass(slots=True)
class MobjInfo:
    """One map-object definition (thing or attack).

    State fields hold frame indices (0 = no state). Sound fields hold sound
    ids (0 = no sound). Radius and height are 16.16 fixed point; speed is
    fixed point for missiles and plain units for walkers.
    """
    name: str                # DDF name; a leading '*' marks an attack
    doomednum: int           # editor number, -1 if not placeable
    spawnstate: int = 0
    spawnhealth: int = 1000
    seestate: int = 0
    seesound: int = 0
    reactiontime: int = 8
    attacksound: int = 0
    painstate: int = 0
    painchance: int = 0
    painsound: int = 0
    meleestate: int = 0
    missilestate: int = 0
    deathstate: int = 0
    xdeathstate: int = 0
    deathsound: int = 0
    speed: int = 0
    radius: int = 0
    height: int = 0
    mass: int = 100
    damage: int = 0
    activesound: int = 0
    flags: int = 0
    mbf21_flags: int = 0
    infight_group: int = NO_GROUP
    proj_group: int = NO_GROUP
    splash_group: int = NO_GROUP
    rip_sound: int = 0
    fast_speed: int = 0
    melee_range: int = 0
    gib_health: int = 0
    dropped_item: int = -1   # -1 = built-in drop, 0 = none, n = entity n-1
    pickup_width: int = 0
    proj_pass_height: int = 0
    fullbright: int = 0
    raisestate: int = 0

    @property
    def is_attack(self) -> bool:
        return self.name.startswith("*")


@dataclass(slots=True)
class Frame:
    """One animation frame. ``args[0]``/``args[1]`` are the legacy misc1/misc2."""
    sprite: int
    subsprite: int           # bit 15 = fullbright
    tics: int                # -1 = hibernate forever
    action: str = "A_NULL"   # codepointer name, e.g. "A_Chase"
    next_state: int = 0
    args: list[int] = field(default_factory=lambda: [0] * 8)

    @property
    def misc1(self) -> int:
        return self.args[0]

    @property
    def misc2(self) -> int:
        return self.args[1]


@dataclass(slots=True)
class WeaponInfo:
    ddf_name: str
    ammo: int
    ammo_per_shot: int
    bind_key: int
    priority: int
    flags: str               # legacy weapon flag letters
    upstate: int = 0
    downstate: int = 0
    readystate: int = 0
    atkstate: int = 0
    flashstate: int = 0
    mbf21_flags: int = 0


@dataclass(slots=True)
class MiscSettings:
    """Global values exposed as the patch's [MISC] section."""
    init_ammo: int = 50
    max_armour: int = 200
    max_health: int = 200
    green_armour_class: int = 1
    blue_armour_class: int = 2
    bfg_cells_per_shot: int = 40
    soul_health: int = 200
    soul_limit: int = 200
    mega_health: int = 200
    monster_infight: int = 202   # 221 = monsters fight each other


@dataclass(slots=True)
class AmmoSettings:
    """Player maximum and per-pickup amount for each of the four ammo types."""
    player_max: list[int] = field(default_factory=lambda: [200, 50, 300, 50])
    pickup: list[int] = field(default_factory=lambda: [10, 4, 20, 1])
