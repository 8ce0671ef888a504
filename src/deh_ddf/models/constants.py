"""Integer ids and fixed sizes shared by every table.

Map-object ids follow the Doom ``mobjtype_t`` order, with the Boom/MBF
additions appended after ``MISC86``. Ids past the compiled-in range are
valid entity ids too: ``150..249`` are the DEHEXTRA slots and anything up
to ``MAX_ENTITY_ID`` can be declared by a DSDehacked patch.
"""

from enum import IntEnum


FRACUNIT = 65536

NO_GROUP = -2              # "unset" sentinel for MBF21 group fields

NUM_MOBJ_TYPES = 146       # compiled baseline range
EXTRA_FIRST = 150          # DEHEXTRA MT_EXTRA00
EXTRA_LAST = 249           # DEHEXTRA MT_EXTRA99
MAX_ENTITY_ID = 32767

# Legacy (patch format 5) table sizes. Field caps are these minus one.
VANILLA_SOUNDS = 109
VANILLA_SPRITES = 138
DSDEHACKED_LIMIT = 32767


class MobjType(IntEnum):
    PLAYER = 0
    POSSESSED = 1
    SHOTGUY = 2
    VILE = 3
    FIRE = 4
    UNDEAD = 5
    TRACER = 6
    SMOKE = 7
    FATSO = 8
    FATSHOT = 9
    CHAINGUY = 10
    TROOP = 11
    SERGEANT = 12
    SHADOWS = 13
    HEAD = 14
    BRUISER = 15
    BRUISERSHOT = 16
    KNIGHT = 17
    SKULL = 18
    SPIDER = 19
    BABY = 20
    CYBORG = 21
    PAIN = 22
    WOLFSS = 23
    KEEN = 24
    BOSSBRAIN = 25
    BOSSSPIT = 26
    BOSSTARGET = 27
    SPAWNSHOT = 28
    SPAWNFIRE = 29
    BARREL = 30
    TROOPSHOT = 31
    HEADSHOT = 32
    ROCKET = 33
    PLASMA = 34
    BFG = 35
    ARACHPLAZ = 36
    PUFF = 37
    BLOOD = 38
    TFOG = 39
    IFOG = 40
    TELEPORTMAN = 41
    EXTRABFG = 42
    MISC0 = 43
    MISC1 = 44
    MISC2 = 45
    MISC3 = 46
    MISC4 = 47
    MISC5 = 48
    MISC6 = 49
    MISC7 = 50
    MISC8 = 51
    MISC9 = 52
    MISC10 = 53
    MISC11 = 54
    MISC12 = 55
    INV = 56
    MISC13 = 57
    INS = 58
    MISC14 = 59
    MISC15 = 60
    MISC16 = 61
    MEGA = 62
    CLIP = 63
    MISC17 = 64
    MISC18 = 65
    MISC19 = 66
    MISC20 = 67
    MISC21 = 68
    MISC22 = 69
    MISC23 = 70
    MISC24 = 71
    MISC25 = 72
    CHAINGUN = 73
    MISC26 = 74
    MISC27 = 75
    MISC28 = 76
    SHOTGUN = 77
    SUPERSHOTGUN = 78
    MISC29 = 79
    MISC30 = 80
    MISC31 = 81
    MISC32 = 82
    MISC33 = 83
    MISC34 = 84
    MISC35 = 85
    MISC36 = 86
    MISC37 = 87
    MISC38 = 88
    MISC39 = 89
    MISC40 = 90
    MISC41 = 91
    MISC42 = 92
    MISC43 = 93
    MISC44 = 94
    MISC45 = 95
    MISC46 = 96
    MISC47 = 97
    MISC48 = 98
    MISC49 = 99
    MISC50 = 100
    MISC51 = 101
    MISC52 = 102
    MISC53 = 103
    MISC54 = 104
    MISC55 = 105
    MISC56 = 106
    MISC57 = 107
    MISC58 = 108
    MISC59 = 109
    MISC60 = 110
    MISC61 = 111
    MISC62 = 112
    MISC63 = 113
    MISC64 = 114
    MISC65 = 115
    MISC66 = 116
    MISC67 = 117
    MISC68 = 118
    MISC69 = 119
    MISC70 = 120
    MISC71 = 121
    MISC72 = 122
    MISC73 = 123
    MISC74 = 124
    MISC75 = 125
    MISC76 = 126
    MISC77 = 127
    MISC78 = 128
    MISC79 = 129
    MISC80 = 130
    MISC81 = 131
    MISC82 = 132
    MISC83 = 133
    MISC84 = 134
    MISC85 = 135
    MISC86 = 136
    PUSH = 137
    PULL = 138
    DOGS = 139
    PLASMA1 = 140
    PLASMA2 = 141
    SCEPTRE = 142
    BIBLE = 143
    MUSICSOURCE = 144
    GIBDTH = 145


class AmmoType(IntEnum):
    BULLET = 0
    SHELL = 1
    CELL = 2
    ROCKET = 3
    UNUSED = 4
    NOAMMO = 5


NUM_AMMO = 4               # ammo kinds with player maxima and pickups
MAX_AMMO_VALUE = 10000

AMMO_DDF_NAMES: dict[int, str] = {
    AmmoType.BULLET: "BULLETS",
    AmmoType.SHELL: "SHELLS",
    AmmoType.CELL: "CELLS",
    AmmoType.ROCKET: "ROCKETS",
    AmmoType.UNUSED: "NOAMMO",
    AmmoType.NOAMMO: "NOAMMO",
}


class WeaponType(IntEnum):
    FIST = 0
    PISTOL = 1
    SHOTGUN = 2
    CHAINGUN = 3
    MISSILE = 4
    PLASMA = 5
    BFG = 6
    CHAINSAW = 7
    SUPER_SHOTGUN = 8


NUM_WEAPONS = 9
