"""Compiled-in sprite name table.

The first 138 names are vanilla Doom, then the Boom/MBF additions (TNT1 is
the invisible sprite), then the DEHEXTRA sprites SP00..SP99.
"""

SPRITE_NAMES: tuple[str, ...] = (
    "TROO", "SHTG", "PUNG", "PISG", "PISF", "SHTF", "SHT2", "CHGG", "CHGF", "MISG",
    "MISF", "SAWG", "PLSG", "PLSF", "BFGG", "BFGF", "BLUD", "PUFF", "BAL1", "BAL2",
    "PLSS", "PLSE", "MISL", "BFS1", "BFE1", "BFE2", "TFOG", "IFOG", "PLAY", "POSS",
    "SPOS", "VILE", "FIRE", "FATB", "FBXP", "SKEL", "MANF", "FATT", "CPOS", "SARG",
    "HEAD", "BAL7", "BOSS", "BOS2", "SKUL", "SPID", "BSPI", "APLS", "APBX", "CYBR",
    "PAIN", "SSWV", "KEEN", "BBRN", "BOSF", "ARM1", "ARM2", "BAR1", "BEXP", "FCAN",
    "BON1", "BON2", "BKEY", "RKEY", "YKEY", "BSKU", "RSKU", "YSKU", "STIM", "MEDI",
    "SOUL", "PINV", "PSTR", "PINS", "MEGA", "SUIT", "PMAP", "PVIS", "CLIP", "AMMO",
    "ROCK", "BROK", "CELL", "CELP", "SHEL", "SBOX", "BPAK", "BFUG", "MGUN", "CSAW",
    "LAUN", "PLAS", "SHOT", "SGN2", "COLU", "SMT2", "GOR1", "POL2", "POL5", "POL4",
    "POL3", "POL1", "POL6", "GOR2", "GOR3", "GOR4", "GOR5", "SMIT", "COL1", "COL2",
    "COL3", "COL4", "CAND", "CBRA", "COL6", "TRE1", "TRE2", "ELEC", "CEYE", "FSKU",
    "COL5", "TBLU", "TGRN", "TRED", "SMBT", "SMGT", "SMRT", "HDB1", "HDB2", "HDB3",
    "HDB4", "HDB5", "HDB6", "POB1", "POB2", "BRS1", "TLMP", "TLP2", "TNT1", "DOGS",
    "PLS1", "PLS2", "BON3", "BON4", "BLD2", "SP00", "SP01", "SP02", "SP03", "SP04",
    "SP05", "SP06", "SP07", "SP08", "SP09", "SP10", "SP11", "SP12", "SP13", "SP14",
    "SP15", "SP16", "SP17", "SP18", "SP19", "SP20", "SP21", "SP22", "SP23", "SP24",
    "SP25", "SP26", "SP27", "SP28", "SP29", "SP30", "SP31", "SP32", "SP33", "SP34",
    "SP35", "SP36", "SP37", "SP38", "SP39", "SP40", "SP41", "SP42", "SP43", "SP44",
    "SP45", "SP46", "SP47", "SP48", "SP49", "SP50", "SP51", "SP52", "SP53", "SP54",
    "SP55", "SP56", "SP57", "SP58", "SP59", "SP60", "SP61", "SP62", "SP63", "SP64",
    "SP65", "SP66", "SP67", "SP68", "SP69", "SP70", "SP71", "SP72", "SP73", "SP74",
    "SP75", "SP76", "SP77", "SP78", "SP79", "SP80", "SP81", "SP82", "SP83", "SP84",
    "SP85", "SP86", "SP87", "SP88", "SP89", "SP90", "SP91", "SP92", "SP93", "SP94",
    "SP95", "SP96", "SP97", "SP98", "SP99",
)

NUM_SPRITES = len(SPRITE_NAMES)
INVISIBLE_SPRITE = "TNT1"


def find_sprite(name: str) -> int | None:
    key = name.upper()
    for num, spr in enumerate(SPRITE_NAMES):
        if spr == key:
            return num
    return None
