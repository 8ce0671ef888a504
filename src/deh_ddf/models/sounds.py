"""Compiled-in sound effect table.

Ids 0..116 are the vanilla, MBF and source-port sounds (0 is the "no sound"
dummy). DEHEXTRA adds ``fre000``..``fre199`` at ids 500..699; the gap in
between has no sounds.
"""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class SoundInfo:
    name: str          # lump name without the DS prefix
    singularity: int
    priority: int


SOUNDS: tuple[SoundInfo, ...] = tuple(SoundInfo(*row) for row in (
    ("", 0, 127),
    ("pistol", 0, 64),
    ("shotgn", 0, 64),
    ("sgcock", 0, 64),
    ("dshtgn", 0, 64),
    ("dbopn", 0, 64),
    ("dbcls", 0, 64),
    ("dbload", 0, 64),
    ("plasma", 0, 64),
    ("bfg", 0, 64),
    ("sawup", 2, 64),
    ("sawidl", 2, 118),
    ("sawful", 2, 64),
    ("sawhit", 2, 64),
    ("rlaunc", 0, 64),
    ("rxplod", 0, 70),
    ("firsht", 0, 70),
    ("firxpl", 0, 70),
    ("pstart", 18, 100),
    ("pstop", 18, 100),
    ("doropn", 0, 100),
    ("dorcls", 0, 100),
    ("stnmov", 18, 119),
    ("swtchn", 0, 78),
    ("swtchx", 0, 78),
    ("plpain", 0, 96),
    ("dmpain", 0, 96),
    ("popain", 0, 96),
    ("vipain", 0, 96),
    ("mnpain", 0, 96),
    ("pepain", 0, 96),
    ("slop", 0, 78),
    ("itemup", 20, 78),
    ("wpnup", 21, 78),
    ("oof", 0, 96),
    ("telept", 0, 32),
    ("posit1", 3, 98),
    ("posit2", 3, 98),
    ("posit3", 3, 98),
    ("bgsit1", 4, 98),
    ("bgsit2", 4, 98),
    ("sgtsit", 5, 98),
    ("cacsit", 6, 98),
    ("brssit", 7, 94),
    ("cybsit", 8, 92),
    ("spisit", 9, 90),
    ("bspsit", 10, 90),
    ("kntsit", 11, 90),
    ("vilsit", 12, 90),
    ("mansit", 13, 90),
    ("pesit", 14, 90),
    ("sklatk", 0, 70),
    ("sgtatk", 0, 70),
    ("skepch", 0, 70),
    ("vilatk", 0, 70),
    ("claw", 0, 70),
    ("skeswg", 0, 70),
    ("pldeth", 0, 32),
    ("pdiehi", 0, 32),
    ("podth1", 0, 70),
    ("podth2", 0, 70),
    ("podth3", 0, 70),
    ("bgdth1", 0, 70),
    ("bgdth2", 0, 70),
    ("sgtdth", 0, 70),
    ("cacdth", 0, 70),
    ("skldth", 0, 70),
    ("brsdth", 0, 32),
    ("cybdth", 0, 32),
    ("spidth", 0, 32),
    ("bspdth", 0, 32),
    ("vildth", 0, 32),
    ("kntdth", 0, 32),
    ("pedth", 0, 32),
    ("skedth", 0, 32),
    ("posact", 3, 120),
    ("bgact", 4, 120),
    ("dmact", 15, 120),
    ("bspact", 10, 100),
    ("bspwlk", 16, 100),
    ("vilact", 12, 100),
    ("noway", 0, 78),
    ("barexp", 0, 60),
    ("punch", 0, 64),
    ("hoof", 0, 70),
    ("metal", 0, 70),
    ("chgun", 0, 64),
    ("tink", 0, 60),
    ("bdopn", 0, 100),
    ("bdcls", 0, 100),
    ("itmbk", 0, 100),
    ("flame", 0, 32),
    ("flamst", 0, 32),
    ("getpow", 0, 60),
    ("bospit", 0, 70),
    ("boscub", 0, 70),
    ("bossit", 0, 70),
    ("bospn", 0, 70),
    ("bosdth", 0, 70),
    ("manatk", 0, 70),
    ("mandth", 0, 70),
    ("sssit", 0, 70),
    ("ssdth", 0, 70),
    ("keenpn", 0, 70),
    ("keendt", 0, 70),
    ("skeact", 0, 70),
    ("skesit", 0, 70),
    ("skeatk", 0, 70),
    ("radio", 0, 60),
    ("dgsit", 0, 98),
    ("dgatk", 0, 70),
    ("dgact", 0, 120),
    ("dgdth", 0, 70),
    ("dgpain", 0, 96),
    ("secret", 0, 60),
    ("gibdth", 0, 60),
    ("scrsht", 0, 0),
))

DEHEXTRA_SOUND_FIRST = 500
DEHEXTRA_SOUND_LAST = 699
NUM_SOUND_IDS = DEHEXTRA_SOUND_LAST + 1

SFX_NONE = 0
SFX_PISTOL = 1
SFX_STNMOV = 22
SFX_CHGUN = 86

# Sounds that pick randomly among numbered variants
RANDOM_SOUND_GROUPS = {
    "podth1": "PODTH?", "podth2": "PODTH?", "podth3": "PODTH?",
    "posit1": "POSIT?", "posit2": "POSIT?", "posit3": "POSIT?",
    "bgdth1": "BGDTH?", "bgdth2": "BGDTH?",
    "bgsit1": "BGSIT?", "bgsit2": "BGSIT?",
}

# MBF dog sounds have their own DDF names
DDF_SOUND_NAMES = {
    "dgsit": "DOG_SIGHT",
    "dgatk": "DOG_BITE",
    "dgact": "DOG_LOOK",
    "dgdth": "DOG_DIE",
    "dgpain": "DOG_PAIN",
}


def is_dehextra_sound(num: int) -> bool:
    return DEHEXTRA_SOUND_FIRST <= num <= DEHEXTRA_SOUND_LAST


def original_sound(num: int) -> SoundInfo | None:
    """The compiled-in definition of sound ``num``, or None if there is none."""
    if is_dehextra_sound(num):
        return SoundInfo("fre%03d" % (num - DEHEXTRA_SOUND_FIRST), 0, 127)
    if 0 < num < len(SOUNDS):
        return SOUNDS[num]
    return None


def all_sound_ids() -> list[int]:
    return list(range(1, len(SOUNDS))) + list(
        range(DEHEXTRA_SOUND_FIRST, DEHEXTRA_SOUND_LAST + 1))


def find_sound(name: str) -> int | None:
    """Id of the sound whose original name matches, case-insensitively."""
    key = name.lower()
    for num in all_sound_ids():
        if original_sound(num).name == key:
            return num
    return None
