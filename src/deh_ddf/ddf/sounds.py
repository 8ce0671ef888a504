"""Sound-table conversion: the ``DDFSFX`` lump."""

from __future__ import annotations

from deh_ddf.ddf.writer import LumpWriter
from deh_ddf.engine.session import MOBJ_STATE_ROLES, WEAPON_STATE_ROLES, ConversionSession
from deh_ddf.models.actions import action_info
from deh_ddf.models.constants import NUM_MOBJ_TYPES, NUM_WEAPONS
from deh_ddf.models.sounds import SFX_CHGUN, SFX_PISTOL, SFX_STNMOV, SOUNDS, is_dehextra_sound, original_sound


LUMP_NAME = "DDFSFX"

_MOBJ_SOUND_FIELDS = ("seesound", "attacksound", "painsound", "deathsound", "activesound", "rip_sound")


def _frame_sound(st) -> int:
    action = action_info(st.action).bex_name
    if action == "A_PlaySound":
        return st.misc1
    if action == "A_Scratch":
        return st.misc2
    return 0


def note_extra_sounds(session: ConversionSession) -> None:
    """Mark DEHEXTRA sounds referenced by the things, weapons and frames
    that will be written.

    Run this after the other converters, since converting things can
    mark more things (drops, ``A_Spawn``) and weapons.
    """
    frames: set[int] = set(session.frame_overlay)

    if session.config.all_mode:
        things = range(NUM_MOBJ_TYPES)
        weapons = range(NUM_WEAPONS)
    else:
        things = session.marked_things()
        weapons = session.marked_weapons()

    for mt_num in things:
        info = session.mobj(mt_num)
        if info is None:
            continue
        for field in _MOBJ_SOUND_FIELDS:
            s_num = getattr(info, field)
            if is_dehextra_sound(s_num):
                session.mark_sound(s_num)
        for role in MOBJ_STATE_ROLES:
            frames.update(session.chain_frames(getattr(info, role)))

    for wp_num in weapons:
        weapon = session.weapon(wp_num)
        for role in WEAPON_STATE_ROLES:
            frames.update(session.chain_frames(getattr(weapon, role)))

    for st_num in sorted(frames):
        st = session.frame(st_num)
        if st is None:
            continue
        s_num = _frame_sound(st)
        if is_dehextra_sound(s_num):
            session.mark_sound(s_num)


class SoundConverter:
    """Writes the sound lump for one session."""

    def __init__(self, session: ConversionSession, out: LumpWriter):
        self.session = session
        self.out = out
        self.got_one = False

    def begin_lump(self) -> None:
        self.out.begin_lump(LUMP_NAME)
        self.out.printf("<SOUNDS>\n\n")

    def finish_lump(self) -> None:
        self.out.printf("\n")
        self.out.finish_lump()

    def write_sound(self, s_num: int) -> None:
        if not self.got_one:
            self.got_one = True
            self.begin_lump()

        session, out = self.session, self.out
        sound = original_sound(s_num)

        out.printf("[%s]\n", session.ddf_sound_name(s_num))

        # the chaingun sound always played the pistol lump
        lump = session.sound_lump(SFX_PISTOL if s_num == SFX_CHGUN else s_num)

        out.printf('LUMP_NAME = "DS%s";\n', lump.upper())
        out.printf("PRIORITY = %d;\n", session.sound_priority(s_num))

        if sound.singularity != 0:
            out.printf("SINGULAR = %d;\n", sound.singularity)

        if s_num == SFX_STNMOV:
            out.printf("LOOP = TRUE;\n")

        out.printf("\n")

    def sounds_to_write(self) -> list[int]:
        session = self.session
        if session.config.all_mode:
            extra = sorted(s for s in session.sound_modified if is_dehextra_sound(s))
            return list(range(1, len(SOUNDS))) + extra
        return sorted(session.sound_modified)

    def convert_all(self) -> None:
        self.got_one = False
        for s_num in self.sounds_to_write():
            self.write_sound(s_num)
        if self.got_one:
            self.finish_lump()
