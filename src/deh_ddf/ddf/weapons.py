"""Weapon conversion: the ``DDFWEAP`` lump."""

from __future__ import annotations

import logging

from deh_ddf.data.weapons import WEAPON_FLAG_DDF
from deh_ddf.ddf.states import WEAPON_GROUP_ORDER, StateGrouper
from deh_ddf.ddf.writer import LumpWriter
from deh_ddf.engine.session import ConversionSession
from deh_ddf.models.constants import AMMO_DDF_NAMES, NUM_WEAPONS, WeaponType
from deh_ddf.models.flags import WEAPON_MBF21_FLAG_NAMES
from deh_ddf.models.records import WeaponInfo
from deh_ddf.models.sounds import find_sound


logger = logging.getLogger(__name__)


LUMP_NAME = "DDFWEAP"

# Key prefixes for the second, third and fourth attack of a weapon
EXTRA_ATTACK_PREFIXES = ("SEC", "3RD", "4TH")


class WeaponConverter:
    """Writes the weapons lump for one session."""

    def __init__(self, session: ConversionSession, out: LumpWriter, grouper: StateGrouper):
        self.session = session
        self.out = out
        self.grouper = grouper
        self.got_one = False

    def begin_lump(self) -> None:
        self.out.begin_lump(LUMP_NAME)
        self.out.printf("<WEAPONS>\n\n")

    def finish_lump(self) -> None:
        self.out.printf("\n")
        self.out.finish_lump()

    def ammo_per_shot(self, info: WeaponInfo, wp_num: int) -> int:
        if wp_num == WeaponType.BFG:
            return self.session.misc.bfg_cells_per_shot
        return info.ammo_per_shot

    def handle_flags(self, info: WeaponInfo) -> None:
        for letter, ddf in WEAPON_FLAG_DDF.items():
            if letter in info.flags:
                self.out.printf("%s = TRUE;\n", ddf)

        for entry in WEAPON_MBF21_FLAG_NAMES:
            if info.mbf21_flags & entry.bits and entry.ddf is not None:
                self.out.printf("%s = TRUE;\n", entry.ddf)

    def handle_sounds(self, wp_num: int) -> None:
        if wp_num != WeaponType.CHAINSAW:
            return
        session, out = self.session, self.out
        out.printf('START_SOUND = "%s";\n', session.sound_name(find_sound("sawup")))
        out.printf('IDLE_SOUND = "%s";\n', session.sound_name(find_sound("sawidl")))
        out.printf('ENGAGED_SOUND = "%s";\n', session.sound_name(find_sound("sawful")))

    def handle_frames(self, info: WeaponInfo) -> None:
        grouper = self.grouper
        grouper.reset(WEAPON_GROUP_ORDER)

        # flash frames are only worth writing if the attack fires them
        has_flash = grouper.check_weapon_flash(info.atkstate)

        count = 0
        if has_flash:
            count += grouper.begin_group("f", info.flashstate)
        count += grouper.begin_group("a", info.atkstate)
        count += grouper.begin_group("r", info.readystate)
        count += grouper.begin_group("d", info.downstate)
        count += grouper.begin_group("u", info.upstate)

        if count == 0:
            self.session.warn("states", "Weapon [%s] has no states.", info.ddf_name)
            return

        grouper.spread_groups()
        for group in "udra":
            grouper.output_group(group)
        if has_flash:
            grouper.output_group("f")

    def handle_attacks(self, info: WeaponInfo, wp_num: int) -> None:
        attacks = []
        for atk in self.grouper.attack_slots:
            if atk and atk not in attacks:
                attacks.append(atk)
        if not attacks:
            return

        out = self.out
        out.printf("\n")
        out.printf("ATTACK = %s;\n", attacks[0])

        # further attacks draw on the primary attack's ammo
        ammo = AMMO_DDF_NAMES[info.ammo]
        per_shot = self.ammo_per_shot(info, wp_num)
        for prefix, atk in zip(EXTRA_ATTACK_PREFIXES, attacks[1:]):
            out.printf("%s_ATTACK = %s;\n", prefix, atk)
            out.printf("%s_AMMOTYPE = %s;\n", prefix, ammo)
            out.printf("%s_AMMOPERSHOT = %d;\n", prefix, per_shot)

    def convert_weapon(self, wp_num: int) -> None:
        if not self.got_one:
            self.got_one = True
            self.begin_lump()

        info = self.session.weapon(wp_num)
        out = self.out

        out.printf("[%s]\n", info.ddf_name)
        out.printf("AMMOTYPE = %s;\n", AMMO_DDF_NAMES[info.ammo])

        per_shot = self.ammo_per_shot(info, wp_num)
        if wp_num == WeaponType.BFG or per_shot != 0:
            out.printf("AMMOPERSHOT = %d;\n", per_shot)

        out.printf("AUTOMATIC = TRUE;\n")
        out.printf("BINDKEY = %d;\n", info.bind_key)
        out.printf("PRIORITY = %d;\n", info.priority)

        self.handle_flags(info)
        self.handle_sounds(wp_num)
        self.handle_frames(info)
        self.handle_attacks(info, wp_num)

        out.printf("\n")

    def convert_all(self) -> None:
        session = self.session
        self.got_one = False

        for wp_num in range(NUM_WEAPONS):
            if not session.config.all_mode and wp_num not in session.weapon_overlay:
                continue
            logger.debug("converting weapon %d", wp_num)
            self.convert_weapon(wp_num)

        if self.got_one:
            self.finish_lump()
