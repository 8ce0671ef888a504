"""Boss-death scripts: the ``RSCRIPT`` lump.

Doom hard-codes what happens when the last boss of certain maps dies.
MBF21 patches can move those duties to other monsters with the per-map
boss flags; when the set of monsters carrying a flag differs from the
stock one, a radius-trigger script reproduces the map's special.
"""

from __future__ import annotations

from dataclasses import dataclass

from deh_ddf.ddf.writer import LumpWriter
from deh_ddf.engine.session import ConversionSession
from deh_ddf.models.constants import NUM_MOBJ_TYPES, MobjType
from deh_ddf.models.flags import Mbf21Flag


LUMP_NAME = "RSCRIPT"


@dataclass(frozen=True, slots=True)
class BossTrigger:
    flag: int
    default_mt: int
    action: str


# map name -> triggers, in output order
DOOM1_LEVELS: tuple[tuple[str, tuple[BossTrigger, ...]], ...] = (
    ("E1M8", (BossTrigger(Mbf21Flag.E1M8BOSS, MobjType.BRUISER, "activate_linetype 38 666"),)),
    ("E2M8", (BossTrigger(Mbf21Flag.E2M8BOSS, MobjType.CYBORG, "exitlevel 5"),)),
    ("E3M8", (BossTrigger(Mbf21Flag.E3M8BOSS, MobjType.SPIDER, "exitlevel 5"),)),
    ("E4M6", (BossTrigger(Mbf21Flag.E4M6BOSS, MobjType.CYBORG, "activate_linetype 2 666"),)),
    ("E4M8", (BossTrigger(Mbf21Flag.E4M8BOSS, MobjType.SPIDER, "activate_linetype 38 666"),)),
)

DOOM2_LEVELS: tuple[tuple[str, tuple[BossTrigger, ...]], ...] = (
    ("MAP07", (
        BossTrigger(Mbf21Flag.MAP07BOSS1, MobjType.FATSO, "activate_linetype 38 666"),
        BossTrigger(Mbf21Flag.MAP07BOSS2, MobjType.BABY, "activate_linetype 30 667"),
    )),
)

KEEN_MAP = "MAP32"
KEEN_ACTION = "activate_linetype 2 666"


class RscriptConverter:
    """Writes the boss-trigger scripts for one session.

    ``keen_deaths`` holds the converted entities whose death frames run
    ``A_KeenDie``. Those are handled by the MAP32 script and never count
    as bosses for the other maps.
    """

    def __init__(self, session: ConversionSession, out: LumpWriter,
                 keen_deaths: list[int] | None = None):
        self.session = session
        self.out = out
        self.keen_deaths = list(keen_deaths or [])

    def keen_set(self) -> set[int]:
        keens = set(self.keen_deaths)
        # an unconverted Commander Keen still dies the stock way
        if not self.session.is_marked(MobjType.KEEN):
            keens.add(MobjType.KEEN)
        return keens

    def collect_bosses(self, flag: int) -> list[int]:
        session = self.session
        excluded = self.keen_set()
        candidates = set(range(NUM_MOBJ_TYPES)) | set(session.mobj_overlay)
        return [mt_num for mt_num in sorted(candidates)
                if mt_num not in excluded and session.mbf21_flags_of(mt_num) & flag]

    def output_trigger(self, bosses: list[int], action: str) -> None:
        out = self.out
        out.printf("  radiustrigger 0 0 -1\n")
        for mt_num in bosses:
            out.printf("    ondeath %s\n", self.session.mobj_name(mt_num))
        out.printf("    %s\n", action)
        out.printf("  end_radiustrigger\n")

    def handle_level(self, map_name: str, triggers: tuple[BossTrigger, ...]) -> None:
        found = [self.collect_bosses(trig.flag) for trig in triggers]

        # unchanged bosses need no script
        if all(bosses == [trig.default_mt] for bosses, trig in zip(found, triggers)):
            return

        out = self.out
        out.printf("start_map %s\n", map_name)
        first = True
        for bosses, trig in zip(found, triggers):
            if not bosses:
                continue
            if not first:
                out.printf("\n")
            self.output_trigger(bosses, trig.action)
            first = False
        out.printf("end_map\n\n\n")

    def handle_keen(self) -> None:
        keens = sorted(self.keen_set())
        if keens == [MobjType.KEEN]:
            return
        out = self.out
        out.printf("start_map %s\n", KEEN_MAP)
        if keens:
            self.output_trigger(keens, KEEN_ACTION)
        out.printf("end_map\n\n\n")

    def convert_all(self) -> None:
        out = self.out
        out.begin_lump(LUMP_NAME)
        out.printf("// <SCRIPTS>\n\n")

        out.printf("// --- DOOM I Scripts ---\n\n")
        for map_name, triggers in DOOM1_LEVELS:
            self.handle_level(map_name, triggers)

        out.printf("// --- DOOM II Scripts ---\n\n")
        for map_name, triggers in DOOM2_LEVELS:
            self.handle_level(map_name, triggers)
        self.handle_keen()

        out.printf("\n")
        out.finish_lump()
