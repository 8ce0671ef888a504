"""Conversion pipeline: a prepared session in, ``{lump name: text}`` out.

Usage::

    session = ConversionSession(ConversionConfig(), FrameTable.from_json(path))
    apply_edits(session, load_edits(Path("edits.json")))
    lumps = convert(session)
"""

from __future__ import annotations

import logging

from deh_ddf.ddf.attacks import AttackConverter, ScratchAttacks
from deh_ddf.ddf.language import LanguageConverter
from deh_ddf.ddf.rscript import RscriptConverter
from deh_ddf.ddf.sounds import SoundConverter, note_extra_sounds
from deh_ddf.ddf.states import StateGrouper
from deh_ddf.ddf.things import ThingConverter
from deh_ddf.ddf.weapons import WeaponConverter
from deh_ddf.ddf.writer import LumpWriter
from deh_ddf.engine.config import ConversionConfig
from deh_ddf.engine.edits import Edit, apply_edits
from deh_ddf.engine.frames import FrameTable
from deh_ddf.engine.session import ConversionSession


logger = logging.getLogger(__name__)


def convert(session: ConversionSession) -> dict[str, str]:
    """Run every converter over ``session`` and return the lumps.

    The sound table comes first in the result but is written last, once
    converting the other lumps has marked every thing they refer to. A
    session is consumed by conversion (heights are fixed and entities
    marked), so convert it only once.
    """
    logger.info("Converting patch (format %d)", session.config.patch_format)

    out = LumpWriter()
    scratch = ScratchAttacks()
    grouper = StateGrouper(session, out, scratch)

    session.resolve_dependencies()

    logger.info("Converting things")
    things = ThingConverter(session, out, grouper)
    things.convert_all()

    logger.info("Converting attacks")
    AttackConverter(session, out, grouper, scratch).convert_all()

    logger.info("Converting weapons")
    WeaponConverter(session, out, grouper).convert_all()

    logger.info("Converting text strings")
    LanguageConverter(session, out).convert_all()

    logger.info("Converting boss scripts")
    RscriptConverter(session, out, things.keen_deaths).convert_all()

    logger.info("Converting sounds")
    note_extra_sounds(session)
    sound_out = LumpWriter()
    SoundConverter(session, sound_out).convert_all()

    lumps = dict(sound_out.lumps)
    lumps.update(out.lumps)
    logger.info("Finished: %d lumps, %d warnings", len(lumps), len(session.diagnostics))
    return lumps


def convert_edits(edits: list[Edit], config: ConversionConfig | None = None,
                  frames: FrameTable | None = None) -> tuple[dict[str, str], ConversionSession]:
    """Apply ``edits`` to a fresh session and convert it."""
    session = ConversionSession(config, frames)
    apply_edits(session, edits)
    return convert(session), session
