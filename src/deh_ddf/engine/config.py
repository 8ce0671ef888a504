"""Configuration knobs for a conversion run.

Defaults match a BEX patch for Doom 1.9. Legacy (pre-BEX) patches use
patch format 5, which caps frame, sprite and sound indices at the vanilla
table sizes.
"""

from dataclasses import dataclass


LEGACY_PATCH_FORMAT = 5


@dataclass(slots=True)
class ConversionConfig:
    """Parameters that are not part of the patch contents."""

    patch_format: int = 6      # 5 = legacy DEHACKED, >= 6 = BEX/DSDehacked
    all_mode: bool = False     # emit every compiled-in entity, not just dirty ones
    quiet: bool = False        # record warnings without logging them

    @property
    def legacy_format(self) -> bool:
        return self.patch_format <= LEGACY_PATCH_FORMAT
