from __future__ import annotations

from dataclasses import dataclass

from countdown.core.formatting import format_remaining


PRESET_STEP_MS = 30_000
PRESET_COUNT = 10


@dataclass(frozen=True)
class Preset:
    millis: int

    @property
    def seconds(self) -> int:
        return self.millis // 1000

    @property
    def label(self) -> str:
        return format_remaining(self.millis)


PRESETS: tuple[Preset, ...] = tuple(Preset(PRESET_STEP_MS * (i + 1)) for i in range(PRESET_COUNT))


def preset_for_label(label: str) -> Preset:
    for preset in PRESETS:
        if preset.label == label:
            return preset
    raise KeyError(label)
