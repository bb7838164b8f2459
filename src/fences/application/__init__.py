"""Application layer - use cases and orchestration."""

from .commands import ComputeLayoutCommand
from .dtos import LayoutOutput, OpeningInput, PlanInput, SideInput
from .presets import SidePreset, apply_preset

__all__ = [
    "ComputeLayoutCommand",
    "LayoutOutput",
    "OpeningInput",
    "PlanInput",
    "SideInput",
    "SidePreset",
    "apply_preset",
]
