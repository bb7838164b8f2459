"""Conversion from configuration models to application DTOs."""

from fences.application.config.schema import FencePlanConfiguration, OpeningConfig
from fences.application.dtos import OpeningInput, PlanInput, SideInput
from fences.domain import OpeningKind


def _opening_input(kind: OpeningKind, opening: OpeningConfig) -> OpeningInput:
    return OpeningInput(
        kind=kind.value,
        enabled=opening.enabled,
        side=opening.side.value,
        width=opening.width,
        height=opening.height,
        offset=opening.offset,
    )


def config_to_input(config: FencePlanConfiguration) -> PlanInput:
    """Convert a validated configuration to a PlanInput DTO.

    Values stay in the configuration's unit; conversion to millimetres
    happens when the DTO is turned into domain objects.
    """
    return PlanInput(
        unit=config.unit.value,
        panel_width=config.panel.width,
        panel_height=config.panel.height,
        panel_type=config.panel.type.value,
        corrugations=config.panel.corrugations,
        post_width=config.post.width,
        plinth_height=config.plinth.height,
        min_gap=config.gaps.min,
        max_gap=config.gaps.max,
        sides=[
            SideInput(
                name=name.value,
                enabled=side.enabled,
                length=side.length,
                system=side.system.value,
            )
            for name, side in config.sides.by_name().items()
        ],
        gate=_opening_input(OpeningKind.GATE, config.gate),
        wicket=_opening_input(OpeningKind.WICKET, config.wicket),
    )
