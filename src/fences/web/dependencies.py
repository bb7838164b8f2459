"""FastAPI dependency injection for fence planning services."""

from functools import lru_cache
from typing import Annotated

from fastapi import Depends

from fences.application import ComputeLayoutCommand
from fences.domain import CorrugationTable


@lru_cache(maxsize=1)
def get_corrugation_table() -> CorrugationTable:
    """Get the cached clamp reference table."""
    return CorrugationTable()


def get_compute_command(
    table: Annotated[CorrugationTable, Depends(get_corrugation_table)],
) -> ComputeLayoutCommand:
    """Dependency for ComputeLayoutCommand."""
    return ComputeLayoutCommand(corrugation_table=table)


# Type aliases for cleaner endpoint signatures
CorrugationTableDep = Annotated[CorrugationTable, Depends(get_corrugation_table)]
ComputeCommandDep = Annotated[ComputeLayoutCommand, Depends(get_compute_command)]
