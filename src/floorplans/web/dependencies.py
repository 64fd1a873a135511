"""FastAPI dependency injection for floor-plan services."""

from functools import lru_cache
from typing import Annotated

from fastapi import Depends

from floorplans.application.commands import GenerateLayoutsCommand


@lru_cache(maxsize=1)
def get_generate_command() -> GenerateLayoutsCommand:
    """Dependency for GenerateLayoutsCommand."""
    return GenerateLayoutsCommand()


# Type alias for cleaner endpoint signatures
GenerateCommandDep = Annotated[GenerateLayoutsCommand, Depends(get_generate_command)]
