"""FastAPI dependency injection for wardrobe services."""

from functools import lru_cache
from typing import Annotated

from fastapi import Depends

from wardrobes.application import SuggestDefaultsCommand


@lru_cache(maxsize=1)
def get_suggest_command() -> SuggestDefaultsCommand:
    """Get cached SuggestDefaultsCommand using default standards."""
    return SuggestDefaultsCommand()


SuggestCommandDep = Annotated[SuggestDefaultsCommand, Depends(get_suggest_command)]
