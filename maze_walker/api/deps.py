"""API dependencies for dependency injection."""

from typing import Annotated

from fastapi import Depends

from maze_walker.config import Settings, get_settings

# Type aliases for cleaner route signatures
AppSettings = Annotated[Settings, Depends(get_settings)]
