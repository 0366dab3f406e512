from typing import Annotated

from fastapi import Depends, HTTPException, status

from textforge.core.config import Settings, get_settings
from textforge.core.exceptions import InputTooLongError
from textforge.services.context import TransformContext
from textforge.services.engines.registry import TransformationRegistry, get_registry


# Settings dependency
SettingsDep = Annotated[Settings, Depends(get_settings)]


def get_context(settings: SettingsDep) -> TransformContext:
    """Fresh transformation context per request."""
    return TransformContext.from_settings(settings)


ContextDep = Annotated[TransformContext, Depends(get_context)]

RegistryDep = Annotated[TransformationRegistry, Depends(get_registry)]


def check_input_length(value: str, settings: Settings) -> None:
    """Reject inputs longer than ``settings.max_input_length`` with a 400."""
    if len(value) > settings.max_input_length:
        error = InputTooLongError(len(value), settings.max_input_length)
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=error.message,
        )
