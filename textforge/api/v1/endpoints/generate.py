from fastapi import APIRouter, Query

from textforge.dependencies import ContextDep
from textforge.models.schemas import GeneratedValue
from textforge.services.engines import crypto

router = APIRouter()


@router.get(
    "/password",
    response_model=GeneratedValue,
    summary="Generate a random password",
)
async def generate_password(
    length: int = Query(default=16, ge=1, le=256),
    uppercase: bool = True,
    lowercase: bool = True,
    numbers: bool = True,
    symbols: bool = True,
) -> GeneratedValue:
    value = crypto.generate_password(length, uppercase, lowercase, numbers, symbols)
    return GeneratedValue(kind="password", value=value)


@router.get(
    "/uuid",
    response_model=GeneratedValue,
    summary="Generate a random UUID",
)
async def generate_uuid() -> GeneratedValue:
    return GeneratedValue(kind="uuid", value=crypto.generate_uuid())


@router.get(
    "/key",
    response_model=GeneratedValue,
    summary="Generate a 256-bit key",
    description=(
        "Without a password, returns 32 random bytes as hex. With a password, "
        "returns the PBKDF2-HMAC-SHA256 key derived with the configured salt."
    ),
)
async def generate_key(
    context: ContextDep,
    password: str | None = None,
) -> GeneratedValue:
    if password:
        value = crypto.derive_key_hex(password, context.kdf_salt, context.kdf_iterations)
    else:
        value = crypto.generate_random_hex(crypto.KEY_LENGTH * 2)
    return GeneratedValue(kind="key", value=value)
