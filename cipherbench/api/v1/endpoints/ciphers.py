from fastapi import APIRouter

from cipherbench.models.schemas import CipherInfo
from cipherbench.services.engines.registry import EngineRegistry

router = APIRouter()


@router.get(
    "",
    response_model=list[CipherInfo],
    summary="List ciphers",
    description="List the supported ciphers and the key each one expects.",
)
async def list_ciphers() -> list[CipherInfo]:
    """Describe every registered cipher engine."""
    registry = EngineRegistry()
    return [
        CipherInfo(
            cipher_type=engine.cipher_type,
            cipher_family=engine.cipher_family,
            name=engine.name,
            description=engine.description,
            key_kind=engine.key_kind,
            key_hint=engine.key_hint,
        )
        for engine in registry.get_all_engines()
    ]
