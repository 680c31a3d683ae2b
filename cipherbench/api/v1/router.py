from fastapi import APIRouter

from cipherbench.api.v1.endpoints import ciphers, decrypt, encrypt, explain, history, playfair

api_router = APIRouter()

api_router.include_router(
    ciphers.router,
    prefix="/ciphers",
    tags=["Ciphers"],
)

api_router.include_router(
    encrypt.router,
    prefix="/encrypt",
    tags=["Encryption"],
)

api_router.include_router(
    decrypt.router,
    prefix="/decrypt",
    tags=["Decryption"],
)

api_router.include_router(
    history.router,
    prefix="/history",
    tags=["History"],
)

api_router.include_router(
    playfair.router,
    prefix="/playfair",
    tags=["Playfair"],
)

api_router.include_router(
    explain.router,
    prefix="/explain",
    tags=["Explanation"],
)
