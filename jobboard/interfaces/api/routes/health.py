from fastapi import APIRouter

router = APIRouter(tags=["health"])


@router.get("/health")
def health() -> dict[str, bool]:
    """Comprueba que el servicio responde."""

    return {"ok": True}
