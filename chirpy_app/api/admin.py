from fastapi import APIRouter, Depends
from fastapi.responses import HTMLResponse, PlainTextResponse

from chirpy_app.config import Settings
from chirpy_app.dependencies import get_hit_counter, get_settings, get_user_service
from chirpy_app.exceptions import Forbidden
from chirpy_app.services.metrics import HitCounter
from chirpy_app.services.user_service import UserService

router = APIRouter(prefix="/admin", tags=["admin"])

METRICS_TEMPLATE = """<html>
  <body>
    <h1>Welcome, Chirpy Admin</h1>
    <p>Chirpy has been visited {hits} times!</p>
  </body>
</html>"""


@router.get("/metrics", response_class=HTMLResponse)
def metrics(counter: HitCounter = Depends(get_hit_counter)):
    """Number of requests served from /app since startup or the last reset"""
    return METRICS_TEMPLATE.format(hits=counter.load())


@router.post("/reset", response_class=PlainTextResponse)
def reset(
    counter: HitCounter = Depends(get_hit_counter),
    user_service: UserService = Depends(get_user_service),
    app_settings: Settings = Depends(get_settings),
):
    """
    Reset the hit counter AND delete every user (and their chirps).

    Only allowed when PLATFORM=dev; anywhere else it answers 403 and
    changes nothing. Users are deleted first, so a storage failure
    leaves the counter untouched.
    """
    if not app_settings.is_dev:
        raise Forbidden()

    user_service.delete_all_users()
    counter.reset()
    return f"Hits have been reset to {counter.load()}"
