"""FastAPI dependency: get_controller.

The controller is created once at app start (``src/main.py``) and stored on
``app.state``; routers receive it through ``Depends`` instead of importing a
module-level singleton. Tests swap it with ``app.dependency_overrides``.
"""

from fastapi import Request

from src.rf_raffle.application.service import RaffleController


def get_controller(request: Request) -> RaffleController:
    return request.app.state.raffle
