"""
Student Council API — Dashboard Routes
========================================

What:  Derived views: GET /api/dashboard/stats and GET /api/leaderboard.
       Both are recomputed from the store on every call.
"""

from typing import List

from fastapi import APIRouter, Depends

from council.schemas.dashboard import DashboardStats, LeaderboardEntry
from council.security import Identity, require_auth
from council.services.dashboard_service import dashboard_service
from council.store import InMemoryStore, get_store

router = APIRouter(prefix="/api", tags=["Dashboard"])


@router.get("/dashboard/stats", response_model=DashboardStats, summary="Dashboard statistics")
async def dashboard_stats(
    identity: Identity = Depends(require_auth),
    store: InMemoryStore = Depends(get_store),
) -> DashboardStats:
    return dashboard_service.stats(store)


@router.get(
    "/leaderboard",
    response_model=List[LeaderboardEntry],
    summary="Member leaderboard",
    description="Figures are randomly generated on each call; only the ordering is meaningful.",
)
async def leaderboard(
    identity: Identity = Depends(require_auth),
    store: InMemoryStore = Depends(get_store),
) -> List[LeaderboardEntry]:
    return dashboard_service.leaderboard(store)
