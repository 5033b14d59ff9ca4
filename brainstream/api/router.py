# file: brainstream/api/router.py
from fastapi import APIRouter
from brainstream.api.endpoints import activity, brain

api_router = APIRouter()
api_router.include_router(brain.router, prefix="/brain", tags=["Brain Stream"])
api_router.include_router(activity.router, prefix="/activity", tags=["Activity"])
