from fastapi import APIRouter

from app.api.routes.analyze import router as analyze_router
from app.api.routes.corpus import router as corpus_router
from app.api.routes.quiz import router as quiz_router
from app.api.routes.root import router as root_router

api_router = APIRouter()
api_router.include_router(root_router)
api_router.include_router(analyze_router)
api_router.include_router(corpus_router)
api_router.include_router(quiz_router)
