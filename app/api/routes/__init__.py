from fastapi import APIRouter
from app.api.routes import auth, bug_reports, generation, health, logs, test_cases

api_router = APIRouter()

# Include all route modules
api_router.include_router(health.router)
api_router.include_router(auth.router)
api_router.include_router(test_cases.router)
api_router.include_router(bug_reports.router)
api_router.include_router(logs.router)
api_router.include_router(generation.router)
