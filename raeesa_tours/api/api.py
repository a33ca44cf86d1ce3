from fastapi import APIRouter
from raeesa_tours.api.routes.auth import router as auth_router
from raeesa_tours.api.routes.registrations import router as registrations_router
from raeesa_tours.api.routes.contact import router as contact_router

api_router = APIRouter(prefix="/api")
api_router.include_router(auth_router)
api_router.include_router(registrations_router)
api_router.include_router(contact_router)
