# mini_file_server/app/api/router.py
from fastapi import APIRouter

from mini_file_server.app.api.files import router as files_router
from mini_file_server.app.api.service import router as service_router

api_router = APIRouter()
api_router.include_router(service_router.router)
api_router.include_router(files_router.router)
