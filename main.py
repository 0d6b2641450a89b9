import logging

import uvicorn
from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles
from starlette.middleware.sessions import SessionMiddleware

# ==================== IMPORTS FROM YOUR MODULES ====================
from config import PORT, SESSION_SECRET, SITE_NAME, STATIC_DIR
from db import connect_to_mongo, close_mongo_connection
from routes.web import router as web_router
from routes.requests import router as requests_router
from routes.admin_auth import router as admin_auth_router
from routes.admin import router as admin_router
from routes.movies import router as movies_router

logger = logging.getLogger(__name__)

# ==================== FASTAPI SETUP ====================
app = FastAPI(title=SITE_NAME)
app.add_middleware(SessionMiddleware, secret_key=SESSION_SECRET)
app.mount("/static", StaticFiles(directory=STATIC_DIR), name="static")

# ==================== INCLUDE ALL ROUTERS ====================
app.include_router(web_router)
app.include_router(requests_router)
app.include_router(admin_auth_router)
app.include_router(admin_router)
# catch-all "/{slug}" goes last
app.include_router(movies_router)


# ==================== STARTUP/SHUTDOWN ====================
@app.on_event("startup")
async def on_startup():
    await connect_to_mongo()
    logger.info("%s startup complete!", SITE_NAME)


@app.on_event("shutdown")
async def on_shutdown():
    await close_mongo_connection()
    logger.info("%s shutting down!", SITE_NAME)


# ==================== RUN SERVER ====================
if __name__ == "__main__":
    uvicorn.run("main:app", host="0.0.0.0", port=PORT, reload=False)
