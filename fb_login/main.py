import logging

from fastapi import FastAPI

from fb_login.config import load_settings
from fb_login.routers.facebook_login import router as facebook_login_router

logging.basicConfig(
    level=load_settings().log_level,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

app = FastAPI()

# ---------------- Routers ----------------
app.include_router(facebook_login_router)
