# server/main.py

import logging
import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from api import auth, users
from core.config import CORS_ORIGINS, HOST, LOG_LEVEL, PORT
from database import init_db


logging.basicConfig(
    level=LOG_LEVEL,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s"
)

init_db()

app = FastAPI(title="Token Auth Service")

app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(auth.router, prefix="/api")
app.include_router(users.router, prefix="/api")


if __name__ == "__main__":
    logging.getLogger(__name__).info("Server ready at: http://localhost:%s", PORT)
    uvicorn.run(app, host=HOST, port=PORT)
