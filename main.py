# main.py
from dotenv import load_dotenv
load_dotenv()   # <-- Must be first!
import logging
import os
from fastapi import FastAPI
from fastapi.responses import PlainTextResponse
from fastapi.middleware.cors import CORSMiddleware
from models import EmailRequest
from services.draft import generate_email_reply

logging.basicConfig(
    level=os.getenv("LOG_LEVEL", "INFO"),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(title="Email Writer Backend")

# ------------- CORS -------------
# The browser extension calls in from arbitrary mail origins.
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)
# ------------------------------------------------

@app.post("/api/email/generate", response_class=PlainTextResponse)
async def generate_email(request: EmailRequest):
    logger.info("📩 Reply requested (tone=%r, %d chars)", request.tone, len(request.email_content))
    return await generate_email_reply(request)

@app.get("/")
def root():
    return {"status": "running", "app": "Email Writer Backend"}
