from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel
import os
import logging
from typing import List, Optional
from dotenv import load_dotenv

from business_card_scanner import BusinessCardScanner
from config import ScannerSettings, env_int

# Load environment variables
load_dotenv()

# Configure logging
logging.basicConfig(level=os.getenv("LOG_LEVEL", "INFO").upper())
logger = logging.getLogger(__name__)

ALLOWED_ORIGINS = [
    origin.strip()
    for origin in os.getenv("ALLOWED_ORIGINS", "http://localhost:8000").split(",")
    if origin.strip()
]

app = FastAPI(title="Business Card Text Extractor", version="1.0.0")

app.add_middleware(
    CORSMiddleware,
    allow_origins=ALLOWED_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Initialize components
business_card_scanner = BusinessCardScanner(ScannerSettings.from_env())


class ParseRequest(BaseModel):
    text: str
    image_data: Optional[str] = None


class BatchParseRequest(BaseModel):
    cards: List[ParseRequest]


@app.post("/api/cards/parse")
async def parse_card(request: ParseRequest):
    """Extract contact details from the OCR text of one business card"""
    try:
        logger.info(f"Parsing business card text ({len(request.text)} characters)")
        record = business_card_scanner.extract(request.text, request.image_data)
        return {"success": True, "contact": record.to_dict()}
    except Exception as e:
        logger.error(f"Error parsing business card text: {str(e)}", exc_info=True)
        raise HTTPException(status_code=500, detail=f"Error parsing business card text: {str(e)}")


@app.post("/api/cards/parse-batch")
async def parse_cards(request: BatchParseRequest):
    """Extract contact details from several business cards at once"""
    try:
        if not request.cards:
            raise HTTPException(status_code=400, detail="No cards provided")

        records = business_card_scanner.extract_many(
            (card.text, card.image_data) for card in request.cards
        )
        logger.info(f"Parsed {len(records)} business cards")
        return {
            "success": True,
            "contacts": [record.to_dict() for record in records],
            "count": len(records),
        }
    except HTTPException as he:
        raise he
    except Exception as e:
        logger.error(f"Error parsing business cards: {str(e)}", exc_info=True)
        raise HTTPException(status_code=500, detail=str(e))


@app.get("/health")
async def health_check():
    """Health check endpoint"""
    return {"status": "healthy", "service": "Business Card Text Extractor"}


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=env_int("PORT", 8000))
