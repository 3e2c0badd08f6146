"""Contact form and outbound email routes."""

import logging

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from ...db import Database, insert_record
from ...models import Feedback
from ...utils.email import EmailError, send_email
from ..dependencies import get_database
from ..schemas import EmailRequest, FeedbackRequest

logger = logging.getLogger(__name__)

router = APIRouter(tags=["contact"])

FEEDBACK_FALLBACK_MESSAGE = "Failed to send message. Please try again."
EMAIL_FALLBACK_MESSAGE = "Failed to send email"

@router.post("/feedback", status_code=201)
async def submit_feedback(body: FeedbackRequest, database: Database = Depends(get_database)):
    """Store a message from the contact form."""
    try:
        insert_record(database, Feedback, body.model_dump())
    except Exception as e:
        logger.error(f"Error saving feedback: {e}")
        return JSONResponse(
            status_code=500,
            content={"title": "Error", "error": str(e) or FEEDBACK_FALLBACK_MESSAGE}
        )
    
    return {
        "title": "Message sent!",
        "description": "Thank you for your feedback. We'll get back to you soon."
    }

@router.post("/email")
def send_email_route(body: EmailRequest):
    """Send an email through the configured provider and return its response."""
    try:
        return send_email(body.to, body.subject, body.content)
    except EmailError as e:
        logger.error(f"Failed to send email: {e}")
        return JSONResponse(
            status_code=500,
            content={"error": str(e) or EMAIL_FALLBACK_MESSAGE}
        )
