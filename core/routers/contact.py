"""Contact form router."""
from fastapi import APIRouter

from core.logging import get_logger
from core.services.database import get_database

from .models import ContactRequest

logger = get_logger(__name__)

router = APIRouter(tags=["contact"])


@router.post("/contact", status_code=201)
async def submit_contact(request: ContactRequest):
    db = get_database()
    contact = await db.create_contact(request.name, request.email, request.message)
    logger.info("Contact message %s received", contact.id)
    return {
        "message": "Thank you for your message. We will get back to you soon.",
        "contact": contact.model_dump(mode="json"),
    }
