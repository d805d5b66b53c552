"""
catalog.py — Where the FAQ list comes from.

  StaticCatalog    built-in defaults, always available
  MongoCatalog     admin-editable `faqs` collection
  FallbackCatalog  primary source, defaults when it fails or is empty

All of them expose load() -> List[FAQ]; the composer only ever sees the list.
"""
import logging
from typing import Callable, List, Optional, Protocol

from pydantic import ValidationError
from pymongo import ASCENDING
from pymongo.collection import Collection
from pymongo.errors import PyMongoError

from moviebot.db import col_faqs, is_configured
from moviebot.schemas import FAQ

logger = logging.getLogger(__name__)


class CatalogProvider(Protocol):
    def load(self) -> List[FAQ]: ...


DEFAULT_FAQS: List[FAQ] = [
    FAQ(
        id="default-1",
        question="What is the refund policy?",
        answer="Refunds are available up to 24 hours before the showtime. Contact support for assistance.",
        category="Refunds",
        keywords="refund,cancellation,refund policy,money back",
    ),
    FAQ(
        id="default-2",
        question="How can I change my seat?",
        answer='Seat changes are allowed depending on availability. Go to your booking and select "Change Seats".',
        category="Booking",
        keywords="seat change,seats,change booking,modify seats",
    ),
    FAQ(
        id="default-3",
        question="Are children allowed?",
        answer="Children are allowed; parental guidance may be required for certain ratings. Check the movie rating.",
        category="Policies",
        keywords="children,age,age restrictions,kids,family",
    ),
    FAQ(
        id="default-4",
        question="What are the ticket prices?",
        answer=(
            "Ticket prices vary by theater and showtime. We accept credit/debit cards, Apple Pay, "
            "Google Pay, and major UPI/NetBanking methods where available. Service fees may apply."
        ),
        category="Ticketing",
        keywords="ticket price,price,payment,payment options,cost,how much",
    ),
    FAQ(
        id="default-5",
        question="How do I check show timings?",
        answer=(
            "Show timings are listed on the movie details page. Click a movie to see available showtimes "
            "and seat availability for each time. You can also filter by date and theater."
        ),
        category="Showtimes",
        keywords="show timing,show timings,availability,showtime,show times,when",
    ),
    FAQ(
        id="default-6",
        question="How does the booking process work?",
        answer=(
            "Select a movie, pick a showtime, choose your seats, and complete payment. You will receive "
            "an email confirmation and e-ticket after successful payment."
        ),
        category="Booking",
        keywords="booking process,how to book,book tickets,make reservation",
    ),
    FAQ(
        id="default-7",
        question="What are the age restrictions?",
        answer=(
            "Movies are rated according to local guidelines (e.g., U, PG, PG-13, R). Please check the movie "
            "rating on the details page. Some theaters may enforce ID checks for age-restricted screenings."
        ),
        category="Policies",
        keywords="age restriction,age restrictions,rating,rated,mature content",
    ),
]


class StaticCatalog:
    def __init__(self, faqs: Optional[List[FAQ]] = None):
        self._faqs = list(DEFAULT_FAQS if faqs is None else faqs)

    def load(self) -> List[FAQ]:
        return list(self._faqs)


def _doc_to_faq(doc: dict) -> FAQ:
    data = dict(doc)
    oid = data.pop("_id", None)
    if not data.get("id") and oid is not None:
        data["id"] = str(oid)
    return FAQ(**data)


class MongoCatalog:
    """Reads every FAQ, oldest first (catalog order breaks keyword ties)."""

    def __init__(self, collection: Callable[[], Collection] = col_faqs):
        self._collection = collection

    def load(self) -> List[FAQ]:
        faqs = []
        for doc in self._collection().find({}).sort("created_at", ASCENDING):
            try:
                faqs.append(_doc_to_faq(doc))
            except ValidationError as e:
                logger.warning(f"[CATALOG] skipping malformed faq {doc.get('_id')!r}: {e}")
        return faqs


class FallbackCatalog:
    def __init__(self, primary: CatalogProvider, fallback: CatalogProvider):
        self.primary  = primary
        self.fallback = fallback

    def load(self) -> List[FAQ]:
        try:
            faqs = self.primary.load()
        except PyMongoError as e:
            logger.warning(f"[CATALOG] remote load failed, using defaults: {e}")
            return self.fallback.load()
        if not faqs:
            logger.warning("[CATALOG] remote catalog is empty, using defaults")
            return self.fallback.load()
        return faqs


def build_catalog() -> CatalogProvider:
    if is_configured():
        return FallbackCatalog(MongoCatalog(), StaticCatalog())
    return StaticCatalog()
