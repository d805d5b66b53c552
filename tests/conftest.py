import pytest

from moviebot.schemas import FAQ


@pytest.fixture
def catalog():
    return [
        FAQ(
            id="faq-prices",
            question="What are the ticket prices and payment options?",
            answer="Ticket prices vary by theater and showtime. Service fees may apply.",
            category="Ticketing",
            keywords="ticket price,price,payment",
        ),
        FAQ(
            id="faq-refunds",
            question="What is the cancellation and refund policy?",
            answer="You can cancel up to 2 hours before the showtime for a full refund.",
            category="Refunds",
            keywords="cancellation, refund ,refund policy",
        ),
        FAQ(
            id="faq-timings",
            question="How do I check show timings",
            answer="Show timings are listed on the movie details page.",
            category="Showtimes",
            keywords="",
        ),
    ]
