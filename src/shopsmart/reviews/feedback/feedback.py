"""Feedback aggregate — a shopper's rating and comment on a product.

A shopper rates a product once. Feedback is not edited; an administrator
may delete it.
"""

from datetime import UTC, datetime

from protean import invariant
from protean.exceptions import ValidationError
from protean.fields import DateTime, Identifier, Integer, Text

from shopsmart.domain import shopsmart
from shopsmart.reviews.feedback.events import FeedbackSubmitted

MIN_RATING = 1
MAX_RATING = 5


@shopsmart.aggregate
class Feedback:
    product_id = Identifier(required=True)
    account_id = Identifier(required=True)
    rating = Integer(required=True)
    comment = Text(default="")
    created_at = DateTime()

    @invariant.post
    def rating_must_be_in_range(self):
        if self.rating is not None and not (MIN_RATING <= self.rating <= MAX_RATING):
            raise ValidationError({"rating": [f"Rating must be between {MIN_RATING} and {MAX_RATING}"]})

    @classmethod
    def submit(cls, product_id, account_id, rating, comment=None):
        now = datetime.now(UTC)
        feedback = cls(
            product_id=product_id,
            account_id=account_id,
            rating=rating,
            comment=(comment or "").strip(),
            created_at=now,
        )
        feedback.raise_(
            FeedbackSubmitted(
                feedback_id=feedback.id,
                product_id=str(product_id),
                account_id=str(account_id),
                rating=rating,
                submitted_at=now,
            )
        )
        return feedback
