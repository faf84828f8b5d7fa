"""Domain events for the Feedback aggregate."""

from protean.fields import DateTime, Identifier, Integer

from shopsmart.domain import shopsmart


@shopsmart.event(part_of="Feedback")
class FeedbackSubmitted:
    __version__ = 1

    feedback_id = Identifier(required=True)
    product_id = Identifier(required=True)
    account_id = Identifier(required=True)
    rating = Integer(required=True)
    submitted_at = DateTime(required=True)
