"""SubmitFeedback — rate a product.

One feedback per account per product, enforced here because it spans
aggregate instances.
"""

from protean import handle
from protean.exceptions import ValidationError
from protean.fields import Identifier, Integer, Text
from protean.utils.globals import current_domain

from shopsmart.catalogue.product.listing import find_product
from shopsmart.domain import logger, shopsmart
from shopsmart.errors import ProductNotFound
from shopsmart.reviews.feedback.feedback import Feedback


@shopsmart.command(part_of="Feedback")
class SubmitFeedback:
    account_id = Identifier(required=True)
    product_id = Identifier(required=True)
    rating = Integer(required=True)
    comment = Text()


@shopsmart.command_handler(part_of=Feedback)
class SubmitFeedbackHandler:
    @handle(SubmitFeedback)
    def submit_feedback(self, command):
        if find_product(command.product_id) is None:
            raise ProductNotFound(command.product_id)

        repo = current_domain.repository_for(Feedback)
        existing = repo._dao.query.filter(
            account_id=str(command.account_id),
            product_id=str(command.product_id),
        ).all()
        if existing.items:
            raise ValidationError({"feedback": ["You have already submitted feedback for this product."]})

        feedback = Feedback.submit(
            product_id=command.product_id,
            account_id=command.account_id,
            rating=command.rating,
            comment=command.comment,
        )
        repo.add(feedback)

        logger.info(
            "feedback_submitted",
            feedback_id=str(feedback.id),
            product_id=str(command.product_id),
            rating=command.rating,
        )
        return str(feedback.id)
