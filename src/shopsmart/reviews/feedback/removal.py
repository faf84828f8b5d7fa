"""DeleteFeedback — administrative removal of a feedback entry."""

from protean import handle
from protean.exceptions import ObjectNotFoundError
from protean.fields import Identifier
from protean.utils.globals import current_domain

from shopsmart.domain import logger, shopsmart
from shopsmart.errors import NotFound
from shopsmart.reviews.feedback.feedback import Feedback


@shopsmart.command(part_of="Feedback")
class DeleteFeedback:
    feedback_id = Identifier(required=True)


@shopsmart.command_handler(part_of=Feedback)
class DeleteFeedbackHandler:
    @handle(DeleteFeedback)
    def delete_feedback(self, command):
        repo = current_domain.repository_for(Feedback)
        try:
            feedback = repo.get(command.feedback_id)
        except ObjectNotFoundError:
            raise NotFound("Feedback not found", feedback_id=str(command.feedback_id)) from None

        repo._dao.delete(feedback)
        logger.info("feedback_deleted", feedback_id=str(command.feedback_id))
