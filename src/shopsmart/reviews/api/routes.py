"""FastAPI endpoints for product feedback."""

from fastapi import APIRouter, Depends
from protean.utils.globals import current_domain

from shopsmart.auth.access import authorize, protect
from shopsmart.identity.account.account import Role
from shopsmart.reviews.api.schemas import MessageResponse, SubmitFeedbackRequest
from shopsmart.reviews.feedback.queries import all_feedback, feedback_for_product
from shopsmart.reviews.feedback.removal import DeleteFeedback
from shopsmart.reviews.feedback.submission import SubmitFeedback

feedback_router = APIRouter(prefix="/feedback", tags=["feedback"])

admin_only = authorize(Role.ADMIN.value)


@feedback_router.post("", status_code=201)
async def submit_feedback(body: SubmitFeedbackRequest, account=Depends(protect)):
    command = SubmitFeedback(
        account_id=account.id,
        product_id=body.product_id,
        rating=body.rating,
        comment=body.comment,
    )
    feedback_id = current_domain.process(command, asynchronous=False)
    return {"id": feedback_id, "message": "Feedback submitted"}


@feedback_router.get("/product/{product_id}")
async def read_product_feedback(product_id: str):
    return feedback_for_product(product_id)


@feedback_router.get("")
async def read_all_feedback(admin=Depends(admin_only)):
    return all_feedback()


@feedback_router.delete("/{feedback_id}", response_model=MessageResponse)
async def delete_feedback(feedback_id: str, admin=Depends(admin_only)) -> MessageResponse:
    current_domain.process(DeleteFeedback(feedback_id=feedback_id), asynchronous=False)
    return MessageResponse(message="Feedback removed")
