from typing import Any, Optional, Type, TypeVar

from pydantic import BaseModel, ConfigDict, StrictStr
from pydantic.alias_generators import to_camel


class CallerPayload(BaseModel):
    """Accepts both snake_case and the camelCase keys the review service sends."""
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
        frozen=True,
    )


class BehaviorMetrics(CallerPayload):
    """Typing behavior captured while the review was written."""
    writing_time: Optional[float] = None  # ms spent typing
    revisions_count: Optional[float] = None
    session_duration: Optional[float] = None  # ms on the review form
    image_count: Optional[float] = None


class UserHistory(CallerPayload):
    """Aggregate stats about the reviewer's previous reviews."""
    total_reviews: Optional[float] = None
    avg_review_length: Optional[float] = None  # in words
    recent_review_count: Optional[float] = None


class OrderData(CallerPayload):
    """Purchase context for the reviewed product."""
    purchase_verified: Optional[bool] = None  # None reads as unverified
    order_trust_score: Optional[float] = None  # 0-100


class ReviewSubmission(CallerPayload):
    """A single review as handed over by the submission pipeline."""
    text: StrictStr
    behavior_metrics: Optional[BehaviorMetrics] = None
    user_history: Optional[UserHistory] = None
    order_data: Optional[OrderData] = None


ModelT = TypeVar("ModelT", bound=BaseModel)


def as_model(model_cls: Type[ModelT], value: Any) -> Optional[ModelT]:
    """Coerce a mapping into `model_cls`; None stays None."""
    if value is None:
        return None
    if isinstance(value, model_cls):
        return value
    return model_cls.model_validate(value)
