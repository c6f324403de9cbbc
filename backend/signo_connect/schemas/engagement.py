"""Engagement Schemas — notifications, referrals and driver assessments."""

from pydantic import Field

from signo_connect.core.domain_types import NotificationType, UserType
from signo_connect.schemas.base import CamelModel


class NotificationCreate(CamelModel):
    user_id: int
    user_type: UserType
    title: str = Field(min_length=1)
    content: str = Field(min_length=1)
    type: NotificationType
    action_url: str | None = None


class ReferralCreate(CamelModel):
    referrer_id: int
    referred_phone: str = Field(min_length=10, max_length=15)
    referred_name: str | None = None


class AssessmentSubmit(CamelModel):
    driver_id: int
    assessment_type: str = Field(min_length=1)
    score: int = Field(ge=0, le=100)
    feedback_notes: str | None = None
