from __future__ import annotations

from typing import Literal

from pydantic import BaseModel

from envelope_parser.schema import extend, omit


class SnsMsgAttributeModel(BaseModel):
    Type: str
    Value: str


class SnsNotificationModel(BaseModel):
    Subject: str | None = None
    TopicArn: str
    UnsubscribeUrl: str
    Type: Literal["Notification"]
    MessageAttributes: dict[str, SnsMsgAttributeModel] | None = None
    Message: str
    MessageId: str
    SigningCertUrl: str | None = None
    Signature: str | None = None
    Timestamp: str
    SignatureVersion: str | None = None


class SnsRecordModel(BaseModel):
    EventSource: Literal["aws:sns"]
    EventVersion: str
    EventSubscriptionArn: str
    Sns: SnsNotificationModel


class SnsModel(BaseModel):
    """Notifications delivered to a Lambda subscription of an SNS topic."""

    Records: list[SnsRecordModel]


# SNS delivering into SQS writes the notification as the message body, with
# upper-case URL suffixes and without a subscription wrapper.
SnsSqsNotificationModel = extend(
    omit(SnsNotificationModel, "UnsubscribeUrl", "SigningCertUrl"),
    name="SnsSqsNotificationModel",
    UnsubscribeURL=(str | None, None),
    SigningCertURL=(str | None, None),
)
