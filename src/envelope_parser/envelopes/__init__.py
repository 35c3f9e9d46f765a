from __future__ import annotations

from envelope_parser.envelopes.apigw import (
    ApiGatewayEnvelope,
    ApiGatewayV2Envelope,
    LambdaFunctionUrlEnvelope,
)
from envelope_parser.envelopes.base import Envelope, RawEventEnvelope
from envelope_parser.envelopes.dynamodb import DynamoDBStreamEnvelope
from envelope_parser.envelopes.eventbridge import EventBridgeEnvelope
from envelope_parser.envelopes.kinesis import KinesisDataStreamEnvelope, KinesisFirehoseEnvelope
from envelope_parser.envelopes.sns import SnsEnvelope
from envelope_parser.envelopes.sqs import SnsSqsEnvelope, SqsEnvelope

ENVELOPES: dict[str, Envelope] = {
    "apigw": ApiGatewayEnvelope(),
    "apigw-v2": ApiGatewayV2Envelope(),
    "dynamodb": DynamoDBStreamEnvelope(),
    "eventbridge": EventBridgeEnvelope(),
    "firehose": KinesisFirehoseEnvelope(),
    "function-url": LambdaFunctionUrlEnvelope(),
    "kinesis": KinesisDataStreamEnvelope(),
    "sns": SnsEnvelope(),
    "sns-sqs": SnsSqsEnvelope(),
    "sqs": SqsEnvelope(),
}


def get_envelope(kind: str) -> Envelope:
    try:
        return ENVELOPES[kind]
    except KeyError:
        raise KeyError(
            f"Unknown envelope {kind!r}; expected one of: {', '.join(sorted(ENVELOPES))}"
        ) from None


__all__ = [
    "ENVELOPES",
    "ApiGatewayEnvelope",
    "ApiGatewayV2Envelope",
    "DynamoDBStreamEnvelope",
    "Envelope",
    "EventBridgeEnvelope",
    "KinesisDataStreamEnvelope",
    "KinesisFirehoseEnvelope",
    "LambdaFunctionUrlEnvelope",
    "RawEventEnvelope",
    "SnsEnvelope",
    "SnsSqsEnvelope",
    "SqsEnvelope",
    "get_envelope",
]
