from envelope_parser.models.apigw import (
    APIGatewayEventIdentity,
    APIGatewayEventRequestContext,
    APIGatewayProxyEventModel,
)
from envelope_parser.models.apigwv2 import (
    APIGatewayProxyEventV2Model,
    LambdaFunctionUrlModel,
    RequestContextV2,
    RequestContextV2Http,
)
from envelope_parser.models.dynamodb import (
    DynamoDBStreamChangeRecord,
    DynamoDBStreamChangeRecordBase,
    DynamoDBStreamModel,
    DynamoDBStreamRecordModel,
    DynamoDBStreamToKinesisChangeRecord,
    DynamoDBStreamToKinesisRecord,
    UserIdentity,
)
from envelope_parser.models.eventbridge import EventBridgeModel
from envelope_parser.models.firehose import (
    KinesisFirehoseModel,
    KinesisFirehoseRecord,
    KinesisFirehoseRecordMetadata,
)
from envelope_parser.models.kinesis import (
    KinesisDataStreamModel,
    KinesisDataStreamRecord,
    KinesisDataStreamRecordPayload,
)
from envelope_parser.models.sns import (
    SnsModel,
    SnsMsgAttributeModel,
    SnsNotificationModel,
    SnsRecordModel,
    SnsSqsNotificationModel,
)
from envelope_parser.models.sqs import (
    SqsAttributesModel,
    SqsModel,
    SqsMsgAttributeModel,
    SqsRecordModel,
)

__all__ = [
    "APIGatewayEventIdentity",
    "APIGatewayEventRequestContext",
    "APIGatewayProxyEventModel",
    "APIGatewayProxyEventV2Model",
    "DynamoDBStreamChangeRecord",
    "DynamoDBStreamChangeRecordBase",
    "DynamoDBStreamModel",
    "DynamoDBStreamRecordModel",
    "DynamoDBStreamToKinesisChangeRecord",
    "DynamoDBStreamToKinesisRecord",
    "EventBridgeModel",
    "KinesisDataStreamModel",
    "KinesisDataStreamRecord",
    "KinesisDataStreamRecordPayload",
    "KinesisFirehoseModel",
    "KinesisFirehoseRecord",
    "KinesisFirehoseRecordMetadata",
    "LambdaFunctionUrlModel",
    "RequestContextV2",
    "RequestContextV2Http",
    "SnsModel",
    "SnsMsgAttributeModel",
    "SnsNotificationModel",
    "SnsRecordModel",
    "SnsSqsNotificationModel",
    "SqsAttributesModel",
    "SqsModel",
    "SqsMsgAttributeModel",
    "SqsRecordModel",
    "UserIdentity",
]
