from __future__ import annotations

from pydantic import BaseModel, Field


class KinesisFirehoseRecordMetadata(BaseModel):
    shardId: str
    partitionKey: str
    approximateArrivalTimestamp: int
    sequenceNumber: str
    subsequenceNumber: int | None = None


class KinesisFirehoseRecord(BaseModel):
    data: str
    recordId: str
    approximateArrivalTimestamp: int
    kinesisRecordMetadata: KinesisFirehoseRecordMetadata | None = None


class KinesisFirehoseModel(BaseModel):
    """Transformation batch sent by a Firehose delivery stream."""

    invocationId: str
    deliveryStreamArn: str
    region: str
    sourceKinesisStreamArn: str | None = None
    records: list[KinesisFirehoseRecord] = Field(min_length=1)
