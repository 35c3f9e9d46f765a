from __future__ import annotations

from decimal import Decimal
from typing import Any, Optional

import pytest
from pydantic import BaseModel, ValidationError

from envelope_parser.decoders import structured_value
from envelope_parser.models import (
    DynamoDBStreamChangeRecord,
    DynamoDBStreamChangeRecordBase,
    DynamoDBStreamModel,
    DynamoDBStreamToKinesisChangeRecord,
    DynamoDBStreamToKinesisRecord,
)
from envelope_parser.schema import extend


class Item(BaseModel):
    Id: Decimal
    Message: str


def _change_record(**overrides: Any) -> dict[str, Any]:
    record: dict[str, Any] = {
        "Keys": {"Id": {"N": "101"}},
        "NewImage": {"Message": {"S": "hi"}, "Id": {"N": "101"}},
        "SequenceNumber": "111",
        "SizeBytes": 26,
        "StreamViewType": "NEW_AND_OLD_IMAGES",
    }
    record.update(overrides)
    return record


def test_change_record_unmarshalls_images() -> None:
    parsed = DynamoDBStreamChangeRecord.model_validate(_change_record())

    assert parsed.Keys == {"Id": Decimal("101")}
    assert parsed.Keys == {"Id": 101}
    assert parsed.NewImage == {"Message": "hi", "Id": Decimal("101")}
    assert parsed.OldImage is None


def test_change_record_with_ambiguous_keys_fails_on_keys() -> None:
    record = _change_record(Keys={"Id": {"N": "101", "S": "x"}})

    with pytest.raises(ValidationError) as exc_info:
        DynamoDBStreamChangeRecord.model_validate(record)

    errors = exc_info.value.errors()
    assert [error["loc"] for error in errors] == [("Keys",)]
    assert "Could not unmarshall Keys" in errors[0]["msg"]


def test_change_record_base_keeps_images_encoded() -> None:
    parsed = DynamoDBStreamChangeRecordBase.model_validate(_change_record())

    assert parsed.Keys == {"Id": {"N": "101"}}
    assert parsed.NewImage == {"Message": {"S": "hi"}, "Id": {"N": "101"}}


@pytest.mark.parametrize(
    ("view", "images", "allowed"),
    [
        ("KEYS_ONLY", {}, True),
        ("KEYS_ONLY", {"NewImage": {"Id": {"N": "1"}}}, False),
        ("NEW_IMAGE", {"NewImage": {"Id": {"N": "1"}}}, True),
        ("NEW_IMAGE", {"OldImage": {"Id": {"N": "1"}}}, False),
        ("OLD_IMAGE", {"OldImage": {"Id": {"N": "1"}}}, True),
        ("OLD_IMAGE", {"NewImage": {"Id": {"N": "1"}}}, False),
        ("NEW_AND_OLD_IMAGES", {"OldImage": {"Id": {"N": "1"}}}, True),
        (
            "NEW_AND_OLD_IMAGES",
            {"NewImage": {"Id": {"N": "1"}}, "OldImage": {"Id": {"N": "1"}}},
            True,
        ),
    ],
)
def test_stream_view_type_restricts_images(
    view: str, images: dict[str, Any], allowed: bool
) -> None:
    record = _change_record(StreamViewType=view)
    del record["NewImage"]
    record.update(images)

    if allowed:
        DynamoDBStreamChangeRecord.model_validate(record)
        return

    with pytest.raises(ValidationError, match=f"not allowed when StreamViewType is {view}"):
        DynamoDBStreamChangeRecord.model_validate(record)


def test_custom_record_decodes_one_image_with_its_own_schema() -> None:
    Record = extend(
        DynamoDBStreamChangeRecordBase,
        name="OrderChangeRecord",
        NewImage=(Optional[structured_value(Item)], None),
    )

    parsed = Record.model_validate(_change_record())

    assert parsed.NewImage == Item(Id=Decimal("101"), Message="hi")
    assert parsed.Keys == {"Id": {"N": "101"}}


def test_stream_model_requires_records(load_event) -> None:
    event = load_event("dynamodb")
    event["Records"] = []

    with pytest.raises(ValidationError) as exc_info:
        DynamoDBStreamModel.model_validate(event)

    assert exc_info.value.errors()[0]["loc"] == ("Records",)


def test_stream_model_parses_window(load_event) -> None:
    parsed = DynamoDBStreamModel.model_validate(load_event("dynamodb"))

    assert parsed.window is not None
    assert parsed.window.start.year == 2020
    assert len(parsed.Records) == 3
    assert parsed.Records[2].dynamodb.NewImage is None


def test_kinesis_change_record_has_no_sequence_or_view_type() -> None:
    record = {
        "Keys": {"id": {"S": "record-1"}},
        "NewImage": {"id": {"S": "record-1"}},
        "OldImage": {"id": {"S": "record-0"}},
        "SizeBytes": 60,
    }

    parsed = DynamoDBStreamToKinesisChangeRecord.model_validate(record)

    assert "SequenceNumber" not in DynamoDBStreamToKinesisChangeRecord.model_fields
    assert "StreamViewType" not in DynamoDBStreamToKinesisChangeRecord.model_fields
    assert parsed.Keys == {"id": {"S": "record-1"}}


def test_dynamodb_record_delivered_through_kinesis() -> None:
    record = {
        "awsRegion": "us-east-1",
        "eventID": "eac5bf6b-0c1b-4a39-b5b3-7b3d1b3d9c1e",
        "eventName": "INSERT",
        "userIdentity": None,
        "recordFormat": "application/json",
        "tableName": "orders",
        "dynamodb": {
            "ApproximateCreationDateTime": 1731924555370,
            "Keys": {"id": {"S": "record-1"}},
            "NewImage": {"id": {"S": "record-1"}, "total": {"N": "12.50"}},
            "SizeBytes": 60,
        },
        "eventSource": "aws:dynamodb",
    }

    parsed = DynamoDBStreamToKinesisRecord.model_validate(record)

    assert parsed.tableName == "orders"
    assert parsed.dynamodb.Keys == {"id": "record-1"}
    assert parsed.dynamodb.NewImage == {"id": "record-1", "total": Decimal("12.50")}
    assert "eventVersion" not in DynamoDBStreamToKinesisRecord.model_fields


def test_unmarshall_failure_skips_the_rest_of_the_record() -> None:
    record = _change_record(
        Keys={"Id": {"N": "101", "S": "x"}},
        NewImage={"Id": {"BOOL": "yes"}},
    )
    del record["SequenceNumber"]

    with pytest.raises(ValidationError) as exc_info:
        DynamoDBStreamChangeRecord.model_validate(record)

    errors = exc_info.value.errors()
    assert [(error["loc"], error["type"]) for error in errors] == [(("Keys",), "unmarshall_error")]


def test_kinesis_delivered_change_stops_at_first_failing_image() -> None:
    record = {
        "awsRegion": "us-east-1",
        "eventID": "1",
        "eventName": "MODIFY",
        "recordFormat": "application/json",
        "tableName": "orders",
        "dynamodb": {
            "Keys": {"id": {"S": "record-1"}},
            "NewImage": {"id": {"L": "record-1"}},
            "OldImage": {"id": {"M": []}},
            "SizeBytes": 60,
        },
        "eventSource": "aws:dynamodb",
    }

    with pytest.raises(ValidationError) as exc_info:
        DynamoDBStreamToKinesisRecord.model_validate(record)

    assert [error["loc"] for error in exc_info.value.errors()] == [("dynamodb", "NewImage")]
