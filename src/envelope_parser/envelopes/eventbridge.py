from __future__ import annotations

from typing import Any

from pydantic import BaseModel

from envelope_parser.envelopes.base import Envelope
from envelope_parser.models.eventbridge import EventBridgeModel
from envelope_parser.schema import extend


class EventBridgeEnvelope(Envelope):
    name = "EventBridge"
    payload_paths = (("detail",),)

    def build_model(self, schema: Any) -> type[BaseModel]:
        return extend(EventBridgeModel, detail=self.payload(schema))

    def extract(self, parsed: BaseModel) -> Any:
        return parsed.detail
