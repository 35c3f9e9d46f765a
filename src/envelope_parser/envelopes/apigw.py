from __future__ import annotations

from typing import Any

from pydantic import BaseModel

from envelope_parser.envelopes.base import Envelope
from envelope_parser.models.apigw import APIGatewayProxyEventModel
from envelope_parser.models.apigwv2 import APIGatewayProxyEventV2Model, LambdaFunctionUrlModel
from envelope_parser.schema import extend


class ApiGatewayEnvelope(Envelope):
    """REST API proxy requests.

    The body is handed to the schema as sent; a binary body
    (``isBase64Encoded``) stays base64 unless ``decoder=base64_encoded``.
    """

    name = "API Gateway REST"
    payload_paths = (("body",),)
    model: type[BaseModel] = APIGatewayProxyEventModel

    def build_model(self, schema: Any) -> type[BaseModel]:
        return extend(self.model, body=self.payload(schema))

    def extract(self, parsed: BaseModel) -> Any:
        return parsed.body


class ApiGatewayV2Envelope(ApiGatewayEnvelope):
    name = "API Gateway HTTP"
    model = APIGatewayProxyEventV2Model


class LambdaFunctionUrlEnvelope(ApiGatewayEnvelope):
    name = "Lambda function URL"
    model = LambdaFunctionUrlModel
