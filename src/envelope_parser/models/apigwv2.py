from __future__ import annotations

from typing import Any

from pydantic import BaseModel


class RequestContextV2Http(BaseModel):
    method: str
    path: str
    protocol: str
    sourceIp: str
    userAgent: str


class RequestContextV2(BaseModel):
    accountId: str
    apiId: str
    authorizer: dict[str, Any] | None = None
    authentication: dict[str, Any] | None = None
    domainName: str
    domainPrefix: str
    requestId: str
    routeKey: str
    stage: str
    time: str
    timeEpoch: int
    http: RequestContextV2Http


class APIGatewayProxyEventV2Model(BaseModel):
    """HTTP API (v2 payload format) request."""

    version: str
    routeKey: str
    rawPath: str
    rawQueryString: str
    cookies: list[str] | None = None
    headers: dict[str, str]
    queryStringParameters: dict[str, str] | None = None
    pathParameters: dict[str, str] | None = None
    stageVariables: dict[str, str] | None = None
    requestContext: RequestContextV2
    body: str | None = None
    isBase64Encoded: bool


class LambdaFunctionUrlModel(APIGatewayProxyEventV2Model):
    """Function URL requests use the HTTP API v2 payload format."""
