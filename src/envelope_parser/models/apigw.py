from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel

HttpMethod = Literal["DELETE", "GET", "HEAD", "OPTIONS", "PATCH", "POST", "PUT"]


class APIGatewayEventIdentity(BaseModel):
    accessKey: str | None = None
    accountId: str | None = None
    apiKey: str | None = None
    apiKeyId: str | None = None
    caller: str | None = None
    cognitoAuthenticationProvider: str | None = None
    cognitoAuthenticationType: str | None = None
    cognitoIdentityId: str | None = None
    cognitoIdentityPoolId: str | None = None
    principalOrgId: str | None = None
    sourceIp: str
    user: str | None = None
    userAgent: str | None = None
    userArn: str | None = None
    clientCert: dict[str, Any] | None = None


class APIGatewayEventRequestContext(BaseModel):
    accountId: str
    apiId: str
    authorizer: dict[str, Any] | None = None
    stage: str
    protocol: str
    identity: APIGatewayEventIdentity
    requestId: str
    requestTime: str | None = None
    requestTimeEpoch: int
    resourceId: str | None = None
    resourcePath: str
    domainName: str | None = None
    domainPrefix: str | None = None
    extendedRequestId: str | None = None
    httpMethod: HttpMethod
    path: str


class APIGatewayProxyEventModel(BaseModel):
    """REST API (v1 payload format) proxy integration request."""

    version: str | None = None
    resource: str
    path: str
    httpMethod: HttpMethod
    headers: dict[str, str] | None = None
    multiValueHeaders: dict[str, list[str]] | None = None
    queryStringParameters: dict[str, str] | None = None
    multiValueQueryStringParameters: dict[str, list[str]] | None = None
    requestContext: APIGatewayEventRequestContext
    pathParameters: dict[str, str] | None = None
    stageVariables: dict[str, str] | None = None
    isBase64Encoded: bool = False
    body: str | None = None
