"""
Preflight (OPTIONS) handling for API Gateway resources.

The OPTIONS method is answered by a mock integration, so no function is
invoked for a preflight request.
"""

from enum import Enum
from types import MappingProxyType
from typing import Mapping

from aws_cdk import aws_apigateway as apigw


class CorsHeader(str, Enum):
    ALLOW_HEADERS = "Access-Control-Allow-Headers"
    ALLOW_METHODS = "Access-Control-Allow-Methods"
    ALLOW_ORIGIN = "Access-Control-Allow-Origin"
    ALLOW_CREDENTIALS = "Access-Control-Allow-Credentials"

    @property
    def response_parameter(self) -> str:
        return f"method.response.header.{self.value}"


PREFLIGHT_HEADERS: Mapping[CorsHeader, str] = MappingProxyType({
    CorsHeader.ALLOW_HEADERS: "Content-Type,X-Amz-Date,Authorization,X-Api-Key,X-Amz-Security-Token,X-Amz-User-Agent",
    CorsHeader.ALLOW_METHODS: "OPTIONS,GET,PUT,POST,DELETE",
    CorsHeader.ALLOW_ORIGIN: "*",
    CorsHeader.ALLOW_CREDENTIALS: "false",
})


def add_cors_options(resource: apigw.IResource) -> apigw.Method:
    """Attach the preflight OPTIONS method to ``resource``.

    A resource that already has an OPTIONS method keeps it and that method is
    returned as is.
    """
    existing = resource.node.try_find_child("OPTIONS")
    if existing is not None:
        return existing

    return resource.add_method(
        "OPTIONS",
        apigw.MockIntegration(
            integration_responses=[
                apigw.IntegrationResponse(
                    status_code="200",
                    # Static values must be single-quoted for API Gateway.
                    response_parameters={
                        header.response_parameter: f"'{value}'"
                        for header, value in PREFLIGHT_HEADERS.items()
                    },
                )
            ],
            # Binary media types need this set to WHEN_NO_MATCH instead.
            passthrough_behavior=apigw.PassthroughBehavior.NEVER,
            request_templates={"application/json": '{"statusCode": 200}'},
        ),
        method_responses=[
            apigw.MethodResponse(
                status_code="200",
                response_parameters={header.response_parameter: True for header in CorsHeader},
            )
        ],
    )
