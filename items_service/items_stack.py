from aws_cdk import (
    Stack,
    aws_dynamodb as dynamodb,
    aws_apigateway as apigw,
    RemovalPolicy,
    CfnOutput,
)
from constructs import Construct

from items_service.config import StackConfig
from items_service.cors import add_cors_options
from items_service.functions import ItemOperation, item_function


class ItemsServiceStack(Stack):

    def __init__(self, scope: Construct, id: str, *, config: StackConfig, **kwargs) -> None:
        super().__init__(scope, id, **kwargs)

        # Database
        self.table = dynamodb.Table(self, "items",
            partition_key=dynamodb.Attribute(name=config.primary_key, type=dynamodb.AttributeType.STRING),
            table_name=config.table_name,
            removal_policy=RemovalPolicy.DESTROY,
        )

        # One function per CRUD operation, all sharing the same settings
        environment = {
            "PRIMARY_KEY": config.primary_key,
            "TABLE_NAME": self.table.table_name,
        }
        self.functions = {
            operation: item_function(self, operation, config.functions, environment)
            for operation in ItemOperation
        }

        for function in self.functions.values():
            self.table.grant_read_write_data(function)

        # API Gateway
        self.api = apigw.RestApi(self, "itemsApi",
            rest_api_name=config.api_name,
            cloud_watch_role=False,
        )

        def integration(operation: ItemOperation) -> apigw.LambdaIntegration:
            return apigw.LambdaIntegration(self.functions[operation])

        open_access = apigw.AuthorizationType.NONE

        self.items_resource = self.api.root.add_resource("items")
        self.items_resource.add_method("GET", integration(ItemOperation.GET_ALL), authorization_type=open_access)
        self.items_resource.add_method("POST", integration(ItemOperation.CREATE), authorization_type=open_access)
        add_cors_options(self.items_resource)

        self.item_resource = self.items_resource.add_resource("{id}")
        self.item_resource.add_method("GET", integration(ItemOperation.GET_ONE), authorization_type=open_access)
        self.item_resource.add_method("PUT", integration(ItemOperation.UPDATE_ONE), authorization_type=open_access)
        self.item_resource.add_method("DELETE", integration(ItemOperation.DELETE_ONE), authorization_type=open_access)
        add_cors_options(self.item_resource)

        CfnOutput(self, "TableName", value=self.table.table_name)
