#!/usr/bin/env python3
import logging

import aws_cdk as cdk

from items_service.config import load_config
from items_service.items_stack import ItemsServiceStack

logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")
logger = logging.getLogger("items_service")

app = cdk.App()
config = load_config(app)
logger.info("Synthesizing %s (table=%s, key=%s)", config.stack_name, config.table_name, config.primary_key)
ItemsServiceStack(app, config.stack_name, config=config)

app.synth()
