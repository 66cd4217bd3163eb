import logging
import uuid

from crud.http import api_handler, json_body, response
from crud.table import get_table, primary_key

logger = logging.getLogger(__name__)


@api_handler
def main(event, context):
    item = json_body(event)
    # The key is always generated server-side.
    item[primary_key()] = str(uuid.uuid4())

    get_table().put_item(Item=item)

    logger.info("Created item %s", item[primary_key()])
    return response(201, item)
