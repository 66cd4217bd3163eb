import logging

from crud.http import api_handler, path_id, response
from crud.table import get_table, primary_key

logger = logging.getLogger(__name__)


@api_handler
def main(event, context):
    item_id = path_id(event)

    get_table().delete_item(Key={primary_key(): item_id})

    logger.info("Deleted item %s", item_id)
    return response(200)
