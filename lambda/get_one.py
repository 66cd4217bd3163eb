import logging

from crud.errors import ItemNotFoundError
from crud.http import api_handler, path_id, response
from crud.table import get_table, primary_key

logger = logging.getLogger(__name__)


@api_handler
def main(event, context):
    item_id = path_id(event)

    result = get_table().get_item(Key={primary_key(): item_id})
    item = result.get('Item')
    if item is None:
        raise ItemNotFoundError(item_id)

    logger.info("Fetched item %s", item_id)
    return response(200, item)
