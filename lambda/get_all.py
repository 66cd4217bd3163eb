import logging

from crud.http import api_handler, response
from crud.table import get_table

logger = logging.getLogger(__name__)


@api_handler
def main(event, context):
    table = get_table()
    scan_kwargs = {}
    items = []
    while True:
        page = table.scan(**scan_kwargs)
        items.extend(page.get('Items', []))
        if 'LastEvaluatedKey' not in page:
            break
        scan_kwargs['ExclusiveStartKey'] = page['LastEvaluatedKey']

    logger.info("Listed %d items", len(items))
    return response(200, items)
