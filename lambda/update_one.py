import logging

from crud.errors import BadRequestError, ErrorCode
from crud.http import api_handler, json_body, path_id, response
from crud.table import get_table, primary_key

logger = logging.getLogger(__name__)


def build_update(attributes):
    """UpdateExpression arguments setting every attribute in ``attributes``.

    Names go through placeholders so reserved words such as ``name`` or
    ``status`` can be updated.
    """
    assignments = []
    names = {}
    values = {}
    for index, (attribute, value) in enumerate(attributes.items()):
        assignments.append(f"#{index} = :{index}")
        names[f"#{index}"] = attribute
        values[f":{index}"] = value
    return {
        'UpdateExpression': 'SET ' + ', '.join(assignments),
        'ExpressionAttributeNames': names,
        'ExpressionAttributeValues': values,
    }


@api_handler
def main(event, context):
    edited = json_body(event)
    item_id = path_id(event)

    key_name = primary_key()
    attributes = {name: value for name, value in edited.items() if name != key_name}
    if not attributes:
        raise BadRequestError("invalid request, no arguments provided", code=ErrorCode.NO_ARGUMENTS)

    get_table().update_item(
        Key={key_name: item_id},
        ReturnValues='UPDATED_NEW',
        **build_update(attributes),
    )

    logger.info("Updated item %s (%s)", item_id, ', '.join(attributes))
    return response(204)
