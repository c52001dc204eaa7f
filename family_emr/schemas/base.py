from flask import jsonify
from pydantic import BaseModel, ConfigDict, ValidationError
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Payload model that reads camelCase JSON into snake_case attributes."""
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra='ignore',
    )


def camel_key(name):
    """JSON name of a payload key; camelCase keys pass through unchanged."""
    if isinstance(name, str) and '_' in name:
        return to_camel(name)
    return name


def format_validation_errors(exc: ValidationError):
    """Flatten a pydantic error into the per-field list returned to clients."""
    # Errors raised on a default value are located by field name, not alias
    return [
        {
            'path': [camel_key(part) for part in error['loc']],
            'message': error['msg'],
            'code': error['type'],
        }
        for error in exc.errors(include_url=False)
    ]


def invalid_data_response(errors):
    return jsonify({'message': 'Invalid data', 'errors': errors}), 400


def parse_payload(schema, data, partial=False):
    """Validate ``data`` against ``schema``.

    Returns ``(fields, None)`` on success, where ``fields`` holds snake_case
    attribute names, or ``(None, response)`` with a ready 400 response.
    ``partial`` keeps only the fields the client actually sent.
    """
    try:
        payload = schema.model_validate(data)
    except ValidationError as e:
        return None, invalid_data_response(format_validation_errors(e))
    return payload.model_dump(exclude_unset=partial), None
