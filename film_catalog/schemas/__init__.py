from flask_marshmallow import Marshmallow
from marshmallow import ValidationError

ma = Marshmallow()


# shared validators

def validate_not_blank(value):
    if value is None or not value.strip():
        raise ValidationError("Must not be blank.")


def validate_ids(value):
    if not isinstance(value, list):
        raise ValidationError("Must be a list of ids.")
    ids = []
    for item in value:
        # bool is an int subclass, reject it explicitly
        if isinstance(item, bool) or not isinstance(item, int) or item < 1:
            raise ValidationError(f"'{item}' is not a valid id.")
        ids.append(item)
    return ids
