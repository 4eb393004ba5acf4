from marshmallow import fields


class TrimmedString(fields.String):
    """String field that strips surrounding whitespace on load"""

    def _deserialize(self, value, attr, data, **kwargs):
        return super()._deserialize(value, attr, data, **kwargs).strip()


class StrictBoolean(fields.Boolean):
    """Boolean field that only accepts JSON ``true`` and ``false``"""

    def _deserialize(self, value, attr, data, **kwargs):
        if not isinstance(value, bool):
            raise self.make_error("invalid", input=value)
        return value
