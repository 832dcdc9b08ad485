import collections
import collections.abc

import marshmallow
import marshmallow.fields

import wetwire.expressions


unset_values = ('', 0)


def is_unset(value, skip_values=unset_values):
    if value is None:
        return True

    if isinstance(value, collections.abc.Sized) and not isinstance(value, str):
        return len(value) == 0

    # False == 0, so booleans are covered by the integer zero
    return value in skip_values


def explicit_keys(schema):
    return {
        field.data_key or name
        for name, field in schema.fields.items()
        if field.metadata.get('explicit', False)
    }


def remove_unset_values(schema, the_dict):
    explicit = explicit_keys(schema)

    return type(the_dict)([
        [key, value]
        for key, value in the_dict.items()
        if value is not None
        if key in explicit or not is_unset(value)
    ])


@marshmallow.decorators.post_dump
def post_dump_remove_unset_values(self, data, many, **kwargs):
    return remove_unset_values(self, data)


def sorted_ordered_dict(mapping):
    return collections.OrderedDict(sorted(mapping.items()))


def serialize_value(value):
    if isinstance(value, wetwire.expressions.Expression):
        return str(value)

    if isinstance(value, collections.abc.Mapping):
        return sorted_ordered_dict({
            key: serialize_value(element)
            for key, element in value.items()
        })

    if (
            isinstance(value, collections.abc.Sequence)
            and not isinstance(value, str)
    ):
        return [serialize_value(element) for element in value]

    return value


class Value(marshmallow.fields.Field):
    """A scalar or an expression, emitted in its ``${{ }}`` form."""

    def _serialize(self, value, attr, obj, **kwargs):
        return serialize_value(value)


class Condition(marshmallow.fields.Field):
    """An ``if`` field, emitted as the bare expression text."""

    def _serialize(self, value, attr, obj, **kwargs):
        return wetwire.expressions.raw(value)


def is_expression_text(value):
    return isinstance(value, (str, wetwire.expressions.Expression))


class Boolean(marshmallow.fields.Boolean):
    """A boolean that may instead hold an expression."""

    def _serialize(self, value, attr, obj, **kwargs):
        if is_expression_text(value):
            return serialize_value(value)

        return super()._serialize(value, attr, obj, **kwargs)


class Integer(marshmallow.fields.Integer):
    """An integer that may instead hold an expression."""

    def _serialize(self, value, attr, obj, **kwargs):
        if is_expression_text(value):
            return serialize_value(value)

        return super()._serialize(value, attr, obj, **kwargs)


class SortedDict(marshmallow.fields.Dict):
    """A mapping with user chosen keys, emitted in lexicographic order."""

    def _serialize(self, value, attr, obj, **kwargs):
        serialized = super()._serialize(value, attr, obj, **kwargs)

        if serialized is None:
            return None

        return sorted_ordered_dict(serialized)


class StringOrList(marshmallow.fields.Field):
    """``runs-on`` style fields that take one label or several."""

    def _serialize(self, value, attr, obj, **kwargs):
        if value is None:
            return None

        if isinstance(value, (str, wetwire.expressions.Expression)):
            return serialize_value(value)

        return [serialize_value(element) for element in value]
