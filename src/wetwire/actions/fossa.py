import attr
import marshmallow

import wetwire.contract


class FossaSchema(wetwire.contract.InputsSchema):
    api_key = marshmallow.fields.String(data_key='api-key')
    branch = marshmallow.fields.String()
    revision = marshmallow.fields.String()
    container = marshmallow.fields.String()


@attr.s(frozen=True)
class Fossa(wetwire.contract.Action):
    action_reference = 'fossas/fossa-action@v1'
    inputs_schema = FossaSchema

    api_key = attr.ib(default='')
    branch = attr.ib(default='')
    revision = attr.ib(default='')
    container = attr.ib(default='')
