import attr
import marshmallow

import wetwire.contract


class SetupHelmSchema(wetwire.contract.InputsSchema):
    version = marshmallow.fields.String()
    token = marshmallow.fields.String()
    download_base_url = marshmallow.fields.String(data_key='downloadBaseURL')


@attr.s(frozen=True)
class SetupHelm(wetwire.contract.Action):
    action_reference = 'azure/setup-helm@v4'
    inputs_schema = SetupHelmSchema

    version = attr.ib(default='')
    token = attr.ib(default='')
    download_base_url = attr.ib(default='')
