import attr
import marshmallow

import wetwire.contract


class AzureDockerLoginSchema(wetwire.contract.InputsSchema):
    login_server = marshmallow.fields.String(data_key='login-server')
    username = marshmallow.fields.String()
    password = marshmallow.fields.String()


@attr.s(frozen=True)
class AzureDockerLogin(wetwire.contract.Action):
    action_reference = 'azure/docker-login@v2'
    inputs_schema = AzureDockerLoginSchema

    login_server = attr.ib(default='')
    username = attr.ib(default='')
    password = attr.ib(default='')
