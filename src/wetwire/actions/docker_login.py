import attr
import marshmallow

import wetwire.contract
import wetwire.utils


class DockerLoginSchema(wetwire.contract.InputsSchema):
    registry = marshmallow.fields.String()
    username = marshmallow.fields.String()
    password = marshmallow.fields.String()
    ecr = marshmallow.fields.String()
    logout = wetwire.utils.Boolean()


@attr.s(frozen=True)
class DockerLogin(wetwire.contract.Action):
    action_reference = 'docker/login-action@v3'
    inputs_schema = DockerLoginSchema

    registry = attr.ib(default='')
    username = attr.ib(default='')
    password = attr.ib(default='')
    ecr = attr.ib(default='')
    logout = attr.ib(default=False)
