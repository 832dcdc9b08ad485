import attr
import marshmallow

import wetwire.contract
import wetwire.utils


class DeployPagesSchema(wetwire.contract.InputsSchema):
    token = marshmallow.fields.String()
    timeout = wetwire.utils.Integer()
    error_count = wetwire.utils.Integer()
    reporting_interval = wetwire.utils.Integer()
    artifact_name = marshmallow.fields.String()


@attr.s(frozen=True)
class DeployPages(wetwire.contract.Action):
    action_reference = 'actions/deploy-pages@v4'
    inputs_schema = DeployPagesSchema

    token = attr.ib(default='')
    timeout = attr.ib(default=0)
    error_count = attr.ib(default=0)
    reporting_interval = attr.ib(default=0)
    artifact_name = attr.ib(default='')
