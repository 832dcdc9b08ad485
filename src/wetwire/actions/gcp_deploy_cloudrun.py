import attr
import marshmallow

import wetwire.contract
import wetwire.utils


class GCPDeployCloudRunSchema(wetwire.contract.InputsSchema):
    service = marshmallow.fields.String()
    job = marshmallow.fields.String()
    image = marshmallow.fields.String()
    source = marshmallow.fields.String()
    metadata = marshmallow.fields.String()
    env_vars = marshmallow.fields.String()
    env_vars_update_strategy = marshmallow.fields.String()
    secrets = marshmallow.fields.String()
    secrets_update_strategy = marshmallow.fields.String()
    labels = marshmallow.fields.String()
    tag = marshmallow.fields.String()
    timeout = marshmallow.fields.String()
    flags = marshmallow.fields.String()
    no_traffic = wetwire.utils.Boolean()
    project_id = marshmallow.fields.String()
    region = marshmallow.fields.String()
    suffix = marshmallow.fields.String()
    skip_default_labels = wetwire.utils.Boolean()


@attr.s(frozen=True)
class GCPDeployCloudRun(wetwire.contract.Action):
    action_reference = 'google-github-actions/deploy-cloudrun@v2'
    inputs_schema = GCPDeployCloudRunSchema

    service = attr.ib(default='')
    job = attr.ib(default='')
    image = attr.ib(default='')
    source = attr.ib(default='')
    metadata = attr.ib(default='')
    env_vars = attr.ib(default='')
    env_vars_update_strategy = attr.ib(default='')
    secrets = attr.ib(default='')
    secrets_update_strategy = attr.ib(default='')
    labels = attr.ib(default='')
    tag = attr.ib(default='')
    timeout = attr.ib(default='')
    flags = attr.ib(default='')
    no_traffic = attr.ib(default=False)
    project_id = attr.ib(default='')
    region = attr.ib(default='')
    suffix = attr.ib(default='')
    skip_default_labels = attr.ib(default=False)
