import attr
import marshmallow

import wetwire.contract
import wetwire.utils


class GCPSetupGcloudSchema(wetwire.contract.InputsSchema):
    version = marshmallow.fields.String()
    project_id = marshmallow.fields.String()
    install_components = marshmallow.fields.String()
    skip_install = wetwire.utils.Boolean()
    cache = wetwire.utils.Boolean()


@attr.s(frozen=True)
class GCPSetupGcloud(wetwire.contract.Action):
    action_reference = 'google-github-actions/setup-gcloud@v2'
    inputs_schema = GCPSetupGcloudSchema

    version = attr.ib(default='')
    project_id = attr.ib(default='')
    install_components = attr.ib(default='')
    skip_install = attr.ib(default=False)
    cache = attr.ib(default=False)
