import attr
import marshmallow

import wetwire.contract
import wetwire.utils


class AzureWebappsDeploySchema(wetwire.contract.InputsSchema):
    app_name = marshmallow.fields.String(data_key='app-name')
    publish_profile = marshmallow.fields.String(data_key='publish-profile')
    slot_name = marshmallow.fields.String(data_key='slot-name')
    package = marshmallow.fields.String()
    images = marshmallow.fields.String()
    configuration_file = marshmallow.fields.String(
        data_key='configuration-file',
    )
    startup_command = marshmallow.fields.String(data_key='startup-command')
    resource_group_name = marshmallow.fields.String(
        data_key='resource-group-name',
    )
    type = marshmallow.fields.String()
    target_path = marshmallow.fields.String(data_key='target-path')
    clean = wetwire.utils.Boolean()
    restart = wetwire.utils.Boolean()


@attr.s(frozen=True)
class AzureWebappsDeploy(wetwire.contract.Action):
    action_reference = 'azure/webapps-deploy@v3'
    inputs_schema = AzureWebappsDeploySchema

    app_name = attr.ib(default='')
    publish_profile = attr.ib(default='')
    slot_name = attr.ib(default='')
    package = attr.ib(default='')
    images = attr.ib(default='')
    configuration_file = attr.ib(default='')
    startup_command = attr.ib(default='')
    resource_group_name = attr.ib(default='')
    type = attr.ib(default='')
    target_path = attr.ib(default='')
    clean = attr.ib(default=False)
    restart = attr.ib(default=False)
