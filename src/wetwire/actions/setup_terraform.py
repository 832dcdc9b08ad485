import attr
import marshmallow

import wetwire.contract
import wetwire.utils


class SetupTerraformSchema(wetwire.contract.InputsSchema):
    cli_config_credentials_hostname = marshmallow.fields.String()
    cli_config_credentials_token = marshmallow.fields.String()
    terraform_version = marshmallow.fields.String()
    terraform_wrapper = wetwire.utils.Boolean()


@attr.s(frozen=True)
class SetupTerraform(wetwire.contract.Action):
    action_reference = 'hashicorp/setup-terraform@v3'
    inputs_schema = SetupTerraformSchema

    cli_config_credentials_hostname = attr.ib(default='')
    cli_config_credentials_token = attr.ib(default='')
    terraform_version = attr.ib(default='')
    terraform_wrapper = attr.ib(default=False)
