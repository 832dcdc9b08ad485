import attr
import marshmallow

import wetwire.contract
import wetwire.utils


class GCPAuthSchema(wetwire.contract.InputsSchema):
    project_id = marshmallow.fields.String()
    workload_identity_provider = marshmallow.fields.String()
    service_account = marshmallow.fields.String()
    audience = marshmallow.fields.String()
    credentials_json = marshmallow.fields.String()
    create_credentials_file = wetwire.utils.Boolean()
    export_environment_variables = wetwire.utils.Boolean()
    token_format = marshmallow.fields.String()
    delegates = marshmallow.fields.String()
    cleanup_credentials = wetwire.utils.Boolean()
    access_token_lifetime = marshmallow.fields.String()
    access_token_scopes = marshmallow.fields.String()
    access_token_subject = marshmallow.fields.String()
    id_token_audience = marshmallow.fields.String()
    id_token_include_email = wetwire.utils.Boolean()


@attr.s(frozen=True)
class GCPAuth(wetwire.contract.Action):
    action_reference = 'google-github-actions/auth@v2'
    inputs_schema = GCPAuthSchema

    project_id = attr.ib(default='')
    workload_identity_provider = attr.ib(default='')
    service_account = attr.ib(default='')
    audience = attr.ib(default='')
    credentials_json = attr.ib(default='')
    create_credentials_file = attr.ib(default=False)
    export_environment_variables = attr.ib(default=False)
    token_format = attr.ib(default='')
    delegates = attr.ib(default='')
    cleanup_credentials = attr.ib(default=False)
    access_token_lifetime = attr.ib(default='')
    access_token_scopes = attr.ib(default='')
    access_token_subject = attr.ib(default='')
    id_token_audience = attr.ib(default='')
    id_token_include_email = attr.ib(default=False)
